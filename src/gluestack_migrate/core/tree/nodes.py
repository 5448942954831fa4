"""
Tree Model Nodes.

Defines the immutable values stored in a :class:`~gluestack_migrate.core.tree.document.Document`
arena:

- ``Element``: a tag with attributes and child ids.
- ``Text``: a raw character span.
- ``ExpressionHolder``: an opaque ``{expression}`` child.
- ``Attribute`` / ``SpreadAttribute``: element properties.
- ``ImportDeclaration`` / ``ImportSpecifier``: the module dependencies of a document.

Nodes never hold references to other nodes, only ``NodeId`` integers. Changing a
tree therefore means storing a new node value under an existing id (see
``Document.apply``).
"""

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple, Union

from gluestack_migrate.enums import SpecifierKind, TagKind

NodeId = int


@dataclass(frozen=True)
class TagName:
  """
  The name written in an opening or closing tag marker.

  Attributes:
      name (str): Raw text of the tag (e.g. 'div', 'motion.div', 'svg:rect', '').
      kind (TagKind): Shape of the name. Only identifiers are rewritten.
  """

  name: str
  kind: TagKind = TagKind.IDENTIFIER

  @classmethod
  def parse(cls, raw: str) -> "TagName":
    """
    Infers the tag kind from its textual form.

    Args:
        raw: The tag text as written in markup.

    Returns:
        TagName: The classified tag name.
    """
    if raw == "":
      return cls("", TagKind.FRAGMENT)
    if "." in raw:
      return cls(raw, TagKind.MEMBER)
    if ":" in raw:
      return cls(raw, TagKind.NAMESPACED)
    return cls(raw, TagKind.IDENTIFIER)

  @property
  def is_identifier(self) -> bool:
    return self.kind == TagKind.IDENTIFIER


@dataclass(frozen=True)
class StringValue:
  """A literal attribute value (``className="flex"``). Rules may rewrite it."""

  value: str


@dataclass(frozen=True)
class ExpressionValue:
  """An opaque embedded expression (``onClick={fn}``). Never introspected."""

  source: str


AttributeValue = Union[StringValue, ExpressionValue]


@dataclass(frozen=True)
class Attribute:
  """
  A named element property.

  Attributes:
      name (str): Property name.
      value (Optional[AttributeValue]): Literal or expression value. ``None`` is
          the boolean shorthand (``<input disabled />``).
  """

  name: str
  value: Optional[AttributeValue] = None

  @property
  def is_literal(self) -> bool:
    return isinstance(self.value, StringValue)

  @property
  def literal(self) -> Optional[str]:
    """Returns the literal string value, or None for expressions and shorthands."""
    if isinstance(self.value, StringValue):
      return self.value.value
    return None

  def with_changes(self, **changes: Any) -> "Attribute":
    return dataclasses.replace(self, **changes)


@dataclass(frozen=True)
class SpreadAttribute:
  """A ``{...props}`` attribute. It has no name and always stays where it was written."""

  expression: ExpressionValue

  @property
  def name(self) -> None:
    return None


AttributeLike = Union[Attribute, SpreadAttribute]


@dataclass(frozen=True)
class Text:
  """A raw text run between tags."""

  value: str

  @property
  def is_blank(self) -> bool:
    return self.value.strip() == ""


@dataclass(frozen=True)
class ExpressionHolder:
  """An opaque ``{expression}`` child."""

  expression: ExpressionValue


@dataclass(frozen=True)
class Element:
  """
  A tagged element.

  The closing marker is tracked separately from the opening one so that a
  mismatch coming from the parser can be detected by ``Document.validate``.
  When omitted for a non self-closing element it mirrors the opening tag.

  Attributes:
      opening (TagName): Name in the opening marker.
      attributes (Tuple[AttributeLike, ...]): Ordered attributes, duplicates allowed.
      children (Tuple[NodeId, ...]): Ordered child ids.
      self_closing (bool): True for ``<Tag />``.
      closing (Optional[TagName]): Name in the closing marker (None when self-closing).
  """

  opening: TagName
  attributes: Tuple[AttributeLike, ...] = ()
  children: Tuple[NodeId, ...] = ()
  self_closing: bool = False
  closing: Optional[TagName] = field(default=None)

  def __post_init__(self) -> None:
    if not self.self_closing and self.closing is None:
      object.__setattr__(self, "closing", self.opening)
    if self.self_closing and self.closing is not None:
      object.__setattr__(self, "closing", None)

  @classmethod
  def create(
    cls,
    tag: str,
    attributes: Tuple[AttributeLike, ...] = (),
    children: Tuple[NodeId, ...] = (),
    self_closing: Optional[bool] = None,
  ) -> "Element":
    """
    Convenience constructor from a raw tag string.

    Args:
        tag: Tag name, classified with ``TagName.parse``.
        attributes: Element attributes.
        children: Child ids.
        self_closing: Defaults to True when there are no children.

    Returns:
        Element: The new element value.
    """
    if self_closing is None:
      self_closing = not children
    return cls(
      opening=TagName.parse(tag),
      attributes=tuple(attributes),
      children=tuple(children),
      self_closing=self_closing,
    )

  @property
  def name(self) -> str:
    return self.opening.name

  @property
  def tag(self) -> Optional[str]:
    """The tag name if it is a simple identifier, otherwise None."""
    if self.opening.is_identifier:
      return self.opening.name
    return None

  def get(self, name: str) -> Optional[Attribute]:
    """Returns the first attribute called ``name``."""
    for attr in self.attributes:
      if isinstance(attr, Attribute) and attr.name == name:
        return attr
    return None

  def has(self, name: str) -> bool:
    return self.get(name) is not None

  def with_changes(self, **changes: Any) -> "Element":
    return dataclasses.replace(self, **changes)

  def renamed(self, new_name: str) -> "Element":
    """
    Renames the opening marker and, for non self-closing elements, the closing one.

    Args:
        new_name: Target identifier.

    Returns:
        Element: Copy with both markers renamed in lock-step.
    """
    tag = TagName(new_name)
    if self.self_closing:
      return self.with_changes(opening=tag, closing=None)
    return self.with_changes(opening=tag, closing=tag)

  def with_children(self, children: Tuple[NodeId, ...]) -> "Element":
    """
    Replaces the children, opening a self-closing element if it gains content.
    """
    children = tuple(children)
    if children and self.self_closing:
      return self.with_changes(children=children, self_closing=False, closing=self.opening)
    return self.with_changes(children=children)

  def with_attributes(self, attributes: Tuple[AttributeLike, ...]) -> "Element":
    return self.with_changes(attributes=tuple(attributes))


Node = Union[Element, Text, ExpressionHolder]


@dataclass(frozen=True)
class ImportSpecifier:
  """
  One binding of an import declaration.

  Attributes:
      imported (str): Exported name in the module ('Box'). Ignored for namespace imports.
      local (Optional[str]): Alias when different from ``imported``.
      kind (SpecifierKind): named / default / namespace.
  """

  imported: str
  local: Optional[str] = None
  kind: SpecifierKind = SpecifierKind.NAMED

  @property
  def local_name(self) -> str:
    return self.local or self.imported


@dataclass(frozen=True)
class ImportDeclaration:
  """
  ``import { a, b } from 'module'``.

  Attributes:
      module (str): Module path string.
      specifiers (Tuple[ImportSpecifier, ...]): Ordered bindings.
  """

  module: str
  specifiers: Tuple[ImportSpecifier, ...] = ()

  @classmethod
  def named(cls, module: str, *names: str) -> "ImportDeclaration":
    return cls(module=module, specifiers=tuple(ImportSpecifier(n) for n in names))

  @property
  def local_names(self) -> Tuple[str, ...]:
    return tuple(s.local_name for s in self.specifiers)

  def with_changes(self, **changes: Any) -> "ImportDeclaration":
    return dataclasses.replace(self, **changes)
