"""
Tree Builder Helpers.

Small declarative helpers for hydrating a :class:`Document` from nested Python
values. External parsers use them to populate the arena, and the test-suite uses
them to describe input trees compactly::

    doc = build_document(
      el("div", {"className": "flex", "onClick": expr("fn")}, el("span", None, "Hi")),
    )
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from gluestack_migrate.core.tree.document import Document
from gluestack_migrate.core.tree.nodes import (
  Attribute,
  AttributeLike,
  Element,
  ExpressionHolder,
  ExpressionValue,
  ImportDeclaration,
  NodeId,
  SpreadAttribute,
  StringValue,
  Text,
)

RawAttributes = Union[None, Mapping[str, Any], Sequence[Any]]


@dataclass
class ElementSpec:
  """Nested description of an element, resolved into arena nodes by ``build``."""

  tag: str
  attributes: Tuple[AttributeLike, ...] = ()
  children: List[Any] = field(default_factory=list)
  self_closing: Optional[bool] = None


def expr(source: str) -> ExpressionValue:
  """Marks a value as an opaque expression (attribute value or child)."""
  return ExpressionValue(source)


def spread(source: str) -> SpreadAttribute:
  """Creates a ``{...source}`` attribute."""
  return SpreadAttribute(ExpressionValue(source))


def _coerce_value(value: Any) -> Any:
  if value is None or value is True:
    return None
  if isinstance(value, (StringValue, ExpressionValue)):
    return value
  return StringValue(str(value))


def make_attributes(raw: RawAttributes) -> Tuple[AttributeLike, ...]:
  """
  Normalizes attribute input.

  Accepts a mapping (``{"className": "flex"}``) or a sequence mixing
  ``(name, value)`` pairs and ready-made attributes. Sequences allow duplicate
  names, which mappings cannot express.

  Args:
      raw: The attribute description.

  Returns:
      Tuple[AttributeLike, ...]: Ordered attributes.
  """
  if not raw:
    return ()
  items: Iterable[Any] = raw.items() if isinstance(raw, Mapping) else raw
  result: List[AttributeLike] = []
  for item in items:
    if isinstance(item, (Attribute, SpreadAttribute)):
      result.append(item)
    else:
      name, value = item
      result.append(Attribute(name, _coerce_value(value)))
  return tuple(result)


def el(tag: str, attrs: RawAttributes = None, *children: Any, self_closing: Optional[bool] = None) -> ElementSpec:
  """
  Describes an element.

  Args:
      tag: Tag name ('div', 'motion.div', '' for a fragment).
      attrs: Attributes, see ``make_attributes``.
      *children: Strings (text), ``expr(...)`` values (expression children) or
          nested ``el(...)`` specs.
      self_closing: Defaults to True when there are no children.
  """
  return ElementSpec(tag=tag, attributes=make_attributes(attrs), children=list(children), self_closing=self_closing)


def build(document: Document, spec: Any) -> NodeId:
  """
  Allocates the nodes described by ``spec`` in ``document``.

  Args:
      document: Target arena.
      spec: An ``ElementSpec``, a string or an ``ExpressionValue``.

  Returns:
      NodeId: Id of the top node.
  """
  if isinstance(spec, str):
    return document.add(Text(spec))
  if isinstance(spec, ExpressionValue):
    return document.add(ExpressionHolder(spec))
  if isinstance(spec, ElementSpec):
    child_ids = tuple(build(document, child) for child in spec.children)
    return document.add(Element.create(spec.tag, spec.attributes, child_ids, spec.self_closing))
  raise TypeError(f"Cannot build a node from {type(spec).__name__}")


def build_document(*roots: Any, imports: Iterable[ImportDeclaration] = ()) -> Document:
  """
  Creates a Document holding the given root specs.

  Args:
      *roots: One spec per top-level tree.
      imports: Initial import declarations.

  Returns:
      Document: The populated arena.
  """
  document = Document(imports=imports)
  for spec in roots:
    document.roots.append(build(document, spec))
  return document
