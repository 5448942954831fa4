"""
Rule Variants.

Element rewrites are expressed as a tagged union of small frozen dataclasses.
Every variant carries a ``kind`` tag (:class:`~gluestack_migrate.enums.RuleKind`),
the ``text_wrapper`` its element's bare text goes into, and an ``apply`` method:

- ``Rename``: tag rename, optionally merging default class tokens.
- ``Restructure``: replace the children with a computed arrangement.
- ``Decompose``: split the element into a skeleton of cooperating elements.
- ``PromoteEvent``: attribute-keyed; moves an event onto an interactive wrapper.
- ``Passthrough``: the explicit "no structural change" arm.

Rules are pure with respect to the pass: they read the document through the
``RuleContext``, may allocate new nodes, and return a ``RuleOutcome`` (the new
value for the matched id, or None). They never raise on unexpected shapes.
"""

from dataclasses import dataclass, field
from typing import Callable, ClassVar, FrozenSet, Iterator, Optional, Tuple, Union

from gluestack_migrate.config import RuntimeConfig
from gluestack_migrate.core.attributes import append_class_tokens, remove_attributes
from gluestack_migrate.core.tree.document import Document
from gluestack_migrate.core.tree.nodes import Attribute, AttributeLike, Element, Node, NodeId
from gluestack_migrate.enums import RuleKind

RuleOutcome = Optional[Node]


@dataclass
class RuleContext:
  """
  Read access to the pass input plus node allocation, handed to every rule.

  Attributes:
      document: The arena being rewritten. Replacements of the current pass are
          not visible yet.
      node_id: Id of the matched element.
      ancestors: Tag names of the enclosing elements, outermost first (None for
          non-identifier tags).
      config: Runtime configuration.
  """

  document: Document
  node_id: NodeId
  ancestors: Tuple[Optional[str], ...] = ()
  config: RuntimeConfig = field(default_factory=RuntimeConfig)

  @property
  def parent_tag(self) -> Optional[str]:
    return self.ancestors[-1] if self.ancestors else None

  @property
  def attributes(self) -> Tuple[AttributeLike, ...]:
    """Attributes of the matched element."""
    elem = self.document.element(self.node_id)
    return elem.attributes if elem else ()

  def allocate(self, node: Node) -> NodeId:
    """Stores a synthesized node in the arena."""
    return self.document.add(node)

  def wrap(self, tag: str, children: Tuple[NodeId, ...] = (), attributes: Tuple[AttributeLike, ...] = ()) -> NodeId:
    """Allocates a new ``tag`` element around ``children``."""
    return self.allocate(Element.create(tag, attributes, children))

  def child_elements(self, element: Element) -> Iterator[Tuple[NodeId, Element]]:
    """Yields ``(id, element)`` for each element child, in order."""
    for child_id in element.children:
      child = self.document.element(child_id)
      if child is not None:
        yield child_id, child

  def find_child(self, element: Element, tag: str) -> Optional[Tuple[NodeId, Element]]:
    """Returns the first child element whose tag is ``tag``."""
    for child_id, child in self.child_elements(element):
      if child.tag == tag:
        return child_id, child
    return None

  def has_child(self, element: Element, *tags: str) -> bool:
    return any(child.tag in tags for _, child in self.child_elements(element))


@dataclass(frozen=True)
class Rename:
  """
  Renames the tag; the closing marker follows.

  Attributes:
      target: New tag name.
      text_wrapper: Wrapper for bare text children (None for text-typed tags).
      default_classes: Class tokens merged into a literal ``className``.
  """

  kind: ClassVar[RuleKind] = RuleKind.RENAME

  target: str
  text_wrapper: Optional[str] = "Text"
  default_classes: Optional[str] = None

  def apply(self, element: Element, ctx: RuleContext) -> RuleOutcome:
    result = element
    if self.default_classes:
      result = result.with_attributes(append_class_tokens(result.attributes, self.default_classes))
    if result.name != self.target:
      result = result.renamed(self.target)
    return None if result == element else result


# (element, ctx) -> new child ids, or None when the shape is not recognised.
Arrangement = Callable[[Element, RuleContext], Optional[Tuple[NodeId, ...]]]


@dataclass(frozen=True)
class Restructure:
  """
  Replaces the children with new wrappers around (subsets of) the originals.

  Attributes:
      target: Tag after the rewrite (None keeps the tag).
      arrange: Computes the new child list.
      text_wrapper: Wrapper for bare text children.
  """

  kind: ClassVar[RuleKind] = RuleKind.RESTRUCTURE

  target: Optional[str]
  arrange: Arrangement
  text_wrapper: Optional[str] = "Text"

  def apply(self, element: Element, ctx: RuleContext) -> RuleOutcome:
    children = self.arrange(element, ctx)
    if children is None:
      return None
    result = element.with_children(children)
    if self.target and result.name != self.target:
      result = result.renamed(self.target)
    return result


# (element, ctx) -> replacement element, or None when the shape is not recognised.
Skeleton = Callable[[Element, RuleContext], Optional[Element]]


@dataclass(frozen=True)
class Decompose:
  """
  Splits one element into a fixed skeleton of cooperating elements.

  Attributes:
      target: Tag of the outer element of the skeleton.
      build: Produces the outer element (children already allocated). It is
          renamed to ``target`` afterwards.
      text_wrapper: Wrapper for bare text children.
  """

  kind: ClassVar[RuleKind] = RuleKind.DECOMPOSE

  target: str
  build: Skeleton
  text_wrapper: Optional[str] = "Text"

  def apply(self, element: Element, ctx: RuleContext) -> RuleOutcome:
    result = self.build(element, ctx)
    if result is not None and result.name != self.target:
      result = result.renamed(self.target)
    return result


@dataclass(frozen=True)
class PromoteEvent:
  """
  Moves a web event handler onto a target-vocabulary event.

  Interactive tags rename the attribute in place. Any other identifier tag is
  wrapped: the wrapper takes over the matched id and owns the renamed event,
  the original element moves to a fresh id keeping its other attributes.

  Attributes:
      source_attr: Web event name ('onClick').
      target_attr: Native event name ('onPress').
      wrapper: Tag of the synthesized interactive wrapper.
      interactive_tags: Tags that already handle the target event. The runtime
          config's ``interactive_tags`` takes precedence when set.
  """

  kind: ClassVar[RuleKind] = RuleKind.PROMOTE_EVENT

  source_attr: str
  target_attr: str
  wrapper: str
  interactive_tags: FrozenSet[str] = frozenset()
  text_wrapper: Optional[str] = None

  def is_interactive(self, tag: str, ctx: RuleContext) -> bool:
    tags = ctx.config.interactive_tags if ctx.config.interactive_tags else self.interactive_tags
    return tag in tags

  def apply(self, element: Element, ctx: RuleContext) -> RuleOutcome:
    tag = element.tag
    if tag is None:
      return None
    events = [a for a in element.attributes if isinstance(a, Attribute) and a.name == self.source_attr]
    if not events:
      return None

    if self.is_interactive(tag, ctx):
      return element.with_attributes(
        tuple(
          a.with_changes(name=self.target_attr) if isinstance(a, Attribute) and a.name == self.source_attr else a
          for a in element.attributes
        )
      )

    inner_id = ctx.allocate(element.with_attributes(remove_attributes(element.attributes, self.source_attr)))
    moved = tuple(a.with_changes(name=self.target_attr) for a in events)
    return Element.create(self.wrapper, moved, (inner_id,))


@dataclass(frozen=True)
class Passthrough:
  """
  Explicit default arm: the tag is kept, only its bare text is wrapped.

  Attributes:
      text_wrapper: Wrapper for bare text children.
  """

  kind: ClassVar[RuleKind] = RuleKind.PASSTHROUGH

  text_wrapper: Optional[str] = "Text"

  def apply(self, element: Element, ctx: RuleContext) -> RuleOutcome:
    return None


ElementRule = Union[Rename, Restructure, Decompose, Passthrough]
Rule = Union[Rename, Restructure, Decompose, PromoteEvent, Passthrough]

PASSTHROUGH = Passthrough()
