"""
Document Arena.

A ``Document`` owns every node of one input file, addressed by stable integer
ids. Passes read the arena, allocate new nodes with :meth:`Document.add`, and
commit a replacement map ``{NodeId: Node}`` once their traversal is complete via
:meth:`Document.apply`. Because ids are stable, a parent that re-arranges child
ids and a child that is replaced in the same pass compose without conflict.
"""

from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple

from gluestack_migrate.core.errors import MalformedTreeError
from gluestack_migrate.core.tree.nodes import (
  Element,
  ImportDeclaration,
  Node,
  NodeId,
  Text,
)

Ancestors = Tuple[NodeId, ...]


class Document:
  """
  Arena of nodes for one document, plus its import declarations.

  Attributes:
      roots (List[NodeId]): Top-level markup trees, in source order.
      imports (List[ImportDeclaration]): Module dependencies, in source order.
  """

  def __init__(self, imports: Optional[Iterable[ImportDeclaration]] = None) -> None:
    self._nodes: Dict[NodeId, Node] = {}
    self._next_id: NodeId = 0
    self.roots: List[NodeId] = []
    self.imports: List[ImportDeclaration] = list(imports or [])

  def __len__(self) -> int:
    return len(self._nodes)

  def __contains__(self, node_id: object) -> bool:
    return node_id in self._nodes

  # --- Allocation & Access ---

  def add(self, node: Node) -> NodeId:
    """
    Stores a node under a fresh id.

    Args:
        node: The node value.

    Returns:
        NodeId: The allocated id.
    """
    node_id = self._next_id
    self._next_id += 1
    self._nodes[node_id] = node
    return node_id

  def add_root(self, node: Node) -> NodeId:
    node_id = self.add(node)
    self.roots.append(node_id)
    return node_id

  def get(self, node_id: NodeId) -> Node:
    """
    Retrieves a node.

    Raises:
        MalformedTreeError: If the id is unknown.
    """
    try:
      return self._nodes[node_id]
    except KeyError:
      raise MalformedTreeError(f"Unknown node id {node_id}", node_id) from None

  def element(self, node_id: NodeId) -> Optional[Element]:
    """Returns the node if it is an Element, otherwise None."""
    node = self._nodes.get(node_id)
    if isinstance(node, Element):
      return node
    return None

  def tag_of(self, node_id: NodeId) -> Optional[str]:
    """Returns the identifier tag of an element id, or None."""
    elem = self.element(node_id)
    return elem.tag if elem else None

  def text(self, value: str) -> NodeId:
    return self.add(Text(value))

  # --- Mutation ---

  def replace(self, node_id: NodeId, node: Node) -> None:
    """Stores a new value under an existing id."""
    if node_id not in self._nodes:
      raise MalformedTreeError(f"Cannot replace unknown node id {node_id}", node_id)
    self._nodes[node_id] = node

  def apply(self, replacements: Dict[NodeId, Node]) -> int:
    """
    Commits a replacement map produced by a pass.

    Args:
        replacements: New node values keyed by the id they replace.

    Returns:
        int: Number of replaced nodes.
    """
    for node_id, node in replacements.items():
      self.replace(node_id, node)
    return len(replacements)

  # --- Traversal ---

  def walk(self, start: Optional[Iterable[NodeId]] = None) -> Iterator[Tuple[NodeId, Node, Ancestors]]:
    """
    Pre-order traversal yielding ``(id, node, ancestor_ids)``.

    Children lists are read when a node is reached, so the walk reflects the
    arena at that moment. Passes collect replacements and apply them after the
    walk is exhausted.

    Args:
        start: Ids to start from. Defaults to the document roots.
    """
    stack: List[Tuple[NodeId, Ancestors]] = [(nid, ()) for nid in reversed(list(start or self.roots))]
    while stack:
      node_id, ancestors = stack.pop()
      node = self.get(node_id)
      yield node_id, node, ancestors
      if isinstance(node, Element):
        child_ancestors = ancestors + (node_id,)
        for child_id in reversed(node.children):
          stack.append((child_id, child_ancestors))

  def elements(self) -> Iterator[Tuple[NodeId, Element, Ancestors]]:
    """Pre-order traversal restricted to Element nodes."""
    for node_id, node, ancestors in self.walk():
      if isinstance(node, Element):
        yield node_id, node, ancestors

  def reachable(self) -> Set[NodeId]:
    return {node_id for node_id, _, _ in self.walk()}

  def compact(self) -> int:
    """
    Drops nodes no longer reachable from any root.

    Returns:
        int: Number of removed nodes.
    """
    live = self.reachable()
    dead = [nid for nid in self._nodes if nid not in live]
    for nid in dead:
      del self._nodes[nid]
    return len(dead)

  # --- Invariants ---

  def validate(self) -> None:
    """
    Checks the structural invariants of the tree reachable from the roots.

    Orphaned nodes left behind by earlier passes are ignored.

    Raises:
        MalformedTreeError: On dangling ids, shared or cyclic children,
            mismatched tag markers, or self-closing elements with children.
    """
    visited: Set[NodeId] = set()
    stack: List[NodeId] = list(reversed(self.roots))

    while stack:
      node_id = stack.pop()
      if node_id not in self._nodes:
        raise MalformedTreeError(f"Reference to missing node {node_id}", node_id)
      if node_id in visited:
        raise MalformedTreeError(f"Node {node_id} is reachable twice (shared child or cycle)", node_id)
      visited.add(node_id)

      node = self._nodes[node_id]
      if not isinstance(node, Element):
        continue
      if node.self_closing and node.children:
        raise MalformedTreeError(f"Self-closing <{node.name}> owns children", node_id)
      if not node.self_closing and node.closing != node.opening:
        closing = node.closing.name if node.closing else "?"
        raise MalformedTreeError(f"Mismatched tags <{node.name}> ... </{closing}>", node_id)
      stack.extend(reversed(node.children))


__all__ = ["Ancestors", "Document"]
