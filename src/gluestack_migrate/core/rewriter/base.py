"""
Replacement-Map Pass Base.

Every tree pass follows the same protocol: one full pre-order traversal over
the pass input, each element mapped to an optional replacement, and the
collected replacement map committed once at the end. New nodes are allocated
in the arena during the traversal, so all rules of a pass observe its input
state.
"""

from abc import abstractmethod
from typing import Dict, Optional

from gluestack_migrate.core.rewriter.context import RewriterContext
from gluestack_migrate.core.rewriter.interface import RewriterPass
from gluestack_migrate.core.tree.document import Ancestors, Document
from gluestack_migrate.core.tree.nodes import Element, Node, NodeId
from gluestack_migrate.utils.node_dump import diff_nodes


class ElementPass(RewriterPass):
  """
  Base class for passes that rewrite elements one at a time.

  Attributes:
      description (str): Human readable summary used for the trace phase.
  """

  description: str = ""

  def transform(self, document: Document, context: RewriterContext) -> Document:
    context.tracer.start_phase(self.name, self.description)

    replacements: Dict[NodeId, Node] = {}
    for node_id, element, ancestors in list(document.elements()):
      replacement = self.rewrite(node_id, element, ancestors, document, context)
      if replacement is None or replacement == element:
        continue
      replacements[node_id] = replacement
      before, after, changed = diff_nodes(document, element, replacement)
      if changed:
        context.tracer.log_mutation(f"<{element.name}>", before, after)

    context.record(self.name, document.apply(replacements))
    context.tracer.end_phase()
    return document

  @abstractmethod
  def rewrite(
    self,
    node_id: NodeId,
    element: Element,
    ancestors: Ancestors,
    document: Document,
    context: RewriterContext,
  ) -> Optional[Node]:
    """
    Computes the replacement for one element.

    Args:
        node_id: Id of the element.
        element: The element as of the pass input.
        ancestors: Ancestor ids, outermost first.
        document: The arena, for reads and allocations.
        context: Shared run state.

    Returns:
        Optional[Node]: The new value for ``node_id`` or None to keep it.
    """
