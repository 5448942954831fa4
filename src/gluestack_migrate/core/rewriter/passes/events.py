"""
Event Promotion Pass.

Runs the attribute-keyed rules (``onClick`` -> ``onPress``) before any tag is
renamed, so the interactive-tag check sees source tags.
"""

from typing import Optional

from gluestack_migrate.core.rewriter.base import ElementPass
from gluestack_migrate.core.rewriter.context import RewriterContext
from gluestack_migrate.core.tree.document import Ancestors, Document
from gluestack_migrate.core.tree.nodes import Element, Node, NodeId


class EventPromotionPass(ElementPass):
  name = "events"
  description = "Promote web events to native press events"

  def rewrite(
    self,
    node_id: NodeId,
    element: Element,
    ancestors: Ancestors,
    document: Document,
    context: RewriterContext,
  ) -> Optional[Node]:
    if element.tag is None:
      return None

    current: Node = element
    for rule in context.attribute_rules():
      if not isinstance(current, Element):
        break
      outcome = rule.apply(current, context.rule_context(document, node_id, ancestors))
      if outcome is not None:
        context.tracer.log_rule(element.tag, outcome.name, rule.kind.value)
        current = outcome
    return current
