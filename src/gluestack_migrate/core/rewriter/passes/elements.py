"""
Element Rule Pass.

Dispatches every identifier-tagged element to its rule variant (rename,
restructure, decompose or passthrough). Rules that do not recognise the shape
they are given return no outcome; the element is kept and the decision is
recorded as a trace inspection.
"""

from typing import Optional

from gluestack_migrate.core.rewriter.base import ElementPass
from gluestack_migrate.core.rewriter.context import RewriterContext
from gluestack_migrate.core.tree.document import Ancestors, Document
from gluestack_migrate.core.tree.nodes import Element, Node, NodeId
from gluestack_migrate.enums import RuleKind
from gluestack_migrate.utils.console import log_debug


class ElementRulePass(ElementPass):
  name = "elements"
  description = "Apply tag rules"

  def rewrite(
    self,
    node_id: NodeId,
    element: Element,
    ancestors: Ancestors,
    document: Document,
    context: RewriterContext,
  ) -> Optional[Node]:
    tag = element.tag
    if tag is None:
      context.tracer.log_inspection(element.name, "skipped", "non-identifier tag")
      return None

    rule = context.rule_for(tag)
    if rule.kind == RuleKind.PASSTHROUGH:
      context.note_unmatched(tag)
      return None

    outcome = rule.apply(element, context.rule_context(document, node_id, ancestors))
    if outcome is None:
      log_debug(f"Rule {rule.kind.value} left <{tag}> unchanged")
      context.tracer.log_inspection(tag, "skipped", f"{rule.kind.value}: shape not recognised")
      return None

    context.tracer.log_rule(tag, outcome.name if isinstance(outcome, Element) else "?", rule.kind.value)
    return outcome
