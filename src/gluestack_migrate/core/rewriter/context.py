"""
Rewriter Context Module.

Provides the ``RewriterContext``, the per-run state shared by all passes:
configuration, the trace logger, per-pass statistics and the tags that fell
through to the passthrough arm. It also builds the ``RuleContext`` handed to
individual rules.
"""

from typing import Dict, List, Optional

from gluestack_migrate.config import RuntimeConfig
from gluestack_migrate.core import registry
from gluestack_migrate.core.rule_types import ElementRule, PromoteEvent, RuleContext
from gluestack_migrate.core.tracer import TraceLogger
from gluestack_migrate.core.tree.document import Ancestors, Document
from gluestack_migrate.core.tree.nodes import NodeId
from gluestack_migrate.core.vocabulary import is_component


class RewriterContext:
  """
  Shared state container for the rewriting pipeline.

  One context is created per document; nothing in it is shared between runs.
  """

  def __init__(self, config: Optional[RuntimeConfig] = None, tracer: Optional[TraceLogger] = None) -> None:
    """
    Initializes the context.

    Args:
        config: The runtime configuration for the run.
        tracer: Event recorder. A fresh one is created when omitted.
    """
    self.config = config or RuntimeConfig()
    self.tracer = tracer or TraceLogger()
    self.stats: Dict[str, int] = {}
    self.unmatched_tags: List[str] = []

  def rule_for(self, tag: Optional[str]) -> ElementRule:
    """Resolves the element rule for a tag, honouring configured renames."""
    return registry.get_rule(tag, self.config)

  def attribute_rules(self) -> List[PromoteEvent]:
    return registry.get_attribute_rules()

  def rule_context(self, document: Document, node_id: NodeId, ancestors: Ancestors) -> RuleContext:
    """
    Builds the read-only view handed to a rule.

    Args:
        document: The arena.
        node_id: The matched element.
        ancestors: Ancestor ids from the traversal.
    """
    return RuleContext(
      document=document,
      node_id=node_id,
      ancestors=tuple(document.tag_of(a) for a in ancestors),
      config=self.config,
    )

  def note_unmatched(self, tag: str) -> None:
    """
    Remembers a source tag without a rule. Target components are not reported.
    """
    if is_component(tag) or tag in self.unmatched_tags:
      return
    if registry.unmatched([tag], self.config):
      self.unmatched_tags.append(tag)

  def record(self, pass_name: str, count: int) -> None:
    self.stats[pass_name] = self.stats.get(pass_name, 0) + count
