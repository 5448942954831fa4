"""
Orchestration logic for executing sequential rewriter passes.

Provides the ``RewriterPipeline``, which runs ``RewriterPass`` instances in
order over a shared context, and ``default_pipeline`` with the standard pass
order.
"""

from typing import List

from gluestack_migrate.core.rewriter.context import RewriterContext
from gluestack_migrate.core.rewriter.interface import RewriterPass
from gluestack_migrate.core.rewriter.passes import (
  ClassNamePass,
  ElementRulePass,
  EventPromotionPass,
  ImportPass,
  TextWrapPass,
)
from gluestack_migrate.core.tree.document import Document


class RewriterPipeline:
  """
  Manages a sequence of rewriting passes and executes them in order.
  """

  def __init__(self, passes: List[RewriterPass]) -> None:
    """
    Initializes the pipeline with a list of passes.

    Args:
        passes: Sequenced list of passes to execute.
    """
    self.passes = passes

  @property
  def names(self) -> List[str]:
    return [p.name for p in self.passes]

  def run(self, document: Document, context: RewriterContext) -> Document:
    """
    Executes all passes sequentially on the document.

    Args:
        document: The arena to rewrite.
        context: The shared run state.

    Returns:
        The fully rewritten document.
    """
    current = document
    for pass_instance in self.passes:
      current = pass_instance.transform(current, context)
    return current


def default_pipeline() -> RewriterPipeline:
  """
  Builds the standard pass order.

  Class tokens are converted and events promoted before any tag is renamed,
  so both observe source tags. Text is wrapped using the source tag's wrapper,
  and imports are fixed last, against the final tree.
  """
  return RewriterPipeline(
    [
      ClassNamePass(),
      EventPromotionPass(),
      TextWrapPass(),
      ElementRulePass(),
      ImportPass(),
    ]
  )
