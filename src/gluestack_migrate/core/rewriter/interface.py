"""
Interface definition for Rewriter Passes.

Defines the abstract base class every pass implements to be run by the
``RewriterPipeline``.
"""

from abc import ABC, abstractmethod

from gluestack_migrate.core.rewriter.context import RewriterContext
from gluestack_migrate.core.tree.document import Document


class RewriterPass(ABC):
  """
  Abstract contract for one pass of the rewriting pipeline.

  Passes encapsulate one concern (class tokens, events, text, tags, imports)
  and are executed sequentially, each observing the previous pass's output.

  Attributes:
      name (str): Stable identifier used in statistics and trace phases.
  """

  name: str = "pass"

  @abstractmethod
  def transform(self, document: Document, context: RewriterContext) -> Document:
    """
    Executes the pass on the document.

    Args:
        document: The arena to rewrite.
        context: Shared run state (config, tracer, statistics).

    Returns:
        The rewritten document.
    """
    pass
