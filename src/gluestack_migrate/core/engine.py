"""
Migration Engine.

Provides the ``MigrationEngine``, the driver for one document:

1.  **Ingestion**: the external ``TreeParser`` builds a ``Document`` (``run`` only).
2.  **Validation**: structural invariants are checked before any rewrite.
3.  **Rewriting**: the pass pipeline runs in its fixed order
    (classes, events, text, elements, imports).
4.  **Verification**: the rewritten tree is validated again and unreachable
    nodes are compacted away.
5.  **Emission**: the external ``TreeSerializer`` renders the result (``run`` only).

``migrate`` is the programmatic entry point and raises on malformed input.
``run`` never raises for bad input: it reports failures in the
``ConversionResult`` and hands back the verbatim source.
"""

from typing import Optional

from gluestack_migrate.config import RuntimeConfig
from gluestack_migrate.core import registry
from gluestack_migrate.core.boundary import TreeParser, TreeSerializer
from gluestack_migrate.core.conversion_result import ConversionResult
from gluestack_migrate.core.errors import MalformedTreeError, MigrationError
from gluestack_migrate.core.rewriter import RewriterContext, RewriterPipeline, default_pipeline
from gluestack_migrate.core.tracer import TraceLogger
from gluestack_migrate.core.tree.document import Document
from gluestack_migrate.utils.console import log_error, log_info, log_success


class MigrationEngine:
  """
  Rewrites documents from the web vocabulary to gluestack-ui.

  The engine itself is stateless between documents: each call creates its own
  ``RewriterContext`` and ``TraceLogger``.
  """

  def __init__(
    self,
    config: Optional[RuntimeConfig] = None,
    parser: Optional[TreeParser] = None,
    serializer: Optional[TreeSerializer] = None,
    pipeline: Optional[RewriterPipeline] = None,
  ) -> None:
    """
    Initializes the engine.

    Args:
        config: Runtime configuration. Loaded from ``pyproject.toml`` when omitted.
        parser: Source text -> Document (required by ``run``).
        serializer: Document -> source text (required by ``run``).
        pipeline: Pass sequence. Defaults to ``default_pipeline()``.
    """
    self.config = config or RuntimeConfig.load()
    self.parser = parser
    self.serializer = serializer
    self.pipeline = pipeline or default_pipeline()
    registry.load_rules(self.config.rule_paths)
    self.last_context: Optional[RewriterContext] = None

  def migrate(self, document: Document, context: Optional[RewriterContext] = None) -> Document:
    """
    Rewrites a document in place.

    Args:
        document: The parsed document.
        context: Run state to use. A fresh one is created when omitted.

    Returns:
        Document: The same document, rewritten.

    Raises:
        MalformedTreeError: If the input (or, through a faulty custom rule, the
            output) violates a structural invariant.
    """
    context = context or RewriterContext(self.config, TraceLogger())
    self.last_context = context
    tracer = context.tracer

    tracer.start_phase("Validation", "Checking tree invariants")
    try:
      document.validate()
    finally:
      tracer.end_phase()

    self.pipeline.run(document, context)

    tracer.start_phase("Verification", "Checking rewritten tree")
    try:
      document.validate()
      removed = document.compact()
      if removed:
        tracer.log_inspection("document", "compacted", f"{removed} unreachable nodes")
    finally:
      tracer.end_phase()

    if context.unmatched_tags:
      log_info(f"Tags kept as-is: {', '.join(context.unmatched_tags)}")
    return document

  def run(self, source: str) -> ConversionResult:
    """
    Parses, rewrites and serializes one source text.

    Args:
        source: The input source.

    Returns:
        ConversionResult: Rewritten code, or the verbatim input with errors.

    Raises:
        MigrationError: If the engine was built without a parser or serializer.
    """
    if self.parser is None or self.serializer is None:
      raise MigrationError("MigrationEngine.run requires a parser and a serializer")

    tracer = TraceLogger()
    context = RewriterContext(self.config, tracer)
    tracer.start_phase("Migration Pipeline", "web -> gluestack-ui")

    def failed(message: str) -> ConversionResult:
      log_error(message)
      return ConversionResult(
        code=source,
        errors=[message],
        success=False,
        pass_stats=dict(context.stats),
        trace_events=tracer.export(),
      )

    tracer.start_phase("Ingestion", "Source -> Document")
    try:
      document = self.parser.parse(source)
    except Exception as e:
      return failed(f"Parse Error: {e}")
    finally:
      tracer.end_phase()

    try:
      self.migrate(document, context)
    except MalformedTreeError as e:
      return failed(f"Malformed Tree: {e}")

    tracer.start_phase("Emission", "Document -> Source")
    try:
      code = self.serializer.serialize(document)
    except Exception as e:
      return failed(f"Serialize Error: {e}")
    finally:
      tracer.end_phase()

    log_success("Migration complete")
    tracer.end_phase()

    return ConversionResult(
      code=code,
      success=True,
      pass_stats=dict(context.stats),
      unmatched_tags=list(context.unmatched_tags),
      trace_events=tracer.export(),
    )
