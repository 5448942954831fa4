"""
Import Pass.

Runs the ``ImportFixer`` against the final tree.
"""

from gluestack_migrate.core.import_fixer import ImportFixer
from gluestack_migrate.core.rewriter.context import RewriterContext
from gluestack_migrate.core.rewriter.interface import RewriterPass
from gluestack_migrate.core.tree.document import Document


class ImportPass(RewriterPass):
  name = "imports"

  def transform(self, document: Document, context: RewriterContext) -> Document:
    context.tracer.start_phase(self.name, "Fix component imports")
    fixer = ImportFixer(context.config, context.tracer)
    context.record(self.name, fixer.fix(document))
    context.tracer.end_phase()
    return document
