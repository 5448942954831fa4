"""
Rewriter Package.

Passes over a ``Document`` and the pipeline that sequences them. Each tree pass
collects a replacement map during one traversal and commits it at the end.
"""

from gluestack_migrate.core.rewriter.context import RewriterContext
from gluestack_migrate.core.rewriter.interface import RewriterPass
from gluestack_migrate.core.rewriter.pipeline import RewriterPipeline, default_pipeline

__all__ = ["RewriterContext", "RewriterPass", "RewriterPipeline", "default_pipeline"]
