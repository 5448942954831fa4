"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Rule registry isolation so tests registering custom rules do not leak.
- Helpers to render documents and run the default pipeline.
"""

import sys
from pathlib import Path
from typing import Callable, Optional, Tuple

import pytest

# Add src to path so we can import 'gluestack_migrate' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from gluestack_migrate.config import RuntimeConfig  # noqa: E402
from gluestack_migrate.core import registry  # noqa: E402
from gluestack_migrate.core.rewriter import RewriterContext, default_pipeline  # noqa: E402
from gluestack_migrate.core.tracer import TraceLogger  # noqa: E402
from gluestack_migrate.core.tree import Document  # noqa: E402
from gluestack_migrate.utils.node_dump import dump_node  # noqa: E402

# Baseline table, loaded once so restoration has the built-in rules.
registry.load_rules()


@pytest.fixture(autouse=True)
def isolate_rule_registry():
  """
  Ensures that modifications to the rule registry (custom rules, clears)
  do not leak between tests.
  """
  rules = registry._RULES.copy()
  attribute_rules = registry._ATTRIBUTE_RULES.copy()
  origins = registry._ORIGINS.copy()
  loaded = registry._RULES_LOADED
  yield
  registry._RULES.clear()
  registry._RULES.update(rules)
  registry._ATTRIBUTE_RULES.clear()
  registry._ATTRIBUTE_RULES.update(attribute_rules)
  registry._ORIGINS.clear()
  registry._ORIGINS.update(origins)
  registry._RULES_LOADED = loaded


@pytest.fixture
def config() -> RuntimeConfig:
  """Default configuration, independent of any pyproject.toml on disk."""
  return RuntimeConfig()


def render_document(document: Document) -> str:
  return "".join(dump_node(document, document.get(root), max_depth=64) for root in document.roots)


@pytest.fixture
def render() -> Callable[[Document], str]:
  """Renders every root of a document as compact markup."""
  return render_document


@pytest.fixture
def run_pipeline(config) -> Callable[..., Tuple[Document, RewriterContext]]:
  """Runs the default pipeline on a document and returns it with its context."""

  def _run(document: Document, cfg: Optional[RuntimeConfig] = None) -> Tuple[Document, RewriterContext]:
    context = RewriterContext(cfg or config, TraceLogger())
    default_pipeline().run(document, context)
    return document, context

  return _run
