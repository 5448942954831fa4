"""
Base Import Fixer Logic.

Holds the configuration and per-run state shared by the import fixer mixins.
"""

from typing import List, Optional

from gluestack_migrate.config import RuntimeConfig
from gluestack_migrate.core.tracer import TraceLogger, get_tracer
from gluestack_migrate.core.vocabulary import BASE_IMPORTS, module_for


class BaseImportFixer:
  """
  Base class for import bookkeeping.

  Attributes:
      config (RuntimeConfig): Component root, icon packages, removed modules.
      tracer (TraceLogger): Receives one event per import action.
      actions (int): Number of declarations added, extended, rewritten or removed.
  """

  def __init__(self, config: Optional[RuntimeConfig] = None, tracer: Optional[TraceLogger] = None) -> None:
    self.config = config or RuntimeConfig()
    self.tracer = tracer or get_tracer()
    self.base_imports: List[str] = list(BASE_IMPORTS)
    self.actions = 0

  def module_path(self, name: str) -> Optional[str]:
    """Module a component is imported from, under the configured root."""
    return module_for(name, self.config.component_root)

  def _record(self, action: str, module: str, names: Optional[List[str]] = None) -> None:
    self.actions += 1
    self.tracer.log_import(action, module, names)
