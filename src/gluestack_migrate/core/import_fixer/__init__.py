"""
Import Fixer Package.

Provides the ``ImportFixer``, responsible for the import declarations of a
migrated document:

1.  **Rewriting**: pointing icon imports at the native icon package.
2.  **Pruning**: removing platform-module imports.
3.  **Injection**: adding the component imports the rewritten tree needs.

The fixer is idempotent: running it on its own output changes nothing.
"""

from gluestack_migrate.core.import_fixer.base import BaseImportFixer
from gluestack_migrate.core.import_fixer.imports_mixin import ImportMixin
from gluestack_migrate.core.import_fixer.injection_mixin import InjectionMixin
from gluestack_migrate.core.import_fixer.utils import collect_used_components, get_signature
from gluestack_migrate.core.tree.document import Document
from gluestack_migrate.utils.console import log_debug


class ImportFixer(ImportMixin, InjectionMixin, BaseImportFixer):
  """
  Composite fixer for import bookkeeping.

  Inherits functionality from:
  - :class:`ImportMixin`: rewriting and pruning existing declarations.
  - :class:`InjectionMixin`: ensuring component specifiers.
  - :class:`BaseImportFixer`: configuration and action tracking.
  """

  def fix(self, document: Document) -> int:
    """
    Rewrites ``document.imports`` in place.

    Args:
        document: The migrated document.

    Returns:
        int: Number of import actions performed.
    """
    before = self.actions
    declarations = self.rewrite_declarations(document.imports)
    names = self.required_names(collect_used_components(document))
    document.imports = self.inject(declarations, names)
    performed = self.actions - before
    if performed:
      log_debug("Import block after fixing:\n" + "\n".join(get_signature(d) for d in document.imports))
    return performed


__all__ = ["ImportFixer"]
