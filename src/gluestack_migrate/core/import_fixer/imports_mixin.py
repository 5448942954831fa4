"""
Import Rewriting Mixin.

Rewrites existing declarations before any injection:

1.  the web icon package is pointed at its React Native build,
2.  declarations from platform modules are dropped (the target components
    replace them).
"""

from typing import List

from gluestack_migrate.core.import_fixer.base import BaseImportFixer
from gluestack_migrate.core.tree.nodes import ImportDeclaration


class ImportMixin(BaseImportFixer):
  """
  Mixin for processing existing import declarations.
  """

  def rewrite_declarations(self, declarations: List[ImportDeclaration]) -> List[ImportDeclaration]:
    """
    Applies the icon rename and platform pruning.

    Args:
        declarations: Declarations in source order.

    Returns:
        List[ImportDeclaration]: The surviving declarations, order preserved.
    """
    result: List[ImportDeclaration] = []
    for decl in declarations:
      if decl.module in self.config.removed_modules:
        self._record("remove", decl.module, list(decl.local_names))
        continue
      if decl.module == self.config.icon_library:
        decl = decl.with_changes(module=self.config.icon_library_target)
        self._record("rewrite", self.config.icon_library_target, list(decl.local_names))
      result.append(decl)
    return result
