"""
Import Injection Mixin.

Ensures every component the migrated file needs is imported:

1.  the base table (``Box``, ``Text``, ``Button``, ...) always,
2.  every other target component used in the tree, when enabled.

A name missing from an existing declaration of its module is appended to that
declaration. Modules without a declaration get a new one; new declarations are
placed before all existing ones and keep table order.
"""

from typing import Dict, List

from gluestack_migrate.core.import_fixer.base import BaseImportFixer
from gluestack_migrate.core.import_fixer.utils import append_specifier, declares, find_declaration, module_declares
from gluestack_migrate.core.tree.nodes import ImportDeclaration
from gluestack_migrate.utils.console import log_debug


class InjectionMixin(BaseImportFixer):
  """
  Mixin for injecting component imports.
  """

  def required_names(self, used: List[str]) -> List[str]:
    """
    Base table first, then the used components in order of first use.
    """
    names = list(self.base_imports)
    if self.config.import_used_components:
      for name in used:
        if name not in names:
          names.append(name)
    return names

  def inject(self, declarations: List[ImportDeclaration], names: List[str]) -> List[ImportDeclaration]:
    """
    Ensures a specifier for each name.

    Args:
        declarations: Existing declarations (already rewritten).
        names: Component names to ensure, in priority order.

    Returns:
        List[ImportDeclaration]: New declarations followed by the existing ones.
    """
    existing = list(declarations)
    created: List[ImportDeclaration] = []
    created_index: Dict[str, int] = {}

    for name in names:
      module = self.module_path(name)
      if module is None:
        log_debug(f"No module known for component '{name}'")
        continue

      index = find_declaration(existing, module, extendable=True)
      if index is not None:
        if not module_declares(existing, module, name):
          existing[index] = append_specifier(existing[index], name)
          self._record("add", module, [name])
        continue

      if module in created_index:
        position = created_index[module]
        if not declares(created[position], name):
          created[position] = append_specifier(created[position], name)
        continue

      created_index[module] = len(created)
      created.append(ImportDeclaration.named(module, name))

    for decl in created:
      self._record("insert", decl.module, list(decl.local_names))

    return created + existing
