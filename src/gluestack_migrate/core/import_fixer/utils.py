"""
Utilities for the Import Fixer.

Static helpers for inspecting import declarations and for collecting the
target components a rewritten tree actually uses.
"""

from typing import Iterable, List, Optional

from gluestack_migrate.core.tree.document import Document
from gluestack_migrate.core.tree.nodes import ImportDeclaration, ImportSpecifier
from gluestack_migrate.core.vocabulary import is_component
from gluestack_migrate.enums import SpecifierKind


def accepts_named(declaration: ImportDeclaration) -> bool:
  """
  True if named specifiers can be appended to the declaration.

  A namespace import (``import * as ui from ...``) cannot be combined with a
  ``{ ... }`` clause.
  """
  return all(spec.kind != SpecifierKind.NAMESPACE for spec in declaration.specifiers)


def find_declaration(
  declarations: Iterable[ImportDeclaration], module: str, extendable: bool = False
) -> Optional[int]:
  """
  Returns the index of the first declaration importing from ``module``.

  Args:
      declarations: Ordered declarations.
      module: Module path string.
      extendable: Only consider declarations that accept named specifiers.

  Returns:
      Optional[int]: Index, or None if the module is not imported.
  """
  for index, decl in enumerate(declarations):
    if decl.module == module and (not extendable or accepts_named(decl)):
      return index
  return None


def declares(declaration: ImportDeclaration, name: str) -> bool:
  """True if the declaration binds ``name`` locally."""
  return name in declaration.local_names


def module_declares(declarations: Iterable[ImportDeclaration], module: str, name: str) -> bool:
  """True if any declaration of ``module`` binds ``name`` locally."""
  return any(decl.module == module and declares(decl, name) for decl in declarations)


def append_specifier(declaration: ImportDeclaration, name: str) -> ImportDeclaration:
  """Adds a named specifier at the end of a declaration."""
  return declaration.with_changes(specifiers=declaration.specifiers + (ImportSpecifier(name),))


def get_signature(declaration: ImportDeclaration) -> str:
  """
  Renders a declaration as a one-line import statement.

  The import pass logs the rewritten import block with it.
  """
  named = [s for s in declaration.specifiers if s.kind == SpecifierKind.NAMED]
  parts: List[str] = []
  for spec in declaration.specifiers:
    if spec.kind == SpecifierKind.DEFAULT:
      parts.append(spec.local_name)
    elif spec.kind == SpecifierKind.NAMESPACE:
      parts.append(f"* as {spec.local_name}")
  if named:
    names = ", ".join(s.imported if not s.local else f"{s.imported} as {s.local}" for s in named)
    parts.append(f"{{ {names} }}")
  if not parts:
    return f"import '{declaration.module}'"
  return f"import {', '.join(parts)} from '{declaration.module}'"


def collect_used_components(document: Document) -> List[str]:
  """
  Lists the target-vocabulary components used in the tree.

  Args:
      document: The rewritten document.

  Returns:
      List[str]: Distinct component names in pre-order of first use.
  """
  seen: List[str] = []
  for _, element, _ in document.elements():
    tag = element.tag
    if is_component(tag) and tag not in seen:
      seen.append(tag)
  return seen
