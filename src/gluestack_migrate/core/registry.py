"""
Rule Registry and Dynamic Loader.

Holds the dispatch table ``source tag -> rule variant`` and the attribute-keyed
rules (event promotion). The built-in table lives in the
:mod:`gluestack_migrate.rules` package, one module per component family; each
module registers its entries at import time, either with ``register_rule`` or
with the ``restructure`` / ``decompose`` decorators::

    @restructure("Tooltip", target="Tooltip")
    def tooltip(element, ctx):
      ...

Unknown tags resolve to the ``Passthrough`` arm. A tag claimed by two different
modules raises :class:`RuleRegistrationError` at import time. Re-importing the
same module (``load_rules`` after ``clear_rules``) replaces its own entries.
"""

import importlib
import importlib.util
import pkgutil
import sys
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

from gluestack_migrate.config import RuntimeConfig
from gluestack_migrate.core.errors import RuleRegistrationError
from gluestack_migrate.core.rule_types import (
  PASSTHROUGH,
  Arrangement,
  Decompose,
  ElementRule,
  PromoteEvent,
  Rename,
  Restructure,
  Skeleton,
)
from gluestack_migrate.core.vocabulary import TEXT_CONTAINERS
from gluestack_migrate.utils.console import log_warning

BUILTIN_PACKAGE = "gluestack_migrate.rules"
RUNTIME_ORIGIN = "<runtime>"

_RULES: Dict[str, ElementRule] = {}
_ATTRIBUTE_RULES: Dict[str, PromoteEvent] = {}
_ORIGINS: Dict[str, str] = {}
_RULES_LOADED = False


def _claim(key: str, origin: str) -> None:
  owner = _ORIGINS.get(key)
  if owner is not None and owner != origin:
    raise RuleRegistrationError(f"'{key}' is already registered by {owner} (conflict in {origin})")
  _ORIGINS[key] = origin


def register_rule(rule: ElementRule, *tags: str, origin: str = RUNTIME_ORIGIN) -> ElementRule:
  """
  Registers ``rule`` for every tag in ``tags``.

  Args:
      rule: The rule variant.
      *tags: Source tag names.
      origin: Name of the registering module (usually ``__name__``).

  Returns:
      ElementRule: The rule, for chaining.

  Raises:
      RuleRegistrationError: If no tag is given, a tag is not a plain
          identifier, a ``PromoteEvent`` is passed, or another module already
          owns one of the tags.
  """
  if isinstance(rule, PromoteEvent):
    raise RuleRegistrationError("PromoteEvent rules are attribute-keyed; use register_attribute_rule")
  if not tags:
    raise RuleRegistrationError(f"{type(rule).__name__} registered without any tag")
  for tag in tags:
    if not tag or not tag.isidentifier():
      raise RuleRegistrationError(f"Cannot key a rule on non-identifier tag '{tag}'")
    _claim(tag, origin)
    _RULES[tag] = rule
  return rule


def register_attribute_rule(rule: PromoteEvent, origin: str = RUNTIME_ORIGIN) -> PromoteEvent:
  """
  Registers an attribute-keyed rule under its source attribute.

  Raises:
      RuleRegistrationError: If another module already owns the attribute.
  """
  _claim(f"@{rule.source_attr}", origin)
  _ATTRIBUTE_RULES[rule.source_attr] = rule
  return rule


def restructure(
  *tags: str, target: Optional[str] = None, text_wrapper: Optional[str] = "Text"
) -> Callable[[Arrangement], Arrangement]:
  """
  Decorator registering an arrangement function as a ``Restructure`` rule.

  Args:
      *tags: Source tags.
      target: Tag after the rewrite (None keeps it).
      text_wrapper: Wrapper for the element's bare text.
  """

  def decorator(func: Arrangement) -> Arrangement:
    register_rule(Restructure(target, func, text_wrapper), *tags, origin=func.__module__)
    return func

  return decorator


def decompose(*tags: str, target: str, text_wrapper: Optional[str] = "Text") -> Callable[[Skeleton], Skeleton]:
  """
  Decorator registering a skeleton builder as a ``Decompose`` rule.

  Args:
      *tags: Source tags.
      target: Tag of the outer element of the skeleton.
      text_wrapper: Wrapper for the element's bare text.
  """

  def decorator(func: Skeleton) -> Skeleton:
    register_rule(Decompose(target, func, text_wrapper), *tags, origin=func.__module__)
    return func

  return decorator


def get_rule(tag: Optional[str], config: Optional[RuntimeConfig] = None) -> ElementRule:
  """
  Resolves the rule for a source tag.

  ``config.extra_renames`` wins over the built-in table. Tags without an entry
  (and non-identifier tags, passed as None) resolve to ``Passthrough``.

  Args:
      tag: Identifier tag, or None.
      config: Runtime configuration.

  Returns:
      ElementRule: The matching variant.
  """
  if tag is None:
    return PASSTHROUGH
  if not _RULES_LOADED:
    load_rules()
  if config and tag in config.extra_renames:
    target = config.extra_renames[tag]
    return Rename(target, text_wrapper=None if target in TEXT_CONTAINERS else "Text")
  return _RULES.get(tag, PASSTHROUGH)


def get_attribute_rules() -> List[PromoteEvent]:
  """Returns the attribute-keyed rules in registration order."""
  if not _RULES_LOADED:
    load_rules()
  return list(_ATTRIBUTE_RULES.values())


def all_rules() -> Dict[str, ElementRule]:
  """Returns a copy of the tag dispatch table."""
  if not _RULES_LOADED:
    load_rules()
  return dict(_RULES)


def unmatched(tags: Iterable[str], config: Optional[RuntimeConfig] = None) -> List[str]:
  """
  Lists the tags that would fall through to the passthrough arm.

  Args:
      tags: Tags to check.
      config: Runtime configuration (its renames count as entries).

  Returns:
      List[str]: Distinct unmatched tags, in first-seen order.
  """
  if not _RULES_LOADED:
    load_rules()
  renames = config.extra_renames if config else {}
  result: List[str] = []
  for tag in tags:
    if tag not in _RULES and tag not in renames and tag not in result:
      result.append(tag)
  return result


def clear_rules() -> None:
  """Resets the registry. Primarily for testing."""
  global _RULES_LOADED
  _RULES.clear()
  _ATTRIBUTE_RULES.clear()
  _ORIGINS.clear()
  _RULES_LOADED = False


def load_rules(extra_dirs: Optional[List[Path]] = None) -> int:
  """
  Imports the built-in rule modules and any external rule files.

  Args:
      extra_dirs: Additional directories whose ``*.py`` files register rules.

  Returns:
      int: Number of modules loaded.

  Raises:
      RuleRegistrationError: If two modules claim the same tag.
  """
  global _RULES_LOADED
  total_loaded = 0

  if not _RULES_LOADED:
    _RULES_LOADED = True
    total_loaded += _load_builtin()

  for ex_dir in extra_dirs or []:
    if ex_dir.exists() and ex_dir.is_dir():
      total_loaded += _import_from_dir(ex_dir)

  return total_loaded


def _load_builtin() -> int:
  package = importlib.import_module(BUILTIN_PACKAGE)
  count = 0
  for _, module_name, _ in pkgutil.iter_modules(package.__path__):
    if module_name.startswith("_"):
      continue
    full_name = f"{BUILTIN_PACKAGE}.{module_name}"
    if full_name in sys.modules:
      importlib.reload(sys.modules[full_name])
    else:
      importlib.import_module(full_name)
    count += 1
  return count


def _import_from_dir(directory: Path) -> int:
  """Imports every python file of an external directory."""
  count = 0
  for item in sorted(directory.glob("*.py")):
    if item.name == "__init__.py":
      continue
    unique_name = f"gluestack_migrate_rules_{item.stem}_{item.stat().st_ino}"
    try:
      spec = importlib.util.spec_from_file_location(unique_name, item)
      if spec and spec.loader:
        mod = importlib.util.module_from_spec(spec)
        sys.modules[unique_name] = mod
        spec.loader.exec_module(mod)
        count += 1
    except RuleRegistrationError:
      raise
    except (ImportError, SyntaxError, OSError) as e:
      log_warning(f"Failed to load rule module {item.name}: {e}")
  return count
