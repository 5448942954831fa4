"""
Runtime Configuration Store.

Holds the knobs of a migration run and resolves them from ``pyproject.toml``
(``[tool.gluestack_migrate]``) with explicit overrides taking precedence.
"""

import re
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from gluestack_migrate.core.vocabulary import (
  DEFAULT_COMPONENT_ROOT,
  ICON_LIBRARY,
  ICON_LIBRARY_TARGET,
  PLATFORM_MODULES,
)
from gluestack_migrate.utils.console import log_warning

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

DEFAULT_INTERACTIVE_TAGS = ["button", "Button", "Pressable", "Fab"]


class RuntimeConfig(BaseModel):
  """
  Global configuration container for the migration engine.
  """

  component_root: str = Field(DEFAULT_COMPONENT_ROOT, description="Module root of the target components.")
  strip_text_brackets: bool = Field(True, description="Strip '()[]' characters from wrapped text runs.")
  interactive_tags: List[str] = Field(
    default_factory=lambda: list(DEFAULT_INTERACTIVE_TAGS),
    description="Tags that own press events directly instead of being wrapped in Pressable.",
  )
  extra_renames: Dict[str, str] = Field(default_factory=dict, description="Additional source -> target tag renames.")
  icon_library: str = Field(ICON_LIBRARY, description="Web icon package to rewrite.")
  icon_library_target: str = Field(ICON_LIBRARY_TARGET, description="Native icon package replacing it.")
  removed_modules: List[str] = Field(
    default_factory=lambda: list(PLATFORM_MODULES),
    description="Modules whose imports are implicit in the target vocabulary and get removed.",
  )
  import_used_components: bool = Field(
    True, description="Also import every target component used in the migrated tree, not just the base set."
  )
  rule_paths: List[Path] = Field(default_factory=list, description="External directories to scan for rule modules.")

  @field_validator("component_root")
  @classmethod
  def validate_component_root(cls, v: str) -> str:
    """
    Normalizes the component root.

    Raises:
        ValueError: If the root is empty.
    """
    v_clean = v.strip().rstrip("/")
    if not v_clean:
      raise ValueError("component_root must not be empty")
    return v_clean

  @field_validator("extra_renames")
  @classmethod
  def validate_renames(cls, v: Dict[str, str]) -> Dict[str, str]:
    """
    Ensures renames map identifiers to identifiers.

    Raises:
        ValueError: If a key or value is not a simple tag identifier.
    """
    for src, tgt in v.items():
      if not _IDENTIFIER.match(src) or not _IDENTIFIER.match(tgt):
        raise ValueError(f"Invalid rename '{src}' -> '{tgt}': both sides must be identifiers.")
    return v

  @classmethod
  def load(
    cls,
    component_root: Optional[str] = None,
    strip_text_brackets: Optional[bool] = None,
    interactive_tags: Optional[List[str]] = None,
    extra_renames: Optional[Dict[str, str]] = None,
    import_used_components: Optional[bool] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and applies overrides.

    Args:
        component_root: Override for the component module root.
        strip_text_brackets: Override for bracket stripping.
        interactive_tags: Override for the interactive tag list.
        extra_renames: Renames merged over the TOML ones.
        import_used_components: Override for used-component import injection.
        search_path: Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The fully resolved configuration object.
    """
    start_dir = search_path or Path.cwd()
    toml_config, toml_dir = _load_toml_settings(start_dir)

    values: Dict[str, Any] = {}
    for key in ("component_root", "icon_library", "icon_library_target", "removed_modules"):
      if key in toml_config:
        values[key] = toml_config[key]

    if component_root is not None:
      values["component_root"] = component_root

    if strip_text_brackets is not None:
      values["strip_text_brackets"] = strip_text_brackets
    elif "strip_text_brackets" in toml_config:
      values["strip_text_brackets"] = toml_config["strip_text_brackets"]

    if interactive_tags is not None:
      values["interactive_tags"] = interactive_tags
    elif "interactive_tags" in toml_config:
      values["interactive_tags"] = toml_config["interactive_tags"]

    if import_used_components is not None:
      values["import_used_components"] = import_used_components
    elif "import_used_components" in toml_config:
      values["import_used_components"] = toml_config["import_used_components"]

    toml_renames = toml_config.get("extra_renames", {})
    values["extra_renames"] = {**toml_renames, **(extra_renames or {})}

    raw_paths = toml_config.get("rule_paths", [])
    if toml_dir:
      values["rule_paths"] = [(toml_dir / Path(p)).resolve() for p in raw_paths]
    else:
      values["rule_paths"] = [Path(p).resolve() for p in raw_paths]

    return cls(**values)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Recursively searches parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError) as e:
        log_warning(f"Ignoring unreadable {toml_path}: {e}")
        return {}, None

      tool_section = data.get("tool", {})
      return tool_section.get("gluestack_migrate", {}), parent

  return {}, None
