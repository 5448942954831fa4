"""
Attribute Utilities.

Helpers for reading and reshaping element attribute lists:

- ``partition_attributes``: route a named subset of props to a synthesized child
  (e.g. ``placeholder`` moving from ``Input`` to ``InputField``).
- ``merge_class_attributes``: collapse duplicate ``className`` attributes.
- small lookup / rename / removal helpers used by the rule set.

Attribute lists may contain duplicate names; none of these helpers assume
uniqueness.
"""

from typing import Collection, Iterable, List, Optional, Tuple

from gluestack_migrate.core.classes import merge_class_strings
from gluestack_migrate.core.tree.nodes import Attribute, AttributeLike, StringValue

CLASS_ATTRIBUTE = "className"

# Props understood by the inner ``InputField`` rather than the ``Input`` frame.
INPUT_FIELD_PROPS: Tuple[str, ...] = (
  "placeholder",
  "name",
  "value",
  "onChangeText",
  "secureTextEntry",
  "keyboardType",
)


def partition_attributes(
  attributes: Iterable[AttributeLike], routable: Collection[str]
) -> Tuple[Tuple[AttributeLike, ...], Tuple[AttributeLike, ...]]:
  """
  Splits attributes into those kept on the parent and those moved to a child.

  Relative order inside each partition matches the input. Spread attributes
  always stay on the parent.

  Args:
      attributes: The element's attributes.
      routable: Names that move to the child.

  Returns:
      Tuple: ``(kept_on_parent, moved_to_child)``.
  """
  kept: List[AttributeLike] = []
  moved: List[AttributeLike] = []
  for attr in attributes:
    if isinstance(attr, Attribute) and attr.name in routable:
      moved.append(attr)
    else:
      kept.append(attr)
  return tuple(kept), tuple(moved)


def find_attribute(attributes: Iterable[AttributeLike], name: str) -> Optional[Attribute]:
  """Returns the first attribute called ``name``."""
  for attr in attributes:
    if isinstance(attr, Attribute) and attr.name == name:
      return attr
  return None


def remove_attributes(attributes: Iterable[AttributeLike], *names: str) -> Tuple[AttributeLike, ...]:
  """Drops every attribute whose name is in ``names``."""
  return tuple(a for a in attributes if not (isinstance(a, Attribute) and a.name in names))


def rename_attribute(attributes: Iterable[AttributeLike], old: str, new: str) -> Tuple[AttributeLike, ...]:
  """Renames every ``old`` attribute to ``new``, keeping its value and position."""
  result: List[AttributeLike] = []
  for attr in attributes:
    if isinstance(attr, Attribute) and attr.name == old:
      result.append(attr.with_changes(name=new))
    else:
      result.append(attr)
  return tuple(result)


def merge_class_attributes(attributes: Iterable[AttributeLike]) -> Tuple[AttributeLike, ...]:
  """
  Collapses duplicate literal ``className`` attributes into the first one.

  Literal values are concatenated in order. Expression-valued ``className``
  attributes are left where they are.

  Args:
      attributes: Attribute list, possibly with duplicates.

  Returns:
      Tuple[AttributeLike, ...]: Attribute list with at most one literal ``className``.
  """
  attributes = tuple(attributes)
  literals = [a for a in attributes if isinstance(a, Attribute) and a.name == CLASS_ATTRIBUTE and a.is_literal]
  if len(literals) <= 1:
    return attributes

  merged = merge_class_strings(*(a.literal or "" for a in literals))
  result: List[AttributeLike] = []
  placed = False
  for attr in attributes:
    if isinstance(attr, Attribute) and attr.name == CLASS_ATTRIBUTE and attr.is_literal:
      if not placed:
        result.append(Attribute(CLASS_ATTRIBUTE, StringValue(merged)))
        placed = True
      continue
    result.append(attr)
  return tuple(result)


def append_class_tokens(attributes: Iterable[AttributeLike], tokens: str) -> Tuple[AttributeLike, ...]:
  """
  Adds default class tokens to an element.

  Existing literal classes come first; tokens already present are not repeated.
  An expression-valued ``className`` is preserved and no defaults are added.
  Without any ``className`` a new attribute is appended.

  Args:
      attributes: The element's attributes.
      tokens: Space separated tokens to add.

  Returns:
      Tuple[AttributeLike, ...]: Updated attributes.
  """
  attributes = merge_class_attributes(attributes)
  existing = find_attribute(attributes, CLASS_ATTRIBUTE)
  if existing is None:
    return attributes + (Attribute(CLASS_ATTRIBUTE, StringValue(tokens)),)
  if not existing.is_literal:
    return attributes

  merged = merge_class_strings(existing.literal or "", tokens)
  result: List[AttributeLike] = []
  for attr in attributes:
    if attr is existing:
      result.append(attr.with_changes(value=StringValue(merged)))
    else:
      result.append(attr)
  return tuple(result)
