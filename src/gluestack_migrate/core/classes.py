"""
Class-Token Transformer.

Rewrites Tailwind utility classes written for the web into their NativeWind
equivalents:

1.  **Pseudo states**: ``hover:bg-red`` -> ``web:hover:bg-red`` (only the web
    target understands pointer states).
2.  **Grid**: tokens starting with ``grid`` become ``flex``.
3.  **Unsupported**: ``*scrollbar*`` tokens and ``aspect-ratio`` are dropped.
4.  **Inline flex**: ``inline-flex`` -> ``flex flex-row``.
5.  **Direction**: React Native lays flex children out in a column, so a bare
    ``flex`` without a direction gets ``flex-row`` appended.

Tokens already carrying the ``web:`` prefix are kept as written. Surviving
tokens are de-duplicated (first occurrence wins) and joined with single
spaces. The transform is idempotent: its output maps to itself.
"""

import re
from typing import Iterable, List, Optional, Union

from gluestack_migrate.core.tree.nodes import AttributeValue, StringValue

PSEUDO_STATE_PATTERN = re.compile(r"^(hover|focus|active|visited|disabled|first|last|odd|even):")
WEB_PREFIX = "web:"

FLEX = "flex"
ROW = "flex-row"
DIRECTION_TOKENS = frozenset({"flex-row", "flex-col", "flex-row-reverse", "flex-col-reverse"})


def map_token(token: str) -> List[str]:
  """
  Maps one source token to zero or more target tokens.

  Args:
      token: A single utility class.

  Returns:
      List[str]: Replacement tokens (empty when dropped).
  """
  if token.startswith(WEB_PREFIX):
    return [token]
  if token == "inline-flex":
    return [FLEX, ROW]
  if PSEUDO_STATE_PATTERN.match(token):
    return [f"{WEB_PREFIX}{token}"]
  if token.startswith("grid"):
    return [FLEX]
  if "scrollbar" in token:
    return []
  if token == "aspect-ratio":
    return []
  return [token]


def convert_class_tokens(tokens: Iterable[str]) -> List[str]:
  """
  Converts a token sequence.

  Args:
      tokens: Source tokens, empty strings allowed.

  Returns:
      List[str]: Ordered, de-duplicated target tokens.
  """
  result: List[str] = []
  seen = set()
  for token in tokens:
    if not token:
      continue
    for mapped in map_token(token):
      if mapped not in seen:
        seen.add(mapped)
        result.append(mapped)

  if FLEX in seen and not seen & DIRECTION_TOKENS:
    result.append(ROW)
  return result


def convert_class_string(value: str) -> Optional[str]:
  """
  Converts a whitespace separated class string.

  Args:
      value: Literal class string.

  Returns:
      Optional[str]: The converted string, or None when no token survives.
  """
  tokens = convert_class_tokens(value.split())
  if not tokens:
    return None
  return " ".join(tokens)


def convert_class_value(value: Optional[AttributeValue]) -> Union[AttributeValue, None]:
  """
  Converts a ``className`` attribute value.

  Expression values are returned untouched. Literal values are converted;
  ``None`` signals the caller to remove the attribute (a valueless
  ``className`` shorthand carries no classes and maps to None as well).

  Args:
      value: The attribute value.

  Returns:
      The new value, or None if the attribute should be removed.
  """
  if isinstance(value, StringValue):
    converted = convert_class_string(value.value)
    if converted is None:
      return None
    return StringValue(converted)
  return value


def merge_class_strings(*values: str) -> str:
  """
  Joins class strings, dropping duplicate tokens.

  Args:
      *values: Class strings in priority order.

  Returns:
      str: The merged string.
  """
  result: List[str] = []
  for value in values:
    for token in value.split():
      if token not in result:
        result.append(token)
  return " ".join(result)
