"""
Child-Wrapping Utility.

React Native refuses raw text outside a text component, so every run of bare
text under a layout element must be moved into a wrapper (``Text``,
``ButtonText``, ...). This module implements that wrapping on arena child-id
lists.
"""

import re
from typing import Iterable, List, Optional, Tuple

from gluestack_migrate.core.tree.document import Document
from gluestack_migrate.core.tree.nodes import Element, NodeId, Text
from gluestack_migrate.core.vocabulary import TEXT_CONTAINERS

BRACKET_PATTERN = re.compile(r"[()\[\]]")


def clean_text(value: str, strip_brackets: bool = False) -> str:
  """
  Trims a text run, optionally removing bracket and parenthesis characters.

  If stripping would leave nothing, the trimmed original is returned so that no
  visible content is lost.

  Args:
      value: Raw text.
      strip_brackets: Remove ``()[]`` characters.

  Returns:
      str: Cleaned text, empty only for whitespace input.
  """
  trimmed = value.strip()
  if strip_brackets:
    stripped = BRACKET_PATTERN.sub("", trimmed).strip()
    if stripped:
      return stripped
  return trimmed


def wrap_text_children(
  document: Document,
  children: Iterable[NodeId],
  parent_tag: Optional[str],
  wrapper: str = "Text",
  exempt_parents: Iterable[str] = TEXT_CONTAINERS,
  strip_brackets: bool = False,
) -> Tuple[NodeId, ...]:
  """
  Wraps each maximal run of adjacent text children in a ``wrapper`` element.

  Whitespace-only text is dropped. Elements and expression children are kept
  in place. Children of exempt parents are returned unchanged.

  Args:
      document: Arena used to read children and allocate wrappers.
      children: Ordered child ids.
      parent_tag: Tag of the parent element (None for non-identifier tags).
      wrapper: Tag of the synthesized wrapper.
      exempt_parents: Parent tags that accept raw text.
      strip_brackets: Remove ``()[]`` from wrapped text.

  Returns:
      Tuple[NodeId, ...]: The new child list.
  """
  children = tuple(children)
  if parent_tag in set(exempt_parents):
    return children

  result: List[NodeId] = []
  run: List[str] = []

  def flush() -> None:
    if not run:
      return
    value = clean_text("".join(run), strip_brackets)
    run.clear()
    if value:
      text_id = document.add(Text(value))
      result.append(document.add(Element.create(wrapper, children=(text_id,))))

  for child_id in children:
    node = document.get(child_id)
    if isinstance(node, Text):
      run.append(node.value)
      continue
    flush()
    result.append(child_id)
  flush()

  return tuple(result)
