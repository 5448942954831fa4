"""
Node Rendering for Trace Diffs.

Renders arena nodes into compact markup strings "in vacuum", without a real
serializer. Used to record the state of an element before and after a rule
rewrote it.
"""

from typing import List, Tuple

from gluestack_migrate.core.tree.document import Document
from gluestack_migrate.core.tree.nodes import (
  Attribute,
  AttributeLike,
  ExpressionHolder,
  Node,
  StringValue,
  Text,
)

ELLIPSIS = "..."


def dump_attribute(attr: AttributeLike) -> str:
  if not isinstance(attr, Attribute):
    return "{..." + attr.expression.source + "}"
  if attr.value is None:
    return attr.name
  if isinstance(attr.value, StringValue):
    return f'{attr.name}="{attr.value.value}"'
  return f"{attr.name}={{{attr.value.source}}}"


def dump_node(document: Document, node: Node, max_depth: int = 3) -> str:
  """
  Renders a node value and its descendants as markup.

  Child ids are resolved through ``document``; below ``max_depth`` children are
  elided. Ids that do not resolve are shown as ``#<id>``.

  Args:
      document: Arena holding the node's children.
      node: The node value (not necessarily stored in the arena yet).
      max_depth: Levels of children to render.

  Returns:
      str: Markup-like text.
  """
  if isinstance(node, Text):
    return node.value
  if isinstance(node, ExpressionHolder):
    return "{" + node.expression.source + "}"

  head = " ".join([node.name] + [dump_attribute(a) for a in node.attributes])
  if node.self_closing:
    return f"<{head} />"

  parts: List[str] = []
  if node.children and max_depth <= 0:
    parts.append(ELLIPSIS)
  else:
    for child_id in node.children:
      if child_id in document:
        parts.append(dump_node(document, document.get(child_id), max_depth - 1))
      else:
        parts.append(f"#{child_id}")

  closing = node.closing.name if node.closing else node.name
  return f"<{head}>{''.join(parts)}</{closing}>"


def diff_nodes(document: Document, original: Node, modified: Node) -> Tuple[str, str, bool]:
  """
  Compares two node values and returns their renderings.

  Args:
      document: Arena resolving children of both values.
      original: The node before the rewrite.
      modified: The node after the rewrite.

  Returns:
      tuple: (dump_before, dump_after, has_changed)
  """
  before = dump_node(document, original)
  after = dump_node(document, modified)
  return before, after, before != after
