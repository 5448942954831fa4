"""
Class Name Pass.

Normalizes duplicate ``className`` attributes, converts literal class strings
to their native equivalents and drops attributes left without tokens.
Expression values are preserved as written.
"""

from typing import List, Optional

from gluestack_migrate.core.attributes import CLASS_ATTRIBUTE, merge_class_attributes
from gluestack_migrate.core.classes import convert_class_value
from gluestack_migrate.core.rewriter.base import ElementPass
from gluestack_migrate.core.rewriter.context import RewriterContext
from gluestack_migrate.core.tree.document import Ancestors, Document
from gluestack_migrate.core.tree.nodes import Attribute, AttributeLike, Element, Node, NodeId


class ClassNamePass(ElementPass):
  name = "classnames"
  description = "Convert utility classes"

  def rewrite(
    self,
    node_id: NodeId,
    element: Element,
    ancestors: Ancestors,
    document: Document,
    context: RewriterContext,
  ) -> Optional[Node]:
    if not any(isinstance(a, Attribute) and a.name == CLASS_ATTRIBUTE for a in element.attributes):
      return None

    result: List[AttributeLike] = []
    for attr in merge_class_attributes(element.attributes):
      if isinstance(attr, Attribute) and attr.name == CLASS_ATTRIBUTE:
        value = convert_class_value(attr.value)
        if value is None:
          continue
        attr = attr.with_changes(value=value)
      result.append(attr)
    return element.with_attributes(tuple(result))
