"""
Text Wrapping Pass.

React Native only renders strings inside text components. Each element's bare
text runs are wrapped with the text wrapper its rule declares (``Text``,
``ButtonText``, ``AlertText``, ...). Rules declaring no wrapper belong to
text-typed tags and are left alone.
"""

from typing import Optional

from gluestack_migrate.core.children import wrap_text_children
from gluestack_migrate.core.rewriter.base import ElementPass
from gluestack_migrate.core.rewriter.context import RewriterContext
from gluestack_migrate.core.tree.document import Ancestors, Document
from gluestack_migrate.core.tree.nodes import Element, Node, NodeId, Text


class TextWrapPass(ElementPass):
  name = "text"
  description = "Wrap bare text in text components"

  def rewrite(
    self,
    node_id: NodeId,
    element: Element,
    ancestors: Ancestors,
    document: Document,
    context: RewriterContext,
  ) -> Optional[Node]:
    tag = element.tag
    if tag is None:
      return None
    wrapper = context.rule_for(tag).text_wrapper
    if wrapper is None:
      return None

    if not any(isinstance(document.get(c), Text) for c in element.children):
      return None

    children = wrap_text_children(
      document,
      element.children,
      tag,
      wrapper=wrapper,
      strip_brackets=context.config.strip_text_brackets,
    )
    if children == element.children:
      return None
    return element.with_children(children)
