"""
Overlay rules.

Dialogs, modals, sheets and tooltips need their content inside a dedicated
content element, often next to a backdrop.
"""

from typing import Optional, Tuple

from gluestack_migrate.core.registry import restructure
from gluestack_migrate.core.rule_types import RuleContext
from gluestack_migrate.core.tree.nodes import Element, NodeId


def _content(element: Element, ctx: RuleContext, content_tag: str, backdrop_tag: Optional[str] = None) -> Tuple[NodeId, ...]:
  arranged = []
  if backdrop_tag:
    arranged.append(ctx.allocate(Element.create(backdrop_tag)))
  arranged.append(ctx.wrap(content_tag, element.children))
  return tuple(arranged)


@restructure("Dialog", target="AlertDialog")
def dialog(element: Element, ctx: RuleContext) -> Tuple[NodeId, ...]:
  return _content(element, ctx, "AlertDialogContent", "AlertDialogBackdrop")


@restructure("Modal", target="Modal")
def modal(element: Element, ctx: RuleContext) -> Optional[Tuple[NodeId, ...]]:
  if ctx.has_child(element, "ModalContent"):
    return None
  return _content(element, ctx, "ModalContent", "ModalBackdrop")


@restructure("Popover", "Sheet", target="Actionsheet")
def actionsheet(element: Element, ctx: RuleContext) -> Tuple[NodeId, ...]:
  return _content(element, ctx, "ActionsheetContent")


@restructure("Tooltip", target="Tooltip")
def tooltip(element: Element, ctx: RuleContext) -> Optional[Tuple[NodeId, ...]]:
  if ctx.has_child(element, "TooltipContent"):
    return None
  return _content(element, ctx, "TooltipContent")
