"""
Disclosure and display rules: tabs, accordions, avatars and progress bars.

These components expect a fixed set of named sub-components, so the rules sort
the original children into them and synthesize empty placeholders for the
parts the source did not provide.
"""

from typing import List, Optional, Tuple

from gluestack_migrate.core.registry import restructure
from gluestack_migrate.core.rule_types import RuleContext
from gluestack_migrate.core.tree.nodes import Element, NodeId
from gluestack_migrate.core.vocabulary import TEXT_CONTAINERS


@restructure("Tabs", target="Tabs")
def tabs(element: Element, ctx: RuleContext) -> Optional[Tuple[NodeId, ...]]:
  """
  ``Tab`` children go into ``TabsTabList``, ``TabPanel`` children into
  ``TabsTabPanels``. Anything else follows the two groups in original order.
  """
  if ctx.has_child(element, "TabsTabList"):
    return None

  tab_ids: List[NodeId] = []
  panel_ids: List[NodeId] = []
  rest: List[NodeId] = []
  for child_id in element.children:
    tag = ctx.document.tag_of(child_id)
    if tag == "Tab":
      tab_ids.append(child_id)
    elif tag == "TabPanel":
      panel_ids.append(child_id)
    else:
      rest.append(child_id)

  tab_list = ctx.wrap("TabsTabList", tuple(tab_ids))
  tab_panels = ctx.wrap("TabsTabPanels", tuple(panel_ids))
  return (tab_list, tab_panels) + tuple(rest)


def _accordion_item(child: Element, ctx: RuleContext) -> NodeId:
  header = ctx.find_child(child, "AccordionHeader")
  content = ctx.find_child(child, "AccordionContent")

  trigger_id = ctx.wrap("AccordionTrigger", header[1].children if header else ())
  content_id = content[0] if content else ctx.allocate(Element.create("AccordionContent", self_closing=False))
  return ctx.allocate(Element.create("AccordionItem", child.attributes, (trigger_id, content_id)))


@restructure("Accordion", target="Accordion")
def accordion(element: Element, ctx: RuleContext) -> Optional[Tuple[NodeId, ...]]:
  """
  Every element child becomes an ``AccordionItem`` holding a trigger (built
  from the child's ``AccordionHeader``) and its ``AccordionContent``.
  """
  changed = False
  arranged: List[NodeId] = []
  for child_id in element.children:
    child = ctx.document.element(child_id)
    if (
      child is None
      or child.tag is None
      or child.tag in TEXT_CONTAINERS
      or (child.tag == "AccordionItem" and ctx.has_child(child, "AccordionTrigger"))
    ):
      arranged.append(child_id)
      continue
    arranged.append(_accordion_item(child, ctx))
    changed = True
  return tuple(arranged) if changed else None


@restructure("Avatar", target="Avatar")
def avatar(element: Element, ctx: RuleContext) -> Optional[Tuple[NodeId, ...]]:
  image = ctx.find_child(element, "AvatarImage")
  if image is None or element.children == (image[0],):
    return None
  return (image[0],)


@restructure("Progress", target="Progress")
def progress(element: Element, ctx: RuleContext) -> Optional[Tuple[NodeId, ...]]:
  existing = ctx.find_child(element, "ProgressFilledTrack")
  if existing is not None and element.children == (existing[0],):
    return None
  return (ctx.allocate(Element.create("ProgressFilledTrack")),)
