"""
Form control rules: buttons, text inputs and selects.
"""

from typing import List, Optional, Tuple

from gluestack_migrate.core.attributes import INPUT_FIELD_PROPS, partition_attributes
from gluestack_migrate.core.registry import decompose, register_rule, restructure
from gluestack_migrate.core.rule_types import Passthrough, RuleContext
from gluestack_migrate.core.tree.nodes import Attribute, Element, ExpressionValue, NodeId
from gluestack_migrate.core.vocabulary import is_component


def is_icon_reference(element: Element) -> bool:
  """
  Capitalised tags outside the target vocabulary are treated as icon components
  (``<Search />``, ``<ChevronRight />``).
  """
  tag = element.tag
  return tag is not None and tag[:1].isupper() and not is_component(tag)


@restructure("button", target="Button", text_wrapper="ButtonText")
def button(element: Element, ctx: RuleContext) -> Tuple[NodeId, ...]:
  children: List[NodeId] = []
  for child_id in element.children:
    child = ctx.document.element(child_id)
    if child is not None and is_icon_reference(child):
      icon_attrs = (Attribute("as", ExpressionValue(child.name)),) + child.attributes
      children.append(ctx.allocate(Element.create("ButtonIcon", icon_attrs)))
    else:
      children.append(child_id)
  return tuple(children)


# shadcn <Button> already has the target tag, only its label needs wrapping.
register_rule(Passthrough(text_wrapper="ButtonText"), "Button", origin=__name__)


@decompose("input", "Input", target="Input", text_wrapper=None)
def input_field(element: Element, ctx: RuleContext) -> Optional[Element]:
  """
  ``<input placeholder="x" className="border" />`` becomes an ``Input`` frame
  keeping the layout props and an ``InputField`` carrying the value props.
  """
  if ctx.has_child(element, "InputField"):
    return None
  kept, moved = partition_attributes(element.attributes, INPUT_FIELD_PROPS)
  field_id = ctx.allocate(Element.create("InputField", moved))
  return element.with_attributes(kept).with_children(element.children + (field_id,))


def _select_item(ctx: RuleContext, child_id: NodeId) -> NodeId:
  child = ctx.document.element(child_id)
  if child is None or child.tag != "option":
    return child_id
  return ctx.allocate(Element.create("SelectItem", child.attributes, child.children))


@decompose("select", "Select", target="Select")
def select(element: Element, ctx: RuleContext) -> Optional[Element]:
  if ctx.has_child(element, "SelectTrigger", "SelectContent"):
    return None
  trigger_id = ctx.wrap("SelectTrigger", (ctx.allocate(Element.create("SelectInput")),))
  content_id = ctx.wrap("SelectContent", tuple(_select_item(ctx, child_id) for child_id in element.children))
  return element.with_children((trigger_id, content_id))
