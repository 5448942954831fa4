"""
Layout and container rules.

Plain renames onto layout primitives, plus the components whose gluestack
counterpart has the same name and shape.
"""

from gluestack_migrate.core.registry import register_rule
from gluestack_migrate.core.rule_types import Passthrough, Rename

register_rule(Rename("Box"), "div", "nav", "Card", origin=__name__)
register_rule(Rename("FormControl"), "Form", origin=__name__)
register_rule(Rename("Divider"), "Separator", origin=__name__)
register_rule(Rename("Menu"), "DropdownMenu", origin=__name__)

# Same name and structure on both sides.
register_rule(
  Passthrough(),
  "RadioGroup",
  "Checkbox",
  "Switch",
  "Slider",
  "Skeleton",
  "Toast",
  "Breadcrumb",
  "AvatarGroup",
  "Kbd",
  origin=__name__,
)
