"""
Text rules.

Source text tags become text-typed target components. Their own text is never
wrapped again (``text_wrapper=None``).
"""

from gluestack_migrate.core.registry import register_rule
from gluestack_migrate.core.rule_types import Passthrough, Rename

HEADING_CLASSES = "text-2xl font-bold"

register_rule(Rename("Text", text_wrapper=None), "p", "span", origin=__name__)
register_rule(
  Rename("Heading", text_wrapper=None, default_classes=HEADING_CLASSES),
  "h1",
  "h2",
  "h3",
  "h4",
  origin=__name__,
)
register_rule(Rename("TextArea", text_wrapper=None), "Textarea", origin=__name__)

# Option labels are wrapped before the select rule turns options into items.
register_rule(Passthrough(text_wrapper="Text"), "option", origin=__name__)

# Components with a dedicated text child.
register_rule(Passthrough(text_wrapper="AlertText"), "Alert", origin=__name__)
register_rule(Passthrough(text_wrapper="BadgeText"), "Badge", origin=__name__)
register_rule(Passthrough(text_wrapper="FabLabel"), "Fab", origin=__name__)
