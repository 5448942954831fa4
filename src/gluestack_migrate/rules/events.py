"""
Event rules.

React Native has no click events: ``onClick`` becomes ``onPress``, owned either
by the element itself (interactive components) or by a ``Pressable`` wrapper.
"""

from gluestack_migrate.config import DEFAULT_INTERACTIVE_TAGS
from gluestack_migrate.core.registry import register_attribute_rule
from gluestack_migrate.core.rule_types import PromoteEvent

register_attribute_rule(
  PromoteEvent(
    source_attr="onClick",
    target_attr="onPress",
    wrapper="Pressable",
    interactive_tags=frozenset(DEFAULT_INTERACTIVE_TAGS),
  ),
  origin=__name__,
)
