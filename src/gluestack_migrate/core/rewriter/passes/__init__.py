"""
Rewrite Passes.

The passes of the default pipeline, in execution order:

1.  ``ClassNamePass``: class-token conversion.
2.  ``EventPromotionPass``: ``onClick`` promotion.
3.  ``TextWrapPass``: bare-text wrapping.
4.  ``ElementRulePass``: tag dispatch.
5.  ``ImportPass``: import bookkeeping.
"""

from gluestack_migrate.core.rewriter.passes.classnames import ClassNamePass
from gluestack_migrate.core.rewriter.passes.elements import ElementRulePass
from gluestack_migrate.core.rewriter.passes.events import EventPromotionPass
from gluestack_migrate.core.rewriter.passes.imports import ImportPass
from gluestack_migrate.core.rewriter.passes.text import TextWrapPass

__all__ = ["ClassNamePass", "ElementRulePass", "EventPromotionPass", "ImportPass", "TextWrapPass"]
