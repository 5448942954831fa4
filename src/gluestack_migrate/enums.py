"""
Enumerations for gluestack-migrate.

This module defines the enumerations shared by the tree model, the rule
variants and the import bookkeeping.
"""

from enum import Enum


class TagKind(str, Enum):
  """
  Shape of an element's tag name.

  Only ``IDENTIFIER`` tags (``div``, ``Button``) take part in tag-level rules.
  """

  IDENTIFIER = "identifier"
  MEMBER = "member"  # motion.div
  NAMESPACED = "namespaced"  # svg:rect
  FRAGMENT = "fragment"  # <>...</>


class RuleKind(str, Enum):
  """
  The variants of the element-rewrite rule union.
  """

  RENAME = "rename"
  RESTRUCTURE = "restructure"
  PROMOTE_EVENT = "promote_event"
  DECOMPOSE = "decompose"
  PASSTHROUGH = "passthrough"


class SpecifierKind(str, Enum):
  """
  Kinds of bindings introduced by an import declaration.
  """

  NAMED = "named"  # import { Box } from '...'
  DEFAULT = "default"  # import Box from '...'
  NAMESPACE = "namespace"  # import * as ui from '...'
