"""
Tree Model Package.

The in-memory representation every rule operates on: an arena ``Document`` of
immutable ``Element`` / ``Text`` / ``ExpressionHolder`` nodes addressed by
stable ids, plus the document's import declarations.
"""

from gluestack_migrate.core.tree.builder import build, build_document, el, expr, spread
from gluestack_migrate.core.tree.document import Ancestors, Document
from gluestack_migrate.core.tree.nodes import (
  Attribute,
  AttributeLike,
  AttributeValue,
  Element,
  ExpressionHolder,
  ExpressionValue,
  ImportDeclaration,
  ImportSpecifier,
  Node,
  NodeId,
  SpreadAttribute,
  StringValue,
  TagName,
  Text,
)

__all__ = [
  "Ancestors",
  "Attribute",
  "AttributeLike",
  "AttributeValue",
  "Document",
  "Element",
  "ExpressionHolder",
  "ExpressionValue",
  "ImportDeclaration",
  "ImportSpecifier",
  "Node",
  "NodeId",
  "SpreadAttribute",
  "StringValue",
  "TagName",
  "Text",
  "build",
  "build_document",
  "el",
  "expr",
  "spread",
]
