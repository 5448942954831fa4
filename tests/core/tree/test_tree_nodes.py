"""
Tests for the immutable tree node values.

Verifies:
1.  Tag classification (identifier / member / namespaced / fragment).
2.  Closing-marker bookkeeping on construction and rename.
3.  Attribute helpers on elements and import declarations.
"""

from gluestack_migrate.core.tree import (
  Attribute,
  Element,
  ExpressionValue,
  ImportDeclaration,
  ImportSpecifier,
  StringValue,
  TagName,
  Text,
)
from gluestack_migrate.enums import SpecifierKind, TagKind


def test_tag_name_parse_kinds():
  assert TagName.parse("div").kind == TagKind.IDENTIFIER
  assert TagName.parse("motion.div").kind == TagKind.MEMBER
  assert TagName.parse("svg:rect").kind == TagKind.NAMESPACED
  assert TagName.parse("").kind == TagKind.FRAGMENT


def test_element_tag_is_none_for_non_identifiers():
  assert Element.create("div").tag == "div"
  assert Element.create("motion.div").tag is None
  assert Element.create("").tag is None


def test_create_defaults_self_closing_from_children():
  assert Element.create("br").self_closing
  assert Element.create("div", children=(1,)).self_closing is False


def test_closing_mirrors_opening():
  elem = Element.create("div", children=(1,))
  assert elem.closing == elem.opening

  leaf = Element.create("img")
  assert leaf.closing is None


def test_renamed_keeps_markers_in_sync():
  elem = Element.create("div", children=(1,)).renamed("Box")
  assert elem.opening.name == "Box"
  assert elem.closing.name == "Box"

  leaf = Element.create("input").renamed("Input")
  assert leaf.self_closing
  assert leaf.closing is None


def test_with_children_opens_self_closing():
  elem = Element.create("Progress").with_children((7,))
  assert not elem.self_closing
  assert elem.closing.name == "Progress"
  assert elem.children == (7,)


def test_get_returns_first_duplicate():
  elem = Element.create("div", (Attribute("className", StringValue("a")), Attribute("className", StringValue("b"))))
  assert elem.get("className").literal == "a"
  assert elem.has("className")
  assert not elem.has("id")


def test_attribute_literal_and_expression():
  assert Attribute("x", StringValue("1")).is_literal
  assert Attribute("x", ExpressionValue("fn")).literal is None
  assert Attribute("disabled").value is None


def test_text_blank():
  assert Text("  \n ").is_blank
  assert not Text(" a ").is_blank


def test_import_declaration_local_names():
  decl = ImportDeclaration(
    "mod",
    (
      ImportSpecifier("A"),
      ImportSpecifier("B", local="C"),
      ImportSpecifier("D", kind=SpecifierKind.DEFAULT),
    ),
  )
  assert decl.local_names == ("A", "C", "D")
  assert ImportDeclaration.named("m", "X", "Y").local_names == ("X", "Y")
