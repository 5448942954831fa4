"""
Tests for layout and text rules.
"""

import pytest

from gluestack_migrate.core.tree import build_document, el, expr


@pytest.mark.parametrize(
  "tag, expected",
  [
    ("div", "<Box><Text>x</Text></Box>"),
    ("nav", "<Box><Text>x</Text></Box>"),
    ("Card", "<Box><Text>x</Text></Box>"),
    ("Form", "<FormControl><Text>x</Text></FormControl>"),
    ("DropdownMenu", "<Menu><Text>x</Text></Menu>"),
    ("p", "<Text>x</Text>"),
    ("span", "<Text>x</Text>"),
    ("Textarea", "<TextArea>x</TextArea>"),
    ("Checkbox", "<Checkbox><Text>x</Text></Checkbox>"),
    ("Alert", "<Alert><AlertText>x</AlertText></Alert>"),
  ],
)
def test_renames_and_wrappers(tag, expected, run_pipeline, render):
  doc, _ = run_pipeline(build_document(el(tag, None, "x")))
  assert render(doc) == expected


def test_separator_is_self_closing_divider(run_pipeline, render):
  doc, _ = run_pipeline(build_document(el("Separator")))
  assert render(doc) == "<Divider />"


@pytest.mark.parametrize("tag", ["h1", "h2", "h3", "h4"])
def test_headings_get_default_classes(tag, run_pipeline, render):
  doc, _ = run_pipeline(build_document(el(tag, {"className": "mb-2"}, "Title")))
  assert render(doc) == '<Heading className="mb-2 text-2xl font-bold">Title</Heading>'


def test_heading_with_dynamic_classes_keeps_them(run_pipeline, render):
  doc, _ = run_pipeline(build_document(el("h1", {"className": expr("cls")}, "T")))
  assert render(doc) == "<Heading className={cls}>T</Heading>"


def test_text_keeps_brackets(run_pipeline, render):
  doc, _ = run_pipeline(build_document(el("span", None, "(optional)")))
  assert render(doc) == "<Text>(optional)</Text>"
