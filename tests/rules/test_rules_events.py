"""
Tests for the onClick promotion rule in a full run.
"""

from gluestack_migrate.config import RuntimeConfig
from gluestack_migrate.core.registry import get_attribute_rules
from gluestack_migrate.core.tree import build_document, el, expr


def test_registered_rule():
  (rule,) = get_attribute_rules()
  assert (rule.source_attr, rule.target_attr, rule.wrapper) == ("onClick", "onPress", "Pressable")
  assert "button" in rule.interactive_tags


def test_wrapped_layout_element(run_pipeline, render):
  doc, _ = run_pipeline(build_document(el("div", {"className": "flex items-center", "onClick": expr("fn")}, "Hi")))
  assert render(doc) == '<Pressable onPress={fn}><Box className="flex items-center flex-row"><Text>Hi</Text></Box></Pressable>'


def test_interactive_tag_keeps_its_slot(run_pipeline, render):
  doc, _ = run_pipeline(build_document(el("button", {"onClick": expr("go")}, "Save")))
  assert render(doc) == "<Button onPress={go}><ButtonText>Save</ButtonText></Button>"


def test_event_on_text_tag(run_pipeline, render):
  doc, _ = run_pipeline(build_document(el("span", {"onClick": expr("copy")}, "ID")))
  assert render(doc) == "<Pressable onPress={copy}><Text>ID</Text></Pressable>"


def test_interactive_tags_from_config(run_pipeline, render):
  config = RuntimeConfig(interactive_tags=["Card"])
  doc, _ = run_pipeline(build_document(el("Card", {"onClick": expr("open")}), el("button", {"onClick": expr("x")})), config)
  assert render(doc) == "<Box onPress={open} /><Pressable onPress={x}><Button /></Pressable>"
