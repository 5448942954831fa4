"""
Tests for the text wrapping pass.
"""

from gluestack_migrate.config import RuntimeConfig
from gluestack_migrate.core.rewriter import RewriterContext
from gluestack_migrate.core.rewriter.passes import TextWrapPass
from gluestack_migrate.core.tree import build_document, el, expr


def _run(document, config):
  context = RewriterContext(config)
  TextWrapPass().transform(document, context)
  return context


def test_layout_text_is_wrapped(config, render):
  doc = build_document(el("div", None, "Hello ", expr("name"), " (beta)"))
  _run(doc, config)
  assert render(doc) == "<div><Text>Hello</Text>{name}<Text>beta</Text></div>"


def test_rule_wrapper_is_used(config, render):
  doc = build_document(el("button", None, "Go"), el("Badge", None, "New"), el("Fab", None, "+"))
  _run(doc, config)
  assert render(doc) == (
    "<button><ButtonText>Go</ButtonText></button>"
    "<Badge><BadgeText>New</BadgeText></Badge>"
    "<Fab><FabLabel>+</FabLabel></Fab>"
  )


def test_text_tags_are_not_wrapped(config, render):
  doc = build_document(el("p", None, "a"), el("h1", None, "b"), el("Text", None, "c"), el("input", None, "d"))
  context = _run(doc, config)
  assert render(doc) == "<p>a</p><h1>b</h1><Text>c</Text><input>d</input>"
  assert context.stats == {"text": 0}


def test_renamed_text_target_is_not_wrapped(render):
  doc = build_document(el("Label", None, "Name"))
  _run(doc, RuntimeConfig(extra_renames={"Label": "Text"}))
  assert render(doc) == "<Label>Name</Label>"


def test_brackets_kept_when_disabled(render):
  doc = build_document(el("div", None, "(x)"))
  _run(doc, RuntimeConfig(strip_text_brackets=False))
  assert render(doc) == "<div><Text>(x)</Text></div>"


def test_non_identifier_and_blank_text(config, render):
  doc = build_document(el("motion.div", None, "x"), el("div", None, "\n  ", el("br")))
  _run(doc, config)
  assert render(doc) == "<motion.div>x</motion.div><div><br /></div>"
