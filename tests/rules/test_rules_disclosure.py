"""
Tests for tabs, accordion, avatar and progress rules.
"""

from gluestack_migrate.core.tree import build_document, el, expr


def test_tabs_grouping(run_pipeline, render):
  doc, _ = run_pipeline(build_document(el("Tabs", None, el("Tab", None, "One"), el("TabPanel", None, "P"), el("div"))))
  assert render(doc) == (
    "<Tabs><TabsTabList><Tab><Text>One</Text></Tab></TabsTabList>"
    "<TabsTabPanels><TabPanel><Text>P</Text></TabPanel></TabsTabPanels><Box /></Tabs>"
  )


def test_tabs_interleaved_keep_relative_order(run_pipeline, render):
  doc, _ = run_pipeline(
    build_document(el("Tabs", None, el("Tab", {"id": "1"}), el("TabPanel", {"id": "1"}), el("Tab", {"id": "2"})))
  )
  assert render(doc) == (
    '<Tabs><TabsTabList><Tab id="1" /><Tab id="2" /></TabsTabList>'
    '<TabsTabPanels><TabPanel id="1" /></TabsTabPanels></Tabs>'
  )


def test_accordion_items(run_pipeline, render):
  doc, _ = run_pipeline(
    build_document(
      el(
        "Accordion",
        None,
        el("div", {"value": "a"}, el("AccordionHeader", None, "Q"), el("AccordionContent", None, "A")),
        el("AccordionItem", {"value": "b"}, el("AccordionHeader", None, "Q2")),
      )
    )
  )
  assert render(doc) == (
    '<Accordion><AccordionItem value="a"><AccordionTrigger><Text>Q</Text></AccordionTrigger>'
    "<AccordionContent><Text>A</Text></AccordionContent></AccordionItem>"
    '<AccordionItem value="b"><AccordionTrigger><Text>Q2</Text></AccordionTrigger>'
    "<AccordionContent></AccordionContent></AccordionItem></Accordion>"
  )


def test_accordion_finished_items_are_left_alone(run_pipeline, render):
  source = el("Accordion", None, el("AccordionItem", None, el("AccordionTrigger"), el("AccordionContent")))
  doc, context = run_pipeline(build_document(source))
  assert render(doc) == "<Accordion><AccordionItem><AccordionTrigger /><AccordionContent /></AccordionItem></Accordion>"
  assert context.stats["elements"] == 0


def test_avatar_keeps_only_image(run_pipeline, render):
  doc, _ = run_pipeline(build_document(el("Avatar", None, el("AvatarImage", {"src": "a.png"}), "JD")))
  assert render(doc) == '<Avatar><AvatarImage src="a.png" /></Avatar>'


def test_avatar_without_image_is_left_alone(run_pipeline, render):
  doc, _ = run_pipeline(build_document(el("Avatar", None, el("AvatarFallbackText", None, "JD"))))
  assert render(doc) == "<Avatar><AvatarFallbackText>JD</AvatarFallbackText></Avatar>"


def test_progress_gets_filled_track(run_pipeline, render):
  doc, _ = run_pipeline(build_document(el("Progress", {"value": expr("40")})))
  assert render(doc) == "<Progress value={40}><ProgressFilledTrack /></Progress>"
