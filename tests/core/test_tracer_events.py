"""
Tests for the migration trace logger.
"""

from gluestack_migrate.core.tracer import TraceEventType, TraceLogger, get_tracer, reset_tracer


def test_phase_nesting():
  logger = TraceLogger()

  p1 = logger.start_phase("Parent")
  p2 = logger.start_phase("Child", "inner work")
  logger.end_phase()  # End Child
  logger.end_phase()  # End Parent

  events = logger.export()

  # 4 events: Start P, Start C, End C, End P
  assert len(events) == 4
  assert events[0]["type"] == TraceEventType.PHASE_START
  assert events[0]["parent_id"] is None
  assert events[1]["parent_id"] == p1
  assert events[1]["metadata"]["detail"] == "inner work"
  assert events[2]["type"] == TraceEventType.PHASE_END
  assert events[2]["parent_id"] == p2
  assert events[3]["parent_id"] == p1


def test_end_phase_without_active_phase_is_noop():
  logger = TraceLogger()
  logger.end_phase()
  assert logger.events == []


def test_events_attach_to_active_phase():
  logger = TraceLogger()
  phase = logger.start_phase("elements")
  logger.log_rule("div", "Box", "rename")
  logger.log_inspection("Tabs", "skipped", "restructure: shape not recognised")
  logger.log_warning("odd")
  logger.end_phase()

  rule, inspection, warning = logger.events[1:4]
  assert rule.type == TraceEventType.RULE_APPLIED
  assert rule.description == "Mapped <div> -> <Box>"
  assert rule.metadata == {"source": "div", "target": "Box", "rule": "rename"}
  assert rule.parent_id == phase
  assert inspection.type == TraceEventType.INSPECTION
  assert inspection.metadata["outcome"] == "skipped"
  assert warning.metadata["level"] == "warning"


def test_mutation_and_import_metadata():
  logger = TraceLogger()
  logger.log_mutation("<div>", "<div />", "<Box />")
  logger.log_import("insert", "@/components/ui/box", ["Box"])
  logger.log_import("remove", "react-native")

  mutation, insert, remove = logger.export()
  assert mutation["type"] == TraceEventType.NODE_MUTATION
  assert mutation["metadata"] == {"before": "<div />", "after": "<Box />"}
  assert insert["type"] == TraceEventType.IMPORT_ACTION
  assert insert["metadata"]["names"] == ["Box"]
  assert remove["metadata"] == {"action": "remove", "module": "react-native", "names": []}


def test_events_property_is_a_copy():
  logger = TraceLogger()
  logger.log_warning("x")
  logger.events.clear()
  assert len(logger.events) == 1


def test_global_tracer_reset():
  first = get_tracer()
  first.log_warning("stale")
  reset_tracer()
  assert get_tracer() is not first
  assert get_tracer().events == []
