"""
Migration Trace Logger.

Records the step-by-step execution of a migration run:

1. Lifecycle phases (validation, each rewrite pass, import bookkeeping).
2. Rule applications (element A rewritten to element B).
3. Inspections (a rule looked at an element and left it alone).
4. Import actions (specifier added, declaration inserted, removed or rewritten).

The output is a list of plain dictionaries suitable for JSON serialization.
"""

import time
import uuid
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class TraceEventType(str, Enum):
  PHASE_START = "phase_start"
  PHASE_END = "phase_end"
  RULE_APPLIED = "rule_applied"
  NODE_MUTATION = "node_mutation"
  ANALYSIS_WARNING = "analysis_warning"
  IMPORT_ACTION = "import_action"
  INSPECTION = "inspection"


@dataclass
class TraceEvent:
  id: str
  type: TraceEventType
  timestamp: float
  description: str
  parent_id: Optional[str] = None
  metadata: Dict[str, Any] = field(default_factory=dict)


class TraceLogger:
  """
  Records migration events.

  One instance is created per run by the engine and handed to every pass
  through the ``RewriterContext``.
  """

  def __init__(self) -> None:
    self._events: List[TraceEvent] = []
    self._active_phases: List[str] = []

  @property
  def events(self) -> List[TraceEvent]:
    return list(self._events)

  def start_phase(self, name: str, description: str = "") -> str:
    """Starts a nested phase. Returns the phase id."""
    phase_id = str(uuid.uuid4())
    parent = self._active_phases[-1] if self._active_phases else None

    self._events.append(
      TraceEvent(
        id=phase_id,
        type=TraceEventType.PHASE_START,
        timestamp=time.time(),
        description=name,
        parent_id=parent,
        metadata={"detail": description},
      )
    )
    self._active_phases.append(phase_id)
    return phase_id

  def end_phase(self) -> None:
    """Ends the current active phase."""
    if not self._active_phases:
      return

    phase_id = self._active_phases.pop()
    self._events.append(
      TraceEvent(
        id=str(uuid.uuid4()),
        type=TraceEventType.PHASE_END,
        timestamp=time.time(),
        description="End Phase",
        parent_id=phase_id,
      )
    )

  def log_rule(self, source_tag: str, target_tag: str, rule_kind: str) -> None:
    """Logs a tag-level rule application."""
    self._log_simple(
      TraceEventType.RULE_APPLIED,
      f"Mapped <{source_tag}> -> <{target_tag}>",
      {"source": source_tag, "target": target_tag, "rule": rule_kind},
    )

  def log_mutation(self, node_type: str, before: str, after: str) -> None:
    """Logs a node rewrite with before/after dumps."""
    self._log_simple(TraceEventType.NODE_MUTATION, f"Transformed {node_type}", {"before": before, "after": after})

  def log_warning(self, message: str) -> None:
    self._log_simple(TraceEventType.ANALYSIS_WARNING, message, {"level": "warning"})

  def log_inspection(self, node_str: str, outcome: str, detail: str = "") -> None:
    """Logs a decision point where no change occurred."""
    self._log_simple(TraceEventType.INSPECTION, f"Inspecting '{node_str}'", {"outcome": outcome, "detail": detail})

  def log_import(self, action: str, module: str, names: Optional[List[str]] = None) -> None:
    """Logs an import bookkeeping action ('add', 'insert', 'remove', 'rewrite')."""
    self._log_simple(
      TraceEventType.IMPORT_ACTION,
      f"{action} import '{module}'",
      {"action": action, "module": module, "names": list(names or [])},
    )

  def _log_simple(self, evt_type: TraceEventType, desc: str, meta: Dict[str, Any]) -> None:
    parent = self._active_phases[-1] if self._active_phases else None
    self._events.append(
      TraceEvent(
        id=str(uuid.uuid4()), type=evt_type, timestamp=time.time(), description=desc, parent_id=parent, metadata=meta
      )
    )

  def export(self) -> List[Dict[str, Any]]:
    """Returns list of dicts for JSON serialization."""
    return [asdict(e) for e in self._events]


# Fallback instance for helpers called outside an engine run.
_GLOBAL_TRACER = TraceLogger()


def get_tracer() -> TraceLogger:
  return _GLOBAL_TRACER


def reset_tracer() -> None:
  global _GLOBAL_TRACER
  _GLOBAL_TRACER = TraceLogger()
