"""
Exception hierarchy for gluestack-migrate.

Rules never raise during a pass: a shape they do not recognise is skipped.
The exceptions below cover the two situations that are genuinely fatal:
a tree that violates the model invariants, and a rule table that was
registered inconsistently.
"""


class MigrationError(Exception):
  """Base class for all errors raised by the migration engine."""


class MalformedTreeError(MigrationError):
  """
  Raised when a Document violates a structural invariant.

  Examples: an opening/closing tag mismatch, a dangling child id, a node
  reachable from two parents, or a self-closing element that owns children.
  """

  def __init__(self, message: str, node_id: int = -1) -> None:
    super().__init__(message)
    self.node_id = node_id


class RuleRegistrationError(MigrationError):
  """Raised at import time when two rules claim the same trigger."""
