"""
Data structures representing the output of a migration run.

Defines the ``ConversionResult`` Pydantic model, which carries the serialized
document, any errors encountered, per-pass statistics and the execution trace.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class ConversionResult(BaseModel):
  """
  Container for the results of a migration job.
  """

  code: str = Field(default="", description="The serialized document (the verbatim input on failure).")
  errors: List[str] = Field(default_factory=list, description="Fatal problems that aborted the run.")
  success: bool = Field(default=True, description="True if the document was parsed, rewritten and serialized.")
  pass_stats: Dict[str, int] = Field(
    default_factory=dict, description="Number of node replacements committed by each pass, keyed by pass name."
  )
  unmatched_tags: List[str] = Field(
    default_factory=list, description="Identifier tags in the input that fell through to the passthrough arm."
  )
  trace_events: List[Dict[str, Any]] = Field(default_factory=list, description="Execution trace log data.")

  @property
  def has_errors(self) -> bool:
    return len(self.errors) > 0

  @property
  def changed(self) -> bool:
    """True if any pass committed at least one replacement."""
    return any(self.pass_stats.values())
