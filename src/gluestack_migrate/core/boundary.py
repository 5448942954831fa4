"""
External Collaborator Protocols.

Parsing markup text into a ``Document`` and rendering it back are provided by
the caller. Any object with the right method satisfies these protocols.
"""

from typing import Protocol, runtime_checkable

from gluestack_migrate.core.tree.document import Document


@runtime_checkable
class TreeParser(Protocol):
  def parse(self, source: str) -> Document:
    """
    Builds a document from source text.

    Implementations raise on syntax errors; the engine reports them.
    """
    ...


@runtime_checkable
class TreeSerializer(Protocol):
  def serialize(self, document: Document) -> str:
    """Renders a document (markup and import declarations) as source text."""
    ...
