"""
gluestack-migrate Package.

Rewrites component trees written for the web (HTML tags, shadcn components,
Tailwind classes) into gluestack-ui for React Native (NativeWind classes,
``Box`` / ``Text`` / ``Button`` ... components).

The package operates on an in-memory ``Document``; parsing and serializing
markup are left to the caller through the ``TreeParser`` / ``TreeSerializer``
protocols.

Usage
-----

Programmatic Trees
^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from gluestack_migrate import RuntimeConfig, migrate
    from gluestack_migrate.core.tree import build_document, el, expr

    doc = build_document(el("div", {"className": "flex", "onClick": expr("go")}, "Hi"))
    migrate(doc, config=RuntimeConfig())

With a Parser and Serializer
^^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from gluestack_migrate import MigrationEngine

    engine = MigrationEngine(parser=my_parser, serializer=my_serializer)
    res = engine.run(source_text)

    if res.success:
        print(res.code)
    else:
        print(f"Errors: {res.errors}")
"""

from typing import Optional

from gluestack_migrate.config import RuntimeConfig
from gluestack_migrate.core.conversion_result import ConversionResult
from gluestack_migrate.core.engine import MigrationEngine
from gluestack_migrate.core.tree.document import Document

__version__ = "0.1.0"


def migrate(document: Document, config: Optional[RuntimeConfig] = None) -> Document:
  """
  Rewrites a document in place with the default pipeline.

  Convenience wrapper around ``MigrationEngine.migrate``.

  Args:
      document (Document): The parsed document.
      config (RuntimeConfig, optional): Runtime settings. Loaded from
          ``pyproject.toml`` when omitted.

  Returns:
      Document: The rewritten document.

  Raises:
      MalformedTreeError: If the document violates a structural invariant.
  """
  return MigrationEngine(config=config).migrate(document)


__all__ = [
  "ConversionResult",
  "MigrationEngine",
  "RuntimeConfig",
  "migrate",
  "__version__",
]
