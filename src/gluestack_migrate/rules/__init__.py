"""
Built-in Element Rules.

Each module registers the rules of one component family with
:mod:`gluestack_migrate.core.registry`. Modules are discovered by
``load_rules``, so adding a file here adds its rules without further wiring.
Modules starting with an underscore hold shared helpers and are skipped.
"""
