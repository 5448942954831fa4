"""
Core Package.

Contains the migration logic:
- Tree model (arena ``Document``)
- Class-token, text-wrapping and attribute utilities
- Rule variants, rule registry and rewrite passes
- Import bookkeeping
- Migration engine
"""
