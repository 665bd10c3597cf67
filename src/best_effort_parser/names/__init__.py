"""
best_effort_parser.names package

- parser:       NameParser (classification + assembly of one name per call)
- parsed_name:  ParsedName value type

Import from the submodules (or from ``best_effort_parser``); this __init__
intentionally exports NOTHING to avoid circular imports.
"""

__all__ = []
