"""
best_effort_parser.dates package

- parser:    DateParser (collection + tandem assembly)
- relative:  relative-day and weekday arithmetic
- models:    DatePart, ParsedDate, DetectedDate

Import from the submodules (or from ``best_effort_parser``); this __init__
intentionally exports NOTHING to avoid circular imports.
"""

__all__ = []
