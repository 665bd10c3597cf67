"""
Compatibility wrapper around the centralized logging package.

Prefer importing from ``best_effort_parser.logging`` directly:
    from best_effort_parser.logging import get_logger
"""

from best_effort_parser.logging import (
    get_logger,
    set_debug,
)

__all__ = [
    "get_logger",
    "set_debug",
]
