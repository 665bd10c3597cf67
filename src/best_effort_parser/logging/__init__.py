"""
Logging package for ``best_effort_parser``.

Use ``get_logger(__name__)`` in modules to inherit the shared handlers.
"""

from .logger import (
    get_logger,
    set_debug,
)

__all__ = [
    "get_logger",
    "set_debug",
]
