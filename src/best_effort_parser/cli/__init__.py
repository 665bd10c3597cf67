"""
CLI package for best_effort_parser.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from best_effort_parser.cli.app import app, main

__all__ = [
    "app",
    "main",
]
