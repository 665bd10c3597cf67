"""
CLI command modules for best_effort_parser.

Each command module defines a single Typer-compatible command function.
"""

from best_effort_parser.cli.commands.date import date_command
from best_effort_parser.cli.commands.name import name_command

__all__ = [
    "date_command",
    "name_command",
]
