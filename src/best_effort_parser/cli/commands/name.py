from __future__ import annotations

from typing import List, Optional

import typer
from rich.console import Console

from best_effort_parser.cli.utils import dump_json, join_words, prepare, resolve_pretty
from best_effort_parser.names.parser import NameParser

console = Console()


def name_command(
    text: Optional[List[str]] = typer.Argument(None, help="Name to parse; words are joined with spaces"),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the parsed fields as JSON",
    ),
    pretty: Optional[bool] = typer.Option(
        None,
        "--pretty/--compact",
        help="Pretty-print JSON (default from config)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug logging",
    ),
):
    """
    Parse a personal name into given, particles, family and suffix.
    """
    prepare(debug)
    parsed = NameParser.basic().parse(join_words(text))

    if as_json:
        print(dump_json(parsed.to_dict(), pretty=resolve_pretty(pretty)))
        return

    console.print(parsed.diagnostic_string(), markup=False, highlight=False)
