from __future__ import annotations

from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from best_effort_parser.cli.utils import dump_json, join_words, prepare, resolve_pretty
from best_effort_parser.config import get_config
from best_effort_parser.dates.parser import DateParser
from best_effort_parser.patterns import CompactDateFormat

console = Console()


def date_command(
    text: Optional[List[str]] = typer.Argument(None, help="Text to search; words are joined with spaces"),
    compact_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Reading of ambiguous compact dates: month-first, day-first or year-first",
    ),
    no_seasons: bool = typer.Option(
        False,
        "--no-seasons",
        help="Ignore season words such as 'spring'",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the detected dates as JSON",
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
    Detect every date in a piece of text.
    """
    prepare(debug)

    fmt_name = compact_format or get_config().date.get("compact_date_format", "month-first")
    try:
        fmt = CompactDateFormat.from_name(fmt_name)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--format") from exc

    kwargs = {"compact_date_format": fmt}
    if no_seasons:
        kwargs["seasons"] = None

    detected = DateParser.basic(**kwargs).detect(join_words(text))

    if as_json:
        print(dump_json([d.to_dict() for d in detected], pretty=resolve_pretty(pretty)))
        return

    if not detected:
        console.print("No dates found.")
        raise typer.Exit(code=1)

    table = Table(title="Detected Dates")
    table.add_column("Date", style="bold")
    table.add_column("Trigger text")

    for d in detected:
        table.add_row(Text(d.date.diagnostic_string()), Text(", ".join(d.trigger_texts)))

    console.print(table)
