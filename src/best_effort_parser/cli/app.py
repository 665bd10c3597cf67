from __future__ import annotations

import typer

from best_effort_parser.cli.commands.date import date_command
from best_effort_parser.cli.commands.name import name_command

app = typer.Typer(
    name="best-effort",
    help="Best-effort name and date extraction from free text",
    add_completion=False,
)


app.command("name")(name_command)
app.command("date")(date_command)


def main():
    app()


if __name__ == "__main__":
    main()
