"""Convert command for cronify CLI."""

from __future__ import annotations

import logging

import typer
from rich.table import Table

from cronify.cli import app, console
from cronify.config import ConfigError, get_default_locale
from cronify.converter import convert as convert_text
from cronify.locales import resolve
from cronify.models import Converted
from cronify.scheduler import next_fire_times


@app.command()
def convert(
    text: str = typer.Argument(..., help="Schedule in plain language, e.g. 'every monday at 9am'"),
    locale: str | None = typer.Option(
        None,
        "--locale",
        "-l",
        help="Locale code (en, es, zh). Defaults to CRONIFY_LOCALE or the config file.",
    ),
    next_runs: int = typer.Option(
        0,
        "--next",
        "-n",
        min=0,
        help="Also show the next N fire times",
    ),
    timezone: str | None = typer.Option(
        None,
        "--timezone",
        help="Timezone for --next (defaults to the local zone)",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output as JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log each conversion step",
    ),
) -> None:
    """Convert a natural-language schedule into cron lines.

    Examples:
        cronify convert "every monday at 9am"
        cronify convert "at 9am and 5pm on weekdays" --next 5
        cronify convert "cada lunes a las 9" --locale es
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        code = locale or get_default_locale()
    except ConfigError as e:
        console.print(f"[red]✗[/] {e}")
        raise typer.Exit(1)

    result = convert_text(text, code)

    if json_output:
        console.print_json(data=result.model_dump(mode="json"))
        if not isinstance(result, Converted):
            raise typer.Exit(1)
        return

    if not isinstance(result, Converted):
        console.print(f"[red]✗[/] {result.message}", highlight=False)
        raise typer.Exit(1)

    for line in result.crons:
        console.print(line, markup=False, highlight=False)

    if next_runs:
        try:
            fire_times = next_fire_times(result, count=next_runs, timezone=timezone)
        except (ValueError, LookupError) as e:
            # Unknown timezone names surface as KeyError subclasses
            console.print(f"[red]✗[/] Could not compute fire times: {e}")
            raise typer.Exit(1)

        table = Table(title=f"Next runs ({resolve(code).name})")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Fire time", style="cyan")
        for index, fire_time in enumerate(fire_times, start=1):
            table.add_row(str(index), fire_time.strftime("%Y-%m-%d %H:%M %Z"))
        console.print()
        console.print(table)
