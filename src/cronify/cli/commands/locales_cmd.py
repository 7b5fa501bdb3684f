"""Locales command for cronify CLI."""

import typer
from rich.table import Table

from cronify.cli import app, console
from cronify.locales import DEFAULT_LOCALE, available_locales, resolve


@app.command("locales")
def list_locales(
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output as JSON",
    ),
) -> None:
    """List the locales cronify understands."""
    bundles = [resolve(code) for code in available_locales()]

    if json_output:
        console.print_json(
            data={
                "default": DEFAULT_LOCALE,
                "locales": [{"code": b.code, "name": b.name} for b in bundles],
            }
        )
        return

    table = Table(title="Locales")
    table.add_column("Code", style="cyan")
    table.add_column("Name")
    table.add_column("Word spacing")

    for bundle in bundles:
        code = f"{bundle.code} [dim](default)[/]" if bundle.code == DEFAULT_LOCALE else bundle.code
        table.add_row(code, bundle.name, "spaces" if bundle.segmented else "none")

    console.print(table)
