"""cronify CLI interface."""

import typer
from rich.console import Console

# CLI App
app = typer.Typer(
    name="cronify",
    help="Turn natural-language schedules into cron expressions.",
    no_args_is_help=True,
)

# Console for rich output
console = Console()

# Import commands to register them
from cronify.cli.commands import convert, locales_cmd  # noqa: E402, F401


@app.command()
def version() -> None:
    """Show cronify version."""
    from cronify import __version__

    console.print(f"cronify v{__version__}")


if __name__ == "__main__":
    app()
