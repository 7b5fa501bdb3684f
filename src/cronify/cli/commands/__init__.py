"""CLI commands for cronify."""

# Importing a command module registers its command with the app
from cronify.cli.commands import convert, locales_cmd

__all__ = ["convert", "locales_cmd"]
