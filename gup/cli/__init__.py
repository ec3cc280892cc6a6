"""CLI entry point for gup.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from gup.cli.config import config_app
from gup.cli.main import main_command
from gup.cli.parse import parse_command
from gup.cli.pr import pr_command
from gup.cli.status import status_command

# Main application
app = typer.Typer(
    name="gup",
    help="gup: commit, push and link to the branch's ticket",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Add individual commands
app.command("parse")(parse_command)
app.command("pr")(pr_command)
app.command("status")(status_command)

# Set the main callback for default behavior (includes --version flag)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "main_command",
    "parse_command",
    "pr_command",
    "status_command",
]
