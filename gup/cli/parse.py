"""CLI command for previewing the composed commit message."""

from typing import Optional

import typer

from gup.config import load_config
from gup.git import get_branch
from gup.message import MessageKind, parse
from gup.cli.utils import exit_on_error


def parse_command(
    message: str = typer.Argument(
        "",
        help="Commit message to parse (empty to derive everything from the branch)",
    ),
    branch: Optional[str] = typer.Option(
        None,
        "--branch",
        "-b",
        help="Branch name to fall back on (default: the current branch)",
    ),
    kind: Optional[MessageKind] = typer.Option(
        None,
        "--kind",
        "-k",
        help="Default kind for the message, forced over the branch's kind",
    ),
) -> None:
    """Print the commit message gup would use, without committing."""
    with exit_on_error():
        config = load_config()
        branch_name = branch.strip() if branch is not None else get_branch()
        result = parse(message.strip(), branch_name, kind or config.default_kind)

    typer.echo(str(result))
