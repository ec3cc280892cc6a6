"""Shared utility functions for CLI commands."""

import logging
import os
import shutil
import subprocess
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import typer

from gup.config import ConfigError
from gup.git import GitError
from gup.github import GitHubError
from gup.message import Message, MessageError, MessageKind, parse

# Exit codes
EXIT_FAILURE = 1
EXIT_INVALID_MESSAGE = 2
EXIT_PENDING = 3
EXIT_REPO_NOT_FOUND = 5
EXIT_GIT_FAILED = 10
EXIT_GITHUB_FAILED = 20
EXIT_CONFIG_INVALID = 30


def setup_logging(verbose: bool) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@contextmanager
def exit_on_error() -> Iterator[None]:
    """Turn gup errors into a message on stderr and a typer.Exit."""
    try:
        yield
    except MessageError as e:
        typer.echo(f"Message error: {e}", err=True)
        raise typer.Exit(EXIT_INVALID_MESSAGE)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(EXIT_GIT_FAILED)
    except GitHubError as e:
        typer.echo(f"GitHub error: {e}", err=True)
        raise typer.Exit(EXIT_GITHUB_FAILED)
    except ConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(EXIT_CONFIG_INVALID)


def find_editor(preferred: Optional[str] = None) -> list[str]:
    """Find an available text editor.

    Preference order:
    1. The editor from the gup configuration
    2. $EDITOR environment variable
    3. nano as fallback

    Returns:
        List of command parts to run the editor.
    """
    if preferred:
        return preferred.split()

    editor = os.environ.get("EDITOR")
    if editor:
        return editor.split()

    # noinspection PyArgumentList
    if shutil.which("nano"):
        return ["nano"]

    # Last resort: vi
    return ["vi"]


def open_editor(file_path: Path, preferred: Optional[str] = None) -> None:
    """Open the file in an editor and wait for it to close.

    Args:
        file_path: Path to the file to edit.
        preferred: Editor command from the configuration.
    """
    editor_cmd = find_editor(preferred)

    typer.echo(f"Opening editor: {' '.join(editor_cmd)}", err=True)

    try:
        result = subprocess.run(
            editor_cmd + [str(file_path)],
            check=False,
        )

        if result.returncode != 0:
            typer.echo(f"Warning: Editor exited with code {result.returncode}", err=True)

    except FileNotFoundError:
        typer.echo(f"Error: Editor not found: {editor_cmd[0]}", err=True)
        raise typer.Exit(EXIT_FAILURE)


def edit_text(text: str, preferred: Optional[str] = None) -> str:
    """Let the user edit text in an editor and return the result.

    Lines starting with ``#`` are dropped, like git does for commit messages.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        message_file = Path(tmpdir) / "COMMIT_EDITMSG"
        message_file.write_text(
            f"{text}\n"
            "# Write the commit message as '<kind>: <team>-<id> <body>'.\n"
            "# Lines starting with '#' are ignored.\n"
        )
        open_editor(message_file, preferred)
        content = message_file.read_text()

    lines = [line for line in content.splitlines() if not line.startswith("#")]
    return " ".join(line.strip() for line in lines if line.strip())


def compose_with_editor(
    raw: str,
    branch: str,
    kind: Optional[MessageKind],
    attempts: int = 1,
    editor: Optional[str] = None,
) -> Message:
    """Compose a message, letting the user fix it in an editor.

    The editor is seeded with the composed message when the raw text already
    parses, otherwise with the raw text itself. An unparsable edit is offered
    again until ``attempts`` editor sessions have been used. An empty edit
    aborts, as it does for git.

    Raises:
        MessageError: If the last edit still cannot be parsed.
        typer.Exit: If the edited message is empty.
    """
    try:
        seed = str(parse(raw, branch, kind))
    except MessageError as e:
        typer.echo(f"{e}", err=True)
        seed = raw

    last_error: Optional[MessageError] = None
    for _ in range(max(attempts, 1)):
        text = edit_text(seed, editor)
        if not text:
            typer.echo("Aborting commit due to empty commit message", err=True)
            raise typer.Exit(EXIT_FAILURE)
        try:
            return parse(text, branch, kind)
        except MessageError as e:
            typer.echo(f"{e}", err=True)
            last_error = e
            seed = text

    raise last_error


def open_url(url: str) -> None:
    """Print a URL and open it in the browser."""
    typer.echo(f"Opening {url}")
    typer.launch(url)
