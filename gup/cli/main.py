"""Main CLI command: commit (or amend) with a ticket-linked message."""

from typing import Optional

import typer

from gup import __version__
from gup.config import GupConfig, load_config
from gup.git import (
    amend_commit,
    basic_commit,
    get_branch,
    is_remote_branch,
    repo_name,
)
from gup.github import GitHubClient, new_pr_url
from gup.message import Message, MessageKind, parse
from gup.cli.utils import (
    EXIT_FAILURE,
    EXIT_REPO_NOT_FOUND,
    compose_with_editor,
    exit_on_error,
    open_url,
    setup_logging,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"gup {__version__}")
        raise typer.Exit()


def pull_request_url(branch: str, config: GupConfig) -> str:
    """Find the open pull request of a branch, or the page to open one."""
    repo = repo_name()
    if not repo:
        typer.echo(f"Could not find the repository name for branch {branch}", err=True)
        raise typer.Exit(EXIT_REPO_NOT_FOUND)

    with GitHubClient(config.github_token, api_url=config.api_url) as client:
        return client.find_pr_url(repo, branch) or new_pr_url(repo, branch, config.web_url)


def main_command(
    ctx: typer.Context,
    message: Optional[str] = typer.Option(
        None,
        "--message",
        "-m",
        help="Commit message, e.g. 'fix: team-123 correct off-by-one' or just 'correct off-by-one'",
    ),
    kind: Optional[MessageKind] = typer.Option(
        None,
        "--kind",
        "-k",
        help="Kind used when the message has none, forced over the branch's kind",
    ),
    pull_request: bool = typer.Option(
        False,
        "--pull-request",
        "-p",
        help="Open the pull request for the branch after pushing",
    ),
    edit: bool = typer.Option(
        False,
        "--edit",
        "-e",
        help="Open the message in an editor before committing",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logs",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Commit everything and push, linking the commit to the branch's ticket.

    On a branch that already tracks a remote, the last commit is amended and
    force-pushed (with lease) instead.
    """
    setup_logging(verbose)

    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    with exit_on_error():
        config = load_config()
        branch = get_branch()

        if branch in config.protected_branches:
            typer.echo(
                f"You're on the protected branch '{branch}', you can't push to this branch",
                err=True,
            )
            raise typer.Exit(EXIT_FAILURE)

        effective_kind = kind or config.default_kind
        raw = message.strip() if message is not None else None

        commit_message: Optional[Message] = None
        if edit:
            commit_message = compose_with_editor(
                raw or "",
                branch,
                effective_kind,
                attempts=config.edit_attempts,
                editor=config.editor,
            )
        elif raw is not None:
            commit_message = parse(raw, branch, effective_kind)

        if commit_message is not None:
            typer.echo(f"Message: {commit_message}", err=True)

        if is_remote_branch():
            amend_commit(str(commit_message) if commit_message is not None else None)
            if pull_request:
                open_url(pull_request_url(branch, config))
            return

        if commit_message is None:
            typer.echo("You're on a local branch, you must provide a commit message", err=True)
            raise typer.Exit(EXIT_FAILURE)

        url = basic_commit(str(commit_message))
        if url:
            open_url(url)
        elif pull_request:
            repo = repo_name()
            if not repo:
                typer.echo(f"Could not find the repository name for branch {branch}", err=True)
                raise typer.Exit(EXIT_REPO_NOT_FOUND)
            open_url(new_pr_url(repo, branch, config.web_url))
