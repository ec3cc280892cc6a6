"""CLI command for reporting check-run results of the pushed commit."""

import time

import typer

from gup.config import load_config
from gup.git import remote_branch_name, remote_commit_id, repo_name
from gup.github import GitHubClient
from gup.cli.utils import (
    EXIT_FAILURE,
    EXIT_PENDING,
    EXIT_REPO_NOT_FOUND,
    exit_on_error,
)


def status_command(
    watch: bool = typer.Option(
        False,
        "--watch",
        "-w",
        help="Poll until every check has completed (bounded by poll_timeout)",
    ),
) -> None:
    """Report the check runs of the branch's last pushed commit.

    Exits 0 when every check passed, 1 when one failed and 3 while checks
    are still running.
    """
    with exit_on_error():
        config = load_config()
        repo = repo_name()
        if not repo:
            typer.echo("Could not find the repository name", err=True)
            raise typer.Exit(EXIT_REPO_NOT_FOUND)

        upstream = remote_branch_name()
        commit_id = remote_commit_id(upstream) if upstream else None
        if not commit_id:
            typer.echo("Failed to find the last pushed commit; push the branch first.", err=True)
            raise typer.Exit(EXIT_FAILURE)

        with GitHubClient(config.github_token, api_url=config.api_url) as client:
            result = client.commit_status(repo, commit_id, config.ignored_checks)

            if watch:
                deadline = time.monotonic() + config.poll_timeout
                while result is None and time.monotonic() < deadline:
                    typer.echo("Checks running...", err=True)
                    time.sleep(config.poll_interval)
                    result = client.commit_status(repo, commit_id, config.ignored_checks)

    if result is None:
        typer.echo("pending")
        raise typer.Exit(EXIT_PENDING)
    if result:
        typer.echo("success")
        return
    typer.echo("failure")
    raise typer.Exit(EXIT_FAILURE)
