"""CLI command for finding the pull request of the current branch."""

import typer

from gup.config import load_config
from gup.git import get_branch, remote_branch_name, remote_commit_id, repo_name
from gup.github import GitHubClient, new_pr_url
from gup.cli.utils import EXIT_REPO_NOT_FOUND, exit_on_error, open_url


def pr_command(
    no_open: bool = typer.Option(
        False,
        "--no-open",
        help="Only print the URL, don't open the browser",
    ),
) -> None:
    """Show the open pull request of the current branch.

    Falls back to the "compare" page for opening a new pull request.
    """
    with exit_on_error():
        config = load_config()
        branch = get_branch()
        repo = repo_name()
        if not repo:
            typer.echo(f"Could not find the repository name for branch {branch}", err=True)
            raise typer.Exit(EXIT_REPO_NOT_FOUND)

        upstream = remote_branch_name()
        commit_id = remote_commit_id(upstream) if upstream else None

        url = None
        with GitHubClient(config.github_token, api_url=config.api_url) as client:
            if commit_id:
                pull = client.open_pull_request(repo, commit_id)
                if pull is not None:
                    draft = " (draft)" if pull.draft else ""
                    typer.echo(f"{pull.title}{draft}", err=True)
                    url = pull.html_url

            if url is None:
                url = client.find_pr_url(repo, branch)

        if url is None:
            typer.echo("No open pull request for this branch.", err=True)
            url = new_pr_url(repo, branch, config.web_url)

    if no_open:
        typer.echo(url)
    else:
        open_url(url)
