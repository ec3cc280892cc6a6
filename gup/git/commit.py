"""Git commit and push utilities.

Contains:
- git_add, git_commit, git_amend, git_push: Single git steps
- find_pull_request_url: Find the pull request link printed by the remote
- basic_commit: Add, commit and push a new commit
- amend_commit: Add, amend and force-push the last commit
"""

from typing import Optional

import typer

from gup.git.runner import _run_git_command, _run_git_process


def git_add() -> None:
    """Stage every change in the working tree."""
    _run_git_command(["add", "."])


def git_commit(message: str) -> None:
    """Create a commit with the given message."""
    _run_git_command(["commit", "-m", message])


def git_amend(message: Optional[str] = None) -> None:
    """Amend the last commit, keeping its message unless one is given."""
    args = ["commit", "--amend"]
    if message is None:
        args.append("--no-edit")
    else:
        args.extend(["-m", message])
    _run_git_command(args)


def git_push(force: bool = False) -> str:
    """Push the current branch.

    Args:
        force: Push with ``--force-with-lease``.

    Returns:
        Everything git printed, stdout followed by stderr. Remote messages
        such as pull request links arrive on stderr.
    """
    args = ["push"]
    if force:
        args.append("--force-with-lease")
    result = _run_git_process(args)
    return "\n".join(part.strip() for part in (result.stdout, result.stderr) if part.strip())


def find_pull_request_url(push_output: str) -> Optional[str]:
    """Find the pull request URL in ``git push`` output.

    Args:
        push_output: Output returned by git_push.

    Returns:
        The first ``https`` line containing ``/pull/``, or None.
    """
    for line in push_output.splitlines():
        line = line.strip()
        if line.startswith("remote:"):
            line = line[len("remote:"):].strip()
        if line.startswith("https") and "/pull/" in line:
            return line
    return None


def basic_commit(message: str) -> Optional[str]:
    """Stage everything, commit and push.

    Args:
        message: The rendered commit message.

    Returns:
        The pull request URL printed by the remote, if any.
    """
    typer.echo("Committing...", err=True)
    git_add()
    git_commit(message)

    output = git_push()
    if output:
        typer.echo(output, err=True)
    return find_pull_request_url(output)


def amend_commit(message: Optional[str] = None) -> None:
    """Stage everything, amend the last commit and force-push with lease."""
    typer.echo("Amending commit...", err=True)
    git_add()
    git_amend(message)
    git_push(force=True)
