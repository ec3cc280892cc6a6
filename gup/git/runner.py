"""Git command runner and repository utilities.

Contains:
- _run_git_process: Run a git command and return the completed process
- _run_git_command: Run a git command and return its output
"""

import logging
import subprocess

from gup.git.exceptions import GitError

logger = logging.getLogger(__name__)


def _run_git_process(args: list[str]) -> subprocess.CompletedProcess:
    """Run a git command and return the completed process.

    Args:
        args: List of arguments to pass to git.

    Returns:
        The completed process with stdout and stderr captured as text.

    Raises:
        GitError: If the command fails.
    """
    logger.debug("git %s", " ".join(args))
    try:
        return subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")


def _run_git_command(args: list[str]) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.

    Returns:
        The stripped stdout of the git command.

    Raises:
        GitError: If the command fails.
    """
    return _run_git_process(args).stdout.strip()
