"""Git branch and remote utilities.

Contains:
- get_branch: Get the current branch name
- is_remote_branch: Check whether the current branch tracks a remote
- remote_branch_name: Get the upstream of the current branch
- remote_commit_id: Get the commit id a ref points at
- repo_name: Get the owner/repo slug of the origin remote
"""

import re
from typing import Optional
from urllib.parse import urlparse

from gup.git.exceptions import DetachedHeadError, GitError
from gup.git.runner import _run_git_command

# git@github.com:owner/repo.git
_SCP_REMOTE_RE = re.compile(r"^[\w.-]+@[\w.-]+:(?P<path>.+)$")


def get_branch() -> str:
    """Get the current branch name.

    Returns:
        The current branch name.

    Raises:
        DetachedHeadError: If HEAD is detached.
    """
    branch = _run_git_command(["branch", "--show-current"])
    if not branch:
        raise DetachedHeadError("HEAD is detached; check out a branch first.")
    return branch


def is_remote_branch() -> bool:
    """Check whether the current branch tracks a remote branch.

    ``git status -sb`` prints ``## local...origin/remote`` as its first line
    when an upstream is configured.
    """
    status = _run_git_command(["status", "-sb"])
    first_line = status.split("\n", 1)[0]
    return first_line.startswith("## ") and "..." in first_line


def remote_branch_name() -> Optional[str]:
    """Get the upstream branch of the current branch.

    Returns:
        The upstream name (e.g. ``origin/fix/team-1``), or None if unset.
    """
    try:
        upstream = _run_git_command(
            ["rev-parse", "--abbrev-ref", "--symbolic-full-name", "@{u}"]
        )
    except GitError:
        # No upstream configured
        return None
    return upstream or None


def remote_commit_id(ref: str) -> Optional[str]:
    """Get the commit id the given ref points at."""
    try:
        commit_id = _run_git_command(["log", "-n", "1", "--pretty=format:%H", ref])
    except GitError:
        return None
    return commit_id or None


def _slug_from_remote_url(url: str) -> Optional[str]:
    """Extract ``owner/repo`` from a remote URL."""
    url = url.strip()
    if not url:
        return None

    scp_match = _SCP_REMOTE_RE.match(url)
    if scp_match and "://" not in url:
        path = scp_match.group("path")
    else:
        path = urlparse(url).path

    path = path.strip("/")
    if path.endswith(".git"):
        path = path[: -len(".git")]
    return path or None


def repo_name() -> Optional[str]:
    """Get the ``owner/repo`` slug of the origin remote.

    Returns:
        The slug, or None if no origin remote is configured.
    """
    try:
        url = _run_git_command(["remote", "get-url", "origin"])
    except GitError:
        return None
    return _slug_from_remote_url(url)
