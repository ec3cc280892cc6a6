"""Git helpers for gup.

This package wraps the git executable with:
- exceptions: GitError, DetachedHeadError
- runner: _run_git_command, _run_git_process
- branch: get_branch, is_remote_branch, remote_branch_name, remote_commit_id, repo_name
- commit: git_add, git_commit, git_amend, git_push, find_pull_request_url,
          basic_commit, amend_commit
"""

# Exceptions
from gup.git.exceptions import (
    DetachedHeadError,
    GitError,
)

# Runner utilities
from gup.git.runner import (
    _run_git_command,
    _run_git_process,
)

# Branch utilities
from gup.git.branch import (
    get_branch,
    is_remote_branch,
    remote_branch_name,
    remote_commit_id,
    repo_name,
)

# Commit utilities
from gup.git.commit import (
    amend_commit,
    basic_commit,
    find_pull_request_url,
    git_add,
    git_amend,
    git_commit,
    git_push,
)


__all__ = [
    # Exceptions
    "GitError",
    "DetachedHeadError",
    # Runner
    "_run_git_command",
    "_run_git_process",
    # Branch
    "get_branch",
    "is_remote_branch",
    "remote_branch_name",
    "remote_commit_id",
    "repo_name",
    # Commit
    "git_add",
    "git_commit",
    "git_amend",
    "git_push",
    "find_pull_request_url",
    "basic_commit",
    "amend_commit",
]
