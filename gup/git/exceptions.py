"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- DetachedHeadError: Raised when HEAD does not point at a branch
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class DetachedHeadError(GitError):
    """Raised when the repository is in detached HEAD state."""

    pass
