"""GitHub API exception classes.

Contains:
- GitHubError: Base exception for GitHub API errors
- MissingTokenError: Raised when no GitHub token is configured
"""

from typing import Optional


class GitHubError(Exception):
    """Raised when a GitHub API call fails."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class MissingTokenError(GitHubError):
    """Raised when the GitHub token is not set."""

    pass
