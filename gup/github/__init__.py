"""GitHub API access for gup.

- exceptions: GitHubError, MissingTokenError
- models: SearchResponse, CheckRun, CheckRunsResponse, PullRequest
- client: GitHubClient, new_pr_url
"""

from gup.github.exceptions import GitHubError, MissingTokenError
from gup.github.models import (
    CheckRun,
    CheckRunsResponse,
    PullRequest,
    PullRequestLink,
    SearchItem,
    SearchResponse,
)
from gup.github.client import GitHubClient, new_pr_url


__all__ = [
    "GitHubError",
    "MissingTokenError",
    "CheckRun",
    "CheckRunsResponse",
    "PullRequest",
    "PullRequestLink",
    "SearchItem",
    "SearchResponse",
    "GitHubClient",
    "new_pr_url",
]
