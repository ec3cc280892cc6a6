"""Pydantic models for the GitHub REST API responses gup reads.

Contains:
- PullRequestLink, SearchItem, SearchResponse: Issue search results
- CheckRun, CheckRunsResponse: Check runs of a commit
- PullRequest: Pull request associated with a commit
"""

from typing import Optional

from pydantic import BaseModel, field_validator


class PullRequestLink(BaseModel):
    """The ``pull_request`` block of an issue search item."""

    html_url: str


class SearchItem(BaseModel):
    """A single issue search result."""

    title: Optional[str] = None
    state: Optional[str] = None
    pull_request: Optional[PullRequestLink] = None


class SearchResponse(BaseModel):
    """Response of ``GET /search/issues``."""

    total_count: int = 0
    items: list[SearchItem] = []


class CheckRun(BaseModel):
    """A check run of a commit.

    ``conclusion`` is null until the run has completed.
    """

    name: str
    status: str
    conclusion: Optional[str] = None

    @property
    def is_completed(self) -> bool:
        return self.status == "completed"


class CheckRunsResponse(BaseModel):
    """Response of ``GET /repos/{repo}/commits/{sha}/check-runs``."""

    total_count: int = 0
    check_runs: list[CheckRun] = []

    @field_validator("check_runs", mode="before")
    @classmethod
    def ensure_runs_list(cls, v):
        """Ensure check_runs is a list."""
        if v is None:
            return []
        return v


class PullRequest(BaseModel):
    """A pull request as returned by ``/commits/{sha}/pulls``."""

    html_url: str
    title: str = ""
    state: str = ""
    draft: bool = False
