"""GitHub REST API client.

Looks up pull requests for a branch or commit and reads check-run results.
API reference: https://docs.github.com/en/rest
"""

import logging
from typing import Iterable, Optional

import requests
from pydantic import ValidationError

from gup.config import DEFAULT_API_URL, DEFAULT_WEB_URL
from gup.github.exceptions import GitHubError, MissingTokenError
from gup.github.models import CheckRun, CheckRunsResponse, PullRequest, SearchResponse

logger = logging.getLogger(__name__)

API_VERSION = "2022-11-28"
USER_AGENT = "gup"


def new_pr_url(repo: str, branch: str, web_url: str = DEFAULT_WEB_URL) -> str:
    """Build the URL of the "open a pull request" page for a branch."""
    return f"{web_url.rstrip('/')}/{repo}/compare/{branch}?expand=1"


class GitHubClient:
    """Thin wrapper around the GitHub endpoints gup needs."""

    def __init__(
        self,
        token: Optional[str],
        api_url: str = DEFAULT_API_URL,
        timeout: float = 30,
    ) -> None:
        if not token:
            raise MissingTokenError("Please set GITHUB_TOKEN to talk to GitHub.")
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._session = self._build_session(token)

    @staticmethod
    def _build_session(token: str) -> requests.Session:
        """Create an HTTP session with authentication headers."""
        session = requests.Session()
        session.headers.update({
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
            "X-GitHub-Api-Version": API_VERSION,
            "Authorization": f"Bearer {token}",
        })
        return session

    def close(self) -> None:
        """Release the pooled connections of the HTTP session."""
        self._session.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _get(self, path: str, params: Optional[dict] = None):
        """Perform a GET request and return the decoded JSON body."""
        url = f"{self._api_url}{path}"
        logger.debug("GET %s %s", url, params or "")

        try:
            resp = self._session.get(url, params=params, timeout=self._timeout)
        except requests.Timeout as e:
            raise GitHubError(f"GitHub API request timed out ({self._timeout}s)") from e
        except requests.RequestException as e:
            raise GitHubError(f"Could not reach GitHub: {e}") from e

        if not resp.ok:
            raise GitHubError(
                f"GitHub API error (HTTP {resp.status_code}): {resp.text[:200]}",
                status_code=resp.status_code,
            )

        try:
            return resp.json()
        except ValueError as e:
            raise GitHubError(f"GitHub returned invalid JSON: {e}") from e

    def find_pr_url(self, repo: str, branch: str) -> Optional[str]:
        """Find the URL of the open pull request for a branch.

        Args:
            repo: ``owner/repo`` slug.
            branch: Head branch name.

        Returns:
            The pull request URL, or None if there is no open pull request.
        """
        data = self._get(
            "/search/issues",
            params={"q": f"repo:{repo} is:pr is:open head:{branch}"},
        )
        try:
            response = SearchResponse.model_validate(data)
        except ValidationError as e:
            raise GitHubError(f"Unexpected search response: {e}") from e

        for item in response.items:
            if item.pull_request is not None:
                return item.pull_request.html_url
        return None

    def check_runs(self, repo: str, commit_id: str) -> list[CheckRun]:
        """List the check runs of a commit."""
        data = self._get(f"/repos/{repo}/commits/{commit_id}/check-runs")
        try:
            return CheckRunsResponse.model_validate(data).check_runs
        except ValidationError as e:
            raise GitHubError(f"Unexpected check-runs response: {e}") from e

    def commit_status(
        self,
        repo: str,
        commit_id: str,
        ignored_checks: Iterable[str] = (),
    ) -> Optional[bool]:
        """Summarize the check runs of a commit.

        Args:
            repo: ``owner/repo`` slug.
            commit_id: Commit SHA.
            ignored_checks: Names of checks whose conclusion does not matter.

        Returns:
            None while any run is still in progress, otherwise True when
            every run succeeded or is ignored.
        """
        runs = self.check_runs(repo, commit_id)
        if any(not run.is_completed for run in runs):
            return None

        ignored = set(ignored_checks)
        failed = [
            run.name for run in runs
            if run.conclusion != "success" and run.name not in ignored
        ]
        if failed:
            logger.info("Failed checks: %s", ", ".join(failed))
        return not failed

    def open_pull_request(self, repo: str, commit_id: str) -> Optional[PullRequest]:
        """Get the first open pull request associated with a commit."""
        data = self._get(f"/repos/{repo}/commits/{commit_id}/pulls")
        if not isinstance(data, list):
            raise GitHubError("Unexpected pulls response: expected a list")

        for raw in data:
            try:
                pull = PullRequest.model_validate(raw)
            except ValidationError as e:
                raise GitHubError(f"Unexpected pull request payload: {e}") from e
            if pull.state == "open":
                return pull
        return None
