"""Tests for gup.github module."""

import pytest
import requests

from gup.github import (
    CheckRun,
    GitHubClient,
    GitHubError,
    MissingTokenError,
    PullRequest,
    new_pr_url,
)

from conftest import http_response


@pytest.fixture
def client():
    return GitHubClient("ghp_test", api_url="https://api.github.com/")


@pytest.fixture
def mock_get(mocker, client):
    return mocker.patch.object(client._session, "get")


def check_run(name, status="completed", conclusion="success"):
    return {"name": name, "status": status, "conclusion": conclusion}


class TestNewPrUrl:
    """Tests for new_pr_url function."""

    def test_builds_compare_url(self):
        assert (
            new_pr_url("acme/gup", "fix/team-1-x")
            == "https://github.com/acme/gup/compare/fix/team-1-x?expand=1"
        )

    def test_custom_web_url(self):
        assert (
            new_pr_url("acme/gup", "b", "https://ghe.example.com/")
            == "https://ghe.example.com/acme/gup/compare/b?expand=1"
        )


class TestClientSetup:
    """Tests for GitHubClient construction."""

    def test_missing_token_raises(self):
        with pytest.raises(MissingTokenError):
            GitHubClient(None)

    def test_empty_token_raises(self):
        with pytest.raises(GitHubError):
            GitHubClient("")

    def test_session_headers(self, client):
        headers = client._session.headers
        assert headers["Authorization"] == "Bearer ghp_test"
        assert headers["Accept"] == "application/json"
        assert headers["User-Agent"] == "gup"
        assert headers["X-GitHub-Api-Version"] == "2022-11-28"


class TestClientLifecycle:
    """Tests for closing the HTTP session."""

    def test_close_closes_session(self, mocker, client):
        close = mocker.patch.object(client._session, "close")

        client.close()

        close.assert_called_once_with()

    def test_context_manager_closes_session(self, mocker, client):
        close = mocker.patch.object(client._session, "close")

        with client as entered:
            assert entered is client
            close.assert_not_called()

        close.assert_called_once_with()

    def test_context_manager_closes_on_error(self, mocker, client, mock_get):
        close = mocker.patch.object(client._session, "close")
        mock_get.side_effect = requests.ConnectionError("down")

        with pytest.raises(GitHubError):
            with client:
                client.find_pr_url("acme/gup", "b")

        close.assert_called_once_with()


class TestRequestErrors:
    """Tests for transport and HTTP error handling."""

    def test_http_error_status(self, client, mock_get):
        mock_get.return_value = http_response(status_code=401, text="Bad credentials")

        with pytest.raises(GitHubError) as exc_info:
            client.find_pr_url("acme/gup", "b")

        assert exc_info.value.status_code == 401
        assert "Bad credentials" in str(exc_info.value)

    def test_connection_error(self, client, mock_get):
        mock_get.side_effect = requests.ConnectionError("refused")

        with pytest.raises(GitHubError) as exc_info:
            client.find_pr_url("acme/gup", "b")

        assert exc_info.value.status_code is None

    def test_timeout(self, client, mock_get):
        mock_get.side_effect = requests.Timeout()

        with pytest.raises(GitHubError) as exc_info:
            client.check_runs("acme/gup", "abc")

        assert "timed out" in str(exc_info.value)

    def test_invalid_json(self, client, mock_get):
        resp = http_response()
        resp.json.side_effect = ValueError("no json")
        mock_get.return_value = resp

        with pytest.raises(GitHubError):
            client.check_runs("acme/gup", "abc")


class TestFindPrUrl:
    """Tests for find_pr_url method."""

    def test_returns_first_pull_request(self, client, mock_get):
        mock_get.return_value = http_response({
            "total_count": 1,
            "items": [
                {"title": "fix: team-1 x", "pull_request": {"html_url": "https://github.com/acme/gup/pull/7"}},
            ],
        })

        assert client.find_pr_url("acme/gup", "fix/team-1") == "https://github.com/acme/gup/pull/7"

        url = mock_get.call_args[0][0]
        params = mock_get.call_args[1]["params"]
        assert url == "https://api.github.com/search/issues"
        assert params == {"q": "repo:acme/gup is:pr is:open head:fix/team-1"}

    def test_no_results(self, client, mock_get):
        mock_get.return_value = http_response({"total_count": 0, "items": []})

        assert client.find_pr_url("acme/gup", "b") is None

    def test_skips_plain_issues(self, client, mock_get):
        mock_get.return_value = http_response({"items": [{"title": "an issue"}]})

        assert client.find_pr_url("acme/gup", "b") is None


class TestCommitStatus:
    """Tests for check_runs and commit_status methods."""

    def test_check_runs_parsed(self, client, mock_get):
        mock_get.return_value = http_response({
            "total_count": 1,
            "check_runs": [check_run("build", "in_progress", None)],
        })

        runs = client.check_runs("acme/gup", "abc")

        assert runs == [CheckRun(name="build", status="in_progress", conclusion=None)]
        assert mock_get.call_args[0][0] == "https://api.github.com/repos/acme/gup/commits/abc/check-runs"

    def test_pending_while_running(self, client, mock_get):
        mock_get.return_value = http_response({
            "check_runs": [check_run("build"), check_run("tests", "queued", None)],
        })

        assert client.commit_status("acme/gup", "abc") is None

    def test_success_when_all_pass(self, client, mock_get):
        mock_get.return_value = http_response({
            "check_runs": [check_run("build"), check_run("tests")],
        })

        assert client.commit_status("acme/gup", "abc") is True

    def test_failure(self, client, mock_get):
        mock_get.return_value = http_response({
            "check_runs": [check_run("build"), check_run("tests", conclusion="failure")],
        })

        assert client.commit_status("acme/gup", "abc") is False

    def test_ignored_checks_do_not_fail(self, client, mock_get):
        mock_get.return_value = http_response({
            "check_runs": [
                check_run("build"),
                check_run("SonarQube Code Analysis", conclusion="failure"),
            ],
        })

        assert client.commit_status(
            "acme/gup", "abc", ["SonarQube Code Analysis"]
        ) is True

    def test_no_runs_is_success(self, client, mock_get):
        mock_get.return_value = http_response({"total_count": 0, "check_runs": None})

        assert client.commit_status("acme/gup", "abc") is True


class TestOpenPullRequest:
    """Tests for open_pull_request method."""

    def test_returns_open_pull(self, client, mock_get):
        mock_get.return_value = http_response([
            {"html_url": "https://github.com/acme/gup/pull/1", "title": "old", "state": "closed", "draft": False},
            {"html_url": "https://github.com/acme/gup/pull/2", "title": "new", "state": "open", "draft": True},
        ])

        pull = client.open_pull_request("acme/gup", "abc")

        assert pull == PullRequest(
            html_url="https://github.com/acme/gup/pull/2", title="new", state="open", draft=True
        )

    def test_none_when_no_open_pull(self, client, mock_get):
        mock_get.return_value = http_response([])

        assert client.open_pull_request("acme/gup", "abc") is None

    def test_unexpected_payload(self, client, mock_get):
        mock_get.return_value = http_response({"message": "Not Found"})

        with pytest.raises(GitHubError):
            client.open_pull_request("acme/gup", "abc")
