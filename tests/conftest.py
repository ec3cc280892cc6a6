"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from gup.config import GupConfig


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_dir(temp_dir, monkeypatch):
    """Point gup at an empty configuration directory."""
    monkeypatch.setenv("GUP_CONFIG_DIR", str(temp_dir))
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    return temp_dir


@pytest.fixture
def gup_config():
    """Configuration with a token and no polling delay."""
    return GupConfig(
        github_token="ghp_testtoken123456",
        poll_interval=0,
        poll_timeout=0,
    )


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    mock_run = mocker.patch("subprocess.run")
    return mock_run


def completed(stdout: str = "", stderr: str = "", returncode: int = 0) -> MagicMock:
    """Build a fake subprocess.CompletedProcess."""
    result = MagicMock()
    result.stdout = stdout
    result.stderr = stderr
    result.returncode = returncode
    return result


def http_response(json_data=None, status_code: int = 200, text: str = "") -> MagicMock:
    """Build a fake requests.Response."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 300
    resp.text = text
    resp.json.return_value = json_data
    return resp
