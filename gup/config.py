"""Global configuration management for gup.

Handles user-level configuration stored in ~/.gup/ (or $GUP_CONFIG_DIR):
- config.yaml: Branch protection, default kind, editor and status polling settings
- credentials: GitHub token in KEY=value form
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from gup.message import MessageError, MessageKind, resolve_kind


class ConfigError(Exception):
    """Raised when there's an error with global configuration."""
    pass


GITHUB_TOKEN_ENV = "GITHUB_TOKEN"
CONFIG_DIR_ENV = "GUP_CONFIG_DIR"

DEFAULT_PROTECTED_BRANCHES = ["main", "master"]
DEFAULT_IGNORED_CHECKS = ["SonarQube Code Analysis"]
DEFAULT_API_URL = "https://api.github.com"
DEFAULT_WEB_URL = "https://github.com"


@dataclass(frozen=True)
class GupConfig:
    """Effective gup configuration."""

    protected_branches: list[str] = field(
        default_factory=lambda: DEFAULT_PROTECTED_BRANCHES.copy())
    default_kind: Optional[MessageKind] = None
    ignored_checks: list[str] = field(
        default_factory=lambda: DEFAULT_IGNORED_CHECKS.copy())
    editor: Optional[str] = None
    edit_attempts: int = 1
    poll_interval: float = 10.0
    poll_timeout: float = 600.0
    api_url: str = DEFAULT_API_URL
    web_url: str = DEFAULT_WEB_URL
    github_token: Optional[str] = None


def get_config_dir() -> Path:
    """Get the gup configuration directory.

    Returns:
        Path to $GUP_CONFIG_DIR, or ~/.gup/ when unset.
    """
    override = os.environ.get(CONFIG_DIR_ENV, "").strip()
    if override:
        return Path(override)
    return Path.home() / ".gup"


def get_config_file_path() -> Path:
    """Get path to config.yaml file."""
    return get_config_dir() / "config.yaml"


def get_credentials_file_path() -> Path:
    """Get path to credentials file."""
    return get_config_dir() / "credentials"


def load_config_file() -> Dict[str, Any]:
    """Load the raw configuration from config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        ConfigError: If the file cannot be read or is not a mapping.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_file} must contain a mapping")
    return data


def load_credentials() -> Dict[str, str]:
    """Load credentials from the credentials file.

    Returns:
        Dictionary mapping credential names to values.
    """
    credentials_file = get_credentials_file_path()

    if not credentials_file.exists():
        return {}

    credentials = {}

    try:
        with open(credentials_file, "r") as f:
            for line in f:
                line = line.strip()
                # Skip empty lines and comments
                if not line or line.startswith("#"):
                    continue

                # Parse KEY=value format
                if "=" in line:
                    key, value = line.split("=", 1)
                    credentials[key.strip()] = value.strip()
    except OSError as e:
        raise ConfigError(f"Failed to load credentials from {credentials_file}: {e}")

    return credentials


def get_github_token() -> Optional[str]:
    """Get the GitHub token from the environment or the credentials file."""
    token = os.environ.get(GITHUB_TOKEN_ENV, "").strip()
    if token:
        return token
    return load_credentials().get(GITHUB_TOKEN_ENV) or None


def _parse_default_kind(value: Any) -> Optional[MessageKind]:
    if value is None or value == "":
        return None
    try:
        return resolve_kind(str(value))
    except MessageError:
        raise ConfigError(f"Invalid default_kind '{value}' (chore, fix, feat)")


def _as_list(name: str, value: Any, default: list[str]) -> list[str]:
    if value is None:
        return default.copy()
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        raise ConfigError(f"'{name}' must be a list")
    return [str(item) for item in value]


def _as_optional_str(name: str, value: Any) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"'{name}' must be a string, got {value!r}")
    return value.strip() or None


def _as_number(name: str, value: Any, default: float) -> float:
    if value is None:
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"'{name}' must be a number, got {value!r}")
    if number < 0:
        raise ConfigError(f"'{name}' must not be negative")
    return number


def load_config() -> GupConfig:
    """Load the effective configuration.

    Values from config.yaml override the defaults; the GitHub token comes
    from $GITHUB_TOKEN or the credentials file.

    Raises:
        ConfigError: If a file is malformed or holds an invalid value.
    """
    data = load_config_file()

    return GupConfig(
        protected_branches=_as_list(
            "protected_branches", data.get("protected_branches"), DEFAULT_PROTECTED_BRANCHES
        ),
        default_kind=_parse_default_kind(data.get("default_kind")),
        ignored_checks=_as_list(
            "ignored_checks", data.get("ignored_checks"), DEFAULT_IGNORED_CHECKS
        ),
        editor=_as_optional_str("editor", data.get("editor")),
        edit_attempts=int(_as_number("edit_attempts", data.get("edit_attempts"), 1)),
        poll_interval=_as_number("poll_interval", data.get("poll_interval"), 10.0),
        poll_timeout=_as_number("poll_timeout", data.get("poll_timeout"), 600.0),
        api_url=str(data.get("api_url") or DEFAULT_API_URL).rstrip("/"),
        web_url=str(data.get("web_url") or DEFAULT_WEB_URL).rstrip("/"),
        github_token=get_github_token(),
    )
