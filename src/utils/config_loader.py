"""
Configuration file discovery and parsing.
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from config import settings
from src.exceptions import ConfigurationError
from src.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AuthInfo:
    """OAuth credentials and the account whose history is cleaned."""

    consumer_key: str
    consumer_secret: str
    access_token: str
    access_secret: str
    username: str

    def __repr__(self) -> str:
        return f"AuthInfo(username={self.username!r}, credentials=<hidden>)"


@dataclass(frozen=True)
class FilterInfo:
    """Retention settings in days; likes fall back to the posts value."""

    backlog_days: int = 0
    backlog_days_likes: Optional[int] = None


@dataclass(frozen=True)
class Configuration:
    auth: AuthInfo
    filter: FilterInfo = field(default_factory=FilterInfo)


def get_home_directory() -> str:
    """Return the first non-empty home directory variable, or an empty string."""
    for name in settings.HOME_ENV_VARS:
        value = os.getenv(name, "")
        if value:
            return value
    return ""


def get_config_file_location() -> Path:
    """
    Resolve the configuration file path.

    TWITTER_CLEANUP_CONFIG wins; otherwise the file lives in the home
    directory, or in the working directory when no home is known.
    """
    explicit = os.getenv("TWITTER_CLEANUP_CONFIG") or settings.TWITTER_CLEANUP_CONFIG
    if explicit:
        return Path(explicit).expanduser()

    home = get_home_directory()
    if home:
        return Path(home) / settings.CONFIG_FILE_NAME
    return Path(settings.CONFIG_FILE_NAME)


def _normalize(section: Any, section_name: str) -> Dict[str, Any]:
    """Lower-case keys and drop underscores so ConsumerKey == consumer_key."""
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"'{section_name}' section must be a mapping")
    return {str(key).lower().replace("_", ""): value for key, value in section.items()}


def _parse_days(value: Any, name: str) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        days = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"'{name}' must be an integer, got {value!r}") from e
    if days < 0:
        raise ConfigurationError(f"'{name}' must not be negative, got {days}")
    return days


def parse_config(data: Any) -> Configuration:
    """
    Build a Configuration from parsed YAML data.

    Raises:
        ConfigurationError: If required values are missing or malformed
    """
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must contain a mapping")

    sections = _normalize(data, "root")
    auth_data = _normalize(sections.get("auth"), "auth")
    filter_data = _normalize(sections.get("filter"), "filter")

    required = {
        "consumerkey": "consumer_key",
        "consumersecret": "consumer_secret",
        "accesstoken": "access_token",
        "accesssecret": "access_secret",
        "username": "username",
    }
    missing = [name for key, name in required.items() if not auth_data.get(key)]
    if missing:
        raise ConfigurationError(f"Missing auth values: {', '.join(missing)}")

    auth = AuthInfo(**{name: str(auth_data[key]).strip() for key, name in required.items()})
    backlog_days = _parse_days(filter_data.get("backlogdays"), "backlog_days") or 0
    backlog_days_likes = _parse_days(filter_data.get("backlogdayslikes"), "backlog_days_likes")

    return Configuration(
        auth=auth,
        filter=FilterInfo(backlog_days=backlog_days, backlog_days_likes=backlog_days_likes),
    )


def load_config(path: Optional[Path] = None) -> Configuration:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the file (defaults to get_config_file_location())

    Returns:
        Configuration instance

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid
    """
    path = Path(path) if path else get_config_file_location()

    if not path.exists():
        raise ConfigurationError(f"Missing configuration file: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Could not read configuration file {path}: {e}") from e

    config = parse_config(data)
    logger.debug(f"Configuration loaded from {path} for @{config.auth.username}")
    return config
