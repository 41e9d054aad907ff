"""
Pytest configuration and shared fixtures for unit tests.
"""
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import MagicMock

import pytest  # noqa: E402

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from src.models import CleanupContext, Item  # noqa: E402

# Fixed reference time so cutoffs are deterministic
NOW = datetime(2024, 6, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    """Reference 'current time' for tests."""
    return NOW


@pytest.fixture
def cutoff():
    """Cutoff seven days before NOW."""
    return NOW - timedelta(days=7)


@pytest.fixture
def make_item():
    """
    Factory for Item objects.

    Usage: make_item(100, days_ago=10, text="hello")
    Passing days_ago=None produces an item with an unparseable timestamp.
    """

    def _make(item_id, days_ago=10, text=None):
        created_at = None if days_ago is None else NOW - timedelta(days=days_ago)
        return Item(
            id=item_id,
            created_at=created_at,
            text=text if text is not None else f"tweet {item_id}",
            created_at_raw="garbage" if created_at is None else created_at.isoformat(),
        )

    return _make


@pytest.fixture
def mock_client():
    """
    Create a mock TwitterClient.

    Listing operations return empty pages by default; destructive
    operations succeed. Tests override as needed.
    """
    client = MagicMock()
    client.fetch_posts_page.return_value = []
    client.fetch_likes_page.return_value = []
    client.delete_post.return_value = None
    client.remove_like.return_value = None
    return client


@pytest.fixture
def context(mock_client):
    """Dry-run CleanupContext around mock_client."""
    return CleanupContext(username="testuser", commit=False, client=mock_client)


@pytest.fixture
def commit_context(mock_client):
    """Committing CleanupContext around mock_client."""
    return CleanupContext(username="testuser", commit=True, client=mock_client)


@pytest.fixture
def config_file(tmp_path):
    """
    Write a valid configuration file and return its path.
    """
    path = tmp_path / ".twitter_cleanup.yaml"
    path.write_text(
        "auth:\n"
        "  consumer_key: ck\n"
        "  consumer_secret: cs\n"
        "  access_token: at\n"
        "  access_secret: as\n"
        "  username: testuser\n"
        "filter:\n"
        "  backlog_days: 30\n"
        "  backlog_days_likes: 7\n",
        encoding="utf-8",
    )
    return path
