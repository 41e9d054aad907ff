"""
Retention filter deciding which items are old enough to remove.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

from src.models import Category, Item, RetentionWindow


def allow_item(item: Item, cutoff: datetime) -> bool:
    """
    Check whether an item was created strictly before the cutoff.

    Items without a usable timestamp are never eligible.
    """
    if item.created_at is None:
        return False
    return item.created_at < cutoff


def compute_cutoff(days: int, now: Optional[datetime] = None) -> datetime:
    """
    Compute the absolute cutoff for a retention window of `days` days.

    Args:
        days: Number of days of history to keep
        now: Reference time (defaults to the current UTC time)

    Returns:
        Timezone-aware cutoff datetime
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now - timedelta(days=days)


def build_window(category: Category, days: int, now: Optional[datetime] = None) -> RetentionWindow:
    """Build the RetentionWindow for one category."""
    return RetentionWindow(category=category, days=days, cutoff=compute_cutoff(days, now))
