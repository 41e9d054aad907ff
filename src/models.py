"""
Data models shared by the cleanup pipelines.
"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Optional


class Category(Enum):
    """Tracked item classes, each with its own retention window and action."""

    POST = "post"
    LIKE = "like"

    @property
    def label(self) -> str:
        """Display label used in console output."""
        return "Tweet" if self is Category.POST else "Like"


@dataclass(frozen=True)
class Item:
    """A retrieved post or like, in flight between paginator and consumer."""

    id: int
    created_at: Optional[datetime]
    text: str = ""
    created_at_raw: str = ""


@dataclass(frozen=True)
class RetentionWindow:
    """Absolute cutoff for one category, fixed for the whole run."""

    category: Category
    days: int
    cutoff: datetime


@dataclass(frozen=True)
class CleanupContext:
    """
    Process-wide values handed to every pipeline worker.

    Built once at startup; workers receive it by reference instead of
    reading module globals.
    """

    username: str
    commit: bool = False
    client: Any = None
