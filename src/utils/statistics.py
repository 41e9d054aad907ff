"""
Statistics and reporting utilities.
"""

import threading
from datetime import datetime
from typing import Any, Dict, Optional

from src.models import Category
from src.utils.logging import get_logger

logger = get_logger(__name__)

COUNTERS = (
    "pages_fetched",
    "items_retrieved",
    "items_matched",
    "items_processed",
    "items_deleted",
    "action_failures",
    "fetch_errors",
    "unparseable_timestamps",
    "items_dropped",
)


class StatisticsReporter:
    """Collects per-category statistics from concurrently running pipelines."""

    def __init__(self, start_time: Optional[datetime] = None, commit: bool = False):
        """
        Initialize StatisticsReporter.

        Args:
            start_time: Operation start time (defaults to now)
            commit: Whether destructive actions are enabled for this run
        """
        self.start_time = start_time or datetime.now()
        self.commit = commit
        self._lock = threading.Lock()
        self.stats: Dict[Category, Dict[str, Any]] = {
            category: self._empty_counters() for category in Category
        }

    @staticmethod
    def _empty_counters() -> Dict[str, Any]:
        counters: Dict[str, Any] = {name: 0 for name in COUNTERS}
        counters["aborted"] = False
        return counters

    def increment(self, category: Category, counter: str, amount: int = 1) -> None:
        """
        Increment a counter for a category.

        Raises:
            KeyError: If the counter name is unknown
        """
        if counter not in COUNTERS:
            raise KeyError(f"Unknown counter: {counter}")
        with self._lock:
            self.stats[category][counter] += amount

    def mark_aborted(self, category: Category) -> None:
        """Record that a category's pipeline stopped on repeated fetch failures."""
        with self._lock:
            self.stats[category]["aborted"] = True

    def totals(self) -> Dict[str, int]:
        """Sum every counter across categories."""
        with self._lock:
            return {
                name: sum(self.stats[category][name] for category in Category)
                for name in COUNTERS
            }

    def print_summary(self) -> None:
        """Print final summary statistics."""
        elapsed = datetime.now() - self.start_time
        mode = "COMMIT" if self.commit else "DRY-RUN"

        logger.info("=" * 60)
        logger.info(f"CLEANUP SUMMARY ({mode})")
        logger.info("=" * 60)
        for category in Category:
            with self._lock:
                counters = dict(self.stats[category])
            logger.info(f"{category.label}s:")
            logger.info(f"  - Pages fetched: {counters['pages_fetched']}")
            logger.info(f"  - Retrieved: {counters['items_retrieved']}")
            logger.info(f"  - Matched: {counters['items_matched']}")
            logger.info(f"  - Processed: {counters['items_processed']}")
            logger.info(f"  - Deleted: {counters['items_deleted']}")
            logger.info(f"  - Action failures: {counters['action_failures']}")
            logger.info(f"  - Fetch errors: {counters['fetch_errors']}")
            if counters["unparseable_timestamps"]:
                logger.info(f"  - Unparseable timestamps: {counters['unparseable_timestamps']}")
            if counters["items_dropped"]:
                logger.warning(f"  - Dropped after consumer failure: {counters['items_dropped']}")
            if counters["aborted"]:
                logger.warning("  - Stopped early after repeated fetch failures")
        totals = self.totals()
        logger.info(
            f"Total: {totals['items_processed']} processed, "
            f"{totals['items_deleted']} deleted, {totals['action_failures']} failed"
        )
        logger.info(f"Time Elapsed: {elapsed}")
        logger.info("=" * 60)

    def get_stats(self) -> Dict[str, Any]:
        """
        Get current statistics.

        Returns:
            Statistics dictionary keyed by category value, plus timing fields
        """
        elapsed = datetime.now() - self.start_time
        with self._lock:
            per_category = {
                category.value: dict(counters) for category, counters in self.stats.items()
            }
        return {
            **per_category,
            "commit": self.commit,
            "start_time": self.start_time.isoformat(),
            "elapsed_time": str(elapsed),
        }
