"""
Paginator walking a user's timeline or favorites backwards, page by page.
"""
import time
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from config import settings
from src.models import Category, CleanupContext, Item
from src.pipeline.channel import HandoffChannel
from src.traversal.retention_filter import allow_item
from src.utils.logging import get_logger
from src.utils.statistics import StatisticsReporter

logger = get_logger(__name__)

PageLoader = Callable[..., List[Item]]


class Paginator:
    """Drives one directional stream of items for a single category."""

    def __init__(
        self,
        context: CleanupContext,
        page_size: Optional[int] = None,
        max_errors: Optional[int] = None,
        backoff_seconds: Optional[float] = None,
        stats: Optional[StatisticsReporter] = None,
        logger_instance=None,
    ):
        """
        Initialize Paginator.

        Args:
            context: Shared run context (username is used for requests)
            page_size: Items requested per page (defaults to settings.PAGE_SIZE)
            max_errors: Consecutive fetch failures tolerated (defaults to settings.MAX_ERROR_COUNT)
            backoff_seconds: Linear retry backoff step (defaults to settings.FETCH_RETRY_BACKOFF_SECONDS)
            stats: Optional StatisticsReporter to record progress into
            logger_instance: Optional logger instance
        """
        self.context = context
        self.page_size = page_size or settings.PAGE_SIZE
        self.max_errors = max_errors or settings.MAX_ERROR_COUNT
        self.backoff_seconds = (
            settings.FETCH_RETRY_BACKOFF_SECONDS if backoff_seconds is None else backoff_seconds
        )
        self.stats = stats
        self.logger = logger_instance or logger

    def build_params(self, cursor: Optional[int] = None) -> Dict[str, Any]:
        """
        Build request parameters for one page.

        Args:
            cursor: Exclusive upper bound on item ids, None for the newest page

        Returns:
            Keyword arguments for the page loader
        """
        params: Dict[str, Any] = {
            "screen_name": self.context.username,
            "count": self.page_size,
            "include_rts": True,
            "tweet_mode": "extended",
        }
        if cursor is not None:
            params["max_id"] = cursor
        return params

    def run(
        self,
        fetch: PageLoader,
        cutoff: datetime,
        out: HandoffChannel,
        category: Category,
    ) -> int:
        """
        Page through the collection and send every item older than cutoff.

        The output channel is closed when this returns, whatever the reason
        for stopping.

        Args:
            fetch: Page loader called with the request parameters
            cutoff: Items created strictly before this are sent
            out: Channel to the deletion consumer
            category: Category being paginated

        Returns:
            Number of items sent on the channel
        """
        name = category.label.lower()
        sent = 0
        try:
            sent = self._paginate(fetch, cutoff, out, category)
        finally:
            out.close()
            self.logger.debug(f"Exiting load {name}s")
        return sent

    def _paginate(
        self,
        fetch: PageLoader,
        cutoff: datetime,
        out: HandoffChannel,
        category: Category,
    ) -> int:
        name = category.label.lower()
        error_count = 0
        cursor: Optional[int] = None
        min_id: Optional[int] = None
        sent = 0

        while True:
            try:
                items = fetch(**self.build_params(cursor))
            except Exception as e:
                error_count += 1
                self.logger.error(f"Error retrieving {name}s: {e}")
                self._record(category, "fetch_errors")
                if error_count >= self.max_errors:
                    self.logger.warning(
                        f"Giving up on {name}s after {error_count} consecutive errors"
                    )
                    if self.stats:
                        self.stats.mark_aborted(category)
                    break
                self._wait_before_retry(error_count)
                continue

            self.logger.debug(f"Retrieved {name}s: {len(items)} {min_id or 0}")

            if not items:
                break

            error_count = 0
            self._record(category, "pages_fetched")
            self._record(category, "items_retrieved", len(items))

            for item in items:
                if min_id is None or item.id < min_id:
                    min_id = item.id
                if item.created_at is None:
                    self.logger.warning(
                        f"Skipping {name} {item.id}: unparseable timestamp '{item.created_at_raw}'"
                    )
                    self._record(category, "unparseable_timestamps")
                    continue
                if allow_item(item, cutoff):
                    out.send(item)
                    sent += 1
                    self._record(category, "items_matched")

            next_cursor = min_id - 1
            if cursor is not None and next_cursor >= cursor:
                self.logger.warning(
                    f"Cursor for {name}s did not advance past {cursor}, stopping"
                )
                break
            cursor = next_cursor

        return sent

    def _wait_before_retry(self, error_count: int) -> None:
        if self.backoff_seconds <= 0:
            return
        delay = self.backoff_seconds * error_count
        self.logger.debug(f"Waiting {delay:.2f} seconds before retrying")
        time.sleep(delay)

    def _record(self, category: Category, counter: str, amount: int = 1) -> None:
        if self.stats:
            self.stats.increment(category, counter, amount)
