"""
Pipeline coordinator running one paginator/consumer pair per category.
"""
from concurrent.futures import ALL_COMPLETED, Future, ThreadPoolExecutor, wait
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, Optional

from src.deletion.deletion_consumer import DeletionConsumer
from src.deletion.handlers import get_handler
from src.models import Category, CleanupContext, RetentionWindow
from src.pipeline.channel import HandoffChannel
from src.traversal.date_parser import DateParser
from src.traversal.paginator import Paginator
from src.traversal.retention_filter import build_window
from src.utils.config_loader import FilterInfo
from src.utils.logging import get_logger
from src.utils.statistics import StatisticsReporter

logger = get_logger(__name__)


def resolve_backlog_days(
    filter_info: FilterInfo,
    backlog_days: Optional[int] = None,
    backlog_days_likes: Optional[int] = None,
) -> Dict[Category, int]:
    """
    Resolve the effective number of days to keep per category.

    Command-line values win when positive. Likes fall back to the posts
    value when neither a likes override nor a positive likes setting exists.
    """
    posts_days = backlog_days if backlog_days and backlog_days > 0 else filter_info.backlog_days

    if backlog_days_likes and backlog_days_likes > 0:
        likes_days = backlog_days_likes
    elif filter_info.backlog_days_likes and filter_info.backlog_days_likes > 0:
        likes_days = filter_info.backlog_days_likes
    else:
        likes_days = posts_days

    return {Category.POST: posts_days, Category.LIKE: likes_days}


def build_retention_windows(
    filter_info: FilterInfo,
    backlog_days: Optional[int] = None,
    backlog_days_likes: Optional[int] = None,
    now: Optional[datetime] = None,
) -> Dict[Category, RetentionWindow]:
    """Compute every category's RetentionWindow once, from a single reference time."""
    days = resolve_backlog_days(filter_info, backlog_days, backlog_days_likes)
    if now is None:
        now = datetime.now(timezone.utc)
    return {category: build_window(category, days[category], now) for category in Category}


class PipelineCoordinator:
    """Starts every category pipeline concurrently and waits for all of them."""

    def __init__(
        self,
        context: CleanupContext,
        windows: Iterable[RetentionWindow],
        stats: Optional[StatisticsReporter] = None,
        paginator_factory: Optional[Callable[..., Paginator]] = None,
        logger_instance=None,
    ):
        """
        Initialize PipelineCoordinator.

        Args:
            context: Shared run context (client, username, commit flag)
            windows: One RetentionWindow per category to clean
            stats: Optional StatisticsReporter shared by all pipelines
            paginator_factory: Optional Paginator constructor override
            logger_instance: Optional logger instance
        """
        self.context = context
        self.windows = list(windows)
        self.stats = stats
        self.paginator_factory = paginator_factory or Paginator
        self.logger = logger_instance or logger

    def fetcher_for(self, category: Category) -> Callable[..., Any]:
        """Return the client's listing operation for a category."""
        if category is Category.POST:
            return self.context.client.fetch_posts_page
        return self.context.client.fetch_likes_page

    def log_windows(self) -> None:
        for window in self.windows:
            self.logger.info(
                f"Filter {window.category.label}s: {window.days} days, "
                f"{DateParser.format_local(window.cutoff)}"
            )

    def run(self) -> Dict[Category, Dict[str, Any]]:
        """
        Run every pipeline to completion.

        Returns:
            Per-category results: {'sent': int or None, 'consumer': dict or None, 'error': str or None}
        """
        results: Dict[Category, Dict[str, Any]] = {
            window.category: {"sent": None, "consumer": None, "error": None}
            for window in self.windows
        }
        if not self.windows:
            return results

        producers: Dict[Category, Future] = {}
        consumers: Dict[Category, Future] = {}

        with ThreadPoolExecutor(
            max_workers=2 * len(self.windows), thread_name_prefix="pipeline"
        ) as pool:
            for window in self.windows:
                category = window.category
                channel: HandoffChannel = HandoffChannel(name=category.value)
                paginator = self.paginator_factory(self.context, stats=self.stats)
                consumer = DeletionConsumer(get_handler(category, self.context.client), stats=self.stats)

                producers[category] = pool.submit(
                    paginator.run, self.fetcher_for(category), window.cutoff, channel, category
                )
                consumers[category] = pool.submit(
                    self._consume, consumer, channel, category
                )

            wait(list(producers.values()) + list(consumers.values()), return_when=ALL_COMPLETED)

        for category in results:
            try:
                results[category]["sent"] = producers[category].result()
            except Exception as e:
                self.logger.error(f"{category.label} paginator failed: {e}")
                results[category]["error"] = str(e)
            results[category]["consumer"] = consumers[category].result()

        return results

    def _consume(
        self, consumer: DeletionConsumer, channel: HandoffChannel, category: Category
    ) -> Optional[dict]:
        try:
            return consumer.run(channel, category, self.context.commit)
        except Exception as e:
            self.logger.error(f"{category.label} consumer failed: {e}", exc_info=True)
            # Keep taking items so the paginator can finish and close the channel
            dropped = 0
            for _ in channel:
                dropped += 1
            if dropped:
                self.logger.warning(
                    f"Dropped {dropped} {category.label.lower()}s after consumer failure"
                )
                if self.stats:
                    self.stats.increment(category, "items_dropped", dropped)
            return None
