"""
Deletion consumer draining a pipeline's channel and removing each item.
"""
from typing import Iterable, Optional

from src.deletion.handlers import DeletionHandler
from src.models import Category, Item
from src.traversal.date_parser import DateParser
from src.utils.logging import get_logger
from src.utils.statistics import StatisticsReporter

logger = get_logger(__name__)


class DeletionConsumer:
    """Performs (or, in dry-run, only reports) the destructive action per item."""

    def __init__(
        self,
        handler: DeletionHandler,
        stats: Optional[StatisticsReporter] = None,
        logger_instance=None,
    ):
        """
        Initialize DeletionConsumer.

        Args:
            handler: Category-specific handler performing the action
            stats: Optional StatisticsReporter to record progress into
            logger_instance: Optional logger instance
        """
        self.handler = handler
        self.stats = stats
        self.logger = logger_instance or logger

    @staticmethod
    def format_item(item: Item, category: Category) -> str:
        """Format the console line for a processed item."""
        timestamp = DateParser.format_local(item.created_at)
        return f"{category.label}: {item.id} {timestamp} - {item.text}"

    def run(self, items: Iterable[Item], category: Category, commit: bool) -> dict:
        """
        Process every item until the stream is closed and drained.

        Action failures are logged and skipped; they never stop the loop.

        Args:
            items: Item stream (usually a HandoffChannel)
            category: Category of the stream
            commit: Perform the destructive action instead of only reporting

        Returns:
            Dictionary with statistics: {'processed': int, 'deleted': int, 'failed': int}
        """
        result = {"processed": 0, "deleted": 0, "failed": 0}

        for item in items:
            self.logger.info(self.format_item(item, category))
            result["processed"] += 1
            self._record(category, "items_processed")

            if not commit:
                continue

            try:
                success, message = self.handler.delete(item)
            except Exception as e:
                success, message = False, f"Unexpected error: {str(e)}"
                self.logger.error(f"Unexpected error processing {category.label} {item.id}: {e}")

            if success:
                result["deleted"] += 1
                self._record(category, "items_deleted")
            else:
                result["failed"] += 1
                self._record(category, "action_failures")
                self.logger.debug(f"Action failed for {category.label} {item.id}: {message}")

        self.logger.debug(f"Exiting log {category.label.lower()}s")
        return result

    def _record(self, category: Category, counter: str) -> None:
        if self.stats:
            self.stats.increment(category, counter)
