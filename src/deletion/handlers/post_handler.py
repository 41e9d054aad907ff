"""
Post deletion handler for tweets and retweets.
"""
from src.deletion.handlers.base_handler import DeletionHandler
from src.models import Category, Item
from src.utils.logging import get_logger

logger = get_logger(__name__)


class PostDeletionHandler(DeletionHandler):
    """Handler for deleting the account's own tweets."""

    category = Category.POST

    def delete(self, item: Item) -> tuple[bool, str]:
        try:
            self.client.delete_post(item.id)
        except Exception as e:
            logger.error(f"Error deleting tweet: {e}")
            return False, f"Error: {str(e)}"

        logger.debug(f"Deleted tweet {item.id}")
        return True, "Tweet deleted successfully"
