"""
Like removal handler for favorited tweets.
"""
from src.deletion.handlers.base_handler import DeletionHandler
from src.models import Category, Item
from src.utils.logging import get_logger

logger = get_logger(__name__)


class LikeRemovalHandler(DeletionHandler):
    """Handler for removing likes (favorites) from other accounts' tweets."""

    category = Category.LIKE

    def delete(self, item: Item) -> tuple[bool, str]:
        """
        Execute like removal.

        Note: Likes use "unlike" terminology, but we implement delete()
        to match the base interface.
        """
        return self.remove_like(item)

    def remove_like(self, item: Item) -> tuple[bool, str]:
        """
        Remove a like from a tweet.

        Args:
            item: Liked tweet

        Returns:
            Tuple of (success: bool, message: str)
        """
        try:
            self.client.remove_like(item.id)
        except Exception as e:
            logger.error(f"Error unliking tweet: {e}")
            return False, f"Error: {str(e)}"

        logger.debug(f"Removed like from tweet {item.id}")
        return True, "Like removed successfully"
