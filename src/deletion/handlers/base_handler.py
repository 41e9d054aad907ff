"""
Base deletion handler interface using Strategy pattern.
"""
from abc import ABC, abstractmethod
from typing import Any

from src.models import Category, Item
from src.utils.logging import get_logger

logger = get_logger(__name__)


class DeletionHandler(ABC):
    """Abstract base class for category-specific destructive actions."""

    category: Category

    def __init__(self, client: Any):
        """
        Initialize deletion handler.

        Args:
            client: API client exposing the destructive operation
        """
        self.client = client

    def can_handle(self, category: Category) -> bool:
        """
        Check if this handler performs the action for the given category.

        Args:
            category: Category of the pipeline being built

        Returns:
            True if handler can process items of this category, False otherwise
        """
        return category is self.category

    @abstractmethod
    def delete(self, item: Item) -> tuple[bool, str]:
        """
        Execute the destructive action for the item.

        Args:
            item: Item to delete

        Returns:
            Tuple of (success: bool, message: str)
        """
        pass
