"""
Deletion handlers registry.
"""
from typing import Any

from src.deletion.handlers.base_handler import DeletionHandler
from src.deletion.handlers.like_handler import LikeRemovalHandler
from src.deletion.handlers.post_handler import PostDeletionHandler
from src.models import Category
from src.utils.logging import get_logger

logger = get_logger(__name__)

# Registry of handler classes, one per category
_registered_handlers: list[type[DeletionHandler]] = [PostDeletionHandler, LikeRemovalHandler]


def get_all_handlers(client: Any) -> list[DeletionHandler]:
    """
    Instantiate every registered deletion handler.

    Args:
        client: API client shared by the handlers

    Returns:
        List of DeletionHandler instances
    """
    return [handler_cls(client) for handler_cls in _registered_handlers]


def get_handler(category: Category, client: Any) -> DeletionHandler:
    """
    Select the handler for a category.

    Args:
        category: Category of the pipeline being built
        client: API client shared by the handlers

    Returns:
        DeletionHandler instance

    Raises:
        ValueError: If no handler is registered for the category
    """
    for handler in get_all_handlers(client):
        if handler.can_handle(category):
            logger.debug(f"Selected handler for {category.value}: {type(handler).__name__}")
            return handler
    raise ValueError(f"No handler registered for category: {category.value}")


__all__ = [
    "DeletionHandler",
    "PostDeletionHandler",
    "LikeRemovalHandler",
    "get_all_handlers",
    "get_handler",
]
