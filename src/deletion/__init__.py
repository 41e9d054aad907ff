"""
Deletion handlers and the consumer that drives them.
"""
from src.deletion.deletion_consumer import DeletionConsumer
from src.deletion.handlers import (
    DeletionHandler,
    LikeRemovalHandler,
    PostDeletionHandler,
    get_all_handlers,
    get_handler,
)

__all__ = [
    "DeletionConsumer",
    "DeletionHandler",
    "PostDeletionHandler",
    "LikeRemovalHandler",
    "get_all_handlers",
    "get_handler",
]
