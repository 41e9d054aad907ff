"""
Twitter API client wrapping tweepy for listing and removing tweets and likes.
"""
from typing import Any, List, Optional

import tweepy

from src.models import Item
from src.traversal.date_parser import DateParser
from src.utils.config_loader import AuthInfo
from src.utils.logging import get_logger

logger = get_logger(__name__)

# Parameters the favorites endpoint does not accept
_LIKES_UNSUPPORTED_PARAMS = ("include_rts",)


class TwitterClient:
    """
    Narrow interface over tweepy.API.

    The two listing operations return lists of Item; the two destructive
    operations raise tweepy.TweepyException on failure.
    """

    def __init__(self, api: Any, date_parser: Optional[DateParser] = None, logger_instance=None):
        """
        Initialize TwitterClient.

        Args:
            api: tweepy.API instance (or a compatible object)
            date_parser: Optional DateParser for created_at values
            logger_instance: Optional logger instance
        """
        self.api = api
        self.date_parser = date_parser or DateParser()
        self.logger = logger_instance or logger

    @classmethod
    def from_auth(cls, auth: AuthInfo, wait_on_rate_limit: bool = True) -> "TwitterClient":
        """
        Create a client authenticated with OAuth 1.0a user credentials.

        Args:
            auth: Credentials from the configuration file
            wait_on_rate_limit: Let tweepy sleep through rate limit windows

        Returns:
            TwitterClient instance
        """
        handler = tweepy.OAuth1UserHandler(
            auth.consumer_key,
            auth.consumer_secret,
            auth.access_token,
            auth.access_secret,
        )
        api = tweepy.API(handler, wait_on_rate_limit=wait_on_rate_limit)
        logger.debug(f"Twitter API client created for @{auth.username}")
        return cls(api)

    def fetch_posts_page(self, **params: Any) -> List[Item]:
        """Fetch one page of the user's own timeline (tweets and retweets)."""
        return self._to_items(self.api.user_timeline(**params))

    def fetch_likes_page(self, **params: Any) -> List[Item]:
        """Fetch one page of tweets the user has liked."""
        for key in _LIKES_UNSUPPORTED_PARAMS:
            params.pop(key, None)
        return self._to_items(self.api.get_favorites(**params))

    def delete_post(self, item_id: int) -> None:
        """Delete one of the user's tweets."""
        self.api.destroy_status(item_id)

    def remove_like(self, item_id: int) -> None:
        """Remove the user's like from a tweet."""
        self.api.destroy_favorite(item_id)

    def _to_items(self, statuses: Any) -> List[Item]:
        return [self.status_to_item(status) for status in statuses or []]

    def status_to_item(self, status: Any) -> Item:
        """
        Convert a tweepy Status into an Item.

        Args:
            status: tweepy Status model

        Returns:
            Item with parsed timestamp (None if it could not be parsed)
        """
        raw_json = getattr(status, "_json", None) or {}
        raw_created = raw_json.get("created_at") or getattr(status, "created_at", None)
        text = getattr(status, "full_text", None) or getattr(status, "text", "") or ""
        return Item(
            id=int(status.id),
            created_at=self.date_parser.parse_timestamp(raw_created),
            text=text.replace("\n", " "),
            created_at_raw=str(raw_created or ""),
        )
