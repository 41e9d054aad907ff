"""
Date parser for Twitter timestamps.
"""

from datetime import datetime, timezone
from typing import Optional, Union, cast

import dateparser  # type: ignore[import-untyped]

from config import settings
from src.exceptions import TimestampParseError
from src.utils.logging import get_logger

logger = get_logger(__name__)


class DateParser:
    """Parses Twitter `created_at` values into timezone-aware datetimes."""

    def __init__(self, timestamp_format: Optional[str] = None):
        """
        Initialize DateParser.

        Args:
            timestamp_format: strptime format of the wire timestamps
                              (defaults to settings.TWITTER_TIMESTAMP_FORMAT)
        """
        self.timestamp_format = timestamp_format or settings.TWITTER_TIMESTAMP_FORMAT

    def parse_timestamp(self, value: Union[str, datetime, None]) -> Optional[datetime]:
        """
        Parse a timestamp into an aware datetime.

        Args:
            value: A datetime, a string in the wire format, or any string
                   dateparser understands

        Returns:
            Parsed datetime (UTC if no offset was present), or None if parsing fails
        """
        if value is None:
            return None

        if isinstance(value, datetime):
            return self._ensure_aware(value)

        if not value.strip():
            logger.warning("Empty timestamp string provided")
            return None

        try:
            return self.parse_strict(value)
        except TimestampParseError:
            pass

        # Fallback to dateparser library
        try:
            parsed = dateparser.parse(
                value.strip(),
                settings={
                    "TIMEZONE": "UTC",
                    "RETURN_AS_TIMEZONE_AWARE": True,
                    # Partial values such as "2010" or "Mon" must not be completed from today
                    "STRICT_PARSING": True,
                    "PARSERS": ["absolute-time"],
                },
            )
            if parsed:
                logger.debug(f"Parsed '{value}' as {parsed} (dateparser fallback)")
                return self._ensure_aware(cast(datetime, parsed))
        except Exception as e:
            logger.debug(f"dateparser failed for '{value}': {e}")

        logger.warning(f"Could not parse timestamp: '{value}'")
        return None

    def parse_strict(self, value: str) -> datetime:
        """
        Parse a timestamp in the wire format only.

        Raises:
            TimestampParseError: If the value does not match the format
        """
        try:
            return datetime.strptime(value.strip(), self.timestamp_format)
        except ValueError as e:
            raise TimestampParseError(f"Unrecognised timestamp '{value}': {e}") from e

    @staticmethod
    def format_local(value: Optional[datetime]) -> str:
        """Format a timestamp in local time for console output."""
        if value is None:
            return "??.??.?? ??:??:??"
        return value.astimezone().strftime(settings.DISPLAY_TIMESTAMP_FORMAT)

    @staticmethod
    def _ensure_aware(value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
