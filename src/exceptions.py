"""
Exception types raised by the cleanup pipeline.
"""


class CleanupError(Exception):
    """Base class for cleanup errors."""


class ConfigurationError(CleanupError):
    """Configuration file is missing, unreadable or incomplete."""


class ChannelClosedError(CleanupError):
    """Raised when sending on, or closing, an already closed hand-off channel."""


class TimestampParseError(CleanupError):
    """Raised by strict timestamp parsing when a value cannot be understood."""
