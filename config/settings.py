"""
Configuration constants for Twitter cleanup project.
"""
import os
from pathlib import Path

# Base directory (project root)
BASE_DIR = Path(__file__).parent.parent

# Pagination
PAGE_SIZE = 200  # Maximum page size accepted by the timeline/favorites endpoints
MAX_ERROR_COUNT = 3  # Consecutive fetch failures before a pipeline gives up

# Retry
FETCH_RETRY_BACKOFF_SECONDS = float(os.getenv("FETCH_RETRY_BACKOFF_SECONDS", "0"))

# Timestamps
TWITTER_TIMESTAMP_FORMAT = "%a %b %d %H:%M:%S %z %Y"  # e.g. "Wed Oct 10 20:19:24 +0000 2018"
DISPLAY_TIMESTAMP_FORMAT = "%d.%m.%y %H:%M:%S"

# Configuration file
CONFIG_FILE_NAME = ".twitter_cleanup.yaml"
HOME_ENV_VARS = ["HOME", "HOMEPATH", "USERPROFILE"]

# Paths (relative to BASE_DIR)
LOG_DIR = BASE_DIR / "data" / "logs"

# Environment Variables (with defaults)
TWITTER_CLEANUP_CONFIG = os.getenv("TWITTER_CLEANUP_CONFIG", "")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Ensure data directories exist
LOG_DIR.mkdir(parents=True, exist_ok=True)
