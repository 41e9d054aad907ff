#!/usr/bin/env python3
"""
Twitter Cleanup - Main entry point.

Deletes tweets and removes likes older than a configurable number of days.
"""

import argparse
import logging
import os
import signal
import sys
from pathlib import Path
from typing import Optional

# Add project root to path for imports
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

# Load environment variables
from dotenv import load_dotenv  # noqa: E402

load_dotenv()

from src.api.twitter_client import TwitterClient  # noqa: E402
from src.exceptions import ConfigurationError  # noqa: E402
from src.models import CleanupContext  # noqa: E402
from src.pipeline.coordinator import PipelineCoordinator, build_retention_windows  # noqa: E402
from src.utils.config_loader import get_config_file_location, load_config  # noqa: E402
from src.utils.logging import setup_logging  # noqa: E402
from src.utils.statistics import StatisticsReporter  # noqa: E402

# Global variable for reporting on interrupt
stats_reporter = None


def _non_negative_int(value: str) -> int:
    try:
        days = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number of days: {value!r}")
    if days < 0:
        raise argparse.ArgumentTypeError(f"number of days must not be negative: {days}")
    return days


def parse_arguments(argv: Optional[list] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="Delete old tweets and likes. Runs as a dry-run unless -x is given.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show what would be removed with the configured windows
  python main.py

  # Delete tweets older than 30 days and likes older than 7 days
  python main.py -x -b 30 -l 7
        """,
    )

    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Show debug messages on the console.",
    )

    parser.add_argument(
        "-x",
        "--commit",
        action="store_true",
        help="Commit changes (default is dry-run).",
    )

    parser.add_argument(
        "-b",
        "--backlog-days",
        type=_non_negative_int,
        default=0,
        help="Days of tweets to keep; overrides filter.backlog_days when positive.",
    )

    parser.add_argument(
        "-l",
        "--backlog-days-likes",
        type=_non_negative_int,
        default=0,
        help="Days of likes to keep; overrides filter.backlog_days_likes when positive.",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Path to the YAML configuration file (defaults to ~/.twitter_cleanup.yaml).",
    )

    return parser.parse_args(argv)


def signal_handler(signum, frame):
    """Handle interrupt signals: report what was done so far and exit."""
    logger = logging.getLogger("twitter_cleanup")
    logger.warning("\nInterrupt received, stopping...")

    if stats_reporter:
        try:
            stats_reporter.print_summary()
        except Exception as e:
            logger.error(f"Failed to print summary on interrupt: {e}")

    logger.info("Exiting...")
    logging.shutdown()
    # Worker threads may be blocked on network calls; do not wait for them
    os._exit(0)


def run_cleanup(
    debug: bool = False,
    commit: bool = False,
    backlog_days: int = 0,
    backlog_days_likes: int = 0,
    config_path: Optional[Path] = None,
    client: Optional[TwitterClient] = None,
) -> int:
    """
    Execute the complete cleanup process.

    Args:
        debug: Show debug messages on the console
        commit: Perform deletions instead of a dry-run
        backlog_days: Command-line override for the tweets window (ignored unless positive)
        backlog_days_likes: Command-line override for the likes window (ignored unless positive)
        config_path: Optional configuration file path
        client: Optional pre-built API client (built from the configuration if None)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    global stats_reporter

    # Initialize logging
    logger = setup_logging(debug=debug)

    # Register signal handlers for graceful shutdown
    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    logger.debug(f"debug: {debug}, commit: {commit}")

    try:
        config = load_config(config_path or get_config_file_location())
    except ConfigurationError as e:
        logger.error(str(e))
        return 1

    if client is None:
        try:
            client = TwitterClient.from_auth(config.auth)
        except Exception as e:
            logger.error(f"Could not create Twitter API client: {e}")
            return 1

    context = CleanupContext(
        username=config.auth.username, commit=commit, client=client
    )
    windows = build_retention_windows(config.filter, backlog_days, backlog_days_likes)

    logger.info("=" * 60)
    logger.info("Twitter Cleanup - Tweet and Like Removal")
    logger.info("=" * 60)
    logger.info(f"Account: @{context.username}")
    logger.info(f"Mode: {'COMMIT' if commit else 'DRY-RUN'}")

    stats_reporter = StatisticsReporter(commit=commit)
    coordinator = PipelineCoordinator(context, windows.values(), stats=stats_reporter)
    coordinator.log_windows()
    logger.info("=" * 60)

    coordinator.run()

    stats_reporter.print_summary()
    logger.info("Cleanup process completed.")
    return 0


def main(argv: Optional[list] = None):
    """
    Main entry point for Twitter cleanup script.

    Parses command-line arguments and runs the cleanup process.
    """
    args = parse_arguments(argv)
    return run_cleanup(
        debug=args.debug,
        commit=args.commit,
        backlog_days=args.backlog_days,
        backlog_days_likes=args.backlog_days_likes,
        config_path=args.config,
    )


if __name__ == "__main__":
    sys.exit(main())
