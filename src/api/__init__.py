"""
Remote API client used by the cleanup pipelines.
"""
from src.api.twitter_client import TwitterClient

__all__ = ["TwitterClient"]
