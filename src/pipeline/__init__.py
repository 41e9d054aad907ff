"""
Producer/consumer plumbing for the cleanup pipelines.

The coordinator is imported from src.pipeline.coordinator directly; it
depends on src.traversal, which itself uses the channel defined here.
"""
from src.pipeline.channel import HandoffChannel

__all__ = ["HandoffChannel"]
