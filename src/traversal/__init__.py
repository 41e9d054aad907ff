"""
Traversal of a user's timeline and likes, newest first.
"""

from src.traversal.date_parser import DateParser
from src.traversal.paginator import Paginator
from src.traversal.retention_filter import allow_item, build_window, compute_cutoff

__all__ = ["DateParser", "Paginator", "allow_item", "build_window", "compute_cutoff"]
