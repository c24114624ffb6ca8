"""Shared helpers for the query builder."""

from .placeholders import Placeholder, find_placeholders, find_unbound_placeholders
from .protocols import QueryExecutor
from .time_window import default_time_window, end_of_day, start_of_day, utc_now

__all__ = [
    "Placeholder",
    "QueryExecutor",
    "default_time_window",
    "end_of_day",
    "find_placeholders",
    "find_unbound_placeholders",
    "start_of_day",
    "utc_now",
]
