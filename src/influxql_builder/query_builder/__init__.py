"""Query Builder package for InfluxQL statement assembly."""

from .builder import InfluxQueryBuilder, build_condition_clause
from .errors import InvalidArgumentError, UnboundPlaceholderError

__all__ = [
    "InfluxQueryBuilder",
    "InvalidArgumentError",
    "UnboundPlaceholderError",
    "build_condition_clause",
]
