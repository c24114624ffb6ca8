"""Fluent InfluxQL query builder."""

from .query_builder import (
    InfluxQueryBuilder,
    InvalidArgumentError,
    UnboundPlaceholderError,
    build_condition_clause,
)

__all__ = [
    "InfluxQueryBuilder",
    "InvalidArgumentError",
    "UnboundPlaceholderError",
    "build_condition_clause",
]
