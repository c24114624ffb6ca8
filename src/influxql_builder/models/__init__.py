"""
Shared models for the query builder.

All models are re-exported here.
"""

from .conditions import ConditionProperty

__all__ = [
    "ConditionProperty",
]
