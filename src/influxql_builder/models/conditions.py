"""
Condition descriptor models.

A condition descriptor is the ``{key, operator, value}`` triple the
builder renders into a single boolean expression such as ``host = 'a'``.
"""

from typing import Any

from pydantic import BaseModel, Field


class ConditionProperty(BaseModel):
    """One comparison inside a condition clause."""

    key: str = Field(description="Column, tag or field name (e.g., 'host' or 'time')")
    operator: str = Field(description="Comparison operator: '=', '!=', '>=', '=~', etc.")
    value: Any = Field(
        default=None,
        description="Literal operand, or a Placeholder token bound through the params map",
    )
