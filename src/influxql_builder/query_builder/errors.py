"""Errors raised while configuring or rendering a query."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """A mutator received a value it cannot use (e.g. a limit of zero)."""


class UnboundPlaceholderError(ValueError):
    """A rendered template references placeholders missing from ``params``.

    Args:
        missing: Names of the unbound placeholders, in template order.
    """

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        names = ", ".join(f"%{{{name}}}" for name in missing)
        super().__init__(f"Template references unbound placeholder(s): {names}")
