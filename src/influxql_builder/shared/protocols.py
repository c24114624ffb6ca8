"""Protocol interfaces for I/O boundaries.

These protocols enable dependency injection for testability.
Production implementations wrap an InfluxDB client; test fakes
return canned data with zero network access.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class QueryExecutor(Protocol):
    """Executes a finalized query template against the database.

    Implementations substitute every ``%{name}`` token with the quoted
    form of ``params[name]`` before sending the query.
    """

    def execute(self, query: str, params: dict[str, Any]) -> Any:
        """Execute a query template.

        Args:
            query: Finalized template with ``%{name}`` placeholder tokens.
            params: Values for every placeholder in *query*.

        Returns:
            Whatever result object the underlying client produces.
        """
        ...
