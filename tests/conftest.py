"""Shared test fixtures for the query builder."""

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import pytest

# Ensure src/ is on the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from influxql_builder.config import Settings
from influxql_builder.query_builder import InfluxQueryBuilder

# ---------------------------------------------------------------------------
# Protocol fakes
# ---------------------------------------------------------------------------

FIXED_NOW = datetime(2026, 10, 19, 15, 30, 12, tzinfo=timezone.utc)


class FakeQueryExecutor:
    """In-memory fake satisfying the ``QueryExecutor`` protocol.

    Returns canned series or raises a canned error, and records every call.
    """

    def __init__(
        self,
        series: list[dict[str, Any]] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.series: list[dict[str, Any]] = series or []
        self.error: Exception | None = error
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def execute(self, query: str, params: dict[str, Any]) -> dict[str, Any]:
        """Return a result dict mimicking a decoded InfluxDB response."""
        self.calls.append((query, dict(params)))

        if self.error:
            raise self.error

        return {"series": self.series, "row_count": len(self.series)}


# ---------------------------------------------------------------------------
# Pytest fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings() -> Settings:
    """Return a ``Settings`` instance populated with safe test defaults."""
    return Settings(
        default_time_window_days=7,
        validate_placeholders=True,
        escape_string_literals=False,
    )


@pytest.fixture
def fake_executor() -> FakeQueryExecutor:
    """Return an empty ``FakeQueryExecutor`` instance."""
    return FakeQueryExecutor()


@pytest.fixture
def fixed_clock():
    """Return a clock frozen at ``FIXED_NOW``."""
    return lambda: FIXED_NOW


@pytest.fixture
def builder(
    fake_executor: FakeQueryExecutor, test_settings: Settings, fixed_clock
) -> InfluxQueryBuilder:
    """Return a fresh builder on the ``events`` measurement."""
    return InfluxQueryBuilder(
        "events", fake_executor, settings=test_settings, clock=fixed_clock
    )
