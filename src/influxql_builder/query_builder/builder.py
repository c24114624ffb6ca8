"""InfluxQL query builder.

Accumulates a source measurement, condition clauses and shaping options,
then renders a ``select`` template whose values are ``%{name}`` tokens
bound through a params map. Substitution of those tokens is the job of
the injected ``QueryExecutor``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from datetime import datetime
from typing import Any

from influxql_builder.config import Settings, get_settings
from influxql_builder.models import ConditionProperty
from influxql_builder.shared.placeholders import Placeholder, find_unbound_placeholders
from influxql_builder.shared.protocols import QueryExecutor
from influxql_builder.shared.time_window import default_time_window, utc_now

from .errors import InvalidArgumentError, UnboundPlaceholderError

logger = logging.getLogger(__name__)

# Comparisons against this key take bare literals such as ``123s``
TIME_KEY = "time"

LIMIT_PARAM = "limit"
OFFSET_PARAM = "offset"
GROUP_BY_PARAM = "group_by"


def _escape_literal(value: str) -> str:
    return value.replace("\\", "\\\\").replace("'", "\\'")


def _render_value(key: str, value: Any, escape: bool = False) -> str:
    """Render a condition operand.

    InfluxQL wants different quoting depending on the operand::

        where time > 123123123s               (no quotes)
        where controller_action = 'sessions'  (single quotes)

    Strings are single-quoted unless compared against ``time``. Numbers
    and ``Placeholder`` tokens are emitted bare.
    """
    if isinstance(value, str) and key != TIME_KEY:
        if escape:
            value = _escape_literal(value)
        elif "'" in value:
            logger.warning("Unescaped single quote in value for %s: %r", key, value)
        return f"'{value}'"
    return str(value)


def build_condition_clause(
    properties: Iterable[ConditionProperty | Mapping[str, Any]],
    operator: str = "AND",
    escape: bool = False,
) -> str:
    """Render condition descriptors into one boolean expression.

    Args:
        properties: Descriptors with ``key``, ``operator`` and ``value``.
        operator: Boolean operator joining the rendered comparisons.
        escape: Backslash-escape quotes inside quoted string operands.

    Returns:
        The comparisons joined with ``" <operator> "``.
    """
    parts: list[str] = []
    for prop in properties:
        if not isinstance(prop, ConditionProperty):
            prop = ConditionProperty.model_validate(prop)
        parts.append(f"{prop.key} {prop.operator} {_render_value(prop.key, prop.value, escape)}")
    return f" {operator} ".join(parts)


def _is_absent(value: Any) -> bool:
    # 0 and "" are real values; only None and False mean "not given"
    return value is None or value is False


def _coerce_int(name: str, value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"Cannot use {value!r} as {name}: not an integer") from exc


class InfluxQueryBuilder:
    """
    Fluent builder for a single InfluxQL ``select`` statement.

    Every mutator changes the builder in place and returns it, so calls
    chain. Mutators given ``None`` or ``False`` leave the builder untouched.

    Usage:
        result = (
            InfluxQueryBuilder("requests", executor)
            .with_time_filters()
            .filter("action", "controller_action", "=", "sessions#create")
            .with_limit(50)
            .resolve()
        )
    """

    def __init__(
        self,
        source: str,
        executor: QueryExecutor,
        conditions: Sequence[str] | None = None,
        params: Mapping[str, Any] | None = None,
        select_columns: Sequence[str] | None = None,
        *,
        settings: Settings | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        """
        Initialize the builder.

        Args:
            source: Measurement to select from. Embedded verbatim.
            executor: Collaborator that runs the finalized template.
            conditions: Pre-rendered condition clauses to start from.
            params: Placeholder values to start from.
            select_columns: Column expressions to project. Defaults to ``*``.
            settings: Overrides ``get_settings()``.
            clock: Returns the current instant for default time windows.
        """
        self.source = source
        self.executor = executor
        self.conditions: list[str] = list(conditions) if conditions else []
        self.params: dict[str, Any] = dict(params) if params else {}
        self.select_columns: list[str] = list(select_columns) if select_columns else ["*"]
        self.settings = settings or get_settings()
        self._clock = clock or utc_now

    # -- Rendering ---------------------------------------------------------

    def render(self) -> str:
        """Return the finalized template, terminated with ``" ;"``."""
        return f"{self.render_subquery()} ;"

    def render_subquery(self) -> str:
        """Return the statement without its terminator.

        Raises:
            UnboundPlaceholderError: If placeholder validation is enabled
                and a token has no entry in ``params``.
        """
        query = f"select {','.join(self.select_columns)} from {self.source}"
        if self.conditions:
            query += f" where {' AND '.join(self.conditions)}"
        if GROUP_BY_PARAM in self.params:
            query += f" GROUP BY {Placeholder(GROUP_BY_PARAM)}"
        if LIMIT_PARAM in self.params:
            query += f" LIMIT {Placeholder(LIMIT_PARAM)}"
        if OFFSET_PARAM in self.params:
            query += f" OFFSET {Placeholder(OFFSET_PARAM)}"

        if self.settings.validate_placeholders:
            missing = find_unbound_placeholders(query, self.params)
            if missing:
                raise UnboundPlaceholderError(missing)

        logger.debug("Rendered query: %s", query)
        return query

    def resolve(self) -> Any:
        """Render the template and run it through the executor.

        Returns:
            The executor's result, unchanged.
        """
        template = self.render()
        logger.info(
            "Resolving query on %s with %d condition(s) and %d param(s)",
            self.source,
            len(self.conditions),
            len(self.params),
        )
        try:
            return self.executor.execute(template, self.params)
        except Exception:
            logger.exception("Query execution failed on %s", self.source)
            raise

    # -- Shaping -----------------------------------------------------------

    def with_limit(self, limit: Any) -> InfluxQueryBuilder:
        """Bind ``limit``; a limit of zero is rejected.

        Raises:
            InvalidArgumentError: If *limit* is zero or not integer-like.
        """
        if _is_absent(limit):
            return self
        limit = _coerce_int(LIMIT_PARAM, limit)
        if limit == 0:
            raise InvalidArgumentError("Cannot add a limit of 0")
        self.params[LIMIT_PARAM] = limit
        return self

    def with_offset(self, offset: Any) -> InfluxQueryBuilder:
        """Bind ``offset`` after integer coercion."""
        if _is_absent(offset):
            return self
        self.params[OFFSET_PARAM] = _coerce_int(OFFSET_PARAM, offset)
        return self

    def with_group_by(self, group_by: Any) -> InfluxQueryBuilder:
        """Bind ``group_by`` verbatim (e.g. ``"time(1h)"`` or ``"host"``)."""
        if _is_absent(group_by):
            return self
        self.params[GROUP_BY_PARAM] = group_by
        return self

    # -- Conditions --------------------------------------------------------

    def add_conditions(
        self,
        properties: Iterable[ConditionProperty | Mapping[str, Any]],
        operator: str = "AND",
        wrap_in_parens: bool = False,
    ) -> InfluxQueryBuilder:
        """Append one clause built from *properties*.

        Args:
            properties: Condition descriptors, rendered in order.
            operator: Boolean operator joining them.
            wrap_in_parens: Parenthesize the clause so an ``OR`` group
                keeps its precedence inside the top-level ``AND``.
        """
        clause = build_condition_clause(
            properties,
            operator=operator,
            escape=self.settings.escape_string_literals,
        )
        if not clause:
            return self
        if wrap_in_parens:
            clause = f"({clause})"
        self.conditions.append(clause)
        logger.debug("Added condition on %s: %s", self.source, clause)
        return self

    def add_where_in_filter(
        self, param_key_prefix: str, column_name: str, values: Sequence[Any]
    ) -> InfluxQueryBuilder:
        """Match *column_name* against any of *values*.

        Each value is bound as ``<prefix>_<index>`` and the equalities are
        OR-ed inside parentheses.
        """
        if not values:
            return self
        properties: list[ConditionProperty] = []
        for idx, value in enumerate(values):
            param_key = f"{param_key_prefix}_{idx}"
            self.params[param_key] = value
            properties.append(
                ConditionProperty(key=column_name, operator="=", value=Placeholder(param_key))
            )
        return self.add_conditions(properties, operator="OR", wrap_in_parens=True)

    # Most of the filters have the same structure.
    def filter(
        self, param_name: str, column_name: str, operator: str, value: Any
    ) -> InfluxQueryBuilder:
        """Bind *value* as *param_name* and compare *column_name* against it."""
        if _is_absent(value):
            return self
        self.params[param_name] = value
        return self.add_conditions(
            [ConditionProperty(key=column_name, operator=operator, value=Placeholder(param_name))]
        )

    def with_time_filters(
        self, start_date: int | None = None, end_date: int | None = None
    ) -> InfluxQueryBuilder:
        """Restrict ``time`` to ``[start_date, end_date]`` in epoch seconds.

        Missing bounds default to a trailing window of
        ``settings.default_time_window_days`` whole UTC days ending with
        the current day.
        """
        if start_date is None or end_date is None:
            default_start, default_end = default_time_window(
                self._clock(), self.settings.default_time_window_days
            )
            if start_date is None:
                start_date = default_start
            if end_date is None:
                end_date = default_end
        self.params.update(start_date=start_date, end_date=end_date)
        return self.add_conditions(
            [
                ConditionProperty(key=TIME_KEY, operator=">=", value=Placeholder("start_date", "s")),
                ConditionProperty(key=TIME_KEY, operator="<=", value=Placeholder("end_date", "s")),
            ],
            operator="AND",
        )
