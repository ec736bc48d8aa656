"""
Filter Clause Builder - retention filters to a SQL WHERE predicate.

Each (column, days) filter becomes a UTC timestamp comparison against NOW();
filters are conjoined with AND.
"""
from typing import Optional, Sequence

from purge_scheduler.core.exceptions import MissingFilters
from purge_scheduler.schemas.job import RetentionFilter
from purge_scheduler.services import identifiers
from purge_scheduler.services.thresholds import clamp_days

TABLE_ALIAS = "om"
CLAUSE_SEPARATOR = " AND "


def build_clause(column: str, days: Optional[int], alias: str = TABLE_ALIAS) -> str:
    """Render the predicate for a single filter, clamping its retention window."""
    column = identifiers.sql_identifier("column", column)
    days = clamp_days(days)
    return f"{alias}.\"{column}\" AT TIME ZONE 'UTC' < NOW() AT TIME ZONE 'UTC' - INTERVAL '{days} days'"


def build_where_clause(filters: Optional[Sequence[RetentionFilter]], alias: str = TABLE_ALIAS) -> str:
    """
    Conjoin one predicate per filter, preserving filter order.

    Raises:
        MissingFilters: filters is None or empty
        InvalidIdentifier: a column name is not a safe SQL identifier
    """
    if not filters:
        raise MissingFilters()

    return CLAUSE_SEPARATOR.join(
        build_clause(f.column, f.days, alias=alias) for f in filters
    )
