"""
Allow-list checks for names interpolated into generated SQL.

SQL identifiers (schema, table, column) are restricted to unquoted-safe
PostgreSQL names. Job and database names end up inside single-quoted
literals, so hyphens are also accepted there.
"""
import re

from purge_scheduler.core.exceptions import InvalidIdentifier

# PostgreSQL truncates identifiers at NAMEDATALEN - 1
MAX_IDENTIFIER_LENGTH = 63

SQL_IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
NAME_TOKEN_PATTERN = re.compile(r"[A-Za-z0-9_][A-Za-z0-9_-]*")


def _check(field: str, value: str, pattern: "re.Pattern[str]") -> str:
    if not isinstance(value, str) or len(value) > MAX_IDENTIFIER_LENGTH or not pattern.fullmatch(value):
        raise InvalidIdentifier(field, value)
    return value


def sql_identifier(field: str, value: str) -> str:
    """Validate a schema, table or column name and return it unchanged."""
    return _check(field, value, SQL_IDENTIFIER_PATTERN)


def name_token(field: str, value: str) -> str:
    """Validate a job or database name and return it unchanged."""
    return _check(field, value, NAME_TOKEN_PATTERN)
