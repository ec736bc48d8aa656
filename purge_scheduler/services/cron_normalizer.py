"""
Cron Normalizer - structural parsing and formatting of cron expressions.

Accepts the standard 5-field form (minute hour day-of-month month day-of-week)
and the 6-field form with a leading seconds field. Grammar checks are delegated
to croniter; this module only owns the field layout and default filling.
"""
import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from croniter import croniter

from purge_scheduler.core.exceptions import InvalidCronFormat

logger = logging.getLogger(__name__)

STANDARD_FIELD_COUNT = 5
WITH_SECONDS_FIELD_COUNT = 6

DEFAULT_SECOND = "0"
WILDCARD = "*"


@dataclass
class CronSchedule:
    """Structural fields of a cron expression. None means absent."""
    second: Optional[str] = DEFAULT_SECOND
    minute: Optional[str] = WILDCARD
    hour: Optional[str] = WILDCARD
    day_of_month: Optional[str] = WILDCARD
    month: Optional[str] = WILDCARD
    day_of_week: Optional[str] = WILDCARD


def _is_valid(expression: str) -> bool:
    try:
        return croniter.is_valid(expression, second_at_beginning=True)
    except (ValueError, TypeError) as e:
        logger.debug(f"croniter rejected '{expression}': {e}")
        return False


def _field_or_default(value: Optional[str], default: str) -> str:
    if value is None or not str(value).strip():
        return default
    return str(value).strip()


def parse(expression: str) -> CronSchedule:
    """
    Parse a cron expression into its structural fields.

    The whole expression is validated by croniter before it is split, so a
    malformed token is rejected before the field count is looked at.

    Raises:
        InvalidCronFormat: wrong field count or rejected by the grammar check
    """
    if not isinstance(expression, str) or not expression.strip():
        raise InvalidCronFormat(str(expression), "Cron expression is empty")

    if not _is_valid(expression):
        raise InvalidCronFormat(expression, "Expression rejected by cron grammar validation")

    parts = expression.split()

    if len(parts) == STANDARD_FIELD_COUNT:
        minute, hour, day_of_month, month, day_of_week = parts
        return CronSchedule(
            minute=minute,
            hour=hour,
            day_of_month=day_of_month,
            month=month,
            day_of_week=day_of_week,
        )

    if len(parts) == WITH_SECONDS_FIELD_COUNT:
        second, minute, hour, day_of_month, month, day_of_week = parts
        return CronSchedule(
            second=second,
            minute=minute,
            hour=hour,
            day_of_month=day_of_month,
            month=month,
            day_of_week=day_of_week,
        )

    raise InvalidCronFormat(
        expression,
        f"Expected {STANDARD_FIELD_COUNT} or {WITH_SECONDS_FIELD_COUNT} space-separated fields, got {len(parts)}",
    )


def format(schedule: CronSchedule, include_seconds: bool = False, validate: bool = True) -> str:
    """
    Render a CronSchedule as a space-joined cron string.

    Blank fields become "*"; a blank second becomes "0" when seconds are
    included and is dropped otherwise. With ``validate`` the rendered string is
    checked again and a failure names the rendered string.

    Raises:
        InvalidCronFormat: the rendered expression fails validation
    """
    if schedule is None:
        raise InvalidCronFormat("None", "Cron schedule is required")

    parts: List[str] = []
    if include_seconds:
        parts.append(_field_or_default(schedule.second, DEFAULT_SECOND))

    parts.extend([
        _field_or_default(schedule.minute, WILDCARD),
        _field_or_default(schedule.hour, WILDCARD),
        _field_or_default(schedule.day_of_month, WILDCARD),
        _field_or_default(schedule.month, WILDCARD),
        _field_or_default(schedule.day_of_week, WILDCARD),
    ])

    cron_string = " ".join(parts)

    # A token holding whitespace would shift every following field
    expected_count = WITH_SECONDS_FIELD_COUNT if include_seconds else STANDARD_FIELD_COUNT
    if len(cron_string.split()) != expected_count:
        raise InvalidCronFormat(
            cron_string,
            f"Each schedule field must be a single token, expected {expected_count} fields",
        )

    if validate and not _is_valid(cron_string):
        raise InvalidCronFormat(
            cron_string,
            "Schedule fields combine into an invalid expression",
        )

    return cron_string


def normalize(expression: str, validate: bool = True) -> str:
    """Parse and re-format an expression, keeping its original field count."""
    include_seconds = len(str(expression).split()) == WITH_SECONDS_FIELD_COUNT
    return format(parse(expression), include_seconds=include_seconds, validate=validate)


def from_fields(
    second: Any = None,
    minute: Any = None,
    hour: Any = None,
    day_of_month: Any = None,
    month: Any = None,
    day_of_week: Any = None,
) -> CronSchedule:
    """Build a CronSchedule from optional int/str values (None stays absent)."""

    def as_token(value: Any) -> Optional[str]:
        return None if value is None else str(value)

    return CronSchedule(
        second=as_token(second),
        minute=as_token(minute),
        hour=as_token(hour),
        day_of_month=as_token(day_of_month),
        month=as_token(month),
        day_of_week=as_token(day_of_week),
    )
