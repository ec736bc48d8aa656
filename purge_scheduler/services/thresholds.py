"""Minimum safety thresholds for purge jobs."""
from typing import Optional

from purge_scheduler.core.config import settings


def clamp(value: Optional[int], minimum: int) -> int:
    """Return max(value, minimum). A missing value yields the minimum."""
    if value is None:
        return minimum
    return max(int(value), minimum)


def clamp_days(days: Optional[int]) -> int:
    """Clamp a retention window to DEFAULT_RETENTION_DAYS."""
    return clamp(days, settings.DEFAULT_RETENTION_DAYS)


def clamp_limit(limit: Optional[int]) -> int:
    """Clamp a batch size to DEFAULT_BATCH_LIMIT."""
    return clamp(limit, settings.DEFAULT_BATCH_LIMIT)
