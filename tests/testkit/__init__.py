"""
Testkit package for Purge Scheduler tests.

Provides request factories for purge job payloads.
"""
from .factories.job_factory import JobRequestFactory

__all__ = [
    "JobRequestFactory",
]
