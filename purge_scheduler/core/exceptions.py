"""
Errors raised while compiling a purge job into a scheduler statement.

All of them are input-validation failures. They derive from ValueError so
callers that already guard service calls with ``except ValueError`` keep
working; the API layer maps them to HTTP 400.
"""


class JobCompilationError(ValueError):
    """Base class for purge job compilation failures."""


class InvalidCronFormat(JobCompilationError):
    """Cron expression has the wrong field count or fails grammar validation."""

    def __init__(self, expression: str, reason: str = ""):
        self.expression = expression
        self.reason = reason
        message = f"Invalid cron expression: '{expression}'"
        if reason:
            message = f"{message}. {reason}"
        super().__init__(message)


class MissingFilters(JobCompilationError):
    """A purge job needs at least one retention filter."""

    def __init__(self, message: str = "At least one retention filter is required"):
        super().__init__(message)


class InvalidIdentifier(JobCompilationError):
    """A caller-supplied name is not safe to embed in generated SQL."""

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}: {value!r}")
