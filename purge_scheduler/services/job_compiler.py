"""
Job Compiler - turns a JobDefinition into a pg_cron registration statement.

Pipeline:
1. Reject jobs without retention filters
2. Normalize the cron expression (croniter-validated)
3. Raise limit and each filter's days to the configured minimums
4. Build the WHERE clause and the dollar-quoted purge query
5. Wrap it in ``SELECT cron.schedule(...)``

Compilation is pure: the same definition always yields the same SQL text.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from purge_scheduler.core.config import settings
from purge_scheduler.core.exceptions import MissingFilters
from purge_scheduler.schemas.job import JobDefinition
from purge_scheduler.services import cron_normalizer, query_assembler
from purge_scheduler.services.filter_clause_builder import build_where_clause
from purge_scheduler.services.thresholds import clamp_days, clamp_limit

logger = logging.getLogger(__name__)


@dataclass
class ClampAdjustment:
    """A requested value that was raised to its configured minimum"""
    field: str
    requested: Optional[int]
    applied: int


@dataclass
class CompiledJob:
    """Compiled scheduler statement plus what was changed on the way"""
    job_name: str
    cron_expression: str
    sql: str
    adjustments: List[ClampAdjustment] = field(default_factory=list)


class JobCompiler:
    """Compiles purge job definitions into scheduler statements."""

    def __init__(self, validate_cron_output: Optional[bool] = None):
        self.validate_cron_output = (
            settings.CRON_VALIDATE_OUTPUT if validate_cron_output is None else validate_cron_output
        )

    def compile(self, definition: JobDefinition) -> str:
        """Return the ``SELECT cron.schedule(...)`` statement for a job."""
        return self.compile_job(definition).sql

    def compile_job(self, definition: JobDefinition) -> CompiledJob:
        """
        Compile a job and report the values that were clamped.

        Raises:
            MissingFilters: the definition has no retention filters
            InvalidCronFormat: the cron expression is malformed
            InvalidIdentifier: a name is unsafe to embed in SQL
        """
        if not definition.filters:
            raise MissingFilters()

        cron_expression = cron_normalizer.normalize(
            definition.cron_expression,
            validate=self.validate_cron_output,
        )
        job_name = query_assembler.registered_job_name(definition.database_name, definition.job_name)

        limit = clamp_limit(definition.limit)
        where_clause = build_where_clause(definition.filters)
        purge_query = query_assembler.build_purge_query(
            definition.schema_name,
            definition.table,
            where_clause,
            limit,
        )
        sql = query_assembler.render_schedule_statement(
            job_name,
            definition.database_name,
            cron_expression,
            purge_query,
        )

        adjustments = self.collect_adjustments(definition)
        for adjustment in adjustments:
            logger.warning(
                f"Job {job_name}: {adjustment.field} raised from {adjustment.requested} to {adjustment.applied}"
            )

        return CompiledJob(
            job_name=job_name,
            cron_expression=cron_expression,
            sql=sql,
            adjustments=adjustments,
        )

    def collect_adjustments(self, definition: JobDefinition) -> List[ClampAdjustment]:
        """List the limit/days values that compilation will raise."""
        adjustments: List[ClampAdjustment] = []

        applied_limit = clamp_limit(definition.limit)
        if definition.limit != applied_limit:
            adjustments.append(ClampAdjustment("limit", definition.limit, applied_limit))

        for index, retention_filter in enumerate(definition.filters):
            applied_days = clamp_days(retention_filter.days)
            if retention_filter.days != applied_days:
                adjustments.append(
                    ClampAdjustment(f"filters[{index}].days", retention_filter.days, applied_days)
                )

        return adjustments


# Global instance
job_compiler = JobCompiler()
