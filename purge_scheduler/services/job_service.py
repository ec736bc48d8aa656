"""
Create Job Service - compiles purge job requests and submits the result.

Usage:
    response = await create_job_service.handle(request)    # compile + submit
    response = create_job_service.preview(request)         # compile only
"""
import logging
from typing import Optional

from purge_scheduler.core.exceptions import InvalidCronFormat
from purge_scheduler.schemas.job import (
    ClampAdjustmentResponse,
    CreateJobRequest,
    CreateJobResponse,
    JobDefinition,
)
from purge_scheduler.services import cron_normalizer
from purge_scheduler.services.job_compiler import CompiledJob, JobCompiler, job_compiler
from purge_scheduler.services.job_repository import JobRepository, job_repository

logger = logging.getLogger(__name__)


class CreateJobService:
    """Service wiring the job compiler to the job repository."""

    def __init__(
        self,
        compiler: Optional[JobCompiler] = None,
        repository: Optional[JobRepository] = None,
    ):
        self.compiler = compiler or job_compiler
        self.repository = repository or job_repository

    def resolve_cron_expression(self, request: CreateJobRequest) -> str:
        """Use cron_expression when given, otherwise render the structured schedule."""
        if request.cron_expression is not None:
            return request.cron_expression

        if request.schedule is None:
            raise InvalidCronFormat("", "Either cron_expression or schedule is required")

        schedule = request.schedule
        cron_schedule = cron_normalizer.from_fields(
            second=schedule.second,
            minute=schedule.minute,
            hour=schedule.hour,
            day_of_month=schedule.day_of_month,
            month=schedule.month,
            day_of_week=schedule.day_of_week,
        )
        return cron_normalizer.format(
            cron_schedule,
            include_seconds=schedule.second is not None,
            validate=self.compiler.validate_cron_output,
        )

    def to_definition(self, request: CreateJobRequest) -> JobDefinition:
        return JobDefinition(
            job_name=request.job_name,
            cron_expression=self.resolve_cron_expression(request),
            database_name=request.database_name,
            schema_name=request.schema_name,
            table=request.table,
            limit=request.limit,
            filters=tuple(request.filters or ()),
        )

    def _to_response(self, compiled: CompiledJob, submitted: bool) -> CreateJobResponse:
        return CreateJobResponse(
            message=compiled.sql,
            job_name=compiled.job_name,
            cron_expression=compiled.cron_expression,
            adjustments=[
                ClampAdjustmentResponse(
                    field=a.field,
                    requested=a.requested,
                    applied=a.applied,
                )
                for a in compiled.adjustments
            ],
            submitted=submitted,
        )

    def preview(self, request: CreateJobRequest) -> CreateJobResponse:
        """Compile a request without submitting it."""
        compiled = self.compiler.compile_job(self.to_definition(request))
        return self._to_response(compiled, submitted=False)

    async def handle(self, request: CreateJobRequest) -> CreateJobResponse:
        """Compile a request and submit the statement exactly once."""
        compiled = self.compiler.compile_job(self.to_definition(request))
        logger.info(f"Submitting purge job {compiled.job_name} ({compiled.cron_expression})")
        await self.repository.submit(compiled.sql)
        return self._to_response(compiled, submitted=True)


# Global singleton instance
create_job_service = CreateJobService()
