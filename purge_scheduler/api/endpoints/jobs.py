"""
Purge Job API Endpoints

Compiles purge job requests into pg_cron registration statements and submits
them to the target database.

Related:
- Service: purge_scheduler/services/job_service.py
- Compiler: purge_scheduler/services/job_compiler.py
- Config: purge_scheduler/core/config.py (DEFAULT_RETENTION_DAYS, DEFAULT_BATCH_LIMIT)
"""

from fastapi import APIRouter, HTTPException, status, Query

from purge_scheduler.core.exceptions import JobCompilationError
from purge_scheduler.schemas.job import CreateJobRequest, CreateJobResponse, JobNameResponse
from purge_scheduler.services.job_service import create_job_service
from purge_scheduler.services.query_assembler import registered_job_name
import logging

router = APIRouter()
logger = logging.getLogger(__name__)


def _bad_request(exc: JobCompilationError) -> HTTPException:
    logger.info(f"Rejected purge job request: {exc}")
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=str(exc)
    )


@router.post("", response_model=CreateJobResponse)
async def create_job(request: CreateJobRequest):
    """
    Compile a purge job and register it with the scheduler.

    Limit and retention days below the configured minimums are raised; the
    response lists every such adjustment.
    """
    try:
        return await create_job_service.handle(request)
    except JobCompilationError as e:
        raise _bad_request(e)


@router.post("/preview", response_model=CreateJobResponse)
async def preview_job(request: CreateJobRequest):
    """Compile a purge job without submitting it."""
    try:
        return create_job_service.preview(request)
    except JobCompilationError as e:
        raise _bad_request(e)


@router.get("/name", response_model=JobNameResponse)
async def get_job_name(
    database_name: str = Query(..., min_length=1),
    job_name: str = Query(..., min_length=1),
):
    """Name a job is registered under for a database/job pair."""
    try:
        return JobNameResponse(job_name=registered_job_name(database_name, job_name))
    except JobCompilationError as e:
        raise _bad_request(e)
