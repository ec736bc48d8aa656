"""Purge job schemas: request/response payloads and the compiled job definition."""
from pydantic import BaseModel, Field
from typing import Optional, List, Tuple, Union


class RetentionFilter(BaseModel):
    """Delete rows whose ``column`` timestamp is older than ``days`` days."""
    column: str = Field(..., min_length=1)
    days: Optional[int] = None

    model_config = {"frozen": True}


class JobDefinition(BaseModel):
    """Immutable input to the job compiler."""
    job_name: str = Field(..., min_length=1)
    cron_expression: str
    database_name: str = Field(..., min_length=1)
    schema_name: str = Field(..., alias="schema")
    table: str
    limit: Optional[int] = None
    filters: Tuple[RetentionFilter, ...] = ()

    model_config = {"frozen": True, "populate_by_name": True}


class CronScheduleRequest(BaseModel):
    """Structured schedule; omitted fields fall back to "*" (second to "0")."""
    second: Optional[Union[int, str]] = None
    minute: Optional[Union[int, str]] = None
    hour: Optional[Union[int, str]] = None
    day_of_month: Optional[Union[int, str]] = None
    month: Optional[Union[int, str]] = None
    day_of_week: Optional[Union[int, str]] = None


class CreateJobRequest(BaseModel):
    """Request to register a periodic purge job."""
    job_name: str = Field(..., min_length=1, description="Job name, registered as <database>-<job>-job")
    cron_expression: Optional[str] = Field(
        None,
        description="5-field cron, or 6-field with leading seconds"
    )
    schedule: Optional[CronScheduleRequest] = Field(
        None,
        description="Structured alternative to cron_expression"
    )
    database_name: str = Field(..., min_length=1)
    schema_name: str = Field("public", alias="schema")
    table: str = Field(..., min_length=1)
    limit: Optional[int] = Field(
        None,
        description="Rows deleted per run; raised to the configured minimum"
    )
    filters: Optional[List[RetentionFilter]] = Field(
        None,
        description="Retention filters, conjoined with AND"
    )

    model_config = {"populate_by_name": True}


class ClampAdjustmentResponse(BaseModel):
    """A requested value that was raised to its configured minimum."""
    field: str
    requested: Optional[int] = None
    applied: int


class CreateJobResponse(BaseModel):
    """Compiled scheduler statement."""
    message: str = Field(..., description="SQL statement registering the job")
    job_name: str
    cron_expression: str
    adjustments: List[ClampAdjustmentResponse] = Field(default_factory=list)
    submitted: bool = False


class JobNameResponse(BaseModel):
    job_name: str
