"""
Pytest fixtures for Purge Scheduler tests.
"""
import pytest
from typing import AsyncGenerator, Generator, Any, Dict
from unittest.mock import AsyncMock

from fastapi import FastAPI
from fastapi.testclient import TestClient
from httpx import AsyncClient, ASGITransport

# Import the app
import sys
import os

# Add the parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from purge_scheduler.main import app
from purge_scheduler.services.job_compiler import JobCompiler
from purge_scheduler.services.job_repository import JobRepository
from tests.testkit import JobRequestFactory


# ============ Fixtures ============

# Statement from the reference integration scenario
SCENARIO_A_SQL = (
    "SELECT cron.schedule('internal_core-expurgo-job', '*/5 * * * *', "
    "$$ with om_cte as (select om.\"Id\" from dbo.\"message_outbox\" om "
    "WHERE om.\"coluna_1\" AT TIME ZONE 'UTC' < NOW() AT TIME ZONE 'UTC' - INTERVAL '95 days' LIMIT 110) "
    "delete from dbo.\"message_outbox\" om where om.\"Id\" in (select \"Id\" from om_cte);$$, "
    "'internal_core');"
)


@pytest.fixture
def scenario_a_sql() -> str:
    return SCENARIO_A_SQL


@pytest.fixture
def scenario_a_payload() -> Dict[str, Any]:
    """Request payload that compiles to SCENARIO_A_SQL."""
    return {
        "job_name": "expurgo",
        "cron_expression": "*/5 * * * *",
        "database_name": "internal_core",
        "schema": "dbo",
        "table": "message_outbox",
        "limit": 110,
        "filters": [{"column": "coluna_1", "days": 95}],
    }


@pytest.fixture
def job_factory() -> JobRequestFactory:
    """Factory for purge job payloads."""
    return JobRequestFactory()


@pytest.fixture
def compiler() -> JobCompiler:
    """Compiler with output re-validation enabled."""
    return JobCompiler(validate_cron_output=True)


@pytest.fixture
def dry_run_repository() -> JobRepository:
    """Repository with no database configured."""
    return JobRepository(database_url="")


@pytest.fixture
def mock_job_repository():
    """Patch the repository used by the job service singleton."""
    from purge_scheduler.services.job_service import create_job_service

    original = create_job_service.repository
    mock = AsyncMock(spec=JobRepository)
    mock.submit = AsyncMock(return_value=1)
    create_job_service.repository = mock

    yield mock

    create_job_service.repository = original


# ============ App and Client Fixtures ============


@pytest.fixture
def test_app(mock_job_repository) -> FastAPI:
    """App with the repository replaced by a mock."""
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(test_app: FastAPI) -> Generator[TestClient, None, None]:
    """Create a synchronous test client."""
    with TestClient(test_app) as c:
        yield c


@pytest.fixture
async def async_client(test_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client for async tests."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
