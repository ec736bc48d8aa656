import logging
from typing import Optional

from sqlalchemy import create_engine, pool
from sqlalchemy.engine import Engine

from purge_scheduler.core.config import settings

logger = logging.getLogger(__name__)


class JobRepository:
    """Submits compiled scheduler statements to the target database"""

    def __init__(self, database_url: Optional[str] = None, engine: Optional[Engine] = None):
        self.database_url = settings.DATABASE_URL if database_url is None else database_url
        self._engine = engine

    @property
    def dry_run(self) -> bool:
        return self._engine is None and not self.database_url

    def _get_engine(self) -> Engine:
        if self._engine is None:
            self._engine = create_engine(self.database_url, poolclass=pool.NullPool)
        return self._engine

    async def submit(self, sql_text: str) -> int:
        """
        Execute a scheduler statement and acknowledge it.

        The statement is sent at driver level so the dollar-quoted body is not
        parsed for bind parameters. Without a configured database the statement
        is only logged.
        """
        if self.dry_run:
            logger.info(f"DATABASE_URL not configured, skipping submit: {sql_text}")
            return 1

        with self._get_engine().begin() as connection:
            connection.exec_driver_sql(sql_text)

        logger.info("Scheduler statement submitted")
        return 1


# Global instance
job_repository = JobRepository()
