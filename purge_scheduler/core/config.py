from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # Database (empty means dry-run: SQL is logged, not executed)
    DATABASE_URL: str = ""

    # API Configuration
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "Purge Scheduler"
    BACKEND_CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Purge job safety thresholds
    DEFAULT_RETENTION_DAYS: int = 60
    DEFAULT_BATCH_LIMIT: int = 100

    # Re-validate normalized cron expressions before embedding them
    CRON_VALIDATE_OUTPUT: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
