# lotto_service/config.py
from functools import lru_cache

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings

from .adapters.constants import LOTTO_HUB_USER_AGENT


class Settings(BaseSettings):
    # --- API Gateway Configuration ---
    UVICORN_HOST: str = "127.0.0.1"
    UVICORN_PORT: int = 8000
    UVICORN_RELOAD: bool = False

    # --- Upstream Fetching ---
    USER_AGENT: str = LOTTO_HUB_USER_AGENT
    FETCH_TIMEOUT_SECONDS: float = Field(10.0, gt=0)
    FETCH_RETRY_ATTEMPTS: int = Field(1, ge=1)  # 1 == a single attempt, no retries
    ADAPTER_TIMEOUT_SECONDS: float = Field(20.0, gt=0)
    MAX_CONCURRENT_REQUESTS: int = Field(6, ge=1)
    HTTP_POOL_CONNECTIONS: int = 20
    HTTP_MAX_KEEPALIVE: int = 10

    # --- HTTP Response Policy ---
    CACHE_MAX_AGE_SECONDS: int = Field(300, ge=60)
    RATE_LIMIT: str = "120/minute"

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    model_config = {"env_file": ".env", "case_sensitive": True, "extra": "ignore"}


@lru_cache()
def get_settings() -> Settings:
    """Loads settings once per process."""
    settings = Settings()
    structlog.get_logger(__name__).debug(
        "settings_loaded",
        fetch_timeout=settings.FETCH_TIMEOUT_SECONDS,
        retry_attempts=settings.FETCH_RETRY_ATTEMPTS,
    )
    return settings
