"""
Configuration for tryresult.

Settings are read from ``TRYRESULT_*`` environment variables (or a ``.env``
file) and control how the adapters report the faults they capture.
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError


class LogLevel(str, Enum):
    """Logging levels."""
    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Fault reporting settings for the adapters."""

    model_config = SettingsConfigDict(
        env_prefix="TRYRESULT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_faults: bool = Field(default=False, description="Log every fault captured by an adapter")
    fault_log_level: LogLevel = Field(default=LogLevel.DEBUG, description="Level for captured fault records")
    log_tracebacks: bool = Field(default=False, description="Attach the traceback to captured fault records")


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance with validation."""
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(str(e), code="INVALID_CONFIGURATION") from e
