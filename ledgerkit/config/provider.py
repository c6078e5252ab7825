"""Configuration provider following Black Box Design principles."""
import os
from typing import Protocol

from pydantic import BaseModel, Field, field_validator

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class SessionConfig(BaseModel):
    """Ledger session configuration."""

    retry_limit: int = Field(default=4, description="Maximum retries per operation", ge=0)
    log_level: str = Field(default="INFO", description="Logging level for ledgerkit loggers")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Accept standard level names in any case."""
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_session_config(self) -> SessionConfig:
        """Get session configuration."""
        ...


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def get_session_config(self) -> SessionConfig:
        """
        Get session configuration from environment variables.

        Raises:
            ValueError: If LEDGER_RETRY_LIMIT is not an integer
            pydantic.ValidationError: If a value is out of range
        """
        return SessionConfig(
            retry_limit=int(os.getenv("LEDGER_RETRY_LIMIT", "4")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
