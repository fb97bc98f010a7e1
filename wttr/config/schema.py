"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field

WTTR_URL = "https://wttr.in/?format=j1"
DEFAULT_USER_AGENT = "wttr-cli/1.0.0"


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    url: str = WTTR_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = Field(default=30.0, gt=0.0)


class LoggingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    level: LogLevel = LogLevel.WARNING


class WttrConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: ProviderConfig = ProviderConfig()
    logging: LoggingConfig = LoggingConfig()
