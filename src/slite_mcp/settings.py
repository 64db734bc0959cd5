"""Application settings (env/.env)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import AnyHttpUrl, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Settings for the MCP server and the Slite API."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    slite_api_key: str = Field(alias="SLITE_API_KEY", min_length=1)
    slite_base_url: AnyHttpUrl = Field(
        default="https://api.slite.com/v1",
        alias="SLITE_BASE_URL",
    )

    http_timeout_seconds: float = Field(
        default=15.0,
        alias="HTTP_TIMEOUT_SECONDS",
        gt=0,
    )
    log_level: LogLevel = Field(
        default="INFO",
        alias="LOG_LEVEL",
    )


@dataclass(frozen=True, slots=True)
class StartupCheck:
    """Outcome of loading settings; exactly one of the fields is set."""

    settings: Settings | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.settings is not None


def _describe(exc: ValidationError) -> str:
    problems = []
    for err in exc.errors():
        name = ".".join(str(part) for part in err["loc"]) or "settings"
        if err["type"] == "missing":
            problems.append(f"{name} is not set")
        else:
            problems.append(f"{name}: {err['msg']}")
    return "; ".join(problems)


def check_startup() -> StartupCheck:
    """Load settings without terminating the process on failure."""
    try:
        return StartupCheck(settings=Settings())
    except ValidationError as exc:
        return StartupCheck(error=_describe(exc))
