"""Simple configuration loader for tracer defaults."""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field


class Settings:
    """Runtime configuration derived from environment variables."""

    def __init__(self) -> None:
        # Defaults applied to tracers built without an explicit config
        self.threshold: float = float(os.getenv("METHOD_TRACER_THRESHOLD", "0.001"))
        self.auto_output: bool = os.getenv("METHOD_TRACER_AUTO_OUTPUT", "false").lower() in {
            "1",
            "true",
            "yes",
            "on",
        }

        # Logging
        self.log_format: str = os.getenv("METHOD_TRACER_LOG_FORMAT", "plain").lower()
        self.log_level: str = os.getenv("METHOD_TRACER_LOG_LEVEL", "INFO").upper()

    def dict(self) -> dict[str, object]:
        return self.__dict__.copy()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""

    load_dotenv()
    return Settings()


class TracerConfig(BaseModel):
    """Per-tracer settings, fixed once the tracer is built."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    threshold: float = Field(
        default=0.001,
        ge=0.0,
        description="Minimum duration in seconds a call must take to be recorded.",
    )
    auto_output: bool = Field(
        default=False,
        description="Emit a log line through the tracer sink for every recorded call.",
    )

    @classmethod
    def from_options(cls, **options: Any) -> "TracerConfig":
        """Overlay keyword options on the environment defaults."""

        settings = get_settings()
        values: dict[str, Any] = {
            "threshold": settings.threshold,
            "auto_output": settings.auto_output,
        }
        values.update(options)
        return cls(**values)


__all__ = ["Settings", "TracerConfig", "get_settings"]
