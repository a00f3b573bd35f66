"""Application configuration and logging setup."""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from pathlib import Path
from typing import Any, Callable, Literal

import structlog
from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
PROJECT_ROOT = Path(__file__).resolve().parents[3]


class Settings(BaseSettings):
    """Settings read from ``MERCH_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="MERCH_", env_file=".env", env_file_encoding="utf-8"
    )

    data_dir: Path = PROJECT_ROOT / "data"
    environment: Literal["development", "production", "test"] = "development"

    @property
    def merchandise_file(self) -> Path:
        return self.data_dir / "merchandise.json"


def configure_logging(environment: str = "development") -> None:
    """Route handler events through structlog onto stderr.

    Accepted and rejected commands are logged at INFO and WARNING.
    Production renders one JSON object per line; other environments use
    the console renderer and only ``test`` hides the INFO events.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=logging.WARNING if environment == "test" else logging.INFO,
    )

    renderer: Callable[..., Any] = (
        structlog.processors.JSONRenderer(ensure_ascii=False)
        if environment == "production"
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
