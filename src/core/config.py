"""Application settings (read from the environment) and logging setup."""

import logging
import os

from pydantic import BaseModel, field_validator

ENV_PREFIX = "CHESS_"
TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    automated_opponent: bool = False
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level


def load_settings() -> Settings:
    """Settings with overrides from CHESS_* environment variables"""
    overrides: dict[str, object] = {}
    automated = os.environ.get(f"{ENV_PREFIX}AUTOMATED_OPPONENT")
    if automated is not None:
        overrides["automated_opponent"] = automated.strip().lower() in TRUTHY
    log_level = os.environ.get(f"{ENV_PREFIX}LOG_LEVEL")
    if log_level is not None:
        overrides["log_level"] = log_level
    return Settings(**overrides)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
