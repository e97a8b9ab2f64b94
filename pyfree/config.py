"""
Package settings read from the environment, and logging setup

Environment variables:
    PYFREE_LOG_LEVEL          level name (DEBUG, info, ...) or number
    PYFREE_STRICT_CONTAINERS  whether By builders check container types
"""
import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Package-wide settings.

    log_level: level for the pyfree logger once configure_logging is called
    strict_containers: whether By builders reject values of the wrong
        container type
    """
    model_config = SettingsConfigDict(
        env_prefix="PYFREE_",
        extra="ignore",
        frozen=True,
    )

    log_level: int = logging.WARNING
    strict_containers: bool = True

    @field_validator("log_level", mode="before")
    @classmethod
    def _level_from_name(cls, value):
        if isinstance(value, str):
            value = value.strip()
            if value.isdigit():
                return int(value)
            level = logging.getLevelName(value.upper())
            if not isinstance(level, int):
                raise ValueError(f"unknown log level {value!r}")
            return level
        return value


settings: Settings = Settings()


def configure_logging(config: Settings | None = None,
                      name: str = "pyfree") -> logging.Logger:
    """
    Attaches a single message-only stream handler to the package logger
    at the configured level.
    """
    config = settings if config is None else config
    logger = logging.getLogger(name)
    logger.setLevel(config.log_level)
    if not any(isinstance(handler, logging.StreamHandler)
               for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(config.log_level)
    logger.propagate = False
    return logger
