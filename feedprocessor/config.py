"""Configuration settings for the BaseStation feed processor."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger("feedprocessor.config")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def _get_bool(env_var: str, default: bool = False) -> bool:
    """Parse an environment variable into a boolean with a default."""

    value = os.getenv(env_var)
    if value is None:
        return default

    return value.lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Application configuration loaded from environment variables."""

    feedprocessor_env: str = os.getenv("FEEDPROCESSOR_ENV", "local")
    log_level: str = os.getenv("FEEDPROCESSOR_LOG_LEVEL", "INFO")

    # Allow-lists consulted by the decoder; SEL and CLK are BaseStation UI events
    expected_message_types: str = os.getenv(
        "FEEDPROCESSOR_EXPECTED_MESSAGE_TYPES", "AIR,ID,MSG,STA"
    )
    expected_status_types: str = os.getenv(
        "FEEDPROCESSOR_EXPECTED_STATUS_TYPES", "PL,SL,RM,AD,OK"
    )

    # Ingestion batch policy for structurally corrupt lines
    stop_on_error: bool = _get_bool("FEEDPROCESSOR_STOP_ON_ERROR")


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Install the root log handler once for command line use."""

    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT,
    )
    logger.debug("Logging configured at %s", level or settings.log_level)


__all__ = ["settings", "Settings", "configure_logging", "LOG_FORMAT"]
