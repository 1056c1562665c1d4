"""
Application settings loaded from the environment.

Values come from process environment variables, optionally seeded from a .env
file in the working directory.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from adapters.cryptocompare import API_ROOT
from models.exceptions import ConfigurationError

# Load environment variables from .env file
load_dotenv()

DB_FILE_NAME = "gainz.db"
EXCHANGE_CURRENCY_DEFAULT = "USD"


@dataclass
class Settings:
    """Runtime configuration for the tracker."""

    api_root: str = API_ROOT
    api_key: Optional[str] = None
    database_url: str = f"sqlite:///{DB_FILE_NAME}"
    default_currency: str = EXCHANGE_CURRENCY_DEFAULT
    request_timeout: int = 30
    log_level: str = "WARNING"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e


def _log_level_env(name: str, default: str) -> str:
    level = (os.getenv(name) or default).upper()
    # getLevelName maps known names to their numeric level
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(f"{name} must be a logging level name, got {level!r}")
    return level


def load_settings() -> Settings:
    """Build Settings from environment variables, falling back to defaults."""
    request_timeout = _int_env("GAINZ_REQUEST_TIMEOUT", 30)
    if request_timeout <= 0:
        raise ConfigurationError(
            f"GAINZ_REQUEST_TIMEOUT must be a positive number of seconds, got {request_timeout}"
        )

    return Settings(
        api_root=os.getenv("CRYPTOCOMPARE_API_ROOT", API_ROOT),
        api_key=os.getenv("CRYPTOCOMPARE_API_KEY") or None,
        database_url=os.getenv("GAINZ_DATABASE_URL", f"sqlite:///{DB_FILE_NAME}"),
        default_currency=os.getenv("GAINZ_DEFAULT_CURRENCY", EXCHANGE_CURRENCY_DEFAULT),
        request_timeout=request_timeout,
        log_level=_log_level_env("GAINZ_LOG_LEVEL", "WARNING"),
    )
