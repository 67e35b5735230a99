from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

import httpx
from dotenv import find_dotenv, load_dotenv

from .exceptions import ConfigError

__version__ = "0.1.0"

DEFAULT_TIMEOUT_SEC = 10.0
DEFAULT_USER_AGENT = f"media-client/{__version__}"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class MediaSettings:
    """
    Settings for talking to the media API.

    Environment variables (a ``.env`` file in the working directory is loaded first):
    - MEDIA_HOST: API host, optionally with port (required)
    - MEDIA_TIMEOUT: request timeout in seconds (default 10)
    - MEDIA_USER_AGENT: User-Agent header
    - MEDIA_LOG_LEVEL: level name for configure_logging (default WARNING)
    """
    host: str
    timeout_sec: float = DEFAULT_TIMEOUT_SEC
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, *, host: Optional[str] = None, timeout_sec: Optional[float] = None) -> "MediaSettings":
        load_dotenv(find_dotenv(usecwd=True))

        host = host or os.getenv("MEDIA_HOST", "").strip()
        if not host:
            raise ConfigError("MEDIA_HOST is not set.")

        if timeout_sec is None:
            raw = os.getenv("MEDIA_TIMEOUT", "").strip()
            try:
                timeout_sec = float(raw) if raw else DEFAULT_TIMEOUT_SEC
            except ValueError as e:
                raise ConfigError(f"MEDIA_TIMEOUT must be a number of seconds, got {raw!r}") from e
        if timeout_sec <= 0:
            raise ConfigError(f"Timeout must be positive, got {timeout_sec}")

        return cls(
            host=host,
            timeout_sec=timeout_sec,
            user_agent=os.getenv("MEDIA_USER_AGENT", DEFAULT_USER_AGENT),
            log_level=os.getenv("MEDIA_LOG_LEVEL", "WARNING").upper(),
        )


def build_http_client(settings: MediaSettings) -> httpx.AsyncClient:
    """Create an AsyncClient for the media API. The caller owns and closes it."""
    return httpx.AsyncClient(
        timeout=settings.timeout_sec,
        headers={
            "User-Agent": settings.user_agent,
            "Accept": "application/json",
        },
    )


def configure_logging(level: str = "WARNING") -> logging.Logger:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING), format=LOG_FORMAT)
    return logging.getLogger("media_client")
