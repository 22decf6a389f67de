"""
Configuration helpers for the network administration API.

Routers/services never read os.environ directly; they receive a Settings
instance built here from environment variables.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple
import os

DEFAULT_PORT = 8080
DEFAULT_VLAN_STORE_PATH = "vlans.json"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    host: str
    port: int
    vlan_store_path: str
    log_level: str
    cors_allow_origins: Tuple[str, ...]
    keepalive_timeout_seconds: int
    graceful_shutdown_seconds: int


def _int(value: str | None, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _seconds(value: str | None, default: int) -> int:
    """Timeouts fall back to the default when unparseable and never go below zero."""
    return max(0, _int(value, default))


def _port(value: str | None) -> int:
    if value is None or not value.strip():
        return DEFAULT_PORT
    try:
        port = int(value)
    except ValueError:
        raise ValueError(f"invalid API server port: {value!r}") from None
    if not 0 <= port <= 65535:
        raise ValueError(f"invalid API server port: {value!r}")
    return port


def _origins(value: str | None) -> Tuple[str, ...]:
    origins = tuple(o.strip() for o in (value or "").split(",") if o.strip())
    return origins or ("*",)


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance.

    Raises ValueError when PORT is set but is not a usable port number.
    """
    return Settings(
        host=os.getenv("HOST") or "0.0.0.0",
        port=_port(os.getenv("PORT")),
        vlan_store_path=os.getenv("VLAN_STORE_PATH") or DEFAULT_VLAN_STORE_PATH,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        cors_allow_origins=_origins(os.getenv("CORS_ALLOW_ORIGINS")),
        keepalive_timeout_seconds=_seconds(os.getenv("KEEPALIVE_TIMEOUT_SECONDS"), 60),
        graceful_shutdown_seconds=_seconds(os.getenv("GRACEFUL_SHUTDOWN_SECONDS"), 5),
    )
