from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from getaddress_mcp.core.errors import ConfigurationError

load_dotenv()


@dataclass
class Settings:
    # getAddress.io
    getaddress_api_key: str
    getaddress_api_root: str | None

    # HTTP
    http_timeout_seconds: float
    http_user_agent: str


def _clean(s: str | None) -> str:
    return (s or "").strip().strip('"').strip("'")


def _float(name: str, default: float) -> float:
    v = _clean(os.getenv(name, str(default)))
    try:
        return float(v)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {v!r}") from e


def get_settings() -> Settings:
    """
    - GETADDRESS_API_KEY is required
    - GETADDRESS_API_ROOT left empty means the default v2 UK endpoint
    """
    api_key = _clean(os.getenv("GETADDRESS_API_KEY"))
    if not api_key:
        raise ConfigurationError("Missing GETADDRESS_API_KEY in environment (.env).")

    return Settings(
        getaddress_api_key=api_key,
        getaddress_api_root=_clean(os.getenv("GETADDRESS_API_ROOT")) or None,
        http_timeout_seconds=_float("HTTP_TIMEOUT_SECONDS", 10.0),
        http_user_agent=_clean(os.getenv("HTTP_USER_AGENT", "getaddress-mcp/0.1.0")),
    )
