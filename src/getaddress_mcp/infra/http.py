from __future__ import annotations

import logging
import re
from typing import Any

import httpx

from getaddress_mcp.core.errors import UpstreamError

log = logging.getLogger(__name__)

_API_KEY = re.compile(r"(api-key=)[^&\s'\"]+")


def redact(text: str) -> str:
    """Mask the api-key query value so it never reaches the logs."""
    return _API_KEY.sub(r"\1***", text)


class HttpClient:
    def __init__(
        self,
        *,
        timeout_seconds: float,
        user_agent: str,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            timeout=timeout_seconds,
            headers={"User-Agent": user_agent, "Accept": "application/json"},
            transport=transport,
        )

    def get_json(self, url: str) -> Any:
        try:
            r = self._client.get(url)
            r.raise_for_status()
            return r.json()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            log.warning("HTTP error: %s", redact(str(e)))
            raise UpstreamError(f"Upstream HTTP error: {redact(str(e))}") from e
        except ValueError as e:
            # 2xx with a body that is not JSON
            log.warning("Invalid JSON from %s: %s", redact(url), e)
            raise UpstreamError(f"Upstream returned invalid JSON: {e}") from e

    def close(self) -> None:
        try:
            self._client.close()
        except Exception:
            # ignore failures while shutting down
            pass
