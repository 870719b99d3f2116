from __future__ import annotations

from collections.abc import Callable, Iterator

import httpx
import pytest

from getaddress_mcp.client import GetAddressClient

Handler = Callable[[httpx.Request], httpx.Response]


class Recorder:
    """MockTransport handler that keeps every request it answers."""

    def __init__(self, handler: Handler) -> None:
        self._handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)


@pytest.fixture()
def make_client() -> Iterator[Callable[..., tuple[GetAddressClient, Recorder]]]:
    clients: list[GetAddressClient] = []

    def _make(handler: Handler, *, api_key: str = "k1", api_root: str | None = None):
        recorder = Recorder(handler)
        c = GetAddressClient(api_key, api_root, transport=httpx.MockTransport(recorder))
        clients.append(c)
        return c, recorder

    yield _make

    for c in clients:
        c.close()
