from __future__ import annotations

from dataclasses import dataclass

from getaddress_mcp.app.settings import Settings, get_settings
from getaddress_mcp.client import GetAddressClient


@dataclass(frozen=True)
class Container:
    settings: Settings
    client: GetAddressClient


def build_container(settings: Settings | None = None) -> Container:
    settings = settings or get_settings()

    client = GetAddressClient(
        settings.getaddress_api_key,
        settings.getaddress_api_root,
        timeout_seconds=settings.http_timeout_seconds,
        user_agent=settings.http_user_agent,
    )

    return Container(settings=settings, client=client)
