from __future__ import annotations


class GetAddressError(Exception):
    """Base error for getaddress-mcp."""


class ConfigurationError(GetAddressError):
    """Raised when the client is constructed with unusable settings."""


class UpstreamError(GetAddressError):
    """Raised when an upstream API fails."""


class MalformedAddress(GetAddressError):
    """Raised when a raw address line does not have the expected fields."""

    def __init__(self, raw: str, parts: int) -> None:
        self.raw = raw
        self.parts = parts
        super().__init__(f"Expected 7 comma-separated fields, got {parts}: {raw!r}")
