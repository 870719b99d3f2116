from __future__ import annotations

from collections.abc import Sequence

import httpx

from getaddress_mcp.core.errors import ConfigurationError
from getaddress_mcp.core.models import Postcode, Result
from getaddress_mcp.infra.http import HttpClient
from getaddress_mcp.infra.providers.getaddress import (
    DEFAULT_API_ROOT,
    GetAddressProvider,
    GetAddressQuery,
)
from getaddress_mcp.services.postcode_service import PostcodeService

DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_USER_AGENT = "getaddress-mcp/0.1.0"


class GetAddressClient:
    """
    getAddress.io client.

    Uses https://api.getAddress.io/v2/uk unless a custom API root is given
    (e.g. a self-hosted instance). A free key can be registered at
    https://getaddress.io/.

    None of the lookups raise for expected failures; inspect Result.success.
    """

    def __init__(
        self,
        api_key: str,
        api_root: str | None = None,
        *,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if api_root is not None and not api_root.strip():
            raise ConfigurationError(
                "You provided a blank getAddress API root path. "
                "Leave api_root unset to use the default getAddress.io API root path."
            )
        if not api_key or not api_key.strip():
            raise ConfigurationError("A getAddress.io API key is required.")

        self.api_root = api_root if api_root is not None else DEFAULT_API_ROOT
        self._http = HttpClient(
            timeout_seconds=timeout_seconds,
            user_agent=user_agent,
            transport=transport,
        )
        self._service = PostcodeService(
            provider=GetAddressProvider(
                http=self._http,
                query=GetAddressQuery(api_root=self.api_root, api_key=api_key),
            )
        )

    def lookup_postcode(self, postcode: str) -> Result[Postcode]:
        """Return every address at *postcode*."""
        return self._service.lookup(postcode=postcode)

    def lookup_postcode_and_house_number(self, postcode: str, house_number: int) -> Result[Postcode]:
        """Return the addresses at *postcode* matching *house_number*."""
        return self._service.lookup(postcode=postcode, house_number=house_number)

    def bulk_lookup_postcodes(self, postcodes: Sequence[str]) -> Result[list[Postcode]]:
        """
        Look up several postcodes in one request.
        Not available on the free plans: those keys get an unsuccessful Result.
        """
        return self._service.bulk_lookup(postcodes=postcodes)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> GetAddressClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
