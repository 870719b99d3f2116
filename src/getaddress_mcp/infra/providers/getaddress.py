from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from getaddress_mcp.core.errors import UpstreamError
from getaddress_mcp.infra.http import HttpClient

log = logging.getLogger(__name__)

DEFAULT_API_ROOT = "https://api.getAddress.io/v2/uk"


class PostcodePayload(BaseModel):
    """
    One postcode as returned by getAddress.io v2:
      { "latitude": 51.50, "longitude": -0.12, "addresses": ["...", ...] }
    """

    model_config = ConfigDict(extra="ignore")

    latitude: float | None = None
    longitude: float | None = None
    addresses: list[str] = Field(default_factory=list)


_BULK_PAYLOAD = TypeAdapter(list[PostcodePayload])


@dataclass(frozen=True)
class GetAddressQuery:
    """
    URL construction for the three lookup endpoints.
    Postcodes and the key are passed through untouched; httpx handles escaping.
    """

    api_root: str
    api_key: str

    def postcode_url(self, postcode: str) -> str:
        return self._with_key(f"{self.api_root}/{postcode}")

    def postcode_and_house_number_url(self, postcode: str, house_number: int) -> str:
        return self._with_key(f"{self.api_root}/{postcode}/{house_number:d}")

    def bulk_url(self, postcodes: Sequence[str]) -> str:
        return self._with_key(f"{self.api_root}/{','.join(postcodes)}")

    def _with_key(self, path: str) -> str:
        return f"{path}?api-key={self.api_key}"


class GetAddressProvider:
    def __init__(self, *, http: HttpClient, query: GetAddressQuery) -> None:
        self._http = http
        self.query = query

    def fetch_postcode(self, url: str) -> PostcodePayload:
        payload = self._http.get_json(url)
        try:
            return PostcodePayload.model_validate(payload)
        except PydanticValidationError as e:
            log.warning("Unexpected getAddress.io payload: %s", e)
            raise UpstreamError(f"Unexpected getAddress.io payload: {e}") from e

    def fetch_postcodes(self, url: str) -> list[PostcodePayload]:
        payload: Any = self._http.get_json(url)
        try:
            return _BULK_PAYLOAD.validate_python(payload)
        except PydanticValidationError as e:
            log.warning("Unexpected getAddress.io bulk payload: %s", e)
            raise UpstreamError(f"Unexpected getAddress.io bulk payload: {e}") from e
