from __future__ import annotations

import logging
from collections.abc import Sequence

from getaddress_mcp.core.address import compile_addresses
from getaddress_mcp.core.errors import UpstreamError
from getaddress_mcp.core.models import Postcode, Result
from getaddress_mcp.infra.providers.getaddress import GetAddressProvider, PostcodePayload

log = logging.getLogger(__name__)

INVALID_POSTCODE_MESSAGE = "Invalid or nonexistent postcode"


class PostcodeService:
    def __init__(self, *, provider: GetAddressProvider) -> None:
        self._provider = provider

    def lookup(self, *, postcode: str, house_number: int | None = None) -> Result[Postcode]:
        """
        Look up one postcode (optionally narrowed to a house number).

        404 (unknown postcode), 401 (bad key or daily limit reached) and
        network errors all come back as the same visible failure message.
        """
        query = self._provider.query
        if house_number is None:
            url = query.postcode_url(postcode)
        else:
            url = query.postcode_and_house_number_url(postcode, house_number)

        try:
            payload = self._provider.fetch_postcode(url)
        except UpstreamError as e:
            log.warning("Postcode lookup failed for %s: %s", postcode, e)
            return Result(success=False, visible=True, message=INVALID_POSTCODE_MESSAGE)

        result = _to_postcode(payload, postcode)
        result.compiled_addresses.extend(compile_addresses(result.addresses))
        return Result(success=True, visible=False, data=result)

    def bulk_lookup(self, *, postcodes: Sequence[str]) -> Result[list[Postcode]]:
        """
        Look up several postcodes in one request.

        Bulk requests are only allowed on the larger paid plans; other keys
        get a 401. Addresses are returned raw, without compiling.
        """
        url = self._provider.query.bulk_url(postcodes)
        try:
            payloads = self._provider.fetch_postcodes(url)
        except UpstreamError as e:
            log.warning("Bulk postcode lookup failed for %d postcodes: %s", len(postcodes), e)
            return Result(success=False)

        # the service does not echo postcodes back; pair them up by position
        queried: Sequence[str | None] = postcodes if len(postcodes) == len(payloads) else [None] * len(payloads)
        return Result(
            success=True,
            data=[_to_postcode(p, pc) for p, pc in zip(payloads, queried)],
        )


def _to_postcode(payload: PostcodePayload, queried: str | None) -> Postcode:
    return Postcode(
        postcode=queried,
        addresses=list(payload.addresses),
        latitude=payload.latitude,
        longitude=payload.longitude,
    )
