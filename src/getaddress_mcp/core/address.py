from __future__ import annotations

import logging
from collections.abc import Iterable

from getaddress_mcp.core.errors import MalformedAddress
from getaddress_mcp.core.models import Address

log = logging.getLogger(__name__)

ADDRESS_FIELD_COUNT = 7


def decode_address(raw: str) -> Address:
    """
    Split one getAddress.io address line into its seven positional fields.

    The service returns "line1,line2,line3,line4,locality,city,county" with
    empty fields left in place, e.g. "10 Downing Street,,,,,London,".
    Fields are not trimmed.

    Raises MalformedAddress if the line does not split into exactly 7 parts.
    """
    parts = raw.split(",")
    if len(parts) != ADDRESS_FIELD_COUNT:
        raise MalformedAddress(raw, len(parts))

    line1, line2, line3, line4, locality, city, county = parts
    return Address(
        line1=line1,
        line2=line2,
        line3=line3,
        line4=line4,
        locality=locality,
        city=city,
        county=county,
    )


def compile_addresses(raw_lines: Iterable[str]) -> list[Address]:
    """Decode every well-formed line in order, skipping malformed ones."""
    compiled: list[Address] = []
    for raw in raw_lines:
        try:
            compiled.append(decode_address(raw))
        except MalformedAddress as e:
            log.warning("Skipping invalid address from getAddress.io: %s", e)
            continue
    return compiled
