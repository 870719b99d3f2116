from __future__ import annotations

from typing import Any

from fastmcp import FastMCP
from pydantic import BaseModel, Field

from getaddress_mcp.app.container import Container


class HouseNumberLookupArgs(BaseModel):
    postcode: str = Field(..., description="UK postcode, e.g. 'SW1A 2AA'")
    house_number: int = Field(..., ge=0, description="House number to narrow the lookup")


class BulkLookupArgs(BaseModel):
    postcodes: list[str] = Field(..., min_length=1, description="UK postcodes, looked up in this order")


def register_lookup_tools(mcp: FastMCP, container: Container) -> None:
    client = container.client

    @mcp.tool(
        name="lookup_postcode",
        description=(
            "Look up every postal address at a UK postcode via getAddress.io. "
            "Returns the raw address lines plus each line split into "
            "line1-line4, locality, city and county."
        ),
    )
    def lookup_postcode(postcode: str) -> dict[str, Any]:
        return client.lookup_postcode(postcode).to_dict()

    @mcp.tool(
        name="lookup_postcode_and_house_number",
        description=(
            "Look up the postal addresses at a UK postcode that match a house number. "
            "Use when the house number is already known, e.g. when completing a delivery form."
        ),
    )
    def lookup_postcode_and_house_number(postcode: str, house_number: int) -> dict[str, Any]:
        args = HouseNumberLookupArgs(postcode=postcode, house_number=house_number)
        return client.lookup_postcode_and_house_number(args.postcode, args.house_number).to_dict()

    @mcp.tool(
        name="bulk_lookup_postcodes",
        description=(
            "Look up several UK postcodes in a single getAddress.io request. "
            "Only available on paid plans; other keys get success=false. "
            "Address lines are returned raw."
        ),
    )
    def bulk_lookup_postcodes(postcodes: list[str]) -> dict[str, Any]:
        args = BulkLookupArgs(postcodes=postcodes)
        return client.bulk_lookup_postcodes(args.postcodes).to_dict()
