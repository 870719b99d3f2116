from __future__ import annotations

import logging

from fastmcp import FastMCP

from getaddress_mcp.app.container import build_container
from getaddress_mcp.app.logger import configure_logging
from getaddress_mcp.tools.lookup_tools import register_lookup_tools

configure_logging()
log = logging.getLogger(__name__)

mcp = FastMCP("getaddress-mcp")

try:
    _container = build_container()
    register_lookup_tools(mcp, _container)
    log.info("getAddress.io lookup tools registered successfully")
except Exception as e:
    log.error("Failed to register lookup tools: %s", e, exc_info=True)
    raise


def main() -> None:
    # default transport is STDIO
    mcp.run()


if __name__ == "__main__":
    main()
