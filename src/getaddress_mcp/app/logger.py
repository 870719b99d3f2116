from __future__ import annotations

import logging
import os
import sys

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Log to stderr; stdout carries the MCP stdio transport."""
    level = (level or os.getenv("LOG_LEVEL") or "INFO").strip().upper()

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level, logging.INFO))

    # httpx logs every request URL at INFO, api-key included
    logging.getLogger("httpx").setLevel(logging.WARNING)
