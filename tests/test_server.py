from __future__ import annotations

import importlib
import logging
import sys

import pytest

from getaddress_mcp.core.errors import ConfigurationError


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    sys.modules.pop("getaddress_mcp.server", None)


def _import_server():
    sys.modules.pop("getaddress_mcp.server", None)
    return importlib.import_module("getaddress_mcp.server")


def test_import_server(monkeypatch):
    monkeypatch.setenv("GETADDRESS_API_KEY", "k1")
    server = _import_server()
    assert server.mcp.name == "getaddress-mcp"
    server._container.client.close()


def test_import_server_without_key_fails(monkeypatch):
    monkeypatch.delenv("GETADDRESS_API_KEY", raising=False)
    with pytest.raises(ConfigurationError):
        _import_server()
