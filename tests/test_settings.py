from __future__ import annotations

import pytest

from getaddress_mcp.app.container import build_container
from getaddress_mcp.app.settings import Settings, get_settings
from getaddress_mcp.core.errors import ConfigurationError
from getaddress_mcp.infra.providers.getaddress import DEFAULT_API_ROOT

_ENV = ("GETADDRESS_API_KEY", "GETADDRESS_API_ROOT", "HTTP_TIMEOUT_SECONDS", "HTTP_USER_AGENT")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in _ENV:
        monkeypatch.delenv(name, raising=False)


def test_missing_key_raises():
    with pytest.raises(ConfigurationError):
        get_settings()


def test_defaults(monkeypatch):
    monkeypatch.setenv("GETADDRESS_API_KEY", "k1")
    s = get_settings()
    assert s.getaddress_api_key == "k1"
    assert s.getaddress_api_root is None
    assert s.http_timeout_seconds == 10.0
    assert s.http_user_agent == "getaddress-mcp/0.1.0"


def test_values_are_cleaned(monkeypatch):
    monkeypatch.setenv("GETADDRESS_API_KEY", ' "k1" ')
    monkeypatch.setenv("GETADDRESS_API_ROOT", "'https://self-hosted.test/v2/uk'")
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "2.5")
    s = get_settings()
    assert s.getaddress_api_key == "k1"
    assert s.getaddress_api_root == "https://self-hosted.test/v2/uk"
    assert s.http_timeout_seconds == 2.5


def test_blank_root_in_env_means_default(monkeypatch):
    monkeypatch.setenv("GETADDRESS_API_KEY", "k1")
    monkeypatch.setenv("GETADDRESS_API_ROOT", "   ")
    assert get_settings().getaddress_api_root is None


def test_bad_timeout_raises(monkeypatch):
    monkeypatch.setenv("GETADDRESS_API_KEY", "k1")
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "soon")
    with pytest.raises(ConfigurationError):
        get_settings()


def test_build_container_default_root():
    settings = Settings(
        getaddress_api_key="k1",
        getaddress_api_root=None,
        http_timeout_seconds=5.0,
        http_user_agent="test-agent",
    )
    c = build_container(settings)
    try:
        assert c.settings is settings
        assert c.client.api_root == DEFAULT_API_ROOT
    finally:
        c.client.close()


def test_build_container_from_env(monkeypatch):
    monkeypatch.setenv("GETADDRESS_API_KEY", "k1")
    monkeypatch.setenv("GETADDRESS_API_ROOT", "https://self-hosted.test/v2/uk")
    c = build_container()
    try:
        assert c.client.api_root == "https://self-hosted.test/v2/uk"
    finally:
        c.client.close()
