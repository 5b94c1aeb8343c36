"""Tests for ClientSettings and BackendClient.from_settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from spine_web_client.adapters.decorators.logging_transport import LoggingTransport
from spine_web_client.adapters.http.transport import HttpxTransport
from spine_web_client.adapters.memory import InMemorySubscriptionClient
from spine_web_client.client import BackendClient
from spine_web_client.config import ClientSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "BASE_URL",
        "QUERY_PATH",
        "COMMAND_PATH",
        "TIMEOUT_SECONDS",
        "LOG_REQUESTS",
    ):
        monkeypatch.delenv(f"SPINE_CLIENT_{name}", raising=False)


def test_defaults() -> None:
    settings = ClientSettings(_env_file=None)  # type: ignore[call-arg]

    assert settings.base_url == "http://localhost:8080"
    assert settings.query_path == "/query"
    assert settings.command_path == "/command"
    assert settings.timeout_seconds == 30.0
    assert settings.log_requests is False


def test_reads_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SPINE_CLIENT_BASE_URL", "https://api.example.org")
    monkeypatch.setenv("SPINE_CLIENT_COMMAND_PATH", "/api/command")
    monkeypatch.setenv("SPINE_CLIENT_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("SPINE_CLIENT_LOG_REQUESTS", "true")

    settings = ClientSettings(_env_file=None)  # type: ignore[call-arg]

    assert settings.base_url == "https://api.example.org"
    assert settings.command_path == "/api/command"
    assert settings.timeout_seconds == 2.5
    assert settings.log_requests is True


@pytest.mark.parametrize("path", ["query", "", "api/query"])
def test_paths_must_be_absolute(path: str) -> None:
    with pytest.raises(ValidationError, match="must start with"):
        ClientSettings(query_path=path, _env_file=None)  # type: ignore[call-arg]


def test_timeout_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        ClientSettings(timeout_seconds=0, _env_file=None)  # type: ignore[call-arg]


@pytest.mark.asyncio()
async def test_from_settings_builds_http_client() -> None:
    settings = ClientSettings(  # type: ignore[call-arg]
        base_url="http://backend.test", _env_file=None
    )

    client = BackendClient.from_settings(
        settings, actor="user-1", subscriptions=InMemorySubscriptionClient()
    )

    assert isinstance(client._transport, HttpxTransport)
    assert client._transport.base_url == "http://backend.test"
    assert client.request_factory.actor.value == "user-1"
    await client.aclose()
    assert client._transport._client.is_closed


@pytest.mark.asyncio()
async def test_from_settings_wraps_logging_transport() -> None:
    settings = ClientSettings(log_requests=True, _env_file=None)  # type: ignore[call-arg]

    async with BackendClient.from_settings(
        settings, actor="user-1", subscriptions=InMemorySubscriptionClient()
    ) as client:
        assert isinstance(client._transport, LoggingTransport)
