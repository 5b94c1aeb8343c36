"""Tests for the LoggingTransport decorator."""

from __future__ import annotations

import logging

import pytest
from given import TaskId

from spine_web_client.adapters.decorators.logging_transport import LoggingTransport
from spine_web_client.adapters.memory import InMemoryTransport
from spine_web_client.correlation import correlation_scope
from spine_web_client.domain.message import TypedMessage

LOGGER = "spine_web_client.transport"


@pytest.fixture()
def inner() -> InMemoryTransport:
    return InMemoryTransport()


@pytest.mark.asyncio()
async def test_logs_request_and_response(
    inner: InMemoryTransport, caplog: pytest.LogCaptureFixture
) -> None:
    inner.respond_with("/query", "/sub/1")
    transport = LoggingTransport(inner)

    with caplog.at_level(logging.INFO, logger=LOGGER), correlation_scope("corr-1"):
        response = await transport.post("/query", TypedMessage.of(TaskId(value="t")))

    assert response.status_code == 200
    assert caplog.messages[0] == "POST /query example.TaskId (correlation_id=corr-1)"
    assert caplog.messages[1].startswith("POST /query example.TaskId -> 200 in ")


@pytest.mark.asyncio()
async def test_logs_and_reraises_failure(
    inner: InMemoryTransport, caplog: pytest.LogCaptureFixture
) -> None:
    inner.fail_with("/command", ConnectionError("reset"))
    transport = LoggingTransport(inner)

    with caplog.at_level(logging.INFO, logger=LOGGER):
        with pytest.raises(ConnectionError):
            await transport.post("/command", TypedMessage.of(TaskId(value="t")))

    failure = caplog.records[-1]
    assert failure.levelno == logging.ERROR
    assert "failed after" in failure.getMessage()
    assert failure.exc_info is not None


@pytest.mark.asyncio()
async def test_aclose_delegates(inner: InMemoryTransport) -> None:
    await LoggingTransport(inner).aclose()
    assert inner.closed
