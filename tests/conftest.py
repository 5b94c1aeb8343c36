"""Shared fixtures for the web client tests."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from spine_web_client.adapters.memory import (
    FixedClock,
    InMemorySubscriptionClient,
    InMemoryTransport,
)
from spine_web_client.client import BackendClient
from spine_web_client.context import ContextBuilder
from spine_web_client.factory import ActorRequestFactory

ACTOR = "user-42"
KYIV = timezone(timedelta(hours=2))


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock(
        datetime(2024, 3, 1, 12, 30, 15, 750000, tzinfo=KYIV),
        zone_id="Europe/Kyiv",
        step=timedelta(seconds=1),
    )


@pytest.fixture()
def request_factory(clock: FixedClock) -> ActorRequestFactory:
    return ActorRequestFactory(ACTOR, context_builder=ContextBuilder(clock))


@pytest.fixture()
def transport() -> InMemoryTransport:
    return InMemoryTransport()


@pytest.fixture()
def subscriptions() -> InMemorySubscriptionClient:
    return InMemorySubscriptionClient()


@pytest.fixture()
def client(
    transport: InMemoryTransport,
    subscriptions: InMemorySubscriptionClient,
    request_factory: ActorRequestFactory,
) -> BackendClient:
    return BackendClient(transport, subscriptions, request_factory)
