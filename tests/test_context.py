"""Tests for ContextBuilder and the clocks."""

from __future__ import annotations

import os
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from spine_web_client.adapters.clock import SystemClock
from spine_web_client.adapters.memory.clock import FixedClock
from spine_web_client.context import ContextBuilder
from spine_web_client.messages.actor_context import UserId
from spine_web_client.ports.clock import IClock

KYIV = timezone(timedelta(hours=2))
NEW_YORK = timezone(timedelta(hours=-5))


def test_actor_context_captures_epoch_seconds() -> None:
    now = datetime(2024, 3, 1, 12, 30, 15, 750000, tzinfo=KYIV)
    builder = ContextBuilder(FixedClock(now, zone_id="Europe/Kyiv"))

    context = builder.build_actor_context("user-1")

    expected = int(datetime(2024, 3, 1, 10, 30, 15, tzinfo=timezone.utc).timestamp())
    assert context.timestamp.seconds == expected
    assert context.timestamp.nanos == 0


def test_actor_context_carries_actor_and_zone() -> None:
    now = datetime(2024, 3, 1, 12, 0, tzinfo=KYIV)
    builder = ContextBuilder(FixedClock(now, zone_id="Europe/Kyiv"))

    context = builder.build_actor_context(UserId(value="user-1"))

    assert context.actor.value == "user-1"
    assert context.zone_offset.amount_seconds == 7200
    assert context.zone_offset.id.value == "Europe/Kyiv"


def test_zone_offset_is_negative_west_of_utc() -> None:
    clock = FixedClock(
        datetime(2024, 1, 1, tzinfo=NEW_YORK), zone_id="America/New_York"
    )
    builder = ContextBuilder(clock)

    assert builder.zone_offset_seconds() == -18000
    assert builder.zone_offset().amount_seconds == -18000


def test_zone_offset_is_zero_in_utc() -> None:
    builder = ContextBuilder(FixedClock())
    assert builder.zone_offset_seconds() == 0
    assert builder.zone_offset().id.value == "UTC"


def test_every_context_is_a_fresh_snapshot() -> None:
    clock = FixedClock(step=timedelta(seconds=1))
    builder = ContextBuilder(clock)

    first = builder.build_actor_context("user-1")
    second = builder.build_actor_context("user-1")

    assert second.timestamp.seconds == first.timestamp.seconds + 1


def test_naive_clock_readings_are_treated_as_local() -> None:
    class NaiveClock:
        def now(self) -> datetime:
            return datetime(2024, 1, 1, 12, 0)

        def zone_id(self) -> str:
            return "Local/Zone"

    context = ContextBuilder(NaiveClock()).build_actor_context("user-1")

    local = datetime(2024, 1, 1, 12, 0).astimezone()
    assert context.timestamp.seconds == int(local.timestamp())
    assert context.zone_offset.amount_seconds == int(local.utcoffset().total_seconds())  # type: ignore[union-attr]


def test_default_builder_uses_system_clock() -> None:
    context = ContextBuilder().build_actor_context("user-1")
    assert abs(context.timestamp.seconds - int(datetime.now().timestamp())) <= 5


# ── FixedClock ──────────────────────────────────────────────────


def test_fixed_clock_requires_aware_datetime() -> None:
    with pytest.raises(ValueError, match="timezone-aware"):
        FixedClock(datetime(2024, 1, 1))


def test_fixed_clock_advance() -> None:
    clock = FixedClock(datetime(2024, 1, 1, tzinfo=timezone.utc))
    clock.advance(timedelta(minutes=5))
    assert clock.now() == datetime(2024, 1, 1, 0, 5, tzinfo=timezone.utc)


def test_fixed_clock_is_a_clock() -> None:
    assert isinstance(FixedClock(), IClock)


# ── SystemClock ─────────────────────────────────────────────────


def test_system_clock_now_is_aware() -> None:
    assert SystemClock().now().tzinfo is not None


def test_system_clock_zone_from_tz_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TZ", ":America/New_York")
    assert SystemClock().zone_id() == "America/New_York"


def test_system_clock_zone_from_tz_file_path(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TZ", "/usr/share/zoneinfo/Europe/Paris")
    assert SystemClock().zone_id() == "Europe/Paris"


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="needs symlinks")
def test_system_clock_zone_from_localtime_link(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.delenv("TZ", raising=False)
    zone_file = tmp_path / "zoneinfo" / "Asia" / "Tokyo"
    zone_file.parent.mkdir(parents=True)
    zone_file.write_bytes(b"")
    link = tmp_path / "localtime"
    link.symlink_to(zone_file)

    assert SystemClock(localtime_path=str(link)).zone_id() == "Asia/Tokyo"


def test_system_clock_zone_falls_back_to_abbreviation(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.delenv("TZ", raising=False)
    zone_id = SystemClock(localtime_path=str(tmp_path / "missing")).zone_id()
    assert zone_id
