from __future__ import annotations

import pytest

from uinav.diagnostics import CAUGHT, CHANGED, FAULT, DiagnosticEvent, DiagnosticHub


def _event(tick: int, name: str = CHANGED, *, level: str = "info", focused: int = 1) -> DiagnosticEvent:
    return DiagnosticEvent(tick=tick, name=name, level=level, focused=focused)


def test_hub_records_and_filters_by_name_and_focus() -> None:
    hub = DiagnosticHub(capacity=10)
    hub.emit(_event(1, focused=3))
    hub.emit(_event(2, CAUGHT, focused=3))
    hub.emit(_event(3, focused=4))

    assert [event.tick for event in hub.snapshot(name=CHANGED)] == [1, 3]
    assert [event.name for event in hub.snapshot(focused=3)] == [CHANGED, CAUGHT]


def test_hub_limit_applies_after_filters() -> None:
    hub = DiagnosticHub(capacity=10)
    for tick in range(4):
        hub.emit(_event(tick))
        hub.emit(_event(tick, CAUGHT))

    recent = hub.snapshot(name=CHANGED, limit=2)

    assert [event.tick for event in recent] == [2, 3]
    assert hub.snapshot(limit=0) == []


def test_hub_evicts_oldest_beyond_capacity() -> None:
    hub = DiagnosticHub(capacity=3)
    for tick in range(5):
        hub.emit(_event(tick))

    assert [event.tick for event in hub.snapshot()] == [2, 3, 4]
    assert hub.capacity == 3


def test_hub_rejects_non_positive_capacity() -> None:
    with pytest.raises(ValueError):
        DiagnosticHub(capacity=0)


def test_hub_subscriber_receives_events_until_unsubscribed() -> None:
    hub = DiagnosticHub(capacity=10)
    seen: list[str] = []

    token = hub.subscribe(lambda event: seen.append(event.name))
    hub.emit(_event(1))
    hub.unsubscribe(token)
    hub.emit(_event(2, CAUGHT))

    assert seen == [CHANGED]


def test_hub_drops_events_below_min_level() -> None:
    hub = DiagnosticHub(capacity=10, min_level="warning")
    hub.emit(_event(1))
    hub.emit(_event(2, CAUGHT, level="warning"))
    hub.emit(_event(3, FAULT, level="ERROR"))

    assert [event.name for event in hub.snapshot()] == [CAUGHT, FAULT]
    assert hub.snapshot(level="ERROR")[0].is_fault


def test_hub_counts_survive_eviction_until_cleared() -> None:
    hub = DiagnosticHub(capacity=2)
    for tick in range(5):
        hub.emit(_event(tick))

    assert len(hub.snapshot()) == 2
    assert hub.counts() == {CHANGED: 5}

    hub.clear()

    assert hub.snapshot() == []
    assert hub.counts() == {}


def test_disabled_hub_drops_everything() -> None:
    hub = DiagnosticHub(capacity=10, enabled=False)
    hub.emit(_event(1))

    assert not hub.enabled
    assert hub.snapshot() == []
    assert hub.counts() == {}
