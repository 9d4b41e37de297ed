from __future__ import annotations

import pytest

from uinav.api.events import create_outcome_bus
from uinav.api.navigation import Activate, Cancel, FocusCaught, FocusChanged
from uinav.runtime.events import RuntimeOutcomeBus


def test_outcome_bus_dispatches_by_outcome_kind() -> None:
    bus = RuntimeOutcomeBus()
    changed: list[FocusChanged] = []
    caught: list[FocusCaught] = []
    bus.subscribe(changed.append, FocusChanged)
    bus.subscribe(caught.append, FocusCaught)

    delivered = bus.publish(FocusChanged((1,), (2,)))
    bus.publish(FocusCaught(focused=2, request=Cancel(), reason="root_scope"))

    assert delivered == 1
    assert [outcome.focused for outcome in changed] == [2]
    assert [outcome.reason for outcome in caught] == ["root_scope"]
    assert bus.published() == {"FocusChanged": 1, "FocusCaught": 1}
    assert isinstance(bus.last, FocusCaught)


def test_outcome_bus_subscription_without_kinds_receives_everything() -> None:
    bus = create_outcome_bus()
    seen: list[object] = []
    subscription = bus.subscribe(seen.append)

    bus.publish(FocusChanged((1,), (2,)))
    bus.publish(FocusCaught(focused=2, request=Activate()))

    assert subscription.kinds == (FocusChanged, FocusCaught)
    assert len(seen) == 2


def test_outcome_bus_unsubscribe_stops_dispatch() -> None:
    bus = create_outcome_bus()
    seen: list[object] = []
    subscription = bus.subscribe(seen.append)
    bus.unsubscribe(subscription)

    delivered = bus.publish(FocusChanged((1,), (2,)))

    assert delivered == 0
    assert seen == []


def test_outcome_bus_rejects_non_outcomes() -> None:
    bus = RuntimeOutcomeBus()

    with pytest.raises(TypeError):
        bus.subscribe(print, Cancel)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        bus.publish(Cancel())  # type: ignore[arg-type]
    assert bus.published() == {}
    assert bus.last is None
