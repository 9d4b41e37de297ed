from __future__ import annotations

import pytest

from uinav.api.events import Subscription, create_outcome_bus
from uinav.api.navigation import (
    Cancel,
    Direction,
    FocusCaught,
    FocusChanged,
    Move,
)


@pytest.mark.parametrize(
    ("direction", "other", "expected"),
    [
        (Direction.NORTH, (0.0, 1.0), True),
        (Direction.NORTH, (5.0, 0.0), False),
        (Direction.SOUTH, (0.0, -0.5), True),
        (Direction.EAST, (2.0, 9.0), True),
        (Direction.WEST, (0.0, 3.0), False),
        (Direction.WEST, (-1.0, -1.0), True),
    ],
)
def test_direction_half_planes(direction: Direction, other: tuple[float, float], expected: bool) -> None:
    assert direction.contains((0.0, 0.0), other) is expected


def test_direction_axis_and_sign() -> None:
    assert (Direction.NORTH.axis, Direction.NORTH.sign) == (1, 1)
    assert (Direction.SOUTH.axis, Direction.SOUTH.sign) == (1, -1)
    assert (Direction.EAST.axis, Direction.EAST.sign) == (0, 1)
    assert (Direction.WEST.axis, Direction.WEST.sign) == (0, -1)


def test_focus_changed_exposes_endpoints() -> None:
    outcome = FocusChanged(from_path=(1, 2), to_path=(5, 4, 2))

    assert outcome.previous == 1
    assert outcome.focused == 5


@pytest.mark.parametrize(("from_path", "to_path"), [((), (1,)), ((1,), ())])
def test_focus_changed_rejects_empty_paths(from_path, to_path) -> None:
    with pytest.raises(ValueError):
        FocusChanged(from_path=from_path, to_path=to_path)


def test_requests_are_value_objects() -> None:
    assert Move(Direction.EAST) == Move(Direction.EAST)
    assert Cancel() == Cancel()
    assert hash(Move(Direction.EAST)) == hash(Move(Direction.EAST))


def test_create_outcome_bus_dispatches_by_kind() -> None:
    bus = create_outcome_bus()
    seen: list[object] = []
    token = bus.subscribe(seen.append, FocusCaught)

    assert isinstance(token, Subscription)
    assert bus.publish(FocusChanged((1,), (2,))) == 0
    assert bus.publish(FocusCaught(focused=1, request=Cancel(), reason="root_scope")) == 1

    bus.unsubscribe(token)
    assert bus.publish(FocusCaught(focused=1, request=Cancel())) == 0
    assert len(seen) == 1
