"""Navigation diagnostics hub."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Callable

from uinav.diagnostics.event import DiagnosticEvent

Subscriber = Callable[[DiagnosticEvent], None]

LEVELS: tuple[str, ...] = ("debug", "info", "warning", "error")


def _level_rank(level: str) -> int:
    try:
        return LEVELS.index(level.strip().lower())
    except ValueError:
        return LEVELS.index("info")


class DiagnosticHub:
    """Bounded history of navigation events plus live subscribers.

    Events below ``min_level`` are dropped before they reach the history or any
    subscriber. ``counts()`` keeps totals for every recorded name, including
    events that have since been evicted from the history.
    """

    def __init__(
        self,
        *,
        capacity: int = 1_000,
        enabled: bool = True,
        min_level: str = "debug",
    ) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be > 0")
        self._enabled = bool(enabled)
        self._history: deque[DiagnosticEvent] = deque(maxlen=int(capacity))
        self._subscribers: dict[int, Subscriber] = {}
        self._next_subscriber_id = 1
        self._min_rank = _level_rank(min_level)
        self._counts: Counter[str] = Counter()

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def capacity(self) -> int:
        return self._history.maxlen or 0

    def emit(self, event: DiagnosticEvent) -> None:
        if not self._enabled or _level_rank(event.level) < self._min_rank:
            return
        self._history.append(event)
        self._counts[event.name] += 1
        for callback in tuple(self._subscribers.values()):
            callback(event)

    def subscribe(self, callback: Subscriber) -> int:
        token = self._next_subscriber_id
        self._next_subscriber_id += 1
        self._subscribers[token] = callback
        return token

    def unsubscribe(self, token: int) -> None:
        self._subscribers.pop(token, None)

    def counts(self) -> dict[str, int]:
        return dict(self._counts)

    def clear(self) -> None:
        """Drop history and totals; subscribers stay attached."""
        self._history.clear()
        self._counts.clear()

    def snapshot(
        self,
        *,
        limit: int | None = None,
        name: str | None = None,
        level: str | None = None,
        focused: object | None = None,
    ) -> list[DiagnosticEvent]:
        events = list(self._history)
        if name is not None:
            events = [event for event in events if event.name == name]
        if level is not None:
            events = [event for event in events if event.level == level]
        if focused is not None:
            events = [event for event in events if event.focused == focused]
        if limit is not None:
            events = events[-int(limit) :] if limit > 0 else []
        return events
