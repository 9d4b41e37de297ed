"""Outcome bus used by the engine to report every resolved request."""

from __future__ import annotations

from collections import Counter

from uinav.api.events import (
    OUTCOME_KINDS,
    OutcomeHandler,
    OutcomeKind,
    Subscription,
)
from uinav.api.navigation import TransitionOutcome


class RuntimeOutcomeBus:
    """Dispatch outcomes to handlers registered per outcome kind.

    Handlers run synchronously in subscription order, after the outcome has
    been committed to the graph.
    """

    def __init__(self) -> None:
        self._next_id = 1
        self._handlers: dict[int, tuple[tuple[OutcomeKind, ...], OutcomeHandler]] = {}
        self._published: Counter[str] = Counter()
        self._last: TransitionOutcome | None = None

    @property
    def last(self) -> TransitionOutcome | None:
        """Most recently published outcome."""
        return self._last

    def published(self) -> dict[str, int]:
        """Return publish totals keyed by outcome class name."""
        return dict(self._published)

    def subscribe(self, handler: OutcomeHandler, *kinds: OutcomeKind) -> Subscription:
        for kind in kinds:
            if kind not in OUTCOME_KINDS:
                raise TypeError(f"not a transition outcome type: {kind!r}")
        subscription = Subscription(self._next_id, kinds or OUTCOME_KINDS)
        self._next_id += 1
        self._handlers[subscription.id] = (subscription.kinds, handler)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        self._handlers.pop(subscription.id, None)

    def publish(self, outcome: TransitionOutcome) -> int:
        if not isinstance(outcome, OUTCOME_KINDS):
            raise TypeError(f"not a transition outcome: {outcome!r}")
        self._published[type(outcome).__name__] += 1
        self._last = outcome
        delivered = 0
        for kinds, handler in tuple(self._handlers.values()):
            if isinstance(outcome, kinds):
                handler(outcome)
                delivered += 1
        return delivered
