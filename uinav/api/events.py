"""Outcome reporting contracts.

Every resolved request produces exactly one ``TransitionOutcome``; the engine
publishes it whether or not focus state changed, so renderers can react to
``FocusCaught`` (feedback sounds, shake animations) as well as to moves.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from uinav.api.navigation import FocusCaught, FocusChanged, TransitionOutcome

type OutcomeKind = type[FocusChanged] | type[FocusCaught]
type OutcomeHandler = Callable[[TransitionOutcome], None]

OUTCOME_KINDS: tuple[OutcomeKind, ...] = (FocusChanged, FocusCaught)


@dataclass(frozen=True, slots=True)
class Subscription:
    """Subscription token; ``kinds`` lists the outcome types it receives."""

    id: int
    kinds: tuple[OutcomeKind, ...] = OUTCOME_KINDS


class OutcomeBus(Protocol):
    """In-process fan-out of transition outcomes."""

    def subscribe(self, handler: OutcomeHandler, *kinds: OutcomeKind) -> Subscription:
        """Subscribe to the given outcome kinds, or to all of them when none are given."""

    def unsubscribe(self, subscription: Subscription) -> None:
        """Drop a subscription; unknown tokens are ignored."""

    def publish(self, outcome: TransitionOutcome) -> int:
        """Deliver one outcome and return how many handlers received it."""


def create_outcome_bus() -> OutcomeBus:
    """Create default outcome bus implementation."""
    from uinav.runtime.events import RuntimeOutcomeBus

    return RuntimeOutcomeBus()
