"""Public navigation request/outcome contracts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from uinav.api.graph import NodeId, Position

if TYPE_CHECKING:
    from uinav.api.events import OutcomeBus
    from uinav.api.graph import NavigationGraph
    from uinav.diagnostics.hub import DiagnosticHub
    from uinav.runtime.config import NavigationConfig


class Direction(StrEnum):
    """Compass direction in world space (y axis points up)."""

    NORTH = "NORTH"
    SOUTH = "SOUTH"
    EAST = "EAST"
    WEST = "WEST"

    @property
    def axis(self) -> int:
        """Coordinate index this direction moves along (0 = x, 1 = y)."""
        return 1 if self in (Direction.NORTH, Direction.SOUTH) else 0

    @property
    def sign(self) -> int:
        return 1 if self in (Direction.NORTH, Direction.EAST) else -1

    def contains(self, origin: Position, other: Position) -> bool:
        """Return whether ``other`` lies strictly in this half-plane seen from ``origin``."""
        offset = other[self.axis] - origin[self.axis]
        return offset * self.sign > 0


class StepDirection(StrEnum):
    """Ordered-sequence step."""

    NEXT = "NEXT"
    PREVIOUS = "PREVIOUS"


@dataclass(frozen=True, slots=True)
class Move:
    """Move to the nearest focusable in a direction."""

    direction: Direction


@dataclass(frozen=True, slots=True)
class Cancel:
    """Leave the current fence for its entry point."""


@dataclass(frozen=True, slots=True)
class Activate:
    """Enter the fence gated by the focused node."""


@dataclass(frozen=True, slots=True)
class Step:
    """Next/previous within the nearest sequence-mode fence."""

    direction: StepDirection


@dataclass(frozen=True, slots=True)
class FocusOn:
    """Jump directly to a focusable."""

    target: NodeId


type NavRequest = Move | Cancel | Activate | Step | FocusOn


@dataclass(frozen=True, slots=True)
class FocusChanged:
    """Focus moved.

    ``from_path`` starts with the previously focused node followed by the
    entry points it leaves, up to the divergence anchor. ``to_path`` starts
    with the newly focused node followed by the entry points leading to it.
    """

    from_path: tuple[NodeId, ...]
    to_path: tuple[NodeId, ...]

    def __post_init__(self) -> None:
        if not self.from_path:
            raise ValueError("from_path must not be empty")
        if not self.to_path:
            raise ValueError("to_path must not be empty")

    @property
    def previous(self) -> NodeId:
        return self.from_path[0]

    @property
    def focused(self) -> NodeId:
        return self.to_path[0]


@dataclass(frozen=True, slots=True)
class FocusCaught:
    """Request had no effect; focus state is untouched."""

    focused: NodeId
    request: NavRequest
    path: tuple[NodeId, ...] = ()
    reason: str = ""


type TransitionOutcome = FocusChanged | FocusCaught


class NavigationEngine(ABC):
    """Request-at-a-time focus navigation contract."""

    @abstractmethod
    def current_focus(self) -> NodeId:
        """Return the node requests currently start from."""

    @abstractmethod
    def request(self, request: NavRequest) -> TransitionOutcome:
        """Resolve, commit and report one request."""

    @abstractmethod
    def process(self, requests: Iterable[NavRequest]) -> tuple[TransitionOutcome, ...]:
        """Resolve, commit and report requests strictly in arrival order."""


def create_navigation_engine(
    graph: NavigationGraph,
    *,
    config: NavigationConfig | None = None,
    outcome_bus: OutcomeBus | None = None,
    diagnostics: DiagnosticHub | None = None,
) -> NavigationEngine:
    """Create default navigation engine implementation."""
    from uinav.runtime.engine import RuntimeNavigationEngine

    return RuntimeNavigationEngine(
        graph,
        config=config,
        outcome_bus=outcome_bus,
        diagnostics=diagnostics,
    )
