"""Public navigation-graph access contracts."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Protocol, runtime_checkable

type NodeId = Hashable
type Position = tuple[float, float]


class FocusState(StrEnum):
    """Per-focusable navigation state."""

    DORMANT = "DORMANT"
    FOCUSED = "FOCUSED"
    ACTIVE = "ACTIVE"
    INERT = "INERT"

    @property
    def is_focused(self) -> bool:
        """The unique node every request starts from."""
        return self is FocusState.FOCUSED

    @property
    def is_active(self) -> bool:
        """Focused, or on the entry-point path leading to the focused node."""
        return self in (FocusState.ACTIVE, FocusState.FOCUSED)

    @property
    def is_dormant(self) -> bool:
        """Left without being replaced by a sibling; the re-entry target of its fence."""
        return self is FocusState.DORMANT

    @property
    def is_inert(self) -> bool:
        return self is FocusState.INERT


@dataclass(frozen=True, slots=True)
class FenceData:
    """Scoping-container payload.

    ``entry_point`` is the focusable whose activation reveals the fence, or
    ``None`` when the fence is a navigation root. ``sequence_mode`` marks fences
    that handle next/previous steps themselves instead of delegating them to the
    fence containing their entry point.

    The "entry point -> fence -> entry point's fence" relation must be acyclic;
    a fence reachable from one of its own focusables is reported as a
    ``NavigationCycleError`` during resolution.
    """

    entry_point: NodeId | None = None
    sequence_mode: bool = False

    @classmethod
    def root(cls) -> FenceData:
        return cls(entry_point=None)

    @classmethod
    def reachable_from(cls, focusable: NodeId) -> FenceData:
        return cls(entry_point=focusable)

    @classmethod
    def with_entry(cls, entry_point: NodeId | None) -> FenceData:
        """Build a fence from an optional entry point without branching at call sites."""
        return cls(entry_point=entry_point)

    def sequence(self) -> FenceData:
        """Return a copy navigated with next/previous steps."""
        return replace(self, sequence_mode=True)

    @property
    def is_root(self) -> bool:
        return self.entry_point is None


@runtime_checkable
class NavGraphAccessor(Protocol):
    """Read-only view of the UI hierarchy for one resolution call."""

    def parent_of(self, node: NodeId) -> NodeId | None:
        """Return the hierarchy parent, if any."""

    def children_of(self, node: NodeId) -> Sequence[NodeId]:
        """Return ordered hierarchy children."""

    def is_focusable(self, node: NodeId) -> bool:
        """Return whether node can receive focus."""

    def is_container(self, node: NodeId) -> bool:
        """Return whether node is a scoping fence."""

    def container_data(self, node: NodeId) -> FenceData:
        """Return fence payload for a container node."""

    def position_of(self, node: NodeId) -> Position | None:
        """Return world-space 2D position of a focusable node."""

    def focus_state_of(self, node: NodeId) -> FocusState:
        """Return current focus state of a focusable node."""

    def focusables(self) -> Iterable[NodeId]:
        """Return every focusable node in stable order."""

    def containers(self) -> Iterable[NodeId]:
        """Return every fence node in stable order."""

    def focused_nodes(self) -> Sequence[NodeId]:
        """Return nodes currently carrying the focused marker."""


@runtime_checkable
class FocusStateCommitter(Protocol):
    """Write surface applied once per resolved request."""

    def set_focus_state(self, node: NodeId, state: FocusState) -> None:
        """Replace the focus state of one focusable."""

    def mark_currently_focused(self, node: NodeId) -> None:
        """Attach the queryable focused marker."""

    def clear_currently_focused(self, node: NodeId) -> None:
        """Remove the focused marker if present."""


@runtime_checkable
class NavigationGraph(NavGraphAccessor, FocusStateCommitter, Protocol):
    """Accessor and committer backed by the same storage."""
