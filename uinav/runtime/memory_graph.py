"""In-memory navigation graph backing tests and embedders without a scene graph."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from uinav.api.graph import FenceData, FocusState, Position


@dataclass(slots=True)
class _NodeRecord:
    parent: int | None
    children: list[int] = field(default_factory=list)
    focusable: bool = False
    fence: FenceData | None = None
    position: Position | None = None
    state: FocusState = FocusState.INERT


class InMemoryNavGraph:
    """Dict-backed hierarchy implementing both accessor and committer contracts.

    Node handles are sequential ints. ``focusables()`` and ``containers()``
    enumerate in insertion order.
    """

    def __init__(self) -> None:
        self._nodes: dict[int, _NodeRecord] = {}
        self._focused: set[int] = set()
        self._next_id = 1

    # Construction

    def add_node(self, parent: int | None = None) -> int:
        """Add a plain grouping node."""
        return self._insert(parent, _NodeRecord(parent=parent))

    def add_focusable(self, parent: int | None, position: Position | None = None) -> int:
        """Add a focusable in ``INERT`` state."""
        record = _NodeRecord(
            parent=parent,
            focusable=True,
            position=None if position is None else (float(position[0]), float(position[1])),
        )
        return self._insert(parent, record)

    def add_fence(self, parent: int | None, fence: FenceData | None = None) -> int:
        """Add a scoping fence; defaults to a navigation root."""
        return self._insert(parent, _NodeRecord(parent=parent, fence=fence or FenceData.root()))

    def set_fence(self, node: int, fence: FenceData) -> None:
        """Replace fence payload, e.g. to link an entry point created later."""
        record = self._record(node)
        if record.fence is None:
            raise ValueError(f"node {node} is not a fence")
        record.fence = fence

    def set_position(self, node: int, position: Position | None) -> None:
        record = self._record(node)
        if not record.focusable:
            raise ValueError(f"node {node} is not focusable")
        record.position = None if position is None else (float(position[0]), float(position[1]))

    def reparent(self, node: int, parent: int | None) -> None:
        """Move ``node`` (and its subtree) under ``parent``; no cycle check."""
        record = self._record(node)
        if parent is not None:
            self._record(parent)
        if record.parent is not None:
            self._nodes[record.parent].children.remove(node)
        record.parent = parent
        if parent is not None:
            self._nodes[parent].children.append(node)

    def remove_node(self, node: int) -> tuple[int, ...]:
        """Remove ``node`` and its subtree; returns removed handles."""
        record = self._record(node)
        if record.parent is not None and record.parent in self._nodes:
            self._nodes[record.parent].children.remove(node)
        removed: list[int] = []
        pending = [node]
        while pending:
            current = pending.pop()
            current_record = self._nodes.pop(current, None)
            if current_record is None:
                continue
            removed.append(current)
            self._focused.discard(current)
            pending.extend(current_record.children)
        return tuple(removed)

    def __contains__(self, node: object) -> bool:
        return node in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    # Accessor

    def parent_of(self, node: int) -> int | None:
        return self._record(node).parent

    def children_of(self, node: int) -> Sequence[int]:
        return tuple(self._record(node).children)

    def is_focusable(self, node: int) -> bool:
        record = self._nodes.get(node)
        return record is not None and record.focusable

    def is_container(self, node: int) -> bool:
        record = self._nodes.get(node)
        return record is not None and record.fence is not None

    def container_data(self, node: int) -> FenceData:
        fence = self._record(node).fence
        if fence is None:
            raise ValueError(f"node {node} is not a fence")
        return fence

    def position_of(self, node: int) -> Position | None:
        return self._record(node).position

    def focus_state_of(self, node: int) -> FocusState:
        return self._record(node).state

    def focusables(self) -> Iterable[int]:
        return tuple(node for node, record in self._nodes.items() if record.focusable)

    def containers(self) -> Iterable[int]:
        return tuple(node for node, record in self._nodes.items() if record.fence is not None)

    def focused_nodes(self) -> Sequence[int]:
        return tuple(node for node in self._nodes if node in self._focused)

    # Committer

    def set_focus_state(self, node: int, state: FocusState) -> None:
        record = self._record(node)
        if not record.focusable:
            raise ValueError(f"node {node} is not focusable")
        record.state = state

    def mark_currently_focused(self, node: int) -> None:
        self._record(node)
        self._focused.add(node)

    def clear_currently_focused(self, node: int) -> None:
        self._focused.discard(node)

    def states(self) -> dict[int, FocusState]:
        """Return focus state of every focusable."""
        return {node: record.state for node, record in self._nodes.items() if record.focusable}

    def _insert(self, parent: int | None, record: _NodeRecord) -> int:
        if parent is not None:
            self._record(parent)
        node = self._next_id
        self._next_id += 1
        self._nodes[node] = record
        if parent is not None:
            self._nodes[parent].children.append(node)
        return node

    def _record(self, node: int) -> _NodeRecord:
        record = self._nodes.get(node)
        if record is None:
            raise KeyError(f"unknown node: {node}")
        return record
