"""Fence lookup and flattening over the UI hierarchy."""

from __future__ import annotations

from collections.abc import Sequence

from uinav.api.errors import NavigationCycleError
from uinav.api.graph import FenceData, FocusState, NavGraphAccessor, NodeId


def containing_scope(graph: NavGraphAccessor, node: NodeId) -> tuple[NodeId, FenceData] | None:
    """Return the nearest ancestor fence of ``node`` and its payload.

    Non-fence ancestors are walked through. Returns ``None`` when no ancestor
    is a fence.
    """
    visited: list[NodeId] = [node]
    current = graph.parent_of(node)
    while current is not None:
        if current in visited:
            raise NavigationCycleError(current, tuple(visited))
        if graph.is_container(current):
            return current, graph.container_data(current)
        visited.append(current)
        current = graph.parent_of(current)
    return None


def flatten_focusables(graph: NavGraphAccessor, container: NodeId) -> tuple[NodeId, ...]:
    """Return the focusables of ``container`` not hidden behind a nested fence.

    Direct focusable children come first, then the focusables found below each
    plain (non-focusable, non-fence) child, in child order.
    """
    result: list[NodeId] = []
    seen: set[NodeId] = {container}
    # Each frame is the child list of one plain node still to be expanded.
    pending: list[Sequence[NodeId]] = [graph.children_of(container)]
    while pending:
        children = pending.pop()
        plain: list[NodeId] = []
        for child in children:
            if child in seen:
                raise NavigationCycleError(child, tuple(seen))
            seen.add(child)
            if graph.is_focusable(child):
                result.append(child)
            elif not graph.is_container(child):
                plain.append(child)
        # Reversed so the first plain child is expanded first.
        pending.extend(graph.children_of(child) for child in reversed(plain))
    return tuple(result)


def pick_resumable(graph: NavGraphAccessor, siblings: Sequence[NodeId]) -> NodeId | None:
    """Return the first non-inert sibling, else the first sibling."""
    for sibling in siblings:
        if graph.focus_state_of(sibling) != FocusState.INERT:
            return sibling
    return siblings[0] if siblings else None


def find_gated_fence(graph: NavGraphAccessor, node: NodeId) -> tuple[NodeId, FenceData] | None:
    """Return the fence whose entry point is ``node``, if any."""
    for container in graph.containers():
        data = graph.container_data(container)
        if data.entry_point == node:
            return container, data
    return None


def root_fences(graph: NavGraphAccessor) -> tuple[NodeId, ...]:
    """Return fences without an entry point, in accessor order."""
    return tuple(
        container for container in graph.containers() if graph.container_data(container).is_root
    )
