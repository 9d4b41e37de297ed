"""Request resolution: focused node + request -> transition outcome."""

from __future__ import annotations

import logging

from uinav.api.errors import EmptyFenceError, NavigationCycleError, NotFocusableError
from uinav.api.graph import NavGraphAccessor, NodeId
from uinav.api.navigation import (
    Activate,
    Cancel,
    FocusCaught,
    FocusChanged,
    FocusOn,
    Move,
    NavRequest,
    Step,
    TransitionOutcome,
)
from uinav.runtime.directional import resolve_direction
from uinav.runtime.paths import root_path, trim_common_tail
from uinav.runtime.scope import (
    containing_scope,
    find_gated_fence,
    flatten_focusables,
    pick_resumable,
)
from uinav.runtime.sequential import resolve_sequence

logger = logging.getLogger(__name__)


def resolve(
    graph: NavGraphAccessor,
    focused: NodeId,
    request: NavRequest,
    *,
    strict_empty_fence: bool = False,
) -> TransitionOutcome:
    """Resolve one request starting from ``focused``.

    Pure over ``graph``: no state is written here. Steps inside a fence that is
    not in sequence mode are re-issued from the fence's entry point, extending
    the same traversal path, until a sequence-mode fence or a root is reached.
    """
    path: list[NodeId] = []
    current = focused
    while True:
        _visit(graph, current, path)
        if not isinstance(request, Step):
            return _resolve_direct(graph, focused, request, path, strict_empty_fence)
        scope = containing_scope(graph, current)
        if scope is None:
            return _caught(focused, request, path, "no_scope")
        container, fence = scope
        if fence.sequence_mode:
            siblings = flatten_focusables(graph, container)
            target = resolve_sequence(current, request.direction, siblings)
            if target is None:
                return _caught(focused, request, path, "sequence_end")
            return FocusChanged(from_path=tuple(path), to_path=(target,))
        if fence.entry_point is None:
            return _caught(focused, request, path, "root_scope")
        current = fence.entry_point


def _visit(graph: NavGraphAccessor, node: NodeId, path: list[NodeId]) -> None:
    if not graph.is_focusable(node):
        raise NotFocusableError(node)
    if node in path:
        raise NavigationCycleError(node, tuple(path))
    path.append(node)


def _caught(
    focused: NodeId, request: NavRequest, path: list[NodeId], reason: str
) -> FocusCaught:
    return FocusCaught(focused=focused, request=request, path=tuple(path), reason=reason)


def _resolve_direct(
    graph: NavGraphAccessor,
    focused: NodeId,
    request: NavRequest,
    path: list[NodeId],
    strict_empty_fence: bool,
) -> TransitionOutcome:
    current = path[-1]

    if isinstance(request, Move):
        scope = containing_scope(graph, current)
        if scope is None:
            siblings = tuple(graph.focusables())
        else:
            siblings = flatten_focusables(graph, scope[0])
        target = resolve_direction(graph, current, request.direction, siblings)
        if target is None:
            return _caught(focused, request, path, "no_candidate")
        return FocusChanged(from_path=tuple(path), to_path=(target,))

    if isinstance(request, Cancel):
        scope = containing_scope(graph, current)
        if scope is None:
            return _caught(focused, request, path, "no_scope")
        entry_point = scope[1].entry_point
        if entry_point is None:
            return _caught(focused, request, path, "root_scope")
        _visit(graph, entry_point, path)
        return FocusChanged(from_path=tuple(path), to_path=(entry_point,))

    if isinstance(request, Activate):
        gated = find_gated_fence(graph, current)
        if gated is None:
            return _caught(focused, request, path, "no_gated_fence")
        fence = gated[0]
        target = pick_resumable(graph, flatten_focusables(graph, fence))
        if target is None:
            if strict_empty_fence:
                raise EmptyFenceError(fence, current)
            logger.warning(
                "activated fence has no focusable descendants",
                extra={"fence": fence, "entry_point": current},
            )
            return _caught(focused, request, path, "empty_fence")
        if target in path:
            raise NavigationCycleError(target, tuple(path))
        return FocusChanged(from_path=tuple(path), to_path=(target, current))

    if isinstance(request, FocusOn):
        if not graph.is_focusable(request.target):
            raise NotFocusableError(request.target)
        from_path, to_path = trim_common_tail(
            root_path(graph, current), root_path(graph, request.target)
        )
        return FocusChanged(from_path=from_path, to_path=to_path)

    raise TypeError(f"unsupported navigation request: {request!r}")
