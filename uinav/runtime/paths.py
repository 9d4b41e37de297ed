"""Entry-point chains and their divergence point."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from uinav.api.errors import NavigationCycleError
from uinav.api.graph import NavGraphAccessor, NodeId
from uinav.runtime.scope import containing_scope

logger = logging.getLogger(__name__)


def root_path(graph: NavGraphAccessor, node: NodeId) -> tuple[NodeId, ...]:
    """Return ``node`` followed by the entry points of its enclosing fences.

    The chain stops at the first fence without an entry point (a navigation
    root) or at a node with no enclosing fence.
    """
    path: list[NodeId] = [node]
    current = node
    while True:
        scope = containing_scope(graph, current)
        if scope is None or scope[1].entry_point is None:
            return tuple(path)
        current = scope[1].entry_point
        if current in path:
            raise NavigationCycleError(current, tuple(path))
        path.append(current)


def trim_common_tail[T](
    first: Sequence[T], second: Sequence[T]
) -> tuple[tuple[T, ...], tuple[T, ...]]:
    """Drop the shared tail of two chains, keeping one shared anchor.

    >>> trim_common_tail([1, 2, 3, 4, 5, 6, 7], [3, 2, 1, 4, 5, 6, 7])
    ((1, 2, 3, 4), (3, 2, 1, 4))

    Chains whose last elements differ share no anchor and are returned whole.
    """
    if not first or not second:
        raise ValueError("chains must not be empty")
    i = len(first) - 1
    j = len(second) - 1
    if first[i] != second[j]:
        return tuple(first), tuple(second)
    while i > 0 and j > 0 and first[i - 1] == second[j - 1]:
        i -= 1
        j -= 1
    return tuple(first[: i + 1]), tuple(second[: j + 1])


def validate_navigation_graph(graph: NavGraphAccessor) -> int:
    """Build the root path of every focusable; return how many were checked.

    Raises ``NavigationCycleError`` for the first entry-point cycle found.
    """
    checked = 0
    for node in graph.focusables():
        root_path(graph, node)
        checked += 1
    logger.debug("navigation graph validated", extra={"focusables": checked})
    return checked
