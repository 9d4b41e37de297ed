"""Nearest-neighbour resolution in a compass direction."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from uinav.api.errors import MissingPositionError
from uinav.api.graph import NavGraphAccessor, NodeId, Position
from uinav.api.navigation import Direction


def _position(graph: NavGraphAccessor, node: NodeId) -> Position:
    position = graph.position_of(node)
    if position is None:
        raise MissingPositionError(node)
    return position


def resolve_direction(
    graph: NavGraphAccessor,
    focused: NodeId,
    direction: Direction,
    siblings: Sequence[NodeId],
) -> NodeId | None:
    """Return the closest sibling lying in ``direction`` from ``focused``.

    Distance is squared Euclidean. Equidistant candidates resolve to the one
    appearing first in ``siblings``.
    """
    origin = _position(graph, focused)
    candidates = [sibling for sibling in siblings if sibling != focused]
    if not candidates:
        return None
    points = np.array([_position(graph, node) for node in candidates], dtype=np.float64)
    offsets = points - np.array(origin, dtype=np.float64)
    # Vectorized form of Direction.contains.
    mask = offsets[:, direction.axis] * direction.sign > 0
    if not mask.any():
        return None
    distances = np.einsum("ij,ij->i", offsets, offsets)
    distances[~mask] = np.inf
    # argmin returns the first minimum, which keeps ties in sibling order.
    return candidates[int(np.argmin(distances))]
