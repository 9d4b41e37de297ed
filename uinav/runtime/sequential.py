"""Next/previous stepping over an ordered sibling list."""

from __future__ import annotations

from collections.abc import Sequence

from uinav.api.graph import NodeId
from uinav.api.navigation import StepDirection


def resolve_sequence(
    focused: NodeId,
    step: StepDirection,
    siblings: Sequence[NodeId],
) -> NodeId | None:
    """Return the sibling adjacent to ``focused``; no wrap-around."""
    try:
        index = list(siblings).index(focused)
    except ValueError:
        return None
    if step is StepDirection.NEXT:
        return siblings[index + 1] if index + 1 < len(siblings) else None
    if index == 0:
        return None
    return siblings[index - 1]
