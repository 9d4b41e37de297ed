"""Fatal navigation fault types.

These signal a malformed graph or caller misuse. Requests that merely have no
effect are reported as ``FocusCaught`` outcomes instead.
"""

from __future__ import annotations

from collections.abc import Mapping


class NavigationFault(RuntimeError):
    """Base class for faults that abort resolution."""

    def __init__(self, message: str, *, details: Mapping[str, object] | None = None) -> None:
        super().__init__(message)
        self.details: dict[str, object] = dict(details or {})


class NavigationCycleError(NavigationFault):
    """A hierarchy or entry-point walk revisited a node."""

    def __init__(self, node: object, path: tuple[object, ...]) -> None:
        super().__init__(
            f"navigation graph cycle detected at node {node!r}; "
            "check fences whose entry point is one of their own focusables",
            details={"node": node, "path": path},
        )
        self.node = node
        self.path = path


class NotFocusableError(NavigationFault):
    """Resolution was asked to start from, or jump to, a non-focusable node."""

    def __init__(self, node: object) -> None:
        super().__init__(f"node {node!r} is not focusable", details={"node": node})
        self.node = node


class MultipleFocusedError(NavigationFault):
    """More than one node carries the focused marker."""

    def __init__(self, nodes: tuple[object, ...]) -> None:
        super().__init__(
            f"{len(nodes)} nodes are focused at once: {nodes!r}",
            details={"nodes": nodes},
        )
        self.nodes = nodes


class MissingPositionError(NavigationFault):
    """A focusable involved in directional resolution has no position."""

    def __init__(self, node: object) -> None:
        super().__init__(f"focusable {node!r} has no position", details={"node": node})
        self.node = node


class EmptyNavigationGraphError(NavigationFault):
    """No focusable exists to start resolution from."""

    def __init__(self) -> None:
        super().__init__("navigation graph has no focusable nodes")


class EmptyFenceError(NavigationFault):
    """An activated fence has no reachable focusable (strict mode only)."""

    def __init__(self, fence: object, entry_point: object) -> None:
        super().__init__(
            f"fence {fence!r} reachable from {entry_point!r} has no focusable descendants",
            details={"fence": fence, "entry_point": entry_point},
        )
        self.fence = fence
        self.entry_point = entry_point
