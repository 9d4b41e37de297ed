"""Focus-navigation resolution for nested UI menus."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from uinav.api.graph import NavigationGraph
    from uinav.api.navigation import NavigationEngine


def create_engine(graph: NavigationGraph) -> NavigationEngine:
    """Create a navigation engine over ``graph`` using environment configuration."""
    from uinav.api.navigation import create_navigation_engine
    from uinav.runtime.config import load_navigation_config

    return create_navigation_engine(graph, config=load_navigation_config())


__all__ = ["create_engine"]
