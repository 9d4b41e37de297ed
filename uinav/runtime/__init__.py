"""Navigation runtime modules."""

from uinav.api.graph import FenceData, FocusState
from uinav.runtime.commit import commit_outcome
from uinav.runtime.config import NavigationConfig, load_navigation_config
from uinav.runtime.directional import resolve_direction
from uinav.runtime.engine import RuntimeNavigationEngine
from uinav.runtime.events import RuntimeOutcomeBus
from uinav.runtime.logging import configure_navigation_logging, setup_navigation_logging
from uinav.runtime.memory_graph import InMemoryNavGraph
from uinav.runtime.paths import root_path, trim_common_tail, validate_navigation_graph
from uinav.runtime.resolver import resolve
from uinav.runtime.scope import (
    containing_scope,
    find_gated_fence,
    flatten_focusables,
    pick_resumable,
)
from uinav.runtime.sequential import resolve_sequence

__all__ = [
    "FenceData",
    "FocusState",
    "InMemoryNavGraph",
    "NavigationConfig",
    "RuntimeNavigationEngine",
    "RuntimeOutcomeBus",
    "commit_outcome",
    "configure_navigation_logging",
    "containing_scope",
    "find_gated_fence",
    "flatten_focusables",
    "load_navigation_config",
    "pick_resumable",
    "resolve",
    "resolve_direction",
    "resolve_sequence",
    "root_path",
    "setup_navigation_logging",
    "trim_common_tail",
    "validate_navigation_graph",
]
