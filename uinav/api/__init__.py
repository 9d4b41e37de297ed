"""Public navigation API contracts."""

from uinav.api.errors import (
    EmptyFenceError,
    EmptyNavigationGraphError,
    MissingPositionError,
    MultipleFocusedError,
    NavigationCycleError,
    NavigationFault,
    NotFocusableError,
)
from uinav.api.events import OutcomeBus, Subscription, create_outcome_bus
from uinav.api.graph import (
    FenceData,
    FocusState,
    FocusStateCommitter,
    NavGraphAccessor,
    NavigationGraph,
    NodeId,
    Position,
)
from uinav.api.navigation import (
    Activate,
    Cancel,
    Direction,
    FocusCaught,
    FocusChanged,
    FocusOn,
    Move,
    NavigationEngine,
    NavRequest,
    Step,
    StepDirection,
    TransitionOutcome,
    create_navigation_engine,
)

__all__ = [
    "Activate",
    "Cancel",
    "Direction",
    "EmptyFenceError",
    "EmptyNavigationGraphError",
    "FenceData",
    "FocusCaught",
    "FocusChanged",
    "FocusOn",
    "FocusState",
    "FocusStateCommitter",
    "MissingPositionError",
    "Move",
    "MultipleFocusedError",
    "NavGraphAccessor",
    "NavRequest",
    "NavigationCycleError",
    "NavigationEngine",
    "NavigationFault",
    "NavigationGraph",
    "NodeId",
    "NotFocusableError",
    "OutcomeBus",
    "Position",
    "Step",
    "StepDirection",
    "Subscription",
    "TransitionOutcome",
    "create_navigation_engine",
    "create_outcome_bus",
]
