"""Adapters from navigation outcomes and faults into diagnostics events."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from uinav.api.errors import NavigationFault
from uinav.api.graph import NodeId
from uinav.api.navigation import FocusCaught, FocusChanged, NavRequest, TransitionOutcome
from uinav.diagnostics.event import CAUGHT, CHANGED, FAULT, DiagnosticEvent
from uinav.diagnostics.hub import DiagnosticHub


def describe_request(request: NavRequest) -> dict[str, Any]:
    """Flatten a request into a JSON-friendly mapping."""
    return {"kind": type(request).__name__, **asdict(request)}


def outcome_event(outcome: TransitionOutcome, *, tick: int) -> DiagnosticEvent:
    if isinstance(outcome, FocusChanged):
        return DiagnosticEvent(
            tick=tick,
            name=CHANGED,
            focused=outcome.focused,
            from_path=outcome.from_path,
            to_path=outcome.to_path,
        )
    if isinstance(outcome, FocusCaught):
        # Empty fences are configuration faults surfaced as no-ops.
        return DiagnosticEvent(
            tick=tick,
            name=CAUGHT,
            level="warning" if outcome.reason == "empty_fence" else "info",
            focused=outcome.focused,
            request=describe_request(outcome.request),
            reason=outcome.reason,
            details={"path": list(outcome.path)},
        )
    raise TypeError(f"not a transition outcome: {outcome!r}")


def emit_outcome(hub: DiagnosticHub, outcome: TransitionOutcome, *, tick: int) -> None:
    """Record one transition outcome as ``nav.changed`` or ``nav.caught``."""
    hub.emit(outcome_event(outcome, tick=tick))


def emit_fault(
    hub: DiagnosticHub,
    fault: NavigationFault,
    *,
    focused: NodeId | None,
    request: NavRequest,
    tick: int,
) -> None:
    hub.emit(
        DiagnosticEvent(
            tick=tick,
            name=FAULT,
            level="error",
            focused=focused,
            request=describe_request(request),
            reason=type(fault).__name__,
            details={"message": str(fault), **fault.details},
        )
    )
