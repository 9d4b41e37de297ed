"""Navigation diagnostics records."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from uinav.api.graph import NodeId

CHANGED = "nav.changed"
CAUGHT = "nav.caught"
FAULT = "nav.fault"


def utc_now_iso() -> str:
    """Return an RFC3339-like UTC timestamp with milliseconds."""
    return datetime.now(tz=UTC).isoformat(timespec="milliseconds")


@dataclass(frozen=True, slots=True)
class DiagnosticEvent:
    """One resolved (or aborted) navigation request.

    ``name`` is one of ``nav.changed``, ``nav.caught`` or ``nav.fault``. Paths
    are only set for changes; ``reason`` holds the caught reason or the fault
    class name.
    """

    tick: int
    name: str
    level: str = "info"
    focused: NodeId | None = None
    request: dict[str, Any] = field(default_factory=dict)
    from_path: tuple[NodeId, ...] = ()
    to_path: tuple[NodeId, ...] = ()
    reason: str = ""
    details: dict[str, Any] = field(default_factory=dict)
    ts_utc: str = field(default_factory=utc_now_iso)

    @property
    def is_fault(self) -> bool:
        return self.name == FAULT

    def to_record(self) -> dict[str, Any]:
        """Flatten into a trace line; empty optional fields are left out."""
        record: dict[str, Any] = {
            "ts": self.ts_utc,
            "tick": int(self.tick),
            "event": self.name,
            "level": self.level,
            "focused": self.focused,
        }
        if self.request:
            record["request"] = dict(self.request)
        if self.from_path:
            record["from"] = list(self.from_path)
        if self.to_path:
            record["to"] = list(self.to_path)
        if self.reason:
            record["reason"] = self.reason
        if self.details:
            record["details"] = dict(self.details)
        return record
