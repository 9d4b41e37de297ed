"""Navigation trace writer: one JSON line per diagnostics event."""

from __future__ import annotations

import queue
import threading
from dataclasses import dataclass
from pathlib import Path

from uinav.diagnostics.event import DiagnosticEvent
from uinav.diagnostics.json_codec import dumps_bytes

_STOP = object()


@dataclass(frozen=True, slots=True)
class TraceStats:
    written: int
    dropped: int
    pending: int


class JsonlTraceExporter:
    """Append ``DiagnosticEvent.to_record()`` lines to ``path`` off the request path.

    ``enqueue`` never blocks: events arriving while the queue is full are
    counted as dropped. ``close`` drains what was queued before returning.
    """

    def __init__(self, *, path: Path, queue_capacity: int = 2048) -> None:
        self._path = path
        self._queue: queue.Queue[object] = queue.Queue(maxsize=max(32, queue_capacity))
        self._closed = False
        self._written = 0
        self._dropped = 0
        self._thread = threading.Thread(target=self._run, name="uinav-trace-writer", daemon=True)
        self._thread.start()

    @property
    def path(self) -> Path:
        return self._path

    def enqueue(self, event: DiagnosticEvent) -> None:
        if self._closed:
            return
        try:
            self._queue.put_nowait(event)
        except queue.Full:
            self._dropped += 1

    def close(self, *, timeout_s: float = 1.0) -> None:
        if self._closed:
            return
        self._closed = True
        self._queue.put(_STOP)
        self._thread.join(timeout=timeout_s)

    def stats(self) -> TraceStats:
        return TraceStats(
            written=self._written,
            dropped=self._dropped,
            pending=self._queue.qsize(),
        )

    def _run(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("ab") as out:
            while True:
                item = self._queue.get()
                if item is _STOP:
                    break
                if isinstance(item, DiagnosticEvent):
                    out.write(dumps_bytes(item.to_record()) + b"\n")
                    self._written += 1
