"""Request-at-a-time navigation engine: resolve, commit, report."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from uinav.api.errors import EmptyNavigationGraphError, MultipleFocusedError, NavigationFault
from uinav.api.events import OutcomeBus
from uinav.api.graph import NavigationGraph, NodeId
from uinav.api.navigation import (
    FocusChanged,
    NavigationEngine,
    NavRequest,
    TransitionOutcome,
)
from uinav.diagnostics.adapters import emit_fault, emit_outcome
from uinav.diagnostics.hub import DiagnosticHub
from uinav.diagnostics.subscribers import JsonlTraceExporter
from uinav.runtime.commit import commit_outcome
from uinav.runtime.config import NavigationConfig
from uinav.runtime.errors import log_fault
from uinav.runtime.events import RuntimeOutcomeBus
from uinav.runtime.paths import validate_navigation_graph
from uinav.runtime.resolver import resolve
from uinav.runtime.scope import flatten_focusables, pick_resumable, root_fences

logger = logging.getLogger(__name__)


class RuntimeNavigationEngine(NavigationEngine):
    """Default engine over one injected graph.

    Each request is one read-resolve-write cycle. Within a batch the focused
    node is carried forward from the previous outcome instead of being looked
    up again.
    """

    def __init__(
        self,
        graph: NavigationGraph,
        *,
        config: NavigationConfig | None = None,
        outcome_bus: OutcomeBus | None = None,
        diagnostics: DiagnosticHub | None = None,
    ) -> None:
        self._graph = graph
        self._config = config or NavigationConfig()
        self._outcomes = outcome_bus if outcome_bus is not None else RuntimeOutcomeBus()
        self._diagnostics = diagnostics or DiagnosticHub(
            capacity=self._config.diagnostics_buffer_cap,
            enabled=self._config.diagnostics_enabled,
            min_level=self._config.diagnostics_min_level,
        )
        self._tick = 0
        if self._config.validate_on_start:
            validate_navigation_graph(graph)
        self._exporter: JsonlTraceExporter | None = None
        self._exporter_token: int | None = None
        if self._config.trace_path:
            self._exporter = JsonlTraceExporter(path=Path(self._config.trace_path))
            self._exporter_token = self._diagnostics.subscribe(self._exporter.enqueue)

    @property
    def outcomes(self) -> OutcomeBus:
        return self._outcomes

    @property
    def diagnostics(self) -> DiagnosticHub:
        return self._diagnostics

    @property
    def tick(self) -> int:
        """Number of requests handled so far."""
        return self._tick

    def current_focus(self) -> NodeId:
        """Return the focused node, falling back when nothing is focused yet."""
        focused = tuple(self._graph.focused_nodes())
        if len(focused) > 1:
            fault = MultipleFocusedError(focused)
            log_fault(logger, fault, "corrupt focus state")
            raise fault
        if focused:
            return focused[0]
        fallback = self._fallback_focus()
        logger.debug("no focused node; starting from fallback", extra={"node": fallback})
        return fallback

    def request(self, request: NavRequest) -> TransitionOutcome:
        return self.process((request,))[0]

    def process(self, requests: Iterable[NavRequest]) -> tuple[TransitionOutcome, ...]:
        outcomes: list[TransitionOutcome] = []
        focused: NodeId | None = None
        for request in requests:
            if focused is None:
                focused = self.current_focus()
            outcome = self._handle(focused, request)
            if isinstance(outcome, FocusChanged):
                focused = outcome.focused
            outcomes.append(outcome)
        return tuple(outcomes)

    def close(self) -> None:
        """Detach and flush the trace exporter, if any."""
        if self._exporter_token is not None:
            self._diagnostics.unsubscribe(self._exporter_token)
            self._exporter_token = None
        if self._exporter is not None:
            self._exporter.close()
            self._exporter = None

    def _handle(self, focused: NodeId, request: NavRequest) -> TransitionOutcome:
        self._tick += 1
        try:
            outcome = resolve(
                self._graph,
                focused,
                request,
                strict_empty_fence=self._config.strict_empty_fence,
            )
        except NavigationFault as fault:
            log_fault(logger, fault, f"navigation request {request!r} aborted")
            emit_fault(
                self._diagnostics, fault, focused=focused, request=request, tick=self._tick
            )
            raise
        commit_outcome(self._graph, outcome)
        emit_outcome(self._diagnostics, outcome, tick=self._tick)
        self._outcomes.publish(outcome)
        return outcome

    def _fallback_focus(self) -> NodeId:
        if self._config.fallback_focus == "root":
            for fence in root_fences(self._graph):
                candidate = pick_resumable(self._graph, flatten_focusables(self._graph, fence))
                if candidate is not None:
                    return candidate
        for node in self._graph.focusables():
            return node
        fault = EmptyNavigationGraphError()
        log_fault(logger, fault, "cannot pick a starting focus")
        raise fault
