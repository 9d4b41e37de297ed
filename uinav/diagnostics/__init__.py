"""Navigation diagnostics core package."""

from uinav.diagnostics.adapters import describe_request, emit_fault, emit_outcome, outcome_event
from uinav.diagnostics.event import CAUGHT, CHANGED, FAULT, DiagnosticEvent
from uinav.diagnostics.hub import DiagnosticHub
from uinav.diagnostics.subscribers import JsonlTraceExporter

__all__ = [
    "CAUGHT",
    "CHANGED",
    "FAULT",
    "DiagnosticEvent",
    "DiagnosticHub",
    "JsonlTraceExporter",
    "describe_request",
    "emit_fault",
    "emit_outcome",
    "outcome_event",
]
