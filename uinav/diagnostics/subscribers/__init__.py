"""Diagnostics subscribers."""

from uinav.diagnostics.subscribers.jsonl_exporter import JsonlTraceExporter, TraceStats

__all__ = ["JsonlTraceExporter", "TraceStats"]
