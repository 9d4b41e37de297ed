"""Shared fault-reporting helpers."""

from __future__ import annotations

import logging

from uinav.api.errors import NavigationFault


def log_fault(logger: logging.Logger, fault: NavigationFault, message: str) -> None:
    """Emit structured observability for a fault that is about to propagate."""
    logger.error(
        "%s: %s",
        message,
        fault,
        exc_info=fault,
        extra={"fault": type(fault).__name__, "details": dict(fault.details)},
    )
