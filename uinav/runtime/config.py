"""Navigation runtime configuration sourced from environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal

type FallbackFocusPolicy = Literal["root", "first"]

_FALLBACK_POLICIES: frozenset[str] = frozenset({"root", "first"})
_DIAGNOSTIC_LEVELS: frozenset[str] = frozenset({"debug", "info", "warning", "error"})


@dataclass(frozen=True, slots=True)
class NavigationConfig:
    """Immutable navigation runtime configuration."""

    fallback_focus: FallbackFocusPolicy = "root"
    strict_empty_fence: bool = False
    validate_on_start: bool = False
    diagnostics_enabled: bool = True
    diagnostics_buffer_cap: int = 1_000
    diagnostics_min_level: str = "debug"
    trace_path: str | None = None


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _int(
    name: str,
    default: int,
    *,
    minimum: int | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    raw = _raw(name, env=env)
    if raw is None:
        value = int(default)
    else:
        try:
            value = int(raw.strip())
        except ValueError:
            value = int(default)
    if minimum is None:
        return value
    return max(int(minimum), value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _fallback_policy(*, env: Mapping[str, str] | None = None) -> FallbackFocusPolicy:
    value = _text("UINAV_FALLBACK_FOCUS", "root", env=env).lower()
    if value not in _FALLBACK_POLICIES:
        return "root"
    return "first" if value == "first" else "root"


def _min_level(*, env: Mapping[str, str] | None = None) -> str:
    value = _text("UINAV_DIAGNOSTICS_MIN_LEVEL", "debug", env=env).lower()
    return value if value in _DIAGNOSTIC_LEVELS else "debug"


def load_navigation_config(env: Mapping[str, str] | None = None) -> NavigationConfig:
    """Load immutable navigation configuration from env vars (or an explicit mapping)."""
    trace_path = _text("UINAV_TRACE_PATH", "", env=env)
    return NavigationConfig(
        fallback_focus=_fallback_policy(env=env),
        strict_empty_fence=_flag("UINAV_STRICT_EMPTY_FENCE", False, env=env),
        validate_on_start=_flag("UINAV_VALIDATE_ON_START", False, env=env),
        diagnostics_enabled=_flag("UINAV_DIAGNOSTICS_ENABLED", True, env=env),
        diagnostics_buffer_cap=_int("UINAV_DIAGNOSTICS_BUFFER_CAP", 1_000, minimum=16, env=env),
        diagnostics_min_level=_min_level(env=env),
        trace_path=trace_path or None,
    )


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with package-prefixed override."""
    value = _raw("UINAV_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env) or default
    return value.strip().upper()
