"""Environment variable readers for configuration."""

from __future__ import annotations

import os

from .errors import ConfigurationError


def env_str(name: str, default: str) -> str:
    """Return the environment variable ``name`` or ``default`` when unset/blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def env_int(name: str, default: int) -> int:
    raw = env_str(name, "")
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


def env_float(name: str, default: float) -> float:
    raw = env_str(name, "")
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc


def env_list(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    """Read a comma-separated list; blank items are dropped."""

    raw = env_str(name, "")
    if not raw:
        return default
    items = tuple(item.strip() for item in raw.split(",") if item.strip())
    if not items:
        raise ConfigurationError(f"{name} does not name any value")
    return items
