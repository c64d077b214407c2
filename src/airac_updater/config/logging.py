"""Logging helpers for the updater."""

from __future__ import annotations

import logging

from airac_updater.common.progress import TRACE

PROGRESS_LOGGER_NAME = "airac_updater.progress"

_LEVEL_NAMES = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def parse_log_level(value: str) -> int:
    """Translate a level name (``trace`` .. ``error``) into a ``logging`` level."""

    try:
        return _LEVEL_NAMES[value.strip().lower()]
    except KeyError:
        choices = ", ".join(sorted(_LEVEL_NAMES))
        raise ValueError(f"Unknown log level {value!r} (expected one of: {choices})") from None


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: we default
    to INFO level and a terse format suitable for CLI output. Pass ``force=True`` to
    reconfigure during tests or specialised entry points.
    """

    logging.addLevelName(TRACE, "TRACE")
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
