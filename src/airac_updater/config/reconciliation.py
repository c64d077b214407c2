"""Matching thresholds for the reconciliation fold."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import env_float
from .errors import ConfigurationError

DEFAULT_FIX_MATCH_RADIUS_M: Final[float] = 1000.0
DEFAULT_FIX_DESIGNATOR_LENGTH: Final[int] = 5
DEFAULT_AIRSPACE_CLASS: Final[str] = "D"
DEFAULT_AIRPORT_FREQUENCY: Final[str] = "000.000"


@dataclass(frozen=True, slots=True)
class ReconciliationConfig:
    """Domain heuristics; the defaults reproduce the established behaviour."""

    fix_match_radius_m: float = DEFAULT_FIX_MATCH_RADIUS_M
    fix_designator_length: int = DEFAULT_FIX_DESIGNATOR_LENGTH
    default_airspace_class: str = DEFAULT_AIRSPACE_CLASS
    default_airport_frequency: str = DEFAULT_AIRPORT_FREQUENCY


def get_reconciliation_config() -> ReconciliationConfig:
    radius = env_float("AIRAC_UPDATER_FIX_RADIUS_M", DEFAULT_FIX_MATCH_RADIUS_M)
    if radius <= 0:
        raise ConfigurationError("AIRAC_UPDATER_FIX_RADIUS_M must be positive")
    return ReconciliationConfig(fix_match_radius_m=radius)
