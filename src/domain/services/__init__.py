"""Domain services: the synthetic forecast generator and its profile tables."""

from .domain_profiles import (
    DOMAIN_PROFILES,
    TIMEFRAMES,
    list_profiles,
    list_timeframes,
    resolve_domain,
    resolve_timeframe,
)
from .forecast_generator import RandomSource, generate, round_half_up

__all__ = [
    "DOMAIN_PROFILES",
    "TIMEFRAMES",
    "list_profiles",
    "list_timeframes",
    "resolve_domain",
    "resolve_timeframe",
    "RandomSource",
    "generate",
    "round_half_up",
]
