"""
Domain Entities - Forecast

Value objects produced by the synthetic forecast generator. They are
transient: built per request, handed to the caller and discarded.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence


class ForecastDomain(str, Enum):
    """Prediction categories known to the platform."""

    WEATHER = "weather"
    STOCKS = "stocks"
    ELECTIONS = "elections"
    CLIMATE = "climate"
    GLOBAL = "global"


class Trend(str, Enum):
    """Coarse direction attached to a generated series for display."""

    UP = "up"
    DOWN = "down"
    STABLE = "stable"


@dataclass(frozen=True)
class DomainProfile:
    """Static generation parameters for one domain."""

    domain: ForecastDomain
    name: str
    description: str
    unit: str
    base_value: float
    variance: float
    factors: Sequence[str]


@dataclass(frozen=True)
class TimeframeSpec:
    """Number of points and the label unit used for a timeframe."""

    label: str
    points: int
    period: str


@dataclass(slots=True)
class SeriesPoint:
    """One labelled point of a generated series."""

    label: str
    value: float


@dataclass
class ForecastResult:
    """Output of a forecast generation."""

    value: float
    unit: str
    trend: Trend
    series: List[SeriesPoint] = field(default_factory=list)
    factors: List[str] = field(default_factory=list)
    confidence: int = 70

