"""
Domain Service - Synthetic Forecast Generator

Produces display-only forecasts: a randomized series shaped by a linear
trend around the domain's base value, plus a cosmetic confidence score.

Randomness is drawn from a single injectable source, in this order: one
draw for the trend, one per series point for noise, one for confidence.
Inject a fixed-sequence callable to get reproducible output.

The generator never raises. Unknown domains use the weather profile and
unknown timeframes produce twelve ``Period`` points.
"""

import math
import random as _random
from typing import Callable, List, Optional

from src.domain.entities.forecast import ForecastResult, SeriesPoint, Trend
from src.domain.services.domain_profiles import resolve_domain, resolve_timeframe

RandomSource = Callable[[], float]

TRENDS = (Trend.UP, Trend.DOWN, Trend.STABLE)
TREND_SLOPE = 0.5
NOISE_SCALE = 0.3
CONFIDENCE_FLOOR = 70
CONFIDENCE_SPAN = 30


def round_half_up(value: float, digits: int = 2) -> float:
    """Round half-up to ``digits`` decimals."""
    factor = 10**digits
    scaled = value * factor + 0.5
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled) / factor


def _draw(source: RandomSource) -> float:
    # Keep every draw inside [0, 1) whatever the injected source returns.
    value = source()
    if not isinstance(value, (int, float)) or not math.isfinite(value):
        return 0.0
    return min(max(float(value), 0.0), math.nextafter(1.0, 0.0))


def _choose_trend(source: RandomSource) -> Trend:
    return TRENDS[int(_draw(source) * len(TRENDS))]


def _drift(trend: Trend, index: int, points: int, variance: float) -> float:
    if trend is Trend.STABLE:
        return 0.0
    slope = TREND_SLOPE * variance * (index / points)
    return slope if trend is Trend.UP else -slope


def generate(
    domain: str,
    timeframe: str,
    random: Optional[RandomSource] = None,
    base_value: Optional[float] = None,
) -> ForecastResult:
    """
    Generate a synthetic forecast.

    Args:
        domain: Domain identifier (``weather``, ``stocks``, ...).
        timeframe: Timeframe label (``"1 week"`` ... ``"5 years"``).
        random: Zero-argument callable returning floats in [0, 1).
            Defaults to :func:`random.random`.
        base_value: Optional centre overriding the profile's base value.
            Non-finite values are ignored.

    Returns:
        A ForecastResult whose ``value`` equals the last series point.
    """
    source = random or _random.random
    profile = resolve_domain(domain)
    window = resolve_timeframe(timeframe)

    centre = float(profile.base_value)
    if base_value is not None and math.isfinite(base_value):
        centre = float(base_value)
    variance = float(profile.variance)
    points = max(window.points, 1)

    trend = _choose_trend(source)

    series: List[SeriesPoint] = []
    for index in range(points):
        noise = (_draw(source) - 0.5) * variance * NOISE_SCALE
        raw_value = centre + _drift(trend, index, points, variance) + noise
        series.append(
            SeriesPoint(
                label=f"{window.period} {index + 1}",
                value=round_half_up(max(0.0, raw_value)),
            )
        )

    confidence = int(math.floor(_draw(source) * CONFIDENCE_SPAN)) + CONFIDENCE_FLOOR

    return ForecastResult(
        value=series[-1].value,
        unit=profile.unit,
        trend=trend,
        series=series,
        factors=list(profile.factors),
        confidence=confidence,
    )
