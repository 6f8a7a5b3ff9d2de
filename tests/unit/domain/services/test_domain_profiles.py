from __future__ import annotations

import pytest

from src.domain.entities.forecast import ForecastDomain
from src.domain.services import (
    DOMAIN_PROFILES,
    list_profiles,
    list_timeframes,
    resolve_domain,
    resolve_timeframe,
)


def test_every_domain_has_a_profile() -> None:
    assert set(DOMAIN_PROFILES) == set(ForecastDomain)
    for profile in list_profiles():
        assert len(profile.factors) == 4
        assert profile.variance > 0


@pytest.mark.parametrize(
    "domain,unit,base_value",
    [
        ("weather", "°F", 70),
        ("stocks", "$", 150),
        ("elections", "%", 50),
        ("climate", "ppm", 420),
        ("global", " points", 70),
    ],
)
def test_profile_table(domain: str, unit: str, base_value: float) -> None:
    profile = resolve_domain(domain)
    assert profile.unit == unit
    assert profile.base_value == base_value


@pytest.mark.parametrize("domain", ["foo", "", None, 42])
def test_resolve_domain_falls_back_to_weather(domain) -> None:
    assert resolve_domain(domain).domain is ForecastDomain.WEATHER


def test_resolve_domain_accepts_enum_members() -> None:
    assert resolve_domain(ForecastDomain.CLIMATE).unit == "ppm"


def test_timeframes_are_listed_in_order() -> None:
    labels = [window.label for window in list_timeframes()]
    assert labels == [
        "1 week",
        "1 month",
        "3 months",
        "6 months",
        "12 months",
        "2 years",
        "5 years",
    ]


def test_resolve_timeframe_known_and_unknown() -> None:
    week = resolve_timeframe("3 months")
    assert (week.points, week.period) == (12, "Week")

    unknown = resolve_timeframe("forever")
    assert (unknown.points, unknown.period) == (12, "Period")

    assert resolve_timeframe(None).points == 12


def test_profiles_are_read_only() -> None:
    with pytest.raises(TypeError):
        DOMAIN_PROFILES[ForecastDomain.WEATHER] = None  # type: ignore[index]
