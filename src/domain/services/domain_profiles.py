"""Static domain profiles and timeframe lookups used by the forecast generator."""

from types import MappingProxyType
from typing import List, Mapping

from src.domain.entities.forecast import DomainProfile, ForecastDomain, TimeframeSpec

DEFAULT_DOMAIN = ForecastDomain.WEATHER
DEFAULT_TIMEFRAME = "12 months"
DEFAULT_POINTS = 12
DEFAULT_PERIOD = "Period"

DOMAIN_PROFILES: Mapping[ForecastDomain, DomainProfile] = MappingProxyType(
    {
        ForecastDomain.WEATHER: DomainProfile(
            domain=ForecastDomain.WEATHER,
            name="Weather Forecasting",
            description="Temperature outlooks driven by climate patterns",
            unit="°F",
            base_value=70,
            variance=20,
            factors=(
                "Historical Patterns",
                "Ocean Currents",
                "Solar Activity",
                "Atmospheric Pressure",
            ),
        ),
        ForecastDomain.STOCKS: DomainProfile(
            domain=ForecastDomain.STOCKS,
            name="Stock Market Predictions",
            description="Share price projections from market signals",
            unit="$",
            base_value=150,
            variance=50,
            factors=(
                "Market Sentiment",
                "Economic Indicators",
                "Company Performance",
                "Global Events",
            ),
        ),
        ForecastDomain.ELECTIONS: DomainProfile(
            domain=ForecastDomain.ELECTIONS,
            name="Election Trend Analysis",
            description="Vote share estimates from polling and sentiment",
            unit="%",
            base_value=50,
            variance=15,
            factors=(
                "Polling Data",
                "Social Media Sentiment",
                "Historical Voting",
                "Demographics",
            ),
        ),
        ForecastDomain.CLIMATE: DomainProfile(
            domain=ForecastDomain.CLIMATE,
            name="Climate Change Planning",
            description="Atmospheric CO2 concentration scenarios",
            unit="ppm",
            base_value=420,
            variance=10,
            factors=(
                "Emission Trends",
                "Policy Changes",
                "Technology Adoption",
                "Economic Growth",
            ),
        ),
        ForecastDomain.GLOBAL: DomainProfile(
            domain=ForecastDomain.GLOBAL,
            name="Global Strategies",
            description="Geopolitical stability index outlooks",
            unit=" points",
            base_value=70,
            variance=25,
            factors=(
                "Economic Indicators",
                "Geopolitical Events",
                "Trade Relations",
                "Policy Changes",
            ),
        ),
    }
)

TIMEFRAMES: Mapping[str, TimeframeSpec] = MappingProxyType(
    {
        window.label: window
        for window in (
            TimeframeSpec(label="1 week", points=7, period="Day"),
            TimeframeSpec(label="1 month", points=30, period="Day"),
            TimeframeSpec(label="3 months", points=12, period="Week"),
            TimeframeSpec(label="6 months", points=24, period="Week"),
            TimeframeSpec(label="12 months", points=12, period="Month"),
            TimeframeSpec(label="2 years", points=24, period="Month"),
            TimeframeSpec(label="5 years", points=60, period="Month"),
        )
    }
)


def resolve_domain(domain: object) -> DomainProfile:
    """Return the profile for ``domain``, falling back to weather."""
    try:
        key = ForecastDomain(str(getattr(domain, "value", domain)).strip().lower())
    except ValueError:
        key = DEFAULT_DOMAIN
    return DOMAIN_PROFILES[key]


def resolve_timeframe(timeframe: object) -> TimeframeSpec:
    """Return the timeframe entry, or a 12-point ``Period`` entry if unknown."""
    if isinstance(timeframe, str) and timeframe in TIMEFRAMES:
        return TIMEFRAMES[timeframe]
    return TimeframeSpec(
        label=str(timeframe), points=DEFAULT_POINTS, period=DEFAULT_PERIOD
    )


def list_profiles() -> List[DomainProfile]:
    return list(DOMAIN_PROFILES.values())


def list_timeframes() -> List[TimeframeSpec]:
    return list(TIMEFRAMES.values())
