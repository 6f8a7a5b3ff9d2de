from __future__ import annotations

from typing import List, Sequence, cast

import pytest

from src.application.dtos.forecast_dto import ForecastRequestDTO
from src.application.use_cases.forecast_use_cases import (
    GenerateForecastUseCase,
    GetForecastCatalogUseCase,
    GetForecastEngineStatusUseCase,
)
from src.domain.entities.errors import ForecastModelUnavailableError
from src.domain.entities.forecast import Trend
from src.domain.ports.forecast_engine import IForecastEngine


class _StubEngine:
    def __init__(self, ready: Sequence[str] = (), output: float = 100.0) -> None:
        self.ready = list(ready)
        self.output = output
        self.calls: List[tuple] = []

    def warm_up(self, domains):
        return self.ready

    def is_ready(self, domain: str) -> bool:
        return domain in self.ready

    def available_domains(self) -> List[str]:
        return list(self.ready)

    def predict(self, domain: str, features: Sequence[float]) -> float:
        self.calls.append((domain, list(features)))
        if domain not in self.ready:
            raise ForecastModelUnavailableError(domain)
        return self.output


def _engine(stub: _StubEngine) -> IForecastEngine:
    return cast(IForecastEngine, stub)


def test_generate_without_features_skips_engine() -> None:
    engine = _StubEngine()
    use_case = GenerateForecastUseCase(_engine(engine), random_source=lambda: 0.9)

    result = use_case.execute(ForecastRequestDTO(domain="elections", timeframe="1 week"))

    assert engine.calls == []
    assert result.unit == "%"
    assert result.trend is Trend.STABLE
    assert len(result.series) == 7
    assert result.value == result.series[-1].value


def test_generate_with_features_centres_on_network_output() -> None:
    engine = _StubEngine(ready=["weather"], output=100.0)
    use_case = GenerateForecastUseCase(_engine(engine), random_source=lambda: 0.9)

    result = use_case.execute(
        ForecastRequestDTO(domain="Weather", timeframe="1 week", feature_vector=[1.0])
    )

    assert engine.calls == [("weather", [1.0])]
    # stable trend, noise (0.9 - 0.5) * 20 * 0.3
    assert result.series[0].value == pytest.approx(102.4)
    assert 70 <= result.confidence < 100


def test_unknown_domain_uses_weather_network() -> None:
    engine = _StubEngine(ready=["weather"])
    use_case = GenerateForecastUseCase(_engine(engine))

    use_case.execute(ForecastRequestDTO(domain="mars", feature_vector=[0.0]))

    assert engine.calls[0][0] == "weather"


def test_generate_with_unloaded_domain_raises() -> None:
    use_case = GenerateForecastUseCase(_engine(_StubEngine()))

    with pytest.raises(ForecastModelUnavailableError):
        use_case.execute(ForecastRequestDTO(domain="stocks", feature_vector=[1.0]))


def test_catalog_lists_domains_and_timeframes() -> None:
    catalog = GetForecastCatalogUseCase()

    domains = catalog.list_domains()
    assert [domain.id for domain in domains] == [
        "weather",
        "stocks",
        "elections",
        "climate",
        "global",
    ]
    assert domains[1].name == "Stock Market Predictions"

    timeframes = catalog.list_timeframes()
    assert timeframes[-1].label == "5 years"
    assert timeframes[-1].points == 60


def test_engine_status_reports_readiness() -> None:
    use_case = GetForecastEngineStatusUseCase(_engine(_StubEngine(ready=["climate"])))

    status = use_case.execute()

    assert status.available_domains == ["climate"]
    ready = {entry.domain: entry.ready for entry in status.domains}
    assert ready["climate"] is True
    assert ready["weather"] is False
