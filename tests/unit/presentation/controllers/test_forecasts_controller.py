from __future__ import annotations

from typing import cast

import pytest
from fastapi import HTTPException

from src.application.dtos.forecast_dto import (
    EngineStatusDTO,
    ForecastEnginesDTO,
    ForecastRequestDTO,
    ForecastResultDTO,
    SeriesPointDTO,
)
from src.application.use_cases.forecast_use_cases import (
    GenerateForecastUseCase,
    GetForecastCatalogUseCase,
    GetForecastEngineStatusUseCase,
)
from src.domain.entities.errors import ForecastModelUnavailableError
from src.domain.entities.forecast import Trend
from src.presentation.controllers import forecasts_controller


def _as_generate(use_case: object) -> GenerateForecastUseCase:
    return cast(GenerateForecastUseCase, use_case)


class _Generator:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error

    def execute(self, request: ForecastRequestDTO) -> ForecastResultDTO:
        if self.error:
            raise self.error
        return ForecastResultDTO(
            value=1.0,
            unit="$",
            trend=Trend.UP,
            series=[SeriesPointDTO(label="Day 1", value=1.0)],
            factors=["Market Sentiment"],
            confidence=80,
        )


def test_generate_forecast_returns_result() -> None:
    result = forecasts_controller.generate_forecast(
        request=ForecastRequestDTO(domain="stocks"),
        generate_use_case=_as_generate(_Generator()),
    )
    assert result.unit == "$"


def test_generate_forecast_engine_unavailable_maps_to_503() -> None:
    with pytest.raises(HTTPException) as exc:
        forecasts_controller.generate_forecast(
            request=ForecastRequestDTO(feature_vector=[1.0]),
            generate_use_case=_as_generate(
                _Generator(ForecastModelUnavailableError("weather"))
            ),
        )
    assert exc.value.status_code == 503
    assert "weather" in exc.value.detail


def test_generate_forecast_unexpected_error_maps_to_500() -> None:
    with pytest.raises(HTTPException) as exc:
        forecasts_controller.generate_forecast(
            request=ForecastRequestDTO(),
            generate_use_case=_as_generate(_Generator(RuntimeError("boom"))),
        )
    assert exc.value.status_code == 500
    assert exc.value.detail == "Internal server error"


def test_catalog_endpoints() -> None:
    catalog = GetForecastCatalogUseCase()

    domains = forecasts_controller.list_domains(catalog_use_case=catalog)
    timeframes = forecasts_controller.list_timeframes(catalog_use_case=catalog)

    assert len(domains) == 5
    assert len(timeframes) == 7


def test_engine_status_endpoint() -> None:
    class _Status:
        def execute(self) -> ForecastEnginesDTO:
            return ForecastEnginesDTO(
                available_domains=["weather"],
                domains=[EngineStatusDTO(domain="weather", ready=True)],
            )

    status = forecasts_controller.get_engine_status(
        engine_status_use_case=cast(GetForecastEngineStatusUseCase, _Status())
    )
    assert status.available_domains == ["weather"]
