"""
Forecast Use Cases - Application Layer

Generates forecasts with the synthetic generator, optionally centred on the
output of the neural engine, and exposes the domain/timeframe catalogue.
"""

from typing import List, Optional

import structlog

from src.domain.entities.forecast import ForecastResult
from src.domain.ports.forecast_engine import IForecastEngine
from src.domain.services import (
    generate,
    list_profiles,
    list_timeframes,
    resolve_domain,
)
from src.domain.services.forecast_generator import RandomSource

from ..dtos.forecast_dto import (
    DomainProfileDTO,
    EngineStatusDTO,
    ForecastEnginesDTO,
    ForecastRequestDTO,
    ForecastResultDTO,
    SeriesPointDTO,
    TimeframeDTO,
)

logger = structlog.get_logger(__name__)


def forecast_result_to_dto(result: ForecastResult) -> ForecastResultDTO:
    return ForecastResultDTO(
        value=result.value,
        unit=result.unit,
        trend=result.trend,
        series=[
            SeriesPointDTO(label=point.label, value=point.value)
            for point in result.series
        ],
        factors=list(result.factors),
        confidence=result.confidence,
    )


class GenerateForecastUseCase:
    """Use case for generating a single forecast."""

    def __init__(
        self,
        forecast_engine: IForecastEngine,
        random_source: Optional[RandomSource] = None,
    ):
        self.forecast_engine = forecast_engine
        self.random_source = random_source

    def execute(self, request: ForecastRequestDTO) -> ForecastResultDTO:
        """
        Generate a forecast for the requested domain and timeframe.

        When ``feature_vector`` is given the neural engine for the resolved
        domain is queried first and its output becomes the series centre.

        Raises:
            ForecastModelUnavailableError: If a feature vector is given but
                no network is loaded for the domain.
        """
        base_value = None
        if request.feature_vector is not None:
            domain_key = resolve_domain(request.domain).domain.value
            base_value = self.forecast_engine.predict(
                domain_key, request.feature_vector
            )

        result = generate(
            request.domain,
            request.timeframe,
            random=self.random_source,
            base_value=base_value,
        )

        logger.info(
            "forecast.generated",
            domain=request.domain,
            timeframe=request.timeframe,
            neural=base_value is not None,
            points=len(result.series),
            trend=result.trend.value,
        )
        return forecast_result_to_dto(result)


class GetForecastCatalogUseCase:
    """Lists the domain profiles and timeframes clients can pick from."""

    def list_domains(self) -> List[DomainProfileDTO]:
        return [
            DomainProfileDTO(
                id=profile.domain.value,
                name=profile.name,
                description=profile.description,
                unit=profile.unit,
                base_value=profile.base_value,
                variance=profile.variance,
                factors=list(profile.factors),
            )
            for profile in list_profiles()
        ]

    def list_timeframes(self) -> List[TimeframeDTO]:
        return [
            TimeframeDTO(label=window.label, points=window.points, period=window.period)
            for window in list_timeframes()
        ]


class GetForecastEngineStatusUseCase:
    def __init__(self, forecast_engine: IForecastEngine):
        self.forecast_engine = forecast_engine

    def execute(self) -> ForecastEnginesDTO:
        return ForecastEnginesDTO(
            available_domains=self.forecast_engine.available_domains(),
            domains=[
                EngineStatusDTO(
                    domain=profile.domain.value,
                    ready=self.forecast_engine.is_ready(profile.domain.value),
                )
                for profile in list_profiles()
            ],
        )
