"""
Forecasts Router - Presentation Layer

Synthetic forecast generation and the catalogue used to build request forms.
"""

from typing import List

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status

from src.application.dtos.forecast_dto import (
    DomainProfileDTO,
    ForecastEnginesDTO,
    ForecastRequestDTO,
    ForecastResultDTO,
    TimeframeDTO,
)
from src.application.use_cases.forecast_use_cases import (
    GenerateForecastUseCase,
    GetForecastCatalogUseCase,
    GetForecastEngineStatusUseCase,
)
from src.domain.entities.errors import ForecastModelUnavailableError
from src.main.container import AppContainer

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/forecasts", tags=["Forecasts"])


@router.get("/domains", response_model=List[DomainProfileDTO])
@inject
def list_domains(
    catalog_use_case: GetForecastCatalogUseCase = Depends(
        Provide[AppContainer.get_forecast_catalog_use_case]
    ),
) -> List[DomainProfileDTO]:
    """Return the prediction domains with their units and driving factors."""
    return catalog_use_case.list_domains()


@router.get("/timeframes", response_model=List[TimeframeDTO])
@inject
def list_timeframes(
    catalog_use_case: GetForecastCatalogUseCase = Depends(
        Provide[AppContainer.get_forecast_catalog_use_case]
    ),
) -> List[TimeframeDTO]:
    """Return the supported timeframes with their point count and label unit."""
    return catalog_use_case.list_timeframes()


@router.get("/engines", response_model=ForecastEnginesDTO)
@inject
def get_engine_status(
    engine_status_use_case: GetForecastEngineStatusUseCase = Depends(
        Provide[AppContainer.get_forecast_engine_status_use_case]
    ),
) -> ForecastEnginesDTO:
    """Report which domains have a neural network loaded."""
    return engine_status_use_case.execute()


@router.post("", response_model=ForecastResultDTO)
@inject
def generate_forecast(
    request: ForecastRequestDTO,
    generate_use_case: GenerateForecastUseCase = Depends(
        Provide[AppContainer.generate_forecast_use_case]
    ),
) -> ForecastResultDTO:
    """
    Generate a forecast series for a domain and timeframe.

    Supplying ``feature_vector`` centres the series on the output of the
    domain's neural network instead of the profile's base value.
    """
    try:
        return generate_use_case.execute(request)
    except ForecastModelUnavailableError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        )
    except Exception as e:
        logger.error(
            "forecasts.generate_failed",
            domain=request.domain,
            timeframe=request.timeframe,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
