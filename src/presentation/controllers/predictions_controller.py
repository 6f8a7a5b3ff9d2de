"""
Predictions Router - Presentation Layer

Generates forecasts on behalf of a user and stores them as predictions.
"""

from typing import List
from uuid import UUID

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Query, status

from src.application.dtos.prediction_dto import (
    PredictionCreateDTO,
    PredictionResponseDTO,
)
from src.application.use_cases.prediction_management_use_case import (
    PredictionManagementError,
    PredictionManagementUseCase,
    PredictionNotFoundError,
)
from src.domain.entities.errors import ModelNotFoundError
from src.main.container import AppContainer

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/predictions", tags=["Predictions"])


@router.post(
    "",
    response_model=PredictionResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_prediction(
    request: PredictionCreateDTO,
    prediction_use_case: PredictionManagementUseCase = Depends(
        Provide[AppContainer.prediction_management_use_case]
    ),
) -> PredictionResponseDTO:
    """
    Generate a forecast for ``domain`` and ``parameters.timeframe`` and store it.
    """
    try:
        return await prediction_use_case.create_prediction(request)
    except ModelNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except PredictionManagementError as e:
        logger.error("predictions.create_failed", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error("predictions.create_unexpected_error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.get("", response_model=List[PredictionResponseDTO])
@inject
async def list_predictions(
    user_id: str = Query(..., min_length=1),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    prediction_use_case: PredictionManagementUseCase = Depends(
        Provide[AppContainer.prediction_management_use_case]
    ),
) -> List[PredictionResponseDTO]:
    try:
        return await prediction_use_case.list_user_predictions(
            user_id, skip=skip, limit=limit
        )
    except Exception as e:
        logger.error("predictions.list_failed", user_id=user_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.get("/{prediction_id}", response_model=PredictionResponseDTO)
@inject
async def get_prediction(
    prediction_id: UUID,
    prediction_use_case: PredictionManagementUseCase = Depends(
        Provide[AppContainer.prediction_management_use_case]
    ),
) -> PredictionResponseDTO:
    try:
        return await prediction_use_case.get_prediction(prediction_id)
    except PredictionNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logger.error(
            "predictions.get_failed",
            prediction_id=str(prediction_id),
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
