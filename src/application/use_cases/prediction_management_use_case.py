"""Use cases for generating, storing and reading user predictions."""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

import structlog

from src.application.dtos.model_dto import ModelSummaryDTO
from src.application.dtos.prediction_dto import (
    PredictionCreateDTO,
    PredictionResponseDTO,
)
from src.domain.entities.errors import ModelNotFoundError
from src.domain.entities.prediction import Prediction, PredictionStatus
from src.domain.repositories.model_repository import IModelRepository
from src.domain.repositories.prediction_repository import IPredictionRepository
from src.domain.services import generate
from src.domain.services.domain_profiles import DEFAULT_TIMEFRAME
from src.domain.services.forecast_generator import RandomSource

from .forecast_use_cases import forecast_result_to_dto

logger = structlog.get_logger(__name__)


class PredictionManagementError(Exception):
    """Base exception for prediction management failures."""


class PredictionNotFoundError(PredictionManagementError):
    """Raised when a stored prediction cannot be found."""


def prediction_to_dto(prediction: Prediction) -> PredictionResponseDTO:
    result_dto = None
    if prediction.result is not None:
        result_dto = forecast_result_to_dto(prediction.result)

    model_dto = None
    if prediction.model is not None:
        model_dto = ModelSummaryDTO(
            name=prediction.model.name,
            domain=prediction.model.domain,
            model_type=prediction.model.model_type,
        )

    return PredictionResponseDTO(
        id=prediction.id,
        user_id=prediction.user_id,
        model_id=prediction.model_id,
        title=prediction.title,
        domain=prediction.domain,
        parameters=prediction.parameters,
        input_data=prediction.input_data,
        prediction_result=result_dto,
        confidence_score=prediction.confidence_score,
        status=prediction.status,
        created_at=prediction.created_at,
        prediction_model=model_dto,
    )


class PredictionManagementUseCase:
    """Generate forecasts for users and keep them as predictions."""

    def __init__(
        self,
        prediction_repository: IPredictionRepository,
        model_repository: IModelRepository,
        random_source: Optional[RandomSource] = None,
    ) -> None:
        self._prediction_repository = prediction_repository
        self._model_repository = model_repository
        self._random_source = random_source

    async def create_prediction(
        self, request: PredictionCreateDTO
    ) -> PredictionResponseDTO:
        """
        Run the generator and persist the outcome.

        Raises:
            ModelNotFoundError: If ``model_id`` references a missing model.
            PredictionManagementError: If the prediction cannot be stored.
        """
        if request.model_id is not None:
            model = await self._model_repository.find_by_id(request.model_id)
            if model is None:
                raise ModelNotFoundError(str(request.model_id))

        timeframe = request.parameters.get("timeframe") or DEFAULT_TIMEFRAME
        result = generate(request.domain, str(timeframe), random=self._random_source)

        prediction = Prediction(
            user_id=request.user_id,
            model_id=request.model_id,
            title=request.title,
            domain=request.domain,
            parameters=dict(request.parameters),
            input_data=request.input_data,
            result=result,
            confidence_score=float(result.confidence),
            status=PredictionStatus.COMPLETED,
        )

        try:
            stored = await self._prediction_repository.create(prediction)
        except Exception as exc:
            raise PredictionManagementError(
                f"Failed to store prediction: {exc}"
            ) from exc

        if stored.model_id is not None:
            stored = await self._prediction_repository.get_by_id(stored.id) or stored

        logger.info(
            "prediction.generated",
            prediction_id=str(stored.id),
            user_id=stored.user_id,
            domain=stored.domain,
            timeframe=timeframe,
        )
        return prediction_to_dto(stored)

    async def list_user_predictions(
        self, user_id: str, skip: int = 0, limit: int = 100
    ) -> List[PredictionResponseDTO]:
        predictions = await self._prediction_repository.get_by_user(
            user_id, skip=skip, limit=limit
        )
        return [prediction_to_dto(prediction) for prediction in predictions]

    async def get_prediction(self, prediction_id: UUID) -> PredictionResponseDTO:
        prediction = await self._prediction_repository.get_by_id(prediction_id)
        if prediction is None:
            raise PredictionNotFoundError(f"Prediction {prediction_id} not found")
        return prediction_to_dto(prediction)
