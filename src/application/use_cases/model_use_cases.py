"""
Model Use Cases - Application Layer

This module defines use cases for model operations.
It orchestrates the flow of data to and from the entities
and implements the business rules of the application.
"""

from typing import List, Optional
from uuid import UUID

import structlog

from src.domain.entities.errors import ModelNotFoundError
from src.domain.entities.model import PredictionModel
from src.domain.repositories.model_repository import IModelRepository

from ..dtos.model_dto import ModelCreateDTO, ModelResponseDTO

logger = structlog.get_logger(__name__)


def model_to_dto(model: PredictionModel) -> ModelResponseDTO:
    return ModelResponseDTO(
        id=model.id,
        user_id=model.user_id,
        name=model.name,
        domain=model.domain,
        model_type=model.model_type,
        training_status=model.training_status,
        accuracy_score=model.accuracy_score,
        is_public=model.is_public,
        configuration=model.configuration,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class CreateModelUseCase:
    """Use case for creating a new model."""

    def __init__(self, model_repository: IModelRepository):
        self.model_repository = model_repository

    async def execute(self, dto: ModelCreateDTO) -> ModelResponseDTO:
        """
        Create a new model.

        New models start in ``pending`` training status.

        Args:
            dto: Model creation data

        Returns:
            Created model response DTO

        Raises:
            ModelOperationError: If model creation fails
        """
        model = PredictionModel(
            user_id=dto.user_id,
            name=dto.name,
            domain=dto.domain,
            model_type=dto.model_type,
            is_public=dto.is_public,
            configuration=dict(dto.configuration),
        )

        created = await self.model_repository.create(model)
        logger.info(
            "model.created",
            model_id=str(created.id),
            user_id=created.user_id,
            domain=created.domain,
        )
        return model_to_dto(created)


class GetUserModelsUseCase:
    """Use case for retrieving the models owned by a user."""

    def __init__(self, model_repository: IModelRepository):
        self.model_repository = model_repository

    async def execute(
        self,
        user_id: str,
        skip: int = 0,
        limit: int = 100,
        domain: Optional[str] = None,
    ) -> List[ModelResponseDTO]:
        """
        List a user's models, newest first.

        Args:
            user_id: Owner of the models
            skip: Number of records to skip
            limit: Maximum number of records to return
            domain: Optional domain filter
        """
        models = await self.model_repository.find_by_user(
            user_id, skip=skip, limit=limit, domain=domain
        )
        return [model_to_dto(model) for model in models]


class GetModelByIdUseCase:
    """Use case for retrieving a model by ID."""

    def __init__(self, model_repository: IModelRepository):
        self.model_repository = model_repository

    async def execute(self, model_id: UUID) -> ModelResponseDTO:
        """
        Raises:
            ModelNotFoundError: If the model doesn't exist
        """
        model = await self.model_repository.find_by_id(model_id)
        if model is None:
            raise ModelNotFoundError(str(model_id))
        return model_to_dto(model)
