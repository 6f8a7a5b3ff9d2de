"""
Models Router - Presentation Layer

This module defines the FastAPI router for model endpoints.
"""

from typing import List, Optional

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import UUID4

from src.application.dtos.model_dto import ModelCreateDTO, ModelResponseDTO
from src.application.use_cases.model_use_cases import (
    CreateModelUseCase,
    GetModelByIdUseCase,
    GetUserModelsUseCase,
)
from src.domain.entities.errors import (
    ModelNotFoundError,
    ModelOperationError,
    ModelValidationError,
)
from src.main.container import AppContainer

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/models", tags=["Models"])


@router.get("", response_model=List[ModelResponseDTO])
@inject
async def get_models(
    user_id: str = Query(..., min_length=1, description="Owner of the models"),
    skip: int = Query(0, ge=0, description="Number of models to skip"),
    limit: int = Query(
        100, ge=1, le=1000, description="Maximum number of models to return"
    ),
    domain: Optional[str] = Query(None, description="Filter by prediction domain"),
    get_models_use_case: GetUserModelsUseCase = Depends(
        Provide[AppContainer.get_user_models_use_case]
    ),
) -> List[ModelResponseDTO]:
    """
    List the models owned by a user, newest first.
    """
    try:
        return await get_models_use_case.execute(
            user_id=user_id, skip=skip, limit=limit, domain=domain
        )
    except Exception as e:
        logger.error("models.list_failed", user_id=user_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.get("/{model_id}", response_model=ModelResponseDTO)
@inject
async def get_model_by_id(
    model_id: UUID4,
    get_model_use_case: GetModelByIdUseCase = Depends(
        Provide[AppContainer.get_model_by_id_use_case]
    ),
) -> ModelResponseDTO:
    try:
        return await get_model_use_case.execute(model_id=model_id)
    except ModelNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except Exception as e:
        logger.error(
            "models.get_failed",
            model_id=str(model_id),
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.post(
    "",
    response_model=ModelResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_model(
    model_dto: ModelCreateDTO,
    create_model_use_case: CreateModelUseCase = Depends(
        Provide[AppContainer.create_model_use_case]
    ),
) -> ModelResponseDTO:
    """
    Register a new prediction model. It starts untrained and private unless
    ``is_public`` is set.
    """
    try:
        return await create_model_use_case.execute(model_dto)
    except ModelValidationError as e:
        logger.error("models.create_failed", error=str(e), details=e.details)
        detail = {"message": e.message, **e.details} if e.details else str(e)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
        )
    except ModelOperationError as e:
        logger.error("models.create_failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logger.error("models.create_unexpected_error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
