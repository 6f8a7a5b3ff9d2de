"""
Presentation Layer - Training Controller

This module contains the FastAPI controllers for training operations.
Submission lives under the model resource; job lookups have their own
``/training-jobs`` router.
"""

from typing import List
from uuid import UUID

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Query, status

from src.application.dtos.training_dto import (
    StartTrainingResponseDTO,
    TrainingJobDTO,
    TrainingRequestDTO,
)
from src.application.use_cases.training_management_use_case import (
    TrainingManagementError,
    TrainingManagementUseCase,
)
from src.domain.entities.errors import (
    ModelNotFoundError,
    ModelOperationError,
    ModelValidationError,
    TrainingJobNotFoundError,
)
from src.main.container import AppContainer

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/models", tags=["Training"])
jobs_router = APIRouter(prefix="/training-jobs", tags=["Training"])


@router.post(
    "/{model_id}/training-jobs",
    response_model=StartTrainingResponseDTO,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Start training a model",
    description="""
    Queue a simulated training run for the model. The dataset metadata is
    stored, the job starts in `queued` and progresses in the background
    worker. Poll the job to follow its progress.
    """,
)
@inject
async def start_training(
    model_id: UUID,
    request: TrainingRequestDTO,
    training_use_case: TrainingManagementUseCase = Depends(
        Provide[AppContainer.training_management_use_case]
    ),
) -> StartTrainingResponseDTO:
    try:
        return await training_use_case.submit_training(
            model_id=model_id, request=request
        )
    except ModelNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except TrainingManagementError as e:
        logger.warning(
            "training.submit_rejected", model_id=str(model_id), error=str(e)
        )
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except (ModelValidationError, ModelOperationError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error(
            "training.submit_failed",
            model_id=str(model_id),
            error=str(e),
        )
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get(
    "/{model_id}/training-jobs/latest",
    response_model=TrainingJobDTO,
    summary="Get the latest training job of a model",
)
@inject
async def get_latest_training_job(
    model_id: UUID,
    training_use_case: TrainingManagementUseCase = Depends(
        Provide[AppContainer.training_management_use_case]
    ),
) -> TrainingJobDTO:
    try:
        job = await training_use_case.get_latest_training_job(model_id)
    except ModelNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logger.error(
            "training.latest_failed",
            model_id=str(model_id),
            error=str(e),
        )
        raise HTTPException(status_code=500, detail="Internal server error")

    if job is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Model {model_id} has no training jobs",
        )
    return job


@jobs_router.get(
    "/{training_job_id}",
    response_model=TrainingJobDTO,
    summary="Get training job status",
)
@inject
async def get_training_job(
    training_job_id: UUID,
    training_use_case: TrainingManagementUseCase = Depends(
        Provide[AppContainer.training_management_use_case]
    ),
) -> TrainingJobDTO:
    try:
        return await training_use_case.get_training_job(training_job_id)
    except TrainingJobNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logger.error(
            "training.get_failed",
            training_job_id=str(training_job_id),
            error=str(e),
        )
        raise HTTPException(status_code=500, detail="Internal server error")


@jobs_router.get(
    "",
    response_model=List[TrainingJobDTO],
    summary="List a user's training jobs",
    description="Returns training jobs sorted by creation date (newest first).",
)
@inject
async def list_training_jobs(
    user_id: str = Query(..., min_length=1, description="Owner of the jobs"),
    skip: int = Query(0, ge=0, description="Number of records to skip"),
    limit: int = Query(
        100, ge=1, le=1000, description="Maximum number of records to return"
    ),
    training_use_case: TrainingManagementUseCase = Depends(
        Provide[AppContainer.training_management_use_case]
    ),
) -> List[TrainingJobDTO]:
    try:
        return await training_use_case.list_user_training_jobs(
            user_id, skip=skip, limit=limit
        )
    except Exception as e:
        logger.error("training.list_failed", user_id=user_id, error=str(e))
        raise HTTPException(status_code=500, detail="Internal server error")
