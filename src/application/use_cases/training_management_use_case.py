"""
Application Use Cases - Training Management

This module contains use cases for submitting training jobs and reading
their progress.
"""

from typing import List, Optional
from uuid import UUID

import structlog

from src.application.dtos.training_dto import (
    StartTrainingResponseDTO,
    TrainingConfigDTO,
    TrainingJobDTO,
    TrainingRequestDTO,
)
from src.domain.entities.errors import ModelNotFoundError, TrainingJobNotFoundError
from src.domain.entities.model import ModelTrainingStatus, PredictionModel
from src.domain.entities.training_job import (
    TrainingConfig,
    TrainingDataset,
    TrainingJob,
)
from src.domain.ports.training_orchestrator import ITrainingOrchestrator
from src.domain.repositories.model_repository import IModelRepository
from src.domain.repositories.training_job_repository import ITrainingJobRepository

logger = structlog.get_logger(__name__)


class TrainingManagementError(Exception):
    """Exception raised when training management operations fail."""

    pass


def training_job_to_dto(job: TrainingJob) -> TrainingJobDTO:
    return TrainingJobDTO(
        id=job.id,
        model_id=job.model_id,
        user_id=job.user_id,
        status=job.status,
        progress_percentage=job.progress_percentage,
        training_logs=job.training_logs,
        error_message=job.error_message,
        training_config=TrainingConfigDTO(**job.training_config.__dict__),
        task_id=job.task_id,
        started_at=job.started_at,
        completed_at=job.completed_at,
        created_at=job.created_at,
        updated_at=job.updated_at,
        duration_seconds=job.get_duration(),
    )


class TrainingManagementUseCase:
    """Use case for managing training jobs."""

    def __init__(
        self,
        training_job_repository: ITrainingJobRepository,
        model_repository: IModelRepository,
        training_orchestrator: ITrainingOrchestrator,
    ):
        """
        Initialize the training management use case.

        Args:
            training_job_repository: Repository for training jobs and datasets
            model_repository: Repository for models
            training_orchestrator: Dispatches the background simulation
        """
        self.training_job_repository = training_job_repository
        self.model_repository = model_repository
        self.training_orchestrator = training_orchestrator

    async def submit_training(
        self, model_id: UUID, request: TrainingRequestDTO
    ) -> StartTrainingResponseDTO:
        """
        Submit a new training job for a model.

        Args:
            model_id: ID of the model to train
            request: Training request parameters

        Returns:
            Response with training job ID

        Raises:
            ModelNotFoundError: When the model does not exist
            TrainingManagementError: When training cannot be started
        """
        model = await self.model_repository.find_by_id(model_id)
        if model is None:
            raise ModelNotFoundError(str(model_id))

        latest = await self.training_job_repository.get_latest_by_model_id(model_id)
        if latest is not None and not latest.is_terminal():
            raise TrainingManagementError(
                f"Model {model_id} already has an active training job: {latest.id}"
            )

        config = TrainingConfig(**request.training_config.model_dump())

        dataset = TrainingDataset(
            model_id=model_id,
            user_id=request.user_id,
            dataset_name=request.dataset_name,
            data_source=request.data_source,
            data_format=request.data_format,
            data_content={"training_config": request.training_config.model_dump()},
            column_mapping=dict(request.column_mapping),
        )
        await self.training_job_repository.save_dataset(dataset)

        training_job = TrainingJob(
            model_id=model_id,
            user_id=request.user_id,
            training_config=config,
        )
        training_job = await self.training_job_repository.create(training_job)

        previous_status = model.training_status
        model.mark_training()
        await self.model_repository.update(model)

        try:
            task_id = await self.training_orchestrator.dispatch_training_job(
                training_job_id=training_job.id,
                model_id=model_id,
            )
        except Exception as exc:
            logger.error(
                "training.dispatch_failed",
                training_job_id=str(training_job.id),
                model_id=str(model_id),
                error=str(exc),
            )
            training_job.mark_failed(f"Failed to dispatch training: {exc}")
            await self.training_job_repository.update(training_job)
            await self._restore_model_status(model, previous_status)
            raise TrainingManagementError(
                f"Failed to start training: {exc}"
            ) from exc

        training_job.task_id = task_id
        training_job.update_timestamp()
        await self.training_job_repository.update(training_job)

        logger.info(
            "training.submitted",
            training_job_id=str(training_job.id),
            model_id=str(model_id),
            task_id=task_id,
        )

        return StartTrainingResponseDTO(
            training_job_id=training_job.id,
            message="Training job started successfully",
            status=training_job.status,
        )

    async def _restore_model_status(
        self, model: PredictionModel, status: ModelTrainingStatus
    ) -> None:
        model.training_status = status
        model.update_timestamp()
        await self.model_repository.update(model)

    async def get_training_job(self, training_job_id: UUID) -> TrainingJobDTO:
        """
        Raises:
            TrainingJobNotFoundError: If the job doesn't exist
        """
        job = await self.training_job_repository.get_by_id(training_job_id)
        if job is None:
            raise TrainingJobNotFoundError(str(training_job_id))
        return training_job_to_dto(job)

    async def get_latest_training_job(
        self, model_id: UUID
    ) -> Optional[TrainingJobDTO]:
        """Return the most recent job for a model, or None if it was never trained."""
        model = await self.model_repository.find_by_id(model_id)
        if model is None:
            raise ModelNotFoundError(str(model_id))

        job = await self.training_job_repository.get_latest_by_model_id(model_id)
        return training_job_to_dto(job) if job else None

    async def list_user_training_jobs(
        self, user_id: str, skip: int = 0, limit: int = 100
    ) -> List[TrainingJobDTO]:
        jobs = await self.training_job_repository.get_by_user(
            user_id, skip=skip, limit=limit
        )
        return [training_job_to_dto(job) for job in jobs]
