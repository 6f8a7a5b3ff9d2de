"""
Training Simulation Use Case - Application Layer

Runs inside the Celery worker. No network is trained: the job walks a fixed
list of progress checkpoints with a delay between writes, then the model is
marked trained with a random accuracy in [0.85, 0.95).
"""

import asyncio
import random as _random
from typing import Awaitable, Callable, Optional, Sequence
from uuid import UUID

import structlog

from src.domain.entities.errors import ModelNotFoundError, TrainingJobNotFoundError
from src.domain.entities.model import PredictionModel
from src.domain.entities.training_job import TrainingJob
from src.domain.repositories.model_repository import IModelRepository
from src.domain.repositories.training_job_repository import ITrainingJobRepository

logger = structlog.get_logger(__name__)

DEFAULT_PROGRESS_STEPS = (10, 25, 50, 75, 90, 100)
DEFAULT_STEP_DELAY_SECONDS = 2.0
ACCURACY_FLOOR = 0.85
ACCURACY_SPAN = 0.1


class TrainingSimulationUseCase:
    """Drives a queued training job to completion."""

    def __init__(
        self,
        training_job_repository: ITrainingJobRepository,
        model_repository: IModelRepository,
        progress_steps: Sequence[int] = DEFAULT_PROGRESS_STEPS,
        step_delay_seconds: float = DEFAULT_STEP_DELAY_SECONDS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        random: Optional[Callable[[], float]] = None,
    ):
        self.training_job_repository = training_job_repository
        self.model_repository = model_repository
        self.progress_steps = sorted(
            {min(100, max(0, int(step))) for step in progress_steps}
        )
        if not self.progress_steps or self.progress_steps[-1] < 100:
            self.progress_steps.append(100)
        self.step_delay_seconds = step_delay_seconds
        self.sleep = sleep
        self.random = random or _random.random

    async def execute(self, training_job_id: UUID) -> TrainingJob:
        """
        Simulate training for ``training_job_id``.

        Any failure after the job is loaded marks both the job and its model
        as failed before the exception is re-raised.

        Raises:
            TrainingJobNotFoundError: If the job doesn't exist
        """
        job = await self.training_job_repository.get_by_id(training_job_id)
        if job is None:
            raise TrainingJobNotFoundError(str(training_job_id))
        if job.is_terminal():
            logger.warning(
                "training.already_finished",
                training_job_id=str(job.id),
                status=job.status.value,
            )
            return job

        model: Optional[PredictionModel] = None
        try:
            if job.model_id is not None:
                model = await self.model_repository.find_by_id(job.model_id)
            if model is None:
                raise ModelNotFoundError(str(job.model_id))

            job.mark_running()
            await self.training_job_repository.update(job)
            logger.info(
                "training.started",
                training_job_id=str(job.id),
                model_id=str(model.id),
            )

            for step in self.progress_steps:
                await self.sleep(self.step_delay_seconds)
                job.update_progress(step)
                await self.training_job_repository.update(job)
                logger.debug(
                    "training.progress",
                    training_job_id=str(job.id),
                    progress=job.progress_percentage,
                )

            accuracy = ACCURACY_FLOOR + self.random() * ACCURACY_SPAN
            model.mark_trained(accuracy)
            await self.model_repository.update(model)

            logger.info(
                "training.completed",
                training_job_id=str(job.id),
                model_id=str(model.id),
                accuracy_score=accuracy,
            )
            return job

        except Exception as exc:
            logger.error(
                "training.failed",
                training_job_id=str(job.id),
                error=str(exc),
            )
            await self._mark_failed(job, model, str(exc))
            raise

    async def _mark_failed(
        self,
        job: TrainingJob,
        model: Optional[PredictionModel],
        message: str,
    ) -> None:
        if not job.is_terminal():
            job.mark_failed(message)
            await self.training_job_repository.update(job)
        if model is not None:
            model.mark_failed()
            await self.model_repository.update(model)
