"""Celery task that runs the simulated training of a model."""

import asyncio
from typing import Any, Dict, Optional
from uuid import UUID

from src.application.use_cases.training_simulation_use_case import (
    TrainingSimulationUseCase,
)
from src.infrastructure.database.mongo_database import MongoDatabase
from src.infrastructure.repositories.model_repository import ModelRepository
from src.infrastructure.repositories.training_job_repository import (
    TrainingJobRepository,
)
from src.infrastructure.services.celery_config import celery_app
from src.infrastructure.services.tasks.base import CallbackTask, logger
from src.infrastructure.settings import WorkerSettings, get_settings


def build_simulation(
    database: MongoDatabase, settings: WorkerSettings
) -> TrainingSimulationUseCase:
    return TrainingSimulationUseCase(
        training_job_repository=TrainingJobRepository(database),
        model_repository=ModelRepository(database),
        progress_steps=settings.training.progress_steps,
        step_delay_seconds=settings.training.step_delay_seconds,
    )


@celery_app.task(bind=True, base=CallbackTask, name="simulate_training")
def simulate_training(
    self, training_job_id: str, model_id: Optional[str] = None
) -> Dict[str, Any]:
    """Walk a training job through its progress steps and finish the model."""

    logger.info(
        "training.task_started",
        training_job_id=training_job_id,
        model_id=model_id,
        task_id=self.request.id,
    )

    settings = get_settings()
    database = MongoDatabase(
        mongo_uri=settings.database.mongo_uri,
        db_name=settings.database.database_name,
    )
    try:
        simulation = build_simulation(database, settings)
        job = asyncio.run(simulation.execute(UUID(training_job_id)))
    finally:
        database.close()

    return {
        "training_job_id": training_job_id,
        "model_id": str(job.model_id) if job.model_id else model_id,
        "status": job.status.value,
        "progress_percentage": job.progress_percentage,
    }
