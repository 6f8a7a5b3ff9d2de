"""Celery-backed implementation of the training orchestrator port."""

from __future__ import annotations

import asyncio
from typing import Optional
from uuid import UUID

from src.domain.ports.training_orchestrator import ITrainingOrchestrator
from src.infrastructure.services.celery_config import TRAINING_QUEUE, celery_app
from src.shared import get_logger

logger = get_logger(__name__)


class CeleryTrainingOrchestrator(ITrainingOrchestrator):
    """Dispatch training simulations through Celery."""

    def __init__(self, queue_name: str = TRAINING_QUEUE) -> None:
        self._queue_name = queue_name

    async def dispatch_training_job(
        self,
        *,
        training_job_id: UUID,
        model_id: UUID,
    ) -> str:
        """Send the simulation task to Celery without blocking the event loop."""

        def _send_task() -> str:
            logger.info(
                "training_orchestrator.dispatch",
                training_job_id=str(training_job_id),
                model_id=str(model_id),
                queue=self._queue_name,
            )
            result = celery_app.send_task(
                "simulate_training",
                kwargs={
                    "training_job_id": str(training_job_id),
                    "model_id": str(model_id),
                },
                queue=self._queue_name,
            )
            return result.id

        task_id: Optional[str] = await asyncio.to_thread(_send_task)
        return task_id or ""
