"""Domain port for training job dispatch."""

from __future__ import annotations

from typing import Protocol
from uuid import UUID


class ITrainingOrchestrator(Protocol):
    """Defines how training jobs are handed to background workers."""

    async def dispatch_training_job(
        self,
        *,
        training_job_id: UUID,
        model_id: UUID,
    ) -> str:
        """Queue the training simulation for a job.

        Returns:
            Identifier of the dispatched task (empty if unavailable).
        """
        ...
