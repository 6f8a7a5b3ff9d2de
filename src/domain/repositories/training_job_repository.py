"""
Domain Repository Interface - Training Job

Persistence contract for training jobs and the datasets submitted with them.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities.training_job import TrainingDataset, TrainingJob


class ITrainingJobRepository(ABC):
    """Interface for training job repository."""

    @abstractmethod
    async def create(self, training_job: TrainingJob) -> TrainingJob:
        """Create a new training job."""
        pass

    @abstractmethod
    async def get_by_id(self, training_job_id: UUID) -> Optional[TrainingJob]:
        """Get training job by ID."""
        pass

    @abstractmethod
    async def get_latest_by_model_id(self, model_id: UUID) -> Optional[TrainingJob]:
        """Get the most recently created training job of a model."""
        pass

    @abstractmethod
    async def get_by_user(
        self, user_id: str, skip: int = 0, limit: int = 100
    ) -> List[TrainingJob]:
        """Get a user's training jobs, newest first."""
        pass

    @abstractmethod
    async def update(self, training_job: TrainingJob) -> TrainingJob:
        """Update a training job."""
        pass

    @abstractmethod
    async def save_dataset(self, dataset: TrainingDataset) -> TrainingDataset:
        """Store the dataset metadata submitted with a training request."""
        pass
