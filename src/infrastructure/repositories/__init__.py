"""
Repositories package - Infrastructure Layer

MongoDB implementations of the domain repository interfaces.
"""

from src.infrastructure.repositories.model_repository import ModelRepository
from src.infrastructure.repositories.prediction_repository import (
    PredictionRepository,
)
from src.infrastructure.repositories.training_job_repository import (
    TrainingJobRepository,
)

__all__ = ["ModelRepository", "PredictionRepository", "TrainingJobRepository"]
