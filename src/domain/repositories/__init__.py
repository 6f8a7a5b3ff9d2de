"""
Repositories Package

Interfaces defining repository contracts for data access operations.
Implementations live in the infrastructure layer.
"""

from .model_repository import IModelRepository
from .prediction_repository import IPredictionRepository
from .training_job_repository import ITrainingJobRepository

__all__ = ["IModelRepository", "IPredictionRepository", "ITrainingJobRepository"]
