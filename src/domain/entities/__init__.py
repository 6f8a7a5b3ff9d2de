"""
Domain Entities Package

This package contains the core domain entities and business logic.
"""

from .errors import (
    DomainError,
    ForecastModelUnavailableError,
    ModelNotFoundError,
    ModelOperationError,
    ModelValidationError,
    TrainingJobNotFoundError,
)
from .forecast import (
    DomainProfile,
    ForecastDomain,
    ForecastResult,
    SeriesPoint,
    TimeframeSpec,
    Trend,
)
from .model import ModelTrainingStatus, ModelType, PredictionModel
from .prediction import ModelSummary, Prediction, PredictionStatus
from .training_job import (
    DataFormat,
    TrainingConfig,
    TrainingDataset,
    TrainingJob,
    TrainingStatus,
)

__all__ = [
    "DomainError",
    "ForecastModelUnavailableError",
    "ModelNotFoundError",
    "ModelOperationError",
    "ModelValidationError",
    "TrainingJobNotFoundError",
    "DomainProfile",
    "ForecastDomain",
    "ForecastResult",
    "SeriesPoint",
    "TimeframeSpec",
    "Trend",
    "ModelTrainingStatus",
    "ModelType",
    "PredictionModel",
    "ModelSummary",
    "Prediction",
    "PredictionStatus",
    "DataFormat",
    "TrainingConfig",
    "TrainingDataset",
    "TrainingJob",
    "TrainingStatus",
]
