"""
DTOs Package - Application Layer

Data Transfer Objects exchanged between the application layer and the
presentation layer.
"""

from .forecast_dto import (
    DomainProfileDTO,
    EngineStatusDTO,
    ForecastEnginesDTO,
    ForecastRequestDTO,
    ForecastResultDTO,
    SeriesPointDTO,
    TimeframeDTO,
)
from .model_dto import ModelCreateDTO, ModelResponseDTO, ModelSummaryDTO
from .prediction_dto import PredictionCreateDTO, PredictionResponseDTO
from .training_dto import (
    StartTrainingResponseDTO,
    TrainingConfigDTO,
    TrainingJobDTO,
    TrainingRequestDTO,
)

__all__ = [
    "DomainProfileDTO",
    "EngineStatusDTO",
    "ForecastEnginesDTO",
    "ForecastRequestDTO",
    "ForecastResultDTO",
    "SeriesPointDTO",
    "TimeframeDTO",
    "ModelCreateDTO",
    "ModelResponseDTO",
    "ModelSummaryDTO",
    "PredictionCreateDTO",
    "PredictionResponseDTO",
    "StartTrainingResponseDTO",
    "TrainingConfigDTO",
    "TrainingJobDTO",
    "TrainingRequestDTO",
]
