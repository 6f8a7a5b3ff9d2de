"""
Use Cases Package - Application Layer

This package contains use cases that implement the business logic
of the application. Use cases orchestrate the flow of data to and from
the entities and implement the business rules of the application.
"""

from .forecast_use_cases import (
    GenerateForecastUseCase,
    GetForecastCatalogUseCase,
    GetForecastEngineStatusUseCase,
)
from .model_use_cases import (
    CreateModelUseCase,
    GetModelByIdUseCase,
    GetUserModelsUseCase,
)
from .prediction_management_use_case import (
    PredictionManagementError,
    PredictionManagementUseCase,
    PredictionNotFoundError,
)
from .training_management_use_case import (
    TrainingManagementError,
    TrainingManagementUseCase,
)
from .training_simulation_use_case import TrainingSimulationUseCase

__all__ = [
    "GenerateForecastUseCase",
    "GetForecastCatalogUseCase",
    "GetForecastEngineStatusUseCase",
    "CreateModelUseCase",
    "GetUserModelsUseCase",
    "GetModelByIdUseCase",
    "PredictionManagementError",
    "PredictionManagementUseCase",
    "PredictionNotFoundError",
    "TrainingManagementError",
    "TrainingManagementUseCase",
    "TrainingSimulationUseCase",
]
