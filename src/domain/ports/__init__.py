"""Domain ports package."""

from .forecast_engine import IForecastEngine
from .training_orchestrator import ITrainingOrchestrator

__all__ = ["IForecastEngine", "ITrainingOrchestrator"]
