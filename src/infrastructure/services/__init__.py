"""Infrastructure services package."""

from . import tasks
from .celery_config import TRAINING_QUEUE, celery_app, create_celery_app
from .neural_forecast_engine import NeuralForecastEngine, build_domain_network
from .training_orchestrator import CeleryTrainingOrchestrator

__all__ = [
    "celery_app",
    "create_celery_app",
    "tasks",
    "TRAINING_QUEUE",
    "NeuralForecastEngine",
    "build_domain_network",
    "CeleryTrainingOrchestrator",
]
