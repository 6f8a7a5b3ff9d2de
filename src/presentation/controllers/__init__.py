"""
Controllers Package - Presentation Layer

This package contains FastAPI controllers (routers) that handle
HTTP requests and responses. Controllers are responsible for
input validation, error handling, and mapping between API DTOs
and application layer use cases.
"""

from .forecasts_controller import router as forecasts_router
from .models_controller import router as models_router
from .predictions_controller import router as predictions_router
from .training_controller import jobs_router as training_jobs_router
from .training_controller import router as training_router

__all__ = [
    "forecasts_router",
    "models_router",
    "predictions_router",
    "training_router",
    "training_jobs_router",
]
