"""Celery task implementations for infrastructure services."""

from .base import CallbackTask, logger
from .training import simulate_training

__all__ = ["CallbackTask", "logger", "simulate_training"]
