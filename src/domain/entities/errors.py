"""
Domain Errors

Custom exceptions raised by domain entities, services and repositories.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ModelNotFoundError(DomainError):
    """Raised when a prediction model cannot be found."""

    def __init__(self, model_id: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"Model with ID {model_id} not found", details)


class ModelValidationError(DomainError):
    """Raised when an entity rejects an invalid change."""


class ModelOperationError(DomainError):
    """Raised when a persistence operation fails."""


class TrainingJobNotFoundError(DomainError):
    """Raised when a training job cannot be found."""

    def __init__(self, job_id: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"Training job with ID {job_id} not found", details)


class ForecastModelUnavailableError(DomainError):
    """Raised when the neural engine has no network loaded for a domain."""

    def __init__(self, domain: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"Model not available for domain: {domain}", details)
