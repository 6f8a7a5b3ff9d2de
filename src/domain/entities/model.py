"""
Domain Entities - Prediction Model

A user-owned model definition. Training is simulated, so the entity only
tracks its lifecycle status and the accuracy reported when training ends.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional
from uuid import UUID, uuid4


class ModelType(str, Enum):
    """Kind of model a user can register."""

    LINEAR_REGRESSION = "linear_regression"
    LSTM = "lstm"
    TRANSFORMER = "transformer"
    CUSTOM = "custom"


class ModelTrainingStatus(str, Enum):
    """Training lifecycle of a model."""

    PENDING = "pending"
    TRAINING = "training"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class PredictionModel:
    """Represents a prediction model registered by a user."""

    id: UUID = field(default_factory=uuid4)
    user_id: str = ""
    name: str = ""
    domain: str = "weather"
    model_type: ModelType = ModelType.LINEAR_REGRESSION
    training_status: ModelTrainingStatus = ModelTrainingStatus.PENDING
    accuracy_score: Optional[float] = None
    is_public: bool = False
    configuration: Dict[str, Any] = field(default_factory=dict)

    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update_timestamp(self) -> None:
        """Update the 'updated_at' timestamp to current time."""
        self.updated_at = datetime.now(timezone.utc)

    def mark_training(self) -> None:
        self.training_status = ModelTrainingStatus.TRAINING
        self.update_timestamp()

    def mark_trained(self, accuracy_score: float) -> None:
        """Record a finished training run and its accuracy."""
        self.training_status = ModelTrainingStatus.COMPLETED
        self.accuracy_score = accuracy_score
        self.update_timestamp()

    def mark_failed(self) -> None:
        self.training_status = ModelTrainingStatus.FAILED
        self.update_timestamp()
