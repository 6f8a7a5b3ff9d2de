"""Domain entities for persisted predictions."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional
from uuid import UUID, uuid4

from src.domain.entities.forecast import ForecastResult


class PredictionStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(slots=True)
class ModelSummary:
    """Subset of model fields shown next to a prediction."""

    name: str
    domain: str
    model_type: str


@dataclass
class Prediction:
    """A forecast generated for a user and stored for later display."""

    id: UUID = field(default_factory=uuid4)
    user_id: str = ""
    model_id: Optional[UUID] = None
    title: str = ""
    domain: str = "weather"
    parameters: Dict[str, Any] = field(default_factory=dict)
    input_data: Optional[Dict[str, Any]] = None
    result: Optional[ForecastResult] = None
    confidence_score: Optional[float] = None
    status: PredictionStatus = PredictionStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # Populated on read when the linked model still exists
    model: Optional[ModelSummary] = None
