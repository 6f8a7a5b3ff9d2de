"""
Model DTOs - Application Layer

Data Transfer Objects for prediction models exchanged with the API.
"""

from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.domain.entities.model import ModelTrainingStatus, ModelType


class ModelCreateDTO(BaseModel):
    """DTO for creating a new model."""

    user_id: str = Field(..., description="Owner of the model", min_length=1)
    name: str = Field(..., description="Name of the model", min_length=1, max_length=100)
    domain: str = Field(default="weather", description="Prediction domain")
    model_type: ModelType = Field(
        default=ModelType.LINEAR_REGRESSION, description="Model architecture"
    )
    configuration: Dict[str, Any] = Field(
        default_factory=dict, description="Free-form model configuration"
    )
    is_public: bool = Field(default=False, description="Share the model publicly")

    @field_validator("domain")
    @classmethod
    def normalize_domain(cls, v: str) -> str:
        return v.strip().lower()

    model_config = {
        "json_schema_extra": {
            "example": {
                "user_id": "user-123",
                "name": "Temperature LSTM",
                "domain": "weather",
                "model_type": "lstm",
                "configuration": {"layers": 2},
                "is_public": False,
            }
        }
    }


class ModelResponseDTO(BaseModel):
    """DTO for model responses."""

    id: UUID
    user_id: str
    name: str
    domain: str
    model_type: ModelType
    training_status: ModelTrainingStatus
    accuracy_score: Optional[float] = None
    is_public: bool
    configuration: Dict[str, Any]
    created_at: datetime
    updated_at: datetime


class ModelSummaryDTO(BaseModel):
    """Model fields joined onto predictions."""

    name: str
    domain: str
    model_type: str
