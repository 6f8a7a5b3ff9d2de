"""Prediction DTOs exposed by the API."""

from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from src.application.dtos.forecast_dto import ForecastResultDTO
from src.application.dtos.model_dto import ModelSummaryDTO
from src.domain.entities.prediction import PredictionStatus


class PredictionCreateDTO(BaseModel):
    """DTO for generating and storing a prediction."""

    user_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=200)
    domain: str = Field(default="weather")
    model_id: Optional[UUID] = None
    parameters: Dict[str, Any] = Field(
        default_factory=dict,
        description="Request parameters; 'timeframe' defaults to '12 months'",
    )
    input_data: Optional[Dict[str, Any]] = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "user_id": "user-123",
                "title": "Q3 temperature outlook",
                "domain": "weather",
                "parameters": {"timeframe": "3 months"},
            }
        }
    }


class PredictionResponseDTO(BaseModel):
    """DTO for a stored prediction."""

    id: UUID
    user_id: str
    model_id: Optional[UUID] = None
    title: str
    domain: str
    parameters: Dict[str, Any]
    input_data: Optional[Dict[str, Any]] = None
    prediction_result: Optional[ForecastResultDTO] = None
    confidence_score: Optional[float] = None
    status: PredictionStatus
    created_at: datetime
    prediction_model: Optional[ModelSummaryDTO] = None
