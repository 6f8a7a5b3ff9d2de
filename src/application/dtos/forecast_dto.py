"""
Forecast DTOs - Application Layer

Request and response shapes for the forecast generator and its catalogue.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from src.domain.entities.forecast import Trend


class ForecastRequestDTO(BaseModel):
    """DTO for a forecast request."""

    domain: str = Field(
        default="weather",
        description="Prediction domain; unknown values fall back to weather",
    )
    timeframe: str = Field(
        default="12 months",
        description="Timeframe label; unknown values produce 12 points",
    )
    feature_vector: Optional[List[float]] = Field(
        default=None,
        description="Inputs for the neural variant. Omit for the synthetic generator",
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "domain": "stocks",
                "timeframe": "6 months",
                "feature_vector": None,
            }
        }
    }


class SeriesPointDTO(BaseModel):
    label: str
    value: float


class ForecastResultDTO(BaseModel):
    """DTO for a generated forecast."""

    value: float
    unit: str
    trend: Trend
    series: List[SeriesPointDTO]
    factors: List[str]
    confidence: int = Field(..., ge=0, le=100)

    model_config = {
        "json_schema_extra": {
            "example": {
                "value": 71.4,
                "unit": "°F",
                "trend": "stable",
                "series": [{"label": "Day 1", "value": 69.8}],
                "factors": ["Historical Patterns", "Ocean Currents"],
                "confidence": 84,
            }
        }
    }


class DomainProfileDTO(BaseModel):
    """DTO describing a prediction domain."""

    id: str
    name: str
    description: str
    unit: str
    base_value: float
    variance: float
    factors: List[str]


class TimeframeDTO(BaseModel):
    label: str
    points: int
    period: str


class EngineStatusDTO(BaseModel):
    domain: str
    ready: bool


class ForecastEnginesDTO(BaseModel):
    """Readiness of the neural engine per domain."""

    available_domains: List[str]
    domains: List[EngineStatusDTO]
