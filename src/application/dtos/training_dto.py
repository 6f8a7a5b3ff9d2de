"""
Application DTOs - Training

DTOs for submitting training requests and reporting job progress.
"""

from datetime import datetime
from typing import Dict, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities.training_job import DataFormat, TrainingStatus


class TrainingConfigDTO(BaseModel):
    """Hyperparameters submitted with a training request."""

    epochs: int = Field(default=50, ge=1, le=1000)
    batch_size: int = Field(default=32, ge=1, le=1024)
    learning_rate: float = Field(default=0.001, gt=0.0, le=1.0)
    validation_split: float = Field(default=0.2, ge=0.0, lt=1.0)


class TrainingRequestDTO(BaseModel):
    """DTO for training request."""

    user_id: str = Field(..., min_length=1, description="User submitting the job")
    dataset_name: str = Field(..., min_length=1, description="Name of the dataset")
    data_format: DataFormat = Field(default=DataFormat.CSV)
    data_source: str = Field(default="upload", description="Where the data came from")
    training_config: TrainingConfigDTO = Field(default_factory=TrainingConfigDTO)
    column_mapping: Dict[str, str] = Field(
        default_factory=dict,
        description="Maps dataset columns to model inputs",
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "user_id": "user-123",
                "dataset_name": "daily-temperatures",
                "data_format": "csv",
                "training_config": {
                    "epochs": 50,
                    "batch_size": 32,
                    "learning_rate": 0.001,
                    "validation_split": 0.2,
                },
                "column_mapping": {"date": "timestamp", "temp": "target"},
            }
        }
    }


class TrainingJobDTO(BaseModel):
    """DTO for training job status and details."""

    id: UUID
    model_id: Optional[UUID]
    user_id: str
    status: TrainingStatus
    progress_percentage: int
    training_logs: Optional[str] = None
    error_message: Optional[str] = None
    training_config: TrainingConfigDTO
    task_id: Optional[str] = None

    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    duration_seconds: Optional[float] = None


class StartTrainingResponseDTO(BaseModel):
    """DTO for training start response."""

    training_job_id: UUID
    message: str = "Training job started successfully"
    status: TrainingStatus = TrainingStatus.QUEUED
