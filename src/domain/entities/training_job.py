"""
Domain Entities - Training Job

Training jobs follow a small state machine::

    queued -> running -> completed
                      \\-> failed

Progress only moves forward and reaching 100% while running completes the
job. Completed and failed jobs are terminal.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional
from uuid import UUID, uuid4

from src.domain.entities.errors import ModelValidationError


class TrainingStatus(str, Enum):
    """Status of a training job."""

    QUEUED = "queued"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


TERMINAL_STATUSES = frozenset({TrainingStatus.COMPLETED, TrainingStatus.FAILED})


class DataFormat(str, Enum):
    """Format of an uploaded training dataset."""

    CSV = "csv"
    JSON = "json"
    API = "api"


@dataclass
class TrainingConfig:
    """Hyperparameters submitted with a training request."""

    epochs: int = 50
    batch_size: int = 32
    learning_rate: float = 0.001
    validation_split: float = 0.2


@dataclass
class TrainingDataset:
    """Dataset metadata uploaded alongside a training request."""

    id: UUID = field(default_factory=uuid4)
    model_id: Optional[UUID] = None
    user_id: str = ""
    dataset_name: str = ""
    data_source: str = "upload"
    data_format: DataFormat = DataFormat.CSV
    data_content: Dict[str, Any] = field(default_factory=dict)
    column_mapping: Dict[str, str] = field(default_factory=dict)
    row_count: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class TrainingJob:
    """Represents a (simulated) training run of a prediction model."""

    id: UUID = field(default_factory=uuid4)
    model_id: Optional[UUID] = None
    user_id: str = ""
    status: TrainingStatus = TrainingStatus.QUEUED
    progress_percentage: int = 0
    training_logs: Optional[str] = None
    error_message: Optional[str] = None
    training_config: TrainingConfig = field(default_factory=TrainingConfig)
    task_id: Optional[str] = None

    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update_timestamp(self) -> None:
        """Update the 'updated_at' timestamp to current time."""
        self.updated_at = datetime.now(timezone.utc)

    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    def _ensure_not_terminal(self, action: str) -> None:
        if self.is_terminal():
            raise ModelValidationError(
                f"Cannot {action} a training job in status '{self.status.value}'",
                details={"training_job_id": str(self.id), "status": self.status.value},
            )

    def mark_running(self) -> None:
        """Move a queued job to running."""
        self._ensure_not_terminal("start")
        self.status = TrainingStatus.RUNNING
        if self.started_at is None:
            self.started_at = datetime.now(timezone.utc)
        self.update_timestamp()

    def update_progress(self, percentage: int) -> None:
        """
        Record training progress.

        Values are clamped to [0, 100] and never move backwards. Reaching 100
        completes the job.
        """
        self._ensure_not_terminal("update progress of")
        if self.status is TrainingStatus.QUEUED:
            self.mark_running()

        clamped = max(0, min(100, int(percentage)))
        self.progress_percentage = max(self.progress_percentage, clamped)
        self.training_logs = f"Training progress: {self.progress_percentage}%"
        self.update_timestamp()

        if self.progress_percentage >= 100:
            self.mark_completed()

    def mark_completed(self) -> None:
        self._ensure_not_terminal("complete")
        now = datetime.now(timezone.utc)
        self.status = TrainingStatus.COMPLETED
        self.progress_percentage = 100
        self.training_logs = "Training completed successfully"
        self.completed_at = now
        self.update_timestamp()

    def mark_failed(self, error_message: str) -> None:
        """Mark training job as failed."""
        self._ensure_not_terminal("fail")
        self.status = TrainingStatus.FAILED
        self.error_message = error_message
        self.completed_at = datetime.now(timezone.utc)
        self.update_timestamp()

    def get_duration(self) -> Optional[float]:
        """Get total duration in seconds, if finished."""
        if self.started_at and self.completed_at:
            return (self.completed_at - self.started_at).total_seconds()
        return None
