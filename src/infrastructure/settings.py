"""Infrastructure-level configuration helpers for background workers."""

from __future__ import annotations

from typing import List

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class _DatabaseSettings(BaseSettings):
    mongo_uri: str = Field(
        default="mongodb://localhost:27017/augur_db",
        validation_alias=AliasChoices("DB_MONGO_URI", "MONGO_URI"),
        description="MongoDB connection URI",
    )
    database_name: str = Field(
        default="augur_db",
        validation_alias=AliasChoices("DB_DATABASE_NAME", "DATABASE_NAME"),
        description="MongoDB database name",
    )

    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")


class _TrainingSettings(BaseSettings):
    step_delay_seconds: float = Field(
        default=2.0,
        validation_alias=AliasChoices("TRAINING_STEP_DELAY_SECONDS"),
        description="Seconds to wait before writing each progress step",
    )
    progress_steps: List[int] = Field(
        default_factory=lambda: [10, 25, 50, 75, 90, 100],
        validation_alias=AliasChoices("TRAINING_PROGRESS_STEPS"),
        description="Progress percentages written by the training simulation",
    )

    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")


class WorkerSettings(BaseSettings):
    """Settings consumed by Celery tasks."""

    database: _DatabaseSettings = Field(default_factory=_DatabaseSettings)
    training: _TrainingSettings = Field(default_factory=_TrainingSettings)

    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")


def get_settings() -> WorkerSettings:
    """Return worker settings loaded from the environment."""

    return WorkerSettings()
