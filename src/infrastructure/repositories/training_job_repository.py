"""
Infrastructure Repository - Training Job MongoDB Implementation

Training jobs live in ``model_training_jobs``; the dataset metadata that
accompanies each request lives in ``training_data``.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

import structlog
from pymongo.errors import PyMongoError

from src.domain.entities.errors import TrainingJobNotFoundError
from src.domain.entities.training_job import (
    TrainingConfig,
    TrainingDataset,
    TrainingJob,
    TrainingStatus,
)
from src.domain.repositories.training_job_repository import ITrainingJobRepository
from src.infrastructure.database.mongo_database import MongoDatabase

logger = structlog.get_logger(__name__)


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def _parse(value: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value else None


class TrainingJobRepository(ITrainingJobRepository):
    """MongoDB implementation of training job repository."""

    def __init__(self, database: MongoDatabase):
        self.database = database
        self.collection_name = "model_training_jobs"
        self.dataset_collection_name = "training_data"

    async def create(self, training_job: TrainingJob) -> TrainingJob:
        try:
            collection = self.database.get_collection(self.collection_name)
            result = collection.insert_one(self._to_document(training_job))

            if not result.inserted_id:
                raise Exception("Failed to insert training job")

            logger.info(
                "training_job.created",
                training_job_id=str(training_job.id),
                model_id=str(training_job.model_id) if training_job.model_id else None,
            )
            return training_job

        except PyMongoError as e:
            logger.error(
                "training_job.create_failed",
                training_job_id=str(training_job.id),
                error=str(e),
            )
            raise e

    async def get_by_id(self, training_job_id: UUID) -> Optional[TrainingJob]:
        try:
            collection = self.database.get_collection(self.collection_name)
            document = collection.find_one({"id": str(training_job_id)})
            return self._from_document(document) if document else None

        except PyMongoError as e:
            logger.error(
                "training_job.get_failed",
                training_job_id=str(training_job_id),
                error=str(e),
            )
            raise e

    async def get_latest_by_model_id(self, model_id: UUID) -> Optional[TrainingJob]:
        try:
            collection = self.database.get_collection(self.collection_name)
            cursor = (
                collection.find({"model_id": str(model_id)})
                .sort("created_at", -1)
                .limit(1)
            )
            documents = list(cursor)
            return self._from_document(documents[0]) if documents else None

        except PyMongoError as e:
            logger.error(
                "training_job.get_latest_failed",
                model_id=str(model_id),
                error=str(e),
            )
            raise e

    async def get_by_user(
        self, user_id: str, skip: int = 0, limit: int = 100
    ) -> List[TrainingJob]:
        try:
            collection = self.database.get_collection(self.collection_name)
            cursor = (
                collection.find({"user_id": user_id})
                .sort("created_at", -1)
                .skip(skip)
                .limit(limit)
            )
            return [self._from_document(doc) for doc in cursor]

        except PyMongoError as e:
            logger.error(
                "training_job.list_failed", user_id=user_id, error=str(e)
            )
            raise e

    async def update(self, training_job: TrainingJob) -> TrainingJob:
        """
        Replace a stored training job.

        Raises:
            TrainingJobNotFoundError: If no job matches the ID
        """
        try:
            collection = self.database.get_collection(self.collection_name)
            training_job.update_timestamp()

            result = collection.replace_one(
                {"id": str(training_job.id)}, self._to_document(training_job)
            )
            if result.matched_count == 0:
                raise TrainingJobNotFoundError(str(training_job.id))

            logger.debug(
                "training_job.updated",
                training_job_id=str(training_job.id),
                status=training_job.status.value,
                progress=training_job.progress_percentage,
            )
            return training_job

        except PyMongoError as e:
            logger.error(
                "training_job.update_failed",
                training_job_id=str(training_job.id),
                error=str(e),
            )
            raise e

    async def save_dataset(self, dataset: TrainingDataset) -> TrainingDataset:
        try:
            collection = self.database.get_collection(self.dataset_collection_name)
            collection.insert_one(
                {
                    "id": str(dataset.id),
                    "model_id": str(dataset.model_id) if dataset.model_id else None,
                    "user_id": dataset.user_id,
                    "dataset_name": dataset.dataset_name,
                    "data_source": dataset.data_source,
                    "data_format": dataset.data_format.value,
                    "data_content": dataset.data_content,
                    "column_mapping": dataset.column_mapping,
                    "row_count": dataset.row_count,
                    "created_at": dataset.created_at.isoformat(),
                }
            )
            return dataset

        except PyMongoError as e:
            logger.error(
                "training_data.save_failed",
                model_id=str(dataset.model_id),
                error=str(e),
            )
            raise e

    def _to_document(self, training_job: TrainingJob) -> Dict[str, Any]:
        config = training_job.training_config
        return {
            "id": str(training_job.id),
            "model_id": str(training_job.model_id) if training_job.model_id else None,
            "user_id": training_job.user_id,
            "job_status": training_job.status.value,
            "progress_percentage": training_job.progress_percentage,
            "training_logs": training_job.training_logs,
            "error_message": training_job.error_message,
            "training_config": {
                "epochs": config.epochs,
                "batch_size": config.batch_size,
                "learning_rate": config.learning_rate,
                "validation_split": config.validation_split,
            },
            "task_id": training_job.task_id,
            "started_at": _iso(training_job.started_at),
            "completed_at": _iso(training_job.completed_at),
            "created_at": training_job.created_at.isoformat(),
            "updated_at": training_job.updated_at.isoformat(),
        }

    def _from_document(self, document: Dict[str, Any]) -> TrainingJob:
        config_doc = document.get("training_config") or {}
        defaults = TrainingConfig()

        return TrainingJob(
            id=UUID(document["id"]),
            model_id=UUID(document["model_id"]) if document.get("model_id") else None,
            user_id=document.get("user_id") or "",
            status=TrainingStatus(document.get("job_status", "queued")),
            progress_percentage=int(document.get("progress_percentage") or 0),
            training_logs=document.get("training_logs"),
            error_message=document.get("error_message"),
            training_config=TrainingConfig(
                epochs=config_doc.get("epochs", defaults.epochs),
                batch_size=config_doc.get("batch_size", defaults.batch_size),
                learning_rate=config_doc.get("learning_rate", defaults.learning_rate),
                validation_split=config_doc.get(
                    "validation_split", defaults.validation_split
                ),
            ),
            task_id=document.get("task_id"),
            started_at=_parse(document.get("started_at")),
            completed_at=_parse(document.get("completed_at")),
            created_at=datetime.fromisoformat(document["created_at"]),
            updated_at=datetime.fromisoformat(document["updated_at"]),
        )

