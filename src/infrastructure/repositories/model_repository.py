"""
MongoDB Model Repository - Infrastructure Layer

Implements IModelRepository on top of the ``prediction_models`` collection.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union
from uuid import UUID

import pymongo

from src.domain.entities.errors import ModelNotFoundError, ModelOperationError
from src.domain.entities.model import ModelTrainingStatus, ModelType, PredictionModel
from src.domain.repositories.model_repository import IModelRepository
from src.infrastructure.database import MongoDatabase


def _parse_timestamp(value: Union[str, datetime]) -> datetime:
    parsed = datetime.fromisoformat(value) if isinstance(value, str) else value
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


class ModelRepository(IModelRepository):
    """MongoDB implementation of the ModelRepository."""

    COLLECTION_NAME = "prediction_models"

    def __init__(self, mongo_database: MongoDatabase):
        self.db = mongo_database

    def _to_document(self, model: PredictionModel) -> Dict[str, Any]:
        return {
            "id": str(model.id),
            "user_id": model.user_id,
            "name": model.name,
            "domain": model.domain,
            "model_type": model.model_type.value,
            "training_status": model.training_status.value,
            "accuracy_score": model.accuracy_score,
            "is_public": model.is_public,
            "configuration": dict(model.configuration),
            "created_at": model.created_at.isoformat(),
            "updated_at": model.updated_at.isoformat(),
        }

    def _to_entity(self, document: Dict[str, Any]) -> PredictionModel:
        try:
            model_type = ModelType(document.get("model_type"))
        except ValueError:
            model_type = ModelType.CUSTOM

        try:
            training_status = ModelTrainingStatus(document.get("training_status"))
        except ValueError:
            training_status = ModelTrainingStatus.PENDING

        accuracy = document.get("accuracy_score")

        return PredictionModel(
            id=UUID(document["id"]),
            user_id=document.get("user_id") or "",
            name=document.get("name") or "",
            domain=document.get("domain") or "weather",
            model_type=model_type,
            training_status=training_status,
            accuracy_score=float(accuracy) if accuracy is not None else None,
            is_public=bool(document.get("is_public", False)),
            configuration=document.get("configuration") or {},
            created_at=_parse_timestamp(document["created_at"]),
            updated_at=_parse_timestamp(document["updated_at"]),
        )

    async def find_by_id(self, model_id: UUID) -> Optional[PredictionModel]:
        document = await self.db.find_one(self.COLLECTION_NAME, {"id": str(model_id)})
        if document is None:
            return None
        return self._to_entity(document)

    async def find_by_user(
        self,
        user_id: str,
        skip: int = 0,
        limit: int = 100,
        domain: Optional[str] = None,
    ) -> List[PredictionModel]:
        query: Dict[str, Any] = {"user_id": user_id}
        if domain is not None:
            query["domain"] = domain

        documents = await self.db.find_many(
            self.COLLECTION_NAME,
            query,
            sort_by="created_at",
            sort_direction=pymongo.DESCENDING,
            skip=skip,
            limit=limit,
        )
        return [self._to_entity(document) for document in documents]

    async def create(self, model: PredictionModel) -> PredictionModel:
        """
        Persist a new model.

        Raises:
            ModelOperationError: If the insert fails
        """
        try:
            await self.db.insert_one(self.COLLECTION_NAME, self._to_document(model))
            return model
        except Exception as e:
            raise ModelOperationError(f"Failed to create model: {str(e)}")

    async def update(self, model: PredictionModel) -> PredictionModel:
        """
        Replace a stored model.

        Raises:
            ModelNotFoundError: If the model does not exist
            ModelOperationError: If the update fails
        """
        try:
            await self.db.replace_one(
                self.COLLECTION_NAME, {"id": str(model.id)}, self._to_document(model)
            )
            return model
        except Exception as e:
            if "Document not found" in str(e):
                raise ModelNotFoundError(str(model.id))
            raise ModelOperationError(f"Failed to update model: {str(e)}")
