"""
Infrastructure Repository - Prediction MongoDB Implementation

Predictions are stored in ``predictions``. Reads join the owning model's
summary from ``prediction_models`` when the prediction references one.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

import structlog
from pymongo.errors import PyMongoError

from src.domain.entities.forecast import ForecastResult, SeriesPoint, Trend
from src.domain.entities.prediction import ModelSummary, Prediction, PredictionStatus
from src.domain.repositories.prediction_repository import IPredictionRepository
from src.infrastructure.database.mongo_database import MongoDatabase

logger = structlog.get_logger(__name__)


class PredictionRepository(IPredictionRepository):
    """MongoDB implementation of prediction repository."""

    def __init__(
        self,
        database: MongoDatabase,
        models_collection_name: str = "prediction_models",
    ):
        self.database = database
        self.collection_name = "predictions"
        self.models_collection_name = models_collection_name

    async def create(self, prediction: Prediction) -> Prediction:
        try:
            collection = self.database.get_collection(self.collection_name)
            collection.insert_one(self._to_document(prediction))
            logger.info(
                "prediction.created",
                prediction_id=str(prediction.id),
                domain=prediction.domain,
                user_id=prediction.user_id,
            )
            return prediction

        except PyMongoError as e:
            logger.error(
                "prediction.create_failed",
                prediction_id=str(prediction.id),
                error=str(e),
            )
            raise e

    async def get_by_id(self, prediction_id: UUID) -> Optional[Prediction]:
        try:
            collection = self.database.get_collection(self.collection_name)
            document = collection.find_one({"id": str(prediction_id)})
            if not document:
                return None
            return self._with_model(self._from_document(document))

        except PyMongoError as e:
            logger.error(
                "prediction.get_failed",
                prediction_id=str(prediction_id),
                error=str(e),
            )
            raise e

    async def get_by_user(
        self, user_id: str, skip: int = 0, limit: int = 100
    ) -> List[Prediction]:
        try:
            collection = self.database.get_collection(self.collection_name)
            cursor = (
                collection.find({"user_id": user_id})
                .sort("created_at", -1)
                .skip(skip)
                .limit(limit)
            )
            return [self._with_model(self._from_document(doc)) for doc in cursor]

        except PyMongoError as e:
            logger.error("prediction.list_failed", user_id=user_id, error=str(e))
            raise e

    def _with_model(self, prediction: Prediction) -> Prediction:
        if prediction.model_id is None:
            return prediction

        models = self.database.get_collection(self.models_collection_name)
        model_doc = models.find_one({"id": str(prediction.model_id)})
        if model_doc:
            prediction.model = ModelSummary(
                name=model_doc.get("name", ""),
                domain=model_doc.get("domain", ""),
                model_type=model_doc.get("model_type", ""),
            )
        return prediction

    def _to_document(self, prediction: Prediction) -> Dict[str, Any]:
        result_doc = None
        if prediction.result is not None:
            result_doc = {
                "value": prediction.result.value,
                "unit": prediction.result.unit,
                "trend": prediction.result.trend.value,
                "series": [
                    {"label": point.label, "value": point.value}
                    for point in prediction.result.series
                ],
                "factors": list(prediction.result.factors),
            }

        return {
            "id": str(prediction.id),
            "user_id": prediction.user_id,
            "model_id": str(prediction.model_id) if prediction.model_id else None,
            "title": prediction.title,
            "domain": prediction.domain,
            "parameters": prediction.parameters,
            "input_data": prediction.input_data,
            "prediction_result": result_doc,
            "confidence_score": prediction.confidence_score,
            "status": prediction.status.value,
            "created_at": prediction.created_at.isoformat(),
        }

    def _from_document(self, document: Dict[str, Any]) -> Prediction:
        confidence = document.get("confidence_score")

        result = None
        result_doc = document.get("prediction_result")
        if result_doc:
            result = ForecastResult(
                value=result_doc["value"],
                unit=result_doc.get("unit", ""),
                trend=Trend(result_doc.get("trend", Trend.STABLE.value)),
                series=[
                    SeriesPoint(label=point["label"], value=point["value"])
                    for point in result_doc.get("series", [])
                ],
                factors=list(result_doc.get("factors", [])),
                confidence=int(confidence) if confidence is not None else 0,
            )

        return Prediction(
            id=UUID(document["id"]),
            user_id=document.get("user_id") or "",
            model_id=UUID(document["model_id"]) if document.get("model_id") else None,
            title=document.get("title") or "",
            domain=document.get("domain") or "weather",
            parameters=document.get("parameters") or {},
            input_data=document.get("input_data"),
            result=result,
            confidence_score=confidence,
            status=PredictionStatus(document.get("status", "completed")),
            created_at=datetime.fromisoformat(document["created_at"]),
        )
