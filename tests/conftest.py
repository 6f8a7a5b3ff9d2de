from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Callable, Dict, Iterable, Iterator, List, Sequence
from uuid import uuid4

import pytest

from src.domain.entities.model import ModelTrainingStatus, ModelType, PredictionModel
from src.domain.entities.training_job import TrainingConfig, TrainingJob

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def sequence_random(values: Iterable[float]) -> Callable[[], float]:
    """Random source returning ``values`` in order, then repeating the last one."""
    items = list(values)
    state = {"index": 0}

    def _next() -> float:
        index = min(state["index"], len(items) - 1)
        state["index"] += 1
        return items[index]

    return _next


@pytest.fixture()
def sample_model() -> PredictionModel:
    return PredictionModel(
        id=uuid4(),
        user_id="user-1",
        name="Temperature LSTM",
        domain="weather",
        model_type=ModelType.LSTM,
        training_status=ModelTrainingStatus.PENDING,
        configuration={"layers": 2},
    )


@pytest.fixture()
def sample_training_job(sample_model: PredictionModel) -> TrainingJob:
    return TrainingJob(
        model_id=sample_model.id,
        user_id=sample_model.user_id,
        training_config=TrainingConfig(epochs=10, batch_size=16),
    )


class FakeCursor:
    def __init__(self, documents: Sequence[Dict[str, Any]]):
        self._documents = list(documents)
        self._skip = 0
        self._limit: int | None = None

    def sort(self, key: Any = None, direction: int = 1) -> "FakeCursor":
        if isinstance(key, str):
            self._documents.sort(
                key=lambda doc: str(doc.get(key)), reverse=direction < 0
            )
        return self

    def skip(self, amount: int) -> "FakeCursor":
        self._skip = amount
        return self

    def limit(self, amount: int) -> "FakeCursor":
        self._limit = amount
        return self

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        docs = self._documents[self._skip :]
        if self._limit:
            docs = docs[: self._limit]
        return iter(docs)


class FakeCollection:
    def __init__(self) -> None:
        self.documents: Dict[str, Dict[str, Any]] = {}
        self.inserts: List[Dict[str, Any]] = []
        self.last_query: Dict[str, Any] | None = None
        self.created_indexes: List[tuple[Any, ...]] = []

    def find_one(self, query: Dict[str, Any]) -> Dict[str, Any] | None:
        self.last_query = query
        key = query.get("id")
        if not isinstance(key, str):
            return None
        return self.documents.get(key)

    def find(self, query: Dict[str, Any]) -> FakeCursor:
        self.last_query = query
        results = [doc for doc in self.documents.values() if self._matches(doc, query)]
        return FakeCursor(results)

    def insert_one(self, document: Dict[str, Any]) -> Any:
        self.inserts.append(document)
        self.documents[document["id"]] = document
        return SimpleNamespace(acknowledged=True, inserted_id=document["id"])

    def replace_one(self, query: Dict[str, Any], document: Dict[str, Any]) -> Any:
        key = query.get("id")
        if not isinstance(key, str) or key not in self.documents:
            return SimpleNamespace(matched_count=0, acknowledged=False)
        self.documents[key] = document
        return SimpleNamespace(matched_count=1, acknowledged=True)

    def create_index(self, keys: Any, name: str | None = None, **kwargs: Any) -> Any:
        self.created_indexes.append((keys, name, kwargs))
        return name or keys

    @staticmethod
    def _matches(document: Dict[str, Any], query: Dict[str, Any]) -> bool:
        for key, value in query.items():
            if document.get(key) != value:
                return False
        return True


class FakeMongoDatabase:
    def __init__(self) -> None:
        self.collections: Dict[str, FakeCollection] = {}
        self.closed = False

    def get_collection(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())

    async def find_one(self, collection_name: str, query: Dict[str, Any]) -> Any:
        return self.get_collection(collection_name).find_one(query)

    async def find_many(
        self,
        collection_name: str,
        query: Dict[str, Any],
        sort_by: str | None = None,
        sort_direction: int = 1,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Dict[str, Any]]:
        cursor = self.get_collection(collection_name).find(query)
        cursor.sort(sort_by, sort_direction)
        cursor.skip(skip)
        cursor.limit(limit)
        return list(cursor)

    async def insert_one(self, collection_name: str, document: Dict[str, Any]) -> Any:
        result = self.get_collection(collection_name).insert_one(document)
        if not getattr(result, "acknowledged", True):
            raise Exception(f"Failed to insert document in {collection_name}")
        return document

    async def replace_one(
        self, collection_name: str, query: Dict[str, Any], document: Dict[str, Any]
    ) -> Any:
        result = self.get_collection(collection_name).replace_one(query, document)
        if getattr(result, "matched_count", 0) == 0:
            raise Exception(f"Document not found in {collection_name}")
        if not getattr(result, "acknowledged", True):
            raise Exception(f"Failed to replace document in {collection_name}")
        return document

    async def create_indexes(self) -> None:  # pragma: no cover - stub for tests
        pass

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def fake_mongo_database() -> FakeMongoDatabase:
    return FakeMongoDatabase()


@pytest.fixture()
def dummy_now() -> datetime:
    return datetime.now(timezone.utc)
