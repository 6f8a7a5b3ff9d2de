"""
MongoDB Database - Infrastructure Layer

Thin wrapper around a pymongo client exposing the collections and the
CRUD helpers used by the repositories.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple

import pymongo.errors
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from src.shared import get_logger

logger = get_logger(__name__)

# collection -> [(index name, keys)]
INDEXES: Dict[str, Sequence[Tuple[str, Any]]] = {
    "prediction_models": (
        ("user_created_idx", [("user_id", 1), ("created_at", -1)]),
        ("domain_idx", "domain"),
        ("training_status_idx", "training_status"),
    ),
    "model_training_jobs": (
        ("model_created_idx", [("model_id", 1), ("created_at", -1)]),
        ("user_created_idx", [("user_id", 1), ("created_at", -1)]),
        ("job_status_idx", "job_status"),
    ),
    "training_data": (("model_idx", "model_id"),),
    "predictions": (("user_created_idx", [("user_id", 1), ("created_at", -1)]),),
}


class MongoDatabase:
    """MongoDB database client."""

    def __init__(self, mongo_uri: str, db_name: str):
        """
        Initialize the MongoDB database client.

        Args:
            mongo_uri: MongoDB connection URI
            db_name: Name of the database to use
        """
        self.client: MongoClient = MongoClient(mongo_uri)
        self.db: Database = self.client[db_name]

    def get_collection(self, collection_name: str) -> Collection:
        return self.db[collection_name]

    async def find_one(
        self, collection_name: str, query: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """Find a single document in a collection."""
        return self.db[collection_name].find_one(query)

    async def find_many(
        self,
        collection_name: str,
        query: Dict[str, Any],
        sort_by: Optional[str] = None,
        sort_direction: int = 1,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Dict[str, Any]]:
        """
        Find multiple documents in a collection.

        Args:
            collection_name: Name of the collection
            query: Query to match documents
            sort_by: Field to sort by
            sort_direction: 1 for ascending, -1 for descending
            skip: Number of documents to skip
            limit: Maximum number of documents to return
        """
        cursor = self.db[collection_name].find(query)

        if sort_by:
            cursor = cursor.sort(sort_by, sort_direction)

        cursor = cursor.skip(skip).limit(limit)

        return list(cursor)

    async def insert_one(
        self, collection_name: str, document: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Insert a document into a collection.

        Raises:
            Exception: If the insert is not acknowledged
        """
        result = self.db[collection_name].insert_one(document)
        if not result.acknowledged:
            raise Exception(f"Failed to insert document in {collection_name}")
        return document

    async def replace_one(
        self, collection_name: str, query: Dict[str, Any], document: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Replace a document in a collection.

        Raises:
            Exception: If the document does not exist or the replace fails
        """
        result = self.db[collection_name].replace_one(query, document)
        if result.matched_count == 0:
            raise Exception(f"Document not found in {collection_name}")
        if not result.acknowledged:
            raise Exception(f"Failed to replace document in {collection_name}")
        return document

    def close(self) -> None:
        """Close the database connection."""
        self.client.close()

    async def create_indexes(self) -> None:
        """Create the indexes used by the repositories' common queries."""
        for collection_name, indexes in INDEXES.items():
            collection = self.db[collection_name]
            for index_name, keys in indexes:
                try:
                    collection.create_index(keys, name=index_name, background=True)
                except pymongo.errors.OperationFailure as e:
                    logger.warning(
                        "mongo.index.create_failed",
                        collection=collection_name,
                        index=index_name,
                        error=str(e),
                    )
