"""
MongoDB Database - Infrastructure Layer

Thin MongoDB client used by the durable evaluation store. It handles the
connection, the collections and the handful of operations the store needs.
"""

from typing import Any, Dict, List

import pymongo.errors
from pymongo import MongoClient, ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database

from predictive_hpa.shared.logging import get_logger

logger = get_logger(__name__)

EVALUATIONS_COLLECTION = "evaluations"
COUNTERS_COLLECTION = "model_counters"


class MongoDatabase:
    """MongoDB database client."""

    def __init__(self, mongo_uri: str, db_name: str):
        """
        Initialize the MongoDB database client.

        Args:
            mongo_uri: MongoDB connection URI
            db_name: Name of the database to use
        """
        self.client: MongoClient = MongoClient(mongo_uri, tz_aware=True)
        self.db: Database = self.client[db_name]

    def get_collection(self, collection_name: str) -> Collection:
        return self.db[collection_name]

    async def find_many(
        self, collection_name: str, query: Dict[str, Any]
    ) -> List[Dict[str, Any]]:
        """
        Find every document matching ``query``, in no particular order.

        Args:
            collection_name: Name of the collection
            query: Query to match documents
        """
        return list(self.db[collection_name].find(query))

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

    async def delete_many(self, collection_name: str, query: Dict[str, Any]) -> int:
        """Delete every document matching ``query`` and return how many went."""
        result = self.db[collection_name].delete_many(query)
        return result.deleted_count

    async def increment(
        self, collection_name: str, query: Dict[str, Any], field: str
    ) -> int:
        """
        Atomically increment ``field`` of the matching document.

        The document is created when missing, so the first call returns 1.
        """
        document = self.db[collection_name].find_one_and_update(
            query,
            {"$inc": {field: 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return int(document[field])

    def close(self) -> None:
        """Close the database connection."""
        self.client.close()

    async def create_indexes(self) -> None:
        """Create the indexes used by the evaluation store."""
        try:
            self.db[EVALUATIONS_COLLECTION].create_index(
                [("model_name", 1), ("id", 1)],
                name="model_evaluation_id_idx",
                unique=True,
            )
            self.db[EVALUATIONS_COLLECTION].create_index(
                [("model_name", 1), ("created", 1)],
                name="model_created_idx",
            )
            self.db[COUNTERS_COLLECTION].create_index(
                [("model_name", 1), ("counter", 1)],
                name="model_counter_idx",
                unique=True,
            )
        except pymongo.errors.OperationFailure as exc:
            logger.warning("mongo.indexes.failed", error=str(exc))
