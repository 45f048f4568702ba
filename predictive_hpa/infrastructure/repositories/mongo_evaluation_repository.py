"""
MongoDB Evaluation Repository - Infrastructure Layer

Durable evaluation store. Each stored evaluation is one document; IDs and
cycle counters are allocated from a per-model counter document so they
stay unique across restarts.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List

from predictive_hpa.domain.entities.evaluation import Evaluation, StoredEvaluation
from predictive_hpa.domain.repositories.evaluation_repository import (
    IEvaluationRepository,
)
from predictive_hpa.infrastructure.database.mongo_database import (
    COUNTERS_COLLECTION,
    EVALUATIONS_COLLECTION,
    MongoDatabase,
)

ID_COUNTER = "evaluation_id"
CYCLE_COUNTER = "cycle"


def _utcnow_millis() -> datetime:
    # BSON dates only keep milliseconds.
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond - now.microsecond % 1000)


class MongoEvaluationRepository(IEvaluationRepository):
    """MongoDB implementation of the evaluation store."""

    def __init__(self, mongo_database: MongoDatabase):
        """
        Args:
            mongo_database: MongoDB database client
        """
        self.db = mongo_database

    def _to_document(self, model_name: str, stored: StoredEvaluation) -> Dict[str, Any]:
        return {
            "model_name": model_name,
            "id": stored.id,
            "created": stored.created,
            "evaluation": stored.evaluation.to_dict(),
        }

    def _to_entity(self, document: Dict[str, Any]) -> StoredEvaluation:
        created = document["created"]
        if created.tzinfo is None:
            created = created.replace(tzinfo=timezone.utc)
        return StoredEvaluation(
            id=int(document["id"]),
            created=created,
            evaluation=Evaluation.from_dict(document["evaluation"]),
        )

    async def _next(self, model_name: str, counter: str) -> int:
        return await self.db.increment(
            COUNTERS_COLLECTION,
            {"model_name": model_name, "counter": counter},
            "value",
        )

    async def add(self, model_name: str, evaluation: Evaluation) -> StoredEvaluation:
        stored = StoredEvaluation(
            id=await self._next(model_name, ID_COUNTER),
            evaluation=evaluation,
            created=_utcnow_millis(),
        )
        await self.db.insert_one(
            EVALUATIONS_COLLECTION, self._to_document(model_name, stored)
        )
        return stored

    async def get_all(self, model_name: str) -> List[StoredEvaluation]:
        documents = await self.db.find_many(
            EVALUATIONS_COLLECTION, {"model_name": model_name}
        )
        return [self._to_entity(document) for document in documents]

    async def remove(self, model_name: str, ids: Iterable[int]) -> None:
        id_list = list(ids)
        if not id_list:
            return
        await self.db.delete_many(
            EVALUATIONS_COLLECTION,
            {"model_name": model_name, "id": {"$in": id_list}},
        )

    async def increment_cycle(self, model_name: str) -> int:
        return await self._next(model_name, CYCLE_COUNTER)
