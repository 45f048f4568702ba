from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Callable, Dict, Iterator, List, Sequence

import pytest

from predictive_hpa.domain.entities.evaluation import Evaluation, StoredEvaluation
from predictive_hpa.domain.entities.model import (
    ComponentMethod,
    HoltWintersConfig,
    LinearConfig,
    ModelConfig,
)

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture()
def linear_model() -> ModelConfig:
    return ModelConfig(
        type="Linear",
        name="LinearPrediction",
        per_interval=1,
        linear=LinearConfig(look_ahead=10000, stored_values=6),
    )


@pytest.fixture()
def holt_winters_model() -> ModelConfig:
    return ModelConfig(
        type="HoltWinters",
        name="HoltWintersPrediction",
        per_interval=1,
        holt_winters=HoltWintersConfig(
            seasonal_periods=4,
            stored_seasons=3,
            trend=ComponentMethod.ADDITIVE,
            seasonal=ComponentMethod.ADDITIVE,
            alpha=0.9,
            beta=0.9,
            gamma=0.9,
        ),
    )


def make_history(
    replicas: Sequence[int],
    start_id: int = 0,
    step: timedelta = timedelta(seconds=10),
) -> List[StoredEvaluation]:
    """Stored evaluations spaced ``step`` apart, oldest first."""
    return [
        StoredEvaluation(
            id=start_id + index,
            evaluation=Evaluation(target_replicas=value),
            created=BASE_TIME + step * index,
        )
        for index, value in enumerate(replicas)
    ]


@pytest.fixture()
def history_factory() -> Callable[..., List[StoredEvaluation]]:
    return make_history


class FakeCursor:
    def __init__(self, documents: Sequence[Dict[str, Any]]):
        self._documents = list(documents)

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        return iter(self._documents)


class FakeCollection:
    def __init__(self) -> None:
        self.documents: List[Dict[str, Any]] = []
        self.last_query: Dict[str, Any] | None = None
        self.created_indexes: List[tuple[Any, ...]] = []

    def find(self, query: Dict[str, Any]) -> FakeCursor:
        self.last_query = query
        return FakeCursor(doc for doc in self.documents if self._matches(doc, query))

    def insert_one(self, document: Dict[str, Any]) -> Any:
        self.documents.append(document)
        return SimpleNamespace(acknowledged=True, inserted_id=document.get("id"))

    def delete_many(self, query: Dict[str, Any]) -> Any:
        self.last_query = query
        kept = [doc for doc in self.documents if not self._matches(doc, query)]
        deleted = len(self.documents) - len(kept)
        self.documents = kept
        return SimpleNamespace(deleted_count=deleted, acknowledged=True)

    def find_one_and_update(
        self,
        query: Dict[str, Any],
        update: Dict[str, Any],
        upsert: bool = False,
        return_document: Any = None,
    ) -> Dict[str, Any] | None:
        document = next(
            (doc for doc in self.documents if self._matches(doc, query)), None
        )
        if document is None:
            if not upsert:
                return None
            document = dict(query)
            self.documents.append(document)
        for field, amount in update.get("$inc", {}).items():
            document[field] = document.get(field, 0) + amount
        return document

    def create_index(self, keys: Any, name: str | None = None, **kwargs: Any) -> Any:
        self.created_indexes.append((keys, name, kwargs))
        return name or keys

    @staticmethod
    def _matches(document: Dict[str, Any], query: Dict[str, Any]) -> bool:
        for key, value in query.items():
            if isinstance(value, dict) and "$in" in value:
                if document.get(key) not in value["$in"]:
                    return False
            elif document.get(key) != value:
                return False
        return True


class FakeMongoDatabase:
    def __init__(self) -> None:
        self.collections: Dict[str, FakeCollection] = {}

    def get_collection(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())

    async def find_many(
        self, collection_name: str, query: Dict[str, Any]
    ) -> List[Dict[str, Any]]:
        return list(self.get_collection(collection_name).find(query))

    async def insert_one(self, collection_name: str, document: Dict[str, Any]) -> Any:
        self.get_collection(collection_name).insert_one(document)
        return document

    async def delete_many(self, collection_name: str, query: Dict[str, Any]) -> int:
        return self.get_collection(collection_name).delete_many(query).deleted_count

    async def increment(
        self, collection_name: str, query: Dict[str, Any], field: str
    ) -> int:
        document = self.get_collection(collection_name).find_one_and_update(
            query, {"$inc": {field: 1}}, upsert=True
        )
        return int(document[field])

    async def create_indexes(self) -> None:  # pragma: no cover - stub for tests
        pass

    def close(self) -> None:
        pass


@pytest.fixture()
def fake_mongo_database() -> FakeMongoDatabase:
    return FakeMongoDatabase()
