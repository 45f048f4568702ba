"""
In-Memory Evaluation Repository - Infrastructure Layer

Process-local evaluation store. History lives as long as the process does,
which suits single-replica deployments and tests.
"""

import threading
from collections import defaultdict
from datetime import datetime, timezone
from typing import Callable, Dict, Iterable, List

from predictive_hpa.domain.entities.evaluation import Evaluation, StoredEvaluation
from predictive_hpa.domain.repositories.evaluation_repository import (
    IEvaluationRepository,
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryEvaluationRepository(IEvaluationRepository):
    """Evaluation store kept in process memory, safe across threads."""

    def __init__(self, clock: Callable[[], datetime] = _utcnow):
        self._clock = clock
        self._lock = threading.Lock()
        self._evaluations: Dict[str, Dict[int, StoredEvaluation]] = defaultdict(dict)
        self._next_ids: Dict[str, int] = defaultdict(int)
        self._cycles: Dict[str, int] = defaultdict(int)

    async def add(self, model_name: str, evaluation: Evaluation) -> StoredEvaluation:
        with self._lock:
            stored = StoredEvaluation(
                id=self._next_ids[model_name],
                evaluation=evaluation,
                created=self._clock(),
            )
            self._next_ids[model_name] += 1
            self._evaluations[model_name][stored.id] = stored
        return stored

    async def get_all(self, model_name: str) -> List[StoredEvaluation]:
        with self._lock:
            return list(self._evaluations.get(model_name, {}).values())

    async def remove(self, model_name: str, ids: Iterable[int]) -> None:
        with self._lock:
            history = self._evaluations.get(model_name)
            if history is None:
                return
            for evaluation_id in ids:
                history.pop(evaluation_id, None)

    async def increment_cycle(self, model_name: str) -> int:
        with self._lock:
            self._cycles[model_name] += 1
            return self._cycles[model_name]
