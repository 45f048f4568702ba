"""Domain entities for evaluations and their stored history."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List


@dataclass(frozen=True, slots=True)
class Evaluation:
    """A scaling decision produced for a single cycle."""

    target_replicas: int

    def to_dict(self) -> Dict[str, Any]:
        return {"targetReplicas": self.target_replicas}

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Evaluation":
        return cls(target_replicas=int(payload["targetReplicas"]))


@dataclass(frozen=True, slots=True)
class StoredEvaluation:
    """An identifiable historical evaluation used as forecasting input."""

    id: int
    evaluation: Evaluation
    created: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "created": self.created.isoformat(),
            "evaluation": self.evaluation.to_dict(),
        }


def sort_by_created(evaluations: Iterable[StoredEvaluation]) -> List[StoredEvaluation]:
    """Oldest first; equal timestamps are ordered by ID."""
    return sorted(evaluations, key=lambda stored: (stored.created, stored.id))
