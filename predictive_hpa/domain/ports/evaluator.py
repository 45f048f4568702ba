"""Domain port for the evaluator producing the current evaluation."""

from __future__ import annotations

from typing import Any, Protocol

from predictive_hpa.domain.entities.evaluation import Evaluation


class IEvaluator(Protocol):
    """Turns gathered metrics into the evaluation for the current cycle."""

    async def get_evaluation(self, gathered_metrics: Any) -> Evaluation:
        """Raises EvaluationError when no evaluation can be produced."""
        ...
