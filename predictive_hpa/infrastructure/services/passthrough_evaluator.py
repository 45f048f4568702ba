"""
Passthrough Evaluator - Infrastructure Layer

The surrounding autoscaler computes the reactive evaluation itself and
hands it over with the gathered metrics. This evaluator extracts and
validates it.
"""

from typing import Any, Mapping

from predictive_hpa.domain.entities.errors import EvaluationError
from predictive_hpa.domain.entities.evaluation import Evaluation
from predictive_hpa.domain.ports.evaluator import IEvaluator


class PassthroughEvaluator(IEvaluator):
    """Reads ``targetReplicas`` from the gathered metrics payload."""

    async def get_evaluation(self, gathered_metrics: Any) -> Evaluation:
        payload = gathered_metrics
        if isinstance(payload, Mapping) and isinstance(
            payload.get("evaluation"), Mapping
        ):
            payload = payload["evaluation"]

        if not isinstance(payload, Mapping) or "targetReplicas" not in payload:
            raise EvaluationError(
                "Gathered metrics do not contain an evaluation with targetReplicas"
            )

        replicas = payload["targetReplicas"]
        if isinstance(replicas, bool) or not isinstance(replicas, int) or replicas < 0:
            raise EvaluationError(
                "targetReplicas must be a non-negative integer",
                details={"target_replicas": repr(replicas)},
            )

        return Evaluation(target_replicas=replicas)
