"""DTOs for scaling decisions and model summaries."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from predictive_hpa.domain.entities.decision import ScalingDecision
from predictive_hpa.domain.entities.model import ModelConfig


class ScalingDecisionDTO(BaseModel):
    """Outcome of one predictive scaling cycle."""

    target_replicas: int = Field(description="Replica count after aggregation")
    current_replicas: int = Field(description="Replica count of the evaluation")
    predictions: Dict[str, int] = Field(
        default_factory=dict, description="Prediction per model that produced one"
    )
    skipped: List[str] = Field(
        default_factory=list, description="Models not due to predict this cycle"
    )
    failed: Dict[str, str] = Field(
        default_factory=dict, description="Error message per model that failed"
    )

    @classmethod
    def from_domain(cls, decision: ScalingDecision) -> "ScalingDecisionDTO":
        return cls(
            target_replicas=decision.target_replicas,
            current_replicas=decision.current_replicas,
            predictions=dict(decision.predictions),
            skipped=list(decision.skipped),
            failed=dict(decision.failed),
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "target_replicas": 6,
                "current_replicas": 4,
                "predictions": {"LinearPrediction": 6},
                "skipped": [],
                "failed": {"HoltWintersPrediction": "Not enough evaluations"},
            }
        }
    }


class ModelSummaryDTO(BaseModel):
    """Configured model with the size of its stored history."""

    name: str
    type: str
    per_interval: int
    capacity: Optional[int] = None
    stored_evaluations: int = 0

    @classmethod
    def from_domain(cls, model: ModelConfig, stored: int) -> "ModelSummaryDTO":
        capacity: Optional[int] = None
        if model.linear is not None:
            capacity = model.linear.stored_values
        elif model.holt_winters is not None:
            capacity = model.holt_winters.capacity
        return cls(
            name=model.name,
            type=model.type,
            per_interval=model.per_interval,
            capacity=capacity,
            stored_evaluations=stored,
        )
