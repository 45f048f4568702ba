"""Domain entities describing the outcome of one scaling cycle."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(slots=True)
class HoltWintersParameters:
    """Smoothing coefficients for one Holt-Winters prediction."""

    alpha: float
    beta: float
    gamma: float


@dataclass(slots=True)
class ScalingDecision:
    """Final replica count and the inputs it was derived from."""

    target_replicas: int
    current_replicas: int
    predictions: Dict[str, int] = field(default_factory=dict)
    skipped: List[str] = field(default_factory=list)
    failed: Dict[str, str] = field(default_factory=dict)
