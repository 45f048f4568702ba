"""
Decision aggregation.

Reduces the current evaluation and the predictions produced this cycle to
the single replica count handed back to the autoscaler.
"""

import math
from typing import Iterable, List, Union

from predictive_hpa.domain.entities.errors import ConfigurationError
from predictive_hpa.domain.entities.model import DecisionType


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def parse_decision_type(value: Union[str, DecisionType]) -> DecisionType:
    try:
        return DecisionType(value)
    except ValueError as exc:
        raise ConfigurationError(
            f"Unknown decision type: {value}",
            details={
                "decision_type": str(value),
                "supported": [item.value for item in DecisionType],
            },
        ) from exc


def decide(
    decision_type: Union[str, DecisionType],
    current_replicas: int,
    predictions: Iterable[int],
) -> int:
    """
    Apply the decision rule over the current replicas and the predictions.

    ``mean`` is rounded half up.

    Raises:
        ConfigurationError: If the decision type is not recognised.
    """
    decision = parse_decision_type(decision_type)
    values: List[int] = [current_replicas, *predictions]

    if decision is DecisionType.MAXIMUM:
        return max(values)
    if decision is DecisionType.MINIMUM:
        return min(values)
    # Integer form of floor(mean + 0.5); exact for any replica count.
    return (2 * sum(values) + len(values)) // (2 * len(values))


def should_predict(per_interval: int, cycle: int) -> bool:
    """Whether a model configured with ``per_interval`` predicts on ``cycle``."""
    if per_interval < 1:
        raise ConfigurationError(
            "perInterval must be at least 1", details={"per_interval": per_interval}
        )
    return cycle % per_interval == 0
