"""Domain services: predictors, retention policy and decision aggregation."""

from .decision_aggregator import decide, round_half_up, should_predict
from .predictors import (
    HoltWintersPredictor,
    LinearPredictor,
    Predictor,
    PredictorRegistry,
)
from .retention import select_ids_to_remove

__all__ = [
    "decide",
    "should_predict",
    "round_half_up",
    "select_ids_to_remove",
    "Predictor",
    "LinearPredictor",
    "HoltWintersPredictor",
    "PredictorRegistry",
]
