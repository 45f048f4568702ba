"""Predictive models available to the scaling cycle."""

from .base import Predictor
from .holt_winters import HoltWintersPredictor, triple_exponential_smoothing
from .linear import LinearPredictor
from .registry import PredictorRegistry

__all__ = [
    "Predictor",
    "LinearPredictor",
    "HoltWintersPredictor",
    "PredictorRegistry",
    "triple_exponential_smoothing",
]
