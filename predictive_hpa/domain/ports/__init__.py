"""Domain ports package."""

from .algorithm_runner import IAlgorithmRunner
from .evaluator import IEvaluator
from .tuning_fetcher import ITuningFetcher

__all__ = ["IAlgorithmRunner", "ITuningFetcher", "IEvaluator"]
