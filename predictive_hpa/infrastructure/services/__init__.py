"""Infrastructure services: algorithm runner, evaluator and config loading."""

from .passthrough_evaluator import PassthroughEvaluator
from .predictive_config_loader import load_predictive_config
from .subprocess_algorithm_runner import SubprocessAlgorithmRunner

__all__ = [
    "SubprocessAlgorithmRunner",
    "PassthroughEvaluator",
    "load_predictive_config",
]
