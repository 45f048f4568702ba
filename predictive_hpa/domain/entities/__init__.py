"""
Domain Entities Package

This package contains the core domain entities and errors.
"""

from .decision import HoltWintersParameters, ScalingDecision
from .errors import (
    AlgorithmExecutionError,
    ComputationError,
    ConfigurationError,
    DomainError,
    EvaluationError,
    InsufficientDataError,
    InvalidResultError,
    PredictionError,
    TuningFetchError,
)
from .evaluation import Evaluation, StoredEvaluation, sort_by_created
from .model import (
    ComponentMethod,
    DecisionType,
    HoltWintersConfig,
    HookType,
    HTTPHook,
    LinearConfig,
    ModelConfig,
    ModelType,
    ParameterMode,
    PredictiveConfig,
    RuntimeTuningFetchHook,
)

__all__ = [
    "Evaluation",
    "StoredEvaluation",
    "sort_by_created",
    "ModelConfig",
    "ModelType",
    "LinearConfig",
    "HoltWintersConfig",
    "ComponentMethod",
    "RuntimeTuningFetchHook",
    "HTTPHook",
    "HookType",
    "ParameterMode",
    "DecisionType",
    "PredictiveConfig",
    "HoltWintersParameters",
    "ScalingDecision",
    "DomainError",
    "ConfigurationError",
    "InsufficientDataError",
    "AlgorithmExecutionError",
    "InvalidResultError",
    "TuningFetchError",
    "ComputationError",
    "EvaluationError",
    "PredictionError",
]
