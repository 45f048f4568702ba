"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for configuration
parsing and for data exchange with the presentation layer.
"""

from .config_dto import (
    HoltWintersDTO,
    HTTPHookDTO,
    LinearDTO,
    ModelDTO,
    PredictiveConfigDTO,
    RuntimeTuningFetchHookDTO,
    parse_predictive_config,
)
from .decision_dto import ModelSummaryDTO, ScalingDecisionDTO

__all__ = [
    "HTTPHookDTO",
    "RuntimeTuningFetchHookDTO",
    "LinearDTO",
    "HoltWintersDTO",
    "ModelDTO",
    "PredictiveConfigDTO",
    "parse_predictive_config",
    "ScalingDecisionDTO",
    "ModelSummaryDTO",
]
