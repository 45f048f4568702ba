"""
Use Cases Package - Application Layer

This package contains use cases orchestrating the evaluation store, the
predictors and the decision aggregator.
"""

from .predictive_scaling_use_case import ListModelsUseCase, PredictiveScalingUseCase

__all__ = ["PredictiveScalingUseCase", "ListModelsUseCase"]
