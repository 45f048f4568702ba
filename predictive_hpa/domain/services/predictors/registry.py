"""Lookup of predictors by model type."""

from typing import Dict, Iterable, List

from predictive_hpa.domain.entities.errors import ConfigurationError
from predictive_hpa.domain.services.predictors.base import Predictor


class PredictorRegistry:
    """Dispatches a model configuration to the predictor handling its type."""

    def __init__(self, predictors: Iterable[Predictor]):
        self._predictors: Dict[str, Predictor] = {}
        for predictor in predictors:
            self._predictors[predictor.get_type()] = predictor

    def types(self) -> List[str]:
        return sorted(self._predictors)

    def get(self, model_type: str) -> Predictor:
        key = getattr(model_type, "value", model_type)
        predictor = self._predictors.get(key)
        if predictor is None:
            raise ConfigurationError(
                f"Unknown model type: {model_type}",
                details={"model_type": str(key), "supported": self.types()},
            )
        return predictor
