from __future__ import annotations

import pytest

from predictive_hpa.domain.entities.errors import ConfigurationError
from predictive_hpa.domain.entities.model import ModelType
from predictive_hpa.domain.services.predictors import (
    HoltWintersPredictor,
    LinearPredictor,
    PredictorRegistry,
)


class _NoopRunner:
    async def run_algorithm_with_value(self, algorithm_path, value, timeout) -> str:
        return "0"


def _registry() -> PredictorRegistry:
    return PredictorRegistry(
        [LinearPredictor(_NoopRunner(), "linear.py"), HoltWintersPredictor()]
    )


def test_lists_registered_types() -> None:
    assert _registry().types() == ["HoltWinters", "Linear"]


def test_get_accepts_names_and_enums() -> None:
    registry = _registry()

    assert isinstance(registry.get("Linear"), LinearPredictor)
    assert isinstance(registry.get(ModelType.HOLT_WINTERS), HoltWintersPredictor)


def test_get_unknown_type_is_configuration_error() -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        _registry().get("Arima")

    assert exc_info.value.details["supported"] == ["HoltWinters", "Linear"]
