from __future__ import annotations

import json

import pytest

from predictive_hpa.algorithms import LINEAR_REGRESSION_PATH
from predictive_hpa.algorithms.linear_regression import predict
from predictive_hpa.domain.entities.errors import AlgorithmExecutionError
from predictive_hpa.domain.entities.model import ModelConfig
from predictive_hpa.domain.services.predictors.linear import LinearPredictor
from predictive_hpa.infrastructure.services import SubprocessAlgorithmRunner
from tests.conftest import make_history


def _payload(replicas, look_ahead: int) -> dict:
    return {
        "lookAhead": look_ahead,
        "evaluations": [stored.to_dict() for stored in make_history(replicas)],
    }


def test_extrapolates_linear_growth() -> None:
    assert predict(_payload([1, 2, 3, 4], 10000)) == 5
    assert predict(_payload([1, 2, 3, 4], 30000)) == 7


def test_look_ahead_zero_predicts_latest_fit() -> None:
    assert predict(_payload([2, 2, 2], 0)) == 2


def test_order_of_evaluations_does_not_matter() -> None:
    payload = _payload([1, 2, 3, 4], 10000)
    payload["evaluations"].reverse()

    assert predict(payload) == 5


def test_negative_trend_is_floored_at_zero() -> None:
    assert predict(_payload([4, 2], 30000)) == 0


def test_empty_history_is_rejected() -> None:
    with pytest.raises(ValueError):
        predict({"lookAhead": 0, "evaluations": []})


@pytest.mark.asyncio
async def test_linear_predictor_runs_bundled_algorithm(linear_model: ModelConfig) -> None:
    predictor = LinearPredictor(
        SubprocessAlgorithmRunner(), LINEAR_REGRESSION_PATH, timeout=30000
    )

    prediction = await predictor.get_prediction(linear_model, make_history([2, 4, 6]))

    assert prediction == 8


@pytest.mark.asyncio
async def test_bundled_algorithm_rejects_bad_input() -> None:
    with pytest.raises(AlgorithmExecutionError) as exc_info:
        await SubprocessAlgorithmRunner().run_algorithm_with_value(
            LINEAR_REGRESSION_PATH, json.dumps({"evaluations": []}), 30000
        )

    assert exc_info.value.details["exit_code"] == 1
