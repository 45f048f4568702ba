"""
Linear regression predictor.

The regression itself runs out of process through an ``IAlgorithmRunner``;
this predictor marshals the history, enforces the timeout and parses the
result.
"""

import json
from typing import List, Sequence

from predictive_hpa.domain.entities.errors import (
    AlgorithmExecutionError,
    ConfigurationError,
    InsufficientDataError,
    InvalidResultError,
)
from predictive_hpa.domain.entities.evaluation import StoredEvaluation
from predictive_hpa.domain.entities.model import LinearConfig, ModelConfig, ModelType
from predictive_hpa.domain.ports.algorithm_runner import IAlgorithmRunner
from predictive_hpa.domain.services.predictors.base import Predictor
from predictive_hpa.domain.services.retention import select_ids_to_remove
from predictive_hpa.shared.logging import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT_MS = 30000


class LinearPredictor(Predictor):
    """Predicts replicas with ordinary least squares over the stored history."""

    type = ModelType.LINEAR.value

    def __init__(
        self,
        runner: IAlgorithmRunner,
        algorithm_path: str,
        timeout: int = DEFAULT_TIMEOUT_MS,
    ):
        """
        Args:
            runner: Port executing the regression algorithm
            algorithm_path: Path of the regression algorithm
            timeout: Maximum algorithm run time in milliseconds
        """
        self.runner = runner
        self.algorithm_path = algorithm_path
        self.timeout = timeout

    def _get_config(self, model: ModelConfig) -> LinearConfig:
        if model.linear is None:
            raise ConfigurationError(
                "No Linear configuration provided for model",
                details={"model": model.name},
            )
        return model.linear

    async def get_prediction(
        self, model: ModelConfig, evaluations: Sequence[StoredEvaluation]
    ) -> int:
        linear = self._get_config(model)

        if not evaluations:
            raise InsufficientDataError(
                "No evaluations provided for Linear regression model",
                details={"model": model.name},
            )

        if len(evaluations) == 1:
            return evaluations[0].evaluation.target_replicas

        value = json.dumps(
            {
                "lookAhead": linear.look_ahead,
                "evaluations": [stored.to_dict() for stored in evaluations],
            }
        )

        logger.debug(
            "prediction.linear.run",
            model=model.name,
            algorithm_path=self.algorithm_path,
            evaluations=len(evaluations),
        )

        try:
            result = await self.runner.run_algorithm_with_value(
                self.algorithm_path, value, self.timeout
            )
        except AlgorithmExecutionError as exc:
            raise AlgorithmExecutionError(
                exc.message, details={"model": model.name, **exc.details}
            ) from exc
        except Exception as exc:
            raise AlgorithmExecutionError(
                str(exc), details={"model": model.name, "cause": repr(exc)}
            ) from exc

        try:
            return int(result.strip())
        except ValueError as exc:
            raise InvalidResultError(result, details={"model": model.name}) from exc

    def get_ids_to_remove(
        self, model: ModelConfig, evaluations: Sequence[StoredEvaluation]
    ) -> List[int]:
        linear = self._get_config(model)
        return select_ids_to_remove(evaluations, linear.stored_values)
