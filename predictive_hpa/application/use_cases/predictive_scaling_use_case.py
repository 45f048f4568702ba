"""
Application Use Case - Predictive Scaling

Runs one evaluation cycle:
  * Obtain the current evaluation from the evaluator
  * Store it in the history of every configured model
  * Ask each model that is due this cycle for a prediction
  * Evict the surplus history of each model
  * Merge the current evaluation and the predictions into one replica count
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, List, Optional

import structlog

from predictive_hpa.application.dtos.decision_dto import (
    ModelSummaryDTO,
    ScalingDecisionDTO,
)
from predictive_hpa.domain.entities.decision import ScalingDecision
from predictive_hpa.domain.entities.errors import (
    DomainError,
    EvaluationError,
    InsufficientDataError,
    PredictionError,
)
from predictive_hpa.domain.entities.evaluation import Evaluation
from predictive_hpa.domain.entities.model import ModelConfig, PredictiveConfig
from predictive_hpa.domain.ports.evaluator import IEvaluator
from predictive_hpa.domain.repositories.evaluation_repository import (
    IEvaluationRepository,
)
from predictive_hpa.domain.services.decision_aggregator import (
    decide,
    parse_decision_type,
    should_predict,
)
from predictive_hpa.domain.services.predictors.registry import PredictorRegistry

logger = structlog.get_logger(__name__)

DEFAULT_MAX_CONCURRENCY = 4


@dataclass
class _ModelOutcome:
    name: str
    prediction: Optional[int] = None
    skipped: bool = False
    error: Optional[DomainError] = None


class PredictiveScalingUseCase:
    """Coordinates one predictive scaling cycle across all configured models."""

    def __init__(
        self,
        evaluation_repository: IEvaluationRepository,
        predictor_registry: PredictorRegistry,
        evaluator: IEvaluator,
        predictive_config: PredictiveConfig,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
    ):
        self.evaluation_repository = evaluation_repository
        self.predictor_registry = predictor_registry
        self.evaluator = evaluator
        self.predictive_config = predictive_config
        self.max_concurrency = max(1, max_concurrency)

    async def execute(self, gathered_metrics: Any) -> ScalingDecisionDTO:
        """
        Run a cycle for the given gathered metrics.

        A single configured model that is still warming up does not fail the
        cycle: its InsufficientDataError is reported under ``failed`` and the
        decision falls back to the current evaluation. Any other failure of
        the only model is raised as PredictionError.

        Raises:
            EvaluationError: The evaluator failed; nothing was stored.
            ConfigurationError: The decision type is not recognised.
            PredictionError: The only configured model failed to predict for
                a reason other than insufficient history.
        """
        decision_type = parse_decision_type(self.predictive_config.decision_type)
        evaluation = await self._get_evaluation(gathered_metrics)
        models = self.predictive_config.models

        logger.info(
            "scaling.cycle.start",
            current_replicas=evaluation.target_replicas,
            models=len(models),
            decision_type=decision_type.value,
        )

        semaphore = asyncio.Semaphore(self.max_concurrency)
        outcomes: List[_ModelOutcome] = await asyncio.gather(
            *(self._run_model(model, evaluation, semaphore) for model in models)
        )

        if len(outcomes) == 1:
            only = outcomes[0]
            if only.error is not None and not isinstance(
                only.error, InsufficientDataError
            ):
                raise PredictionError(only.name, only.error) from only.error

        decision = ScalingDecision(
            target_replicas=evaluation.target_replicas,
            current_replicas=evaluation.target_replicas,
        )
        for outcome in outcomes:
            if outcome.prediction is not None:
                decision.predictions[outcome.name] = outcome.prediction
            elif outcome.skipped:
                decision.skipped.append(outcome.name)
            if outcome.error is not None:
                decision.failed[outcome.name] = outcome.error.message

        decision.target_replicas = decide(
            decision_type,
            evaluation.target_replicas,
            decision.predictions.values(),
        )

        logger.info(
            "scaling.cycle.complete",
            target_replicas=decision.target_replicas,
            predictions=decision.predictions,
            skipped=decision.skipped,
            failed=list(decision.failed),
        )
        return ScalingDecisionDTO.from_domain(decision)

    async def _get_evaluation(self, gathered_metrics: Any) -> Evaluation:
        try:
            return await self.evaluator.get_evaluation(gathered_metrics)
        except EvaluationError:
            logger.warning("scaling.evaluation.failed")
            raise
        except Exception as exc:
            logger.error("scaling.evaluation.error", error=str(exc), exc_info=exc)
            raise EvaluationError(
                f"Failed to evaluate gathered metrics: {exc}",
                details={"cause": repr(exc)},
            ) from exc

    async def _run_model(
        self,
        model: ModelConfig,
        evaluation: Evaluation,
        semaphore: asyncio.Semaphore,
    ) -> _ModelOutcome:
        outcome = _ModelOutcome(name=model.name)

        async with semaphore:
            with structlog.contextvars.bound_contextvars(model=model.name):
                await self.evaluation_repository.add(model.name, evaluation)
                cycle = await self.evaluation_repository.increment_cycle(model.name)
                snapshot = list(await self.evaluation_repository.get_all(model.name))

                try:
                    predictor = self.predictor_registry.get(model.type)
                except DomainError as exc:
                    logger.error("scaling.model.unsupported", error=exc.message)
                    outcome.error = exc
                    return outcome

                try:
                    if should_predict(model.per_interval, cycle):
                        outcome.prediction = await predictor.get_prediction(
                            model, snapshot
                        )
                        logger.debug(
                            "scaling.model.predicted",
                            cycle=cycle,
                            prediction=outcome.prediction,
                        )
                    else:
                        outcome.skipped = True
                        logger.debug("scaling.model.not_due", cycle=cycle)
                except InsufficientDataError as exc:
                    logger.info(
                        "scaling.model.warming_up", error=exc.message, **exc.details
                    )
                    outcome.error = exc
                except DomainError as exc:
                    logger.warning(
                        "scaling.model.prediction_failed",
                        error=exc.message,
                        error_type=type(exc).__name__,
                        **exc.details,
                    )
                    outcome.error = exc

                try:
                    ids = predictor.get_ids_to_remove(model, snapshot)
                    if ids:
                        await self.evaluation_repository.remove(model.name, ids)
                        logger.debug("scaling.model.evicted", ids=ids)
                except DomainError as exc:
                    logger.warning("scaling.model.retention_failed", error=exc.message)
                    if outcome.error is None:
                        outcome.error = exc

        return outcome


class ListModelsUseCase:
    """Lists the configured models with the size of their stored history."""

    def __init__(
        self,
        evaluation_repository: IEvaluationRepository,
        predictive_config: PredictiveConfig,
    ):
        self.evaluation_repository = evaluation_repository
        self.predictive_config = predictive_config

    async def execute(self) -> List[ModelSummaryDTO]:
        summaries = []
        for model in self.predictive_config.models:
            stored = await self.evaluation_repository.get_all(model.name)
            summaries.append(ModelSummaryDTO.from_domain(model, len(stored)))
        return summaries
