"""
Holt-Winters predictor.

Triple exponential smoothing over the stored history, fitted with
statsmodels using fixed coefficients. Trend and seasonality are each
additive or multiplicative. Coefficients come either from the model
configuration or from a runtime tuning hook queried right before the
forecast is computed.
"""

import math
from typing import List, Optional, Sequence

import numpy as np
from statsmodels.tsa.holtwinters import ExponentialSmoothing

from predictive_hpa.domain.entities.decision import HoltWintersParameters
from predictive_hpa.domain.entities.errors import (
    ComputationError,
    ConfigurationError,
    InsufficientDataError,
    TuningFetchError,
)
from predictive_hpa.domain.entities.evaluation import StoredEvaluation, sort_by_created
from predictive_hpa.domain.entities.model import (
    ComponentMethod,
    HoltWintersConfig,
    ModelConfig,
    ModelType,
)
from predictive_hpa.domain.ports.tuning_fetcher import ITuningFetcher
from predictive_hpa.domain.services.decision_aggregator import round_half_up
from predictive_hpa.domain.services.predictors.base import Predictor
from predictive_hpa.domain.services.retention import select_ids_to_remove
from predictive_hpa.shared.logging import get_logger

logger = get_logger(__name__)

MIN_SEASONS = 2

COMPONENT_METHODS = {
    ComponentMethod.ADDITIVE: "add",
    ComponentMethod.MULTIPLICATIVE: "mul",
}


def triple_exponential_smoothing(
    series: Sequence[float],
    season_length: int,
    parameters: HoltWintersParameters,
    trend: ComponentMethod,
    seasonal: ComponentMethod,
    steps: int = 1,
) -> float:
    """
    Forecast ``steps`` points past the end of ``series``.

    ``series`` must hold at least two full seasons. A season of length 1
    carries no seasonal pattern, so it is fitted as Holt's linear method
    and ``gamma`` is unused.

    Raises:
        ComputationError: The data does not suit the model (multiplicative
            components need strictly positive values), or the fit hit a
            division by zero, an overflow or a non-finite result.
    """
    seasonal_method = (
        COMPONENT_METHODS[ComponentMethod(seasonal)] if season_length > 1 else None
    )
    fit_kwargs = {
        "smoothing_level": parameters.alpha,
        "smoothing_trend": parameters.beta,
    }
    if seasonal_method is not None:
        fit_kwargs["smoothing_seasonal"] = parameters.gamma

    try:
        with np.errstate(all="ignore"):
            fitted = ExponentialSmoothing(
                np.asarray(series, dtype=float),
                trend=COMPONENT_METHODS[ComponentMethod(trend)],
                seasonal=seasonal_method,
                seasonal_periods=season_length if seasonal_method else None,
                initialization_method="legacy-heuristic",
            ).fit(optimized=False, **fit_kwargs)
            forecast = float(fitted.forecast(steps)[-1])
    except (ZeroDivisionError, OverflowError, ValueError) as exc:
        raise ComputationError(
            f"Holt-Winters computation failed: {exc}",
            details={"cause": repr(exc)},
        ) from exc

    if not math.isfinite(forecast):
        raise ComputationError(
            "Holt-Winters forecast is not a finite number",
            details={"forecast": repr(forecast)},
        )
    return forecast


def _validate_coefficients(parameters: HoltWintersParameters) -> Optional[str]:
    for name in ("alpha", "beta", "gamma"):
        value = getattr(parameters, name)
        if not isinstance(value, (int, float)) or not 0.0 <= value <= 1.0:
            return f"{name} must be a number between 0 and 1, got {value!r}"
    return None


class HoltWintersPredictor(Predictor):
    """Predicts replicas with Holt-Winters triple exponential smoothing."""

    type = ModelType.HOLT_WINTERS.value

    def __init__(self, fetcher: Optional[ITuningFetcher] = None):
        self.fetcher = fetcher

    def _get_config(self, model: ModelConfig) -> HoltWintersConfig:
        if model.holt_winters is None:
            raise ConfigurationError(
                "No HoltWinters configuration provided for model",
                details={"model": model.name},
            )
        return model.holt_winters

    def _validate(self, model: ModelConfig, config: HoltWintersConfig) -> None:
        if config.seasonal_periods < 1:
            raise ConfigurationError(
                "seasonalPeriods must be at least 1",
                details={"model": model.name},
            )

        static = [config.alpha, config.beta, config.gamma]
        has_static = any(value is not None for value in static)
        has_hook = config.runtime_tuning_fetch_hook is not None

        if has_static and has_hook:
            raise ConfigurationError(
                "HoltWinters alpha, beta and gamma cannot be combined with "
                "a runtime tuning fetch hook",
                details={"model": model.name},
            )
        if not has_hook and not all(value is not None for value in static):
            raise ConfigurationError(
                "HoltWinters requires alpha, beta and gamma or a runtime "
                "tuning fetch hook",
                details={"model": model.name},
            )
        if has_hook and self.fetcher is None:
            raise ConfigurationError(
                "Runtime tuning fetch hook configured but no fetcher available",
                details={"model": model.name},
            )

    async def _resolve_parameters(
        self,
        model: ModelConfig,
        config: HoltWintersConfig,
        evaluations: Sequence[StoredEvaluation],
    ) -> HoltWintersParameters:
        if config.runtime_tuning_fetch_hook is None:
            parameters = HoltWintersParameters(
                alpha=config.alpha, beta=config.beta, gamma=config.gamma
            )
            problem = _validate_coefficients(parameters)
            if problem:
                raise ConfigurationError(problem, details={"model": model.name})
            return parameters

        try:
            parameters = await self.fetcher.fetch(
                config.runtime_tuning_fetch_hook, model, evaluations
            )
        except TuningFetchError as exc:
            raise TuningFetchError(
                exc.message, details={"model": model.name, **exc.details}
            ) from exc
        except Exception as exc:
            raise TuningFetchError(
                f"Runtime tuning fetch failed: {exc}",
                details={"model": model.name, "cause": repr(exc)},
            ) from exc

        problem = _validate_coefficients(parameters)
        if problem:
            raise TuningFetchError(problem, details={"model": model.name})

        logger.debug(
            "prediction.holt_winters.tuned",
            model=model.name,
            alpha=parameters.alpha,
            beta=parameters.beta,
            gamma=parameters.gamma,
        )
        return parameters

    async def get_prediction(
        self,
        model: ModelConfig,
        evaluations: Sequence[StoredEvaluation],
        horizon: int = 1,
    ) -> int:
        """
        Forecast ``horizon * perInterval`` cycles past the latest evaluation.

        Raises:
            ConfigurationError: Missing block or contradictory coefficients.
            InsufficientDataError: Fewer than two full seasons stored.
            TuningFetchError: The runtime tuning hook failed.
            ComputationError: A numeric fault occurred while smoothing.
        """
        config = self._get_config(model)

        required = MIN_SEASONS * config.seasonal_periods
        if len(evaluations) < required:
            raise InsufficientDataError(
                "Not enough evaluations for a HoltWinters prediction",
                details={
                    "model": model.name,
                    "required": required,
                    "available": len(evaluations),
                },
            )

        self._validate(model, config)
        parameters = await self._resolve_parameters(model, config, evaluations)

        series = [
            float(stored.evaluation.target_replicas)
            for stored in sort_by_created(evaluations)
        ]
        steps = max(1, horizon) * max(1, model.per_interval)

        try:
            forecast = triple_exponential_smoothing(
                series,
                config.seasonal_periods,
                parameters,
                config.trend,
                config.seasonal,
                steps,
            )
        except ComputationError as exc:
            exc.details["model"] = model.name
            raise

        return max(0, round_half_up(forecast))

    def get_ids_to_remove(
        self, model: ModelConfig, evaluations: Sequence[StoredEvaluation]
    ) -> List[int]:
        config = self._get_config(model)
        return select_ids_to_remove(evaluations, config.capacity)
