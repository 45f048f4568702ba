"""
Infrastructure Gateway - HTTP Runtime Tuning

Fetches Holt-Winters smoothing coefficients from an HTTP endpoint. The
model and its stored evaluations are sent either as a ``value`` query
parameter or as a JSON request body; the endpoint answers with a JSON
object carrying ``alpha``, ``beta`` and ``gamma``.
"""

import json
from typing import Any, Dict, Optional, Sequence

import httpx
import structlog

from predictive_hpa.domain.entities.decision import HoltWintersParameters
from predictive_hpa.domain.entities.errors import TuningFetchError
from predictive_hpa.domain.entities.evaluation import StoredEvaluation
from predictive_hpa.domain.entities.model import (
    ComponentMethod,
    HookType,
    ModelConfig,
    ParameterMode,
    RuntimeTuningFetchHook,
)
from predictive_hpa.domain.ports.tuning_fetcher import ITuningFetcher

logger = structlog.get_logger(__name__)

COEFFICIENTS = ("alpha", "beta", "gamma")


def _model_payload(model: ModelConfig) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "type": model.type,
        "name": model.name,
        "perInterval": model.per_interval,
    }
    if model.holt_winters is not None:
        payload["holtWinters"] = {
            "seasonalPeriods": model.holt_winters.seasonal_periods,
            "storedSeasons": model.holt_winters.stored_seasons,
            "trend": ComponentMethod(model.holt_winters.trend).value,
            "seasonal": ComponentMethod(model.holt_winters.seasonal).value,
        }
    return payload


class HTTPTuningFetcher(ITuningFetcher):
    """Runtime tuning fetcher using an HTTP client."""

    async def fetch(
        self,
        hook: RuntimeTuningFetchHook,
        model: ModelConfig,
        evaluations: Sequence[StoredEvaluation],
    ) -> HoltWintersParameters:
        if hook.type != HookType.HTTP or hook.http is None:
            raise TuningFetchError(
                f"Unsupported runtime tuning hook type: {hook.type}",
                details={"hook_type": str(hook.type)},
            )

        http = hook.http
        value = json.dumps(
            {
                "model": _model_payload(model),
                "evaluations": [stored.to_dict() for stored in evaluations],
            }
        )

        params: Optional[Dict[str, str]] = None
        content: Optional[str] = None
        headers = dict(http.headers)
        if http.parameter_mode == ParameterMode.BODY:
            content = value
            headers.setdefault("Content-Type", "application/json")
        else:
            params = {"value": value}

        logger.info(
            "tuning.fetch.request",
            method=http.method,
            url=http.url,
            parameter_mode=ParameterMode(http.parameter_mode).value,
            timeout_ms=hook.timeout,
        )

        try:
            async with httpx.AsyncClient(timeout=hook.timeout / 1000) as client:
                response = await client.request(
                    http.method,
                    http.url,
                    params=params,
                    content=content,
                    headers=headers,
                )
        except httpx.TimeoutException as e:
            logger.error("tuning.fetch.timeout", url=http.url, timeout_ms=hook.timeout)
            raise TuningFetchError(
                f"Runtime tuning fetch timed out after {hook.timeout}ms",
                details={"url": http.url, "timeout_ms": hook.timeout},
            ) from e
        except httpx.RequestError as e:
            logger.error("tuning.fetch.request_error", url=http.url, error=str(e))
            raise TuningFetchError(
                f"Runtime tuning fetch failed: {e}", details={"url": http.url}
            ) from e

        if response.status_code not in http.success_codes:
            logger.error(
                "tuning.fetch.unexpected_status",
                url=http.url,
                status_code=response.status_code,
                response_text=response.text,
            )
            raise TuningFetchError(
                f"Runtime tuning fetch returned status {response.status_code}",
                details={
                    "url": http.url,
                    "status_code": response.status_code,
                    "success_codes": list(http.success_codes),
                },
            )

        return self._parse_response(response)

    def _parse_response(self, response: httpx.Response) -> HoltWintersParameters:
        try:
            data = response.json()
        except ValueError as e:
            raise TuningFetchError(
                "Runtime tuning response is not valid JSON",
                details={"response_text": response.text},
            ) from e

        if not isinstance(data, dict):
            raise TuningFetchError(
                "Runtime tuning response must be a JSON object",
                details={"response_text": response.text},
            )

        values = {}
        for name in COEFFICIENTS:
            raw = data.get(name)
            if isinstance(raw, bool) or not isinstance(raw, (int, float)):
                raise TuningFetchError(
                    f"Runtime tuning response is missing a numeric {name}",
                    details={"response_text": response.text},
                )
            values[name] = float(raw)

        return HoltWintersParameters(**values)
