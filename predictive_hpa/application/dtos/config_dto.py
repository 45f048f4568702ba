"""
Predictive Configuration DTOs - Application Layer

Pydantic models validating the ``predictiveConfig`` document (camelCase
keys, as written in the autoscaler manifest) and mapping it onto the domain
configuration entities.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from predictive_hpa.domain.entities.errors import ConfigurationError
from predictive_hpa.domain.entities.model import (
    ComponentMethod,
    DecisionType,
    HoltWintersConfig,
    HookType,
    HTTPHook,
    LinearConfig,
    ModelConfig,
    ParameterMode,
    PredictiveConfig,
    RuntimeTuningFetchHook,
)


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid"
    )


class HTTPHookDTO(_CamelModel):
    """HTTP request used by a runtime tuning fetch hook."""

    method: str = Field(default="GET", min_length=1)
    url: str = Field(..., min_length=1)
    success_codes: List[int] = Field(default_factory=lambda: [200], min_length=1)
    parameter_mode: ParameterMode = ParameterMode.QUERY
    headers: Dict[str, str] = Field(default_factory=dict)

    def to_domain(self) -> HTTPHook:
        return HTTPHook(
            method=self.method.upper(),
            url=self.url,
            success_codes=list(self.success_codes),
            parameter_mode=self.parameter_mode,
            headers=dict(self.headers),
        )


class RuntimeTuningFetchHookDTO(_CamelModel):
    type: HookType = HookType.HTTP
    timeout: int = Field(default=2500, gt=0, description="Timeout in milliseconds")
    http: Optional[HTTPHookDTO] = None

    @model_validator(mode="after")
    def _require_http_block(self) -> "RuntimeTuningFetchHookDTO":
        if self.type is HookType.HTTP and self.http is None:
            raise ValueError("http hook requires an 'http' block")
        return self

    def to_domain(self) -> RuntimeTuningFetchHook:
        return RuntimeTuningFetchHook(
            type=self.type,
            timeout=self.timeout,
            http=self.http.to_domain() if self.http else None,
        )


class LinearDTO(_CamelModel):
    look_ahead: int = Field(..., ge=0, description="Look ahead in milliseconds")
    stored_values: int = Field(..., ge=1)

    def to_domain(self) -> LinearConfig:
        return LinearConfig(
            look_ahead=self.look_ahead, stored_values=self.stored_values
        )


class HoltWintersDTO(_CamelModel):
    alpha: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    beta: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    gamma: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    runtime_tuning_fetch_hook: Optional[RuntimeTuningFetchHookDTO] = None
    seasonal_periods: int = Field(..., ge=1)
    stored_seasons: int = Field(..., ge=2)
    trend: ComponentMethod = ComponentMethod.ADDITIVE
    seasonal: ComponentMethod = ComponentMethod.ADDITIVE

    def to_domain(self) -> HoltWintersConfig:
        return HoltWintersConfig(
            seasonal_periods=self.seasonal_periods,
            stored_seasons=self.stored_seasons,
            trend=self.trend,
            seasonal=self.seasonal,
            alpha=self.alpha,
            beta=self.beta,
            gamma=self.gamma,
            runtime_tuning_fetch_hook=(
                self.runtime_tuning_fetch_hook.to_domain()
                if self.runtime_tuning_fetch_hook
                else None
            ),
        )


class ModelDTO(_CamelModel):
    """A single model entry of the predictive configuration."""

    type: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    per_interval: int = Field(default=1, ge=1)
    linear: Optional[LinearDTO] = None
    holt_winters: Optional[HoltWintersDTO] = None

    def to_domain(self) -> ModelConfig:
        return ModelConfig(
            type=self.type,
            name=self.name,
            per_interval=self.per_interval,
            linear=self.linear.to_domain() if self.linear else None,
            holt_winters=self.holt_winters.to_domain() if self.holt_winters else None,
        )


class PredictiveConfigDTO(_CamelModel):
    """Root of the predictive configuration document."""

    models: List[ModelDTO] = Field(default_factory=list)
    decision_type: DecisionType = DecisionType.MAXIMUM
    metrics: List[Dict[str, Any]] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_model_names(self) -> "PredictiveConfigDTO":
        names = [model.name for model in self.models]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"duplicate model names: {', '.join(duplicates)}")
        return self

    def to_domain(self) -> PredictiveConfig:
        return PredictiveConfig(
            models=[model.to_domain() for model in self.models],
            decision_type=self.decision_type,
            metrics=list(self.metrics),
        )


def parse_predictive_config(payload: Any) -> PredictiveConfig:
    """
    Validate a decoded configuration document.

    Raises:
        ConfigurationError: With the pydantic error list in ``details``.
    """
    try:
        return PredictiveConfigDTO.model_validate(payload or {}).to_domain()
    except ValidationError as exc:
        raise ConfigurationError(
            "Invalid predictive configuration",
            details={
                "errors": [
                    f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                    for error in exc.errors()
                ]
            },
        ) from exc
