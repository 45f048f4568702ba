"""
Domain Entities - Model

Configuration of the predictive models and of the decision that merges
their predictions. These entities are plain values; validation that needs
more than one field at a time is done by the predictors when used.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class ModelType(str, Enum):
    """Type of predictive model."""

    LINEAR = "Linear"
    HOLT_WINTERS = "HoltWinters"


class DecisionType(str, Enum):
    """Rule used to merge the current evaluation with the predictions."""

    MAXIMUM = "maximum"
    MINIMUM = "minimum"
    MEAN = "mean"


class ComponentMethod(str, Enum):
    """How a Holt-Winters trend or seasonal component is combined."""

    ADDITIVE = "additive"
    MULTIPLICATIVE = "multiplicative"


class ParameterMode(str, Enum):
    """Where the tuning hook request carries its payload."""

    QUERY = "query"
    BODY = "body"


class HookType(str, Enum):
    HTTP = "http"


@dataclass
class HTTPHook:
    """HTTP request description for a runtime tuning fetch."""

    method: str
    url: str
    success_codes: List[int] = field(default_factory=lambda: [200])
    parameter_mode: ParameterMode = ParameterMode.QUERY
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass
class RuntimeTuningFetchHook:
    """Hook fetching Holt-Winters coefficients right before predicting."""

    type: HookType = HookType.HTTP
    timeout: int = 2500  # milliseconds
    http: Optional[HTTPHook] = None


@dataclass
class LinearConfig:
    look_ahead: int  # milliseconds
    stored_values: int


@dataclass
class HoltWintersConfig:
    seasonal_periods: int
    stored_seasons: int
    trend: ComponentMethod = ComponentMethod.ADDITIVE
    seasonal: ComponentMethod = ComponentMethod.ADDITIVE
    alpha: Optional[float] = None
    beta: Optional[float] = None
    gamma: Optional[float] = None
    runtime_tuning_fetch_hook: Optional[RuntimeTuningFetchHook] = None

    @property
    def capacity(self) -> int:
        return self.seasonal_periods * self.stored_seasons


@dataclass
class ModelConfig:
    """A configured predictor instance."""

    type: str
    name: str
    per_interval: int = 1
    linear: Optional[LinearConfig] = None
    holt_winters: Optional[HoltWintersConfig] = None


@dataclass
class PredictiveConfig:
    """The full predictive configuration of one autoscaler."""

    models: List[ModelConfig] = field(default_factory=list)
    decision_type: DecisionType = DecisionType.MAXIMUM
    metrics: List[dict] = field(default_factory=list)
