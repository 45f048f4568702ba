"""
Domain Errors

Exception hierarchy raised by predictors, the retention policy, the
decision aggregator and the scaling cycle. Every error carries a message
and a ``details`` mapping with enough context (model name, underlying
cause) for the caller to log it and continue with the next cycle.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(DomainError):
    """Raised when model or decision configuration is missing or contradictory."""


class InsufficientDataError(DomainError):
    """Raised when there is not enough history to produce a prediction yet."""


class AlgorithmExecutionError(DomainError):
    """Raised when the external algorithm fails, exits non-zero or times out."""


class InvalidResultError(DomainError):
    """Raised when an external algorithm returns an unparsable result."""

    def __init__(self, value: str, details: Optional[Dict[str, Any]] = None):
        self.value = value
        super().__init__(f"Invalid algorithm result: {value!r}", details)


class TuningFetchError(DomainError):
    """Raised when runtime tuning parameters cannot be fetched."""


class ComputationError(DomainError):
    """Raised when a numeric fault occurs while forecasting."""


class EvaluationError(DomainError):
    """Raised when the current evaluation cannot be produced."""


class PredictionError(DomainError):
    """Raised when the only configured model fails to predict."""

    def __init__(
        self,
        model_name: str,
        cause: DomainError,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.model_name = model_name
        self.cause = cause
        merged = {"model": model_name, "cause": cause.message, **cause.details}
        merged.update(details or {})
        super().__init__(f"Model {model_name} failed to predict: {cause}", merged)
