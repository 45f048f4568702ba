"""Domain port for fetching Holt-Winters coefficients at runtime."""

from __future__ import annotations

from typing import Protocol, Sequence

from predictive_hpa.domain.entities.decision import HoltWintersParameters
from predictive_hpa.domain.entities.evaluation import StoredEvaluation
from predictive_hpa.domain.entities.model import ModelConfig, RuntimeTuningFetchHook


class ITuningFetcher(Protocol):
    """Fetches smoothing coefficients through a runtime tuning hook."""

    async def fetch(
        self,
        hook: RuntimeTuningFetchHook,
        model: ModelConfig,
        evaluations: Sequence[StoredEvaluation],
    ) -> HoltWintersParameters:
        """Fetch alpha, beta and gamma for ``model``.

        Raises:
            TuningFetchError: On timeout, unexpected status or malformed body.
        """
        ...
