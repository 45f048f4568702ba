"""
Evaluation Repository Interface

Contract of the per-model evaluation store. Each model owns an independent
history addressed by the model name. Implementations must keep IDs unique
per model, make removal of unknown IDs a no-op and must not promise any
ordering from ``get_all``.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List

from predictive_hpa.domain.entities.evaluation import Evaluation, StoredEvaluation


class IEvaluationRepository(ABC):
    """Interface for evaluation store implementations."""

    @abstractmethod
    async def add(self, model_name: str, evaluation: Evaluation) -> StoredEvaluation:
        """
        Store an evaluation for a model.

        Args:
            model_name: Name of the model owning the history
            evaluation: Evaluation to store

        Returns:
            The stored evaluation with its assigned ID and creation time
        """
        pass

    @abstractmethod
    async def get_all(self, model_name: str) -> List[StoredEvaluation]:
        """
        Return every stored evaluation of a model, in no particular order.

        Args:
            model_name: Name of the model owning the history
        """
        pass

    @abstractmethod
    async def remove(self, model_name: str, ids: Iterable[int]) -> None:
        """
        Delete stored evaluations by ID. Unknown IDs are ignored.

        Args:
            model_name: Name of the model owning the history
            ids: IDs of the evaluations to delete
        """
        pass

    @abstractmethod
    async def increment_cycle(self, model_name: str) -> int:
        """
        Advance the evaluation cycle counter of a model.

        Returns:
            The counter value after incrementing, starting at 1
        """
        pass
