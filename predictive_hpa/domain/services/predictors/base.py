"""Common interface of the predictive models."""

from abc import ABC, abstractmethod
from typing import ClassVar, List, Sequence

from predictive_hpa.domain.entities.evaluation import StoredEvaluation
from predictive_hpa.domain.entities.model import ModelConfig


class Predictor(ABC):
    """A forecasting model paired with its retention policy."""

    type: ClassVar[str]

    def get_type(self) -> str:
        return self.type

    @abstractmethod
    async def get_prediction(
        self, model: ModelConfig, evaluations: Sequence[StoredEvaluation]
    ) -> int:
        """
        Predict a replica count from the stored history of ``model``.

        Raises:
            ConfigurationError: If the model lacks its type-specific block.
            InsufficientDataError: If there is not enough history yet.
        """
        pass

    @abstractmethod
    def get_ids_to_remove(
        self, model: ModelConfig, evaluations: Sequence[StoredEvaluation]
    ) -> List[int]:
        """
        Select the stored evaluations to evict, oldest first.

        Raises:
            ConfigurationError: If the model lacks its type-specific block.
        """
        pass
