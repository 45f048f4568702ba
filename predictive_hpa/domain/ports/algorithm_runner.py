"""Domain port for running external forecasting algorithms."""

from __future__ import annotations

from typing import Protocol


class IAlgorithmRunner(Protocol):
    """Runs an external algorithm with a serialized value as its input."""

    async def run_algorithm_with_value(
        self, algorithm_path: str, value: str, timeout: int
    ) -> str:
        """Run the algorithm at ``algorithm_path`` feeding it ``value``.

        Args:
            algorithm_path: Path of the algorithm to execute.
            value: Serialized input handed to the algorithm.
            timeout: Maximum run time in milliseconds.

        Returns:
            The raw output written by the algorithm.

        Raises:
            AlgorithmExecutionError: On non-zero exit, spawn failure or timeout.
        """
        ...
