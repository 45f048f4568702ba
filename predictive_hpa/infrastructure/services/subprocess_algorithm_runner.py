"""
Subprocess Algorithm Runner - Infrastructure Layer

Runs forecasting algorithms as Python scripts in a child process. The
serialized input is written to the child's stdin and its stdout is the
result.
"""

import asyncio
import contextlib
import sys

import structlog

from predictive_hpa.domain.entities.errors import AlgorithmExecutionError
from predictive_hpa.domain.ports.algorithm_runner import IAlgorithmRunner

logger = structlog.get_logger(__name__)


class SubprocessAlgorithmRunner(IAlgorithmRunner):
    """Executes ``<python> <algorithm_path>`` with a timeout."""

    def __init__(self, python_executable: str = sys.executable):
        self.python_executable = python_executable

    async def run_algorithm_with_value(
        self, algorithm_path: str, value: str, timeout: int
    ) -> str:
        try:
            process = await asyncio.create_subprocess_exec(
                self.python_executable,
                algorithm_path,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            logger.error(
                "algorithm.spawn_failed", algorithm_path=algorithm_path, error=str(exc)
            )
            raise AlgorithmExecutionError(
                f"Failed to start algorithm {algorithm_path}: {exc}",
                details={"algorithm_path": algorithm_path},
            ) from exc

        try:
            stdout, stderr = await asyncio.wait_for(
                process.communicate(value.encode("utf-8")), timeout=timeout / 1000
            )
        except asyncio.TimeoutError as exc:
            with contextlib.suppress(ProcessLookupError):
                process.kill()
            await process.wait()
            logger.error(
                "algorithm.timeout", algorithm_path=algorithm_path, timeout_ms=timeout
            )
            raise AlgorithmExecutionError(
                f"Algorithm {algorithm_path} timed out after {timeout}ms",
                details={"algorithm_path": algorithm_path, "timeout_ms": timeout},
            ) from exc

        if process.returncode != 0:
            error_output = stderr.decode("utf-8", errors="replace").strip()
            logger.error(
                "algorithm.failed",
                algorithm_path=algorithm_path,
                exit_code=process.returncode,
                stderr=error_output,
            )
            raise AlgorithmExecutionError(
                f"Algorithm {algorithm_path} exited with code "
                f"{process.returncode}: {error_output}",
                details={
                    "algorithm_path": algorithm_path,
                    "exit_code": process.returncode,
                },
            )

        return stdout.decode("utf-8", errors="replace")
