from __future__ import annotations

import sys

import pytest

from predictive_hpa.domain.entities.errors import (
    AlgorithmExecutionError,
    InvalidResultError,
)
from predictive_hpa.domain.entities.model import ModelConfig
from predictive_hpa.domain.services.predictors import LinearPredictor
from predictive_hpa.infrastructure.services import SubprocessAlgorithmRunner
from tests.conftest import make_history


def _script(tmp_path, name: str, body: str) -> str:
    path = tmp_path / name
    path.write_text(body, encoding="utf-8")
    return str(path)


@pytest.mark.asyncio
async def test_value_is_piped_through_stdin(tmp_path) -> None:
    script = _script(
        tmp_path, "echo.py", "import sys\nsys.stdout.write(sys.stdin.read().upper())\n"
    )

    result = await SubprocessAlgorithmRunner().run_algorithm_with_value(
        script, "hello", 5000
    )

    assert result == "HELLO"


@pytest.mark.asyncio
async def test_non_zero_exit_reports_stderr(tmp_path) -> None:
    script = _script(
        tmp_path,
        "fail.py",
        "import sys\nsys.stderr.write('bad input')\nsys.exit(3)\n",
    )

    with pytest.raises(AlgorithmExecutionError) as exc_info:
        await SubprocessAlgorithmRunner().run_algorithm_with_value(script, "", 5000)

    assert exc_info.value.details["exit_code"] == 3
    assert "bad input" in exc_info.value.message


@pytest.mark.asyncio
async def test_timeout_kills_the_process(tmp_path) -> None:
    script = _script(tmp_path, "slow.py", "import time\ntime.sleep(30)\n")

    with pytest.raises(AlgorithmExecutionError) as exc_info:
        await SubprocessAlgorithmRunner().run_algorithm_with_value(script, "", 200)

    assert exc_info.value.details["timeout_ms"] == 200


@pytest.mark.asyncio
async def test_missing_interpreter_fails(tmp_path) -> None:
    runner = SubprocessAlgorithmRunner(python_executable=str(tmp_path / "no-python"))

    with pytest.raises(AlgorithmExecutionError):
        await runner.run_algorithm_with_value("algorithm.py", "", 1000)


def test_defaults_to_current_interpreter() -> None:
    assert SubprocessAlgorithmRunner().python_executable == sys.executable


@pytest.mark.asyncio
async def test_invalid_utf8_output_is_replaced(tmp_path) -> None:
    script = _script(
        tmp_path, "bytes.py", "import sys\nsys.stdout.buffer.write(b'4\\xff\\xfe')\n"
    )

    result = await SubprocessAlgorithmRunner().run_algorithm_with_value(
        script, "", 5000
    )

    assert result == "4\ufffd\ufffd"


@pytest.mark.asyncio
async def test_invalid_utf8_output_is_an_invalid_result(
    tmp_path, linear_model: ModelConfig
) -> None:
    script = _script(
        tmp_path, "bytes.py", "import sys\nsys.stdout.buffer.write(b'\\xff\\xfe')\n"
    )
    predictor = LinearPredictor(SubprocessAlgorithmRunner(), script, timeout=5000)

    with pytest.raises(InvalidResultError) as exc_info:
        await predictor.get_prediction(linear_model, make_history([1, 2]))

    assert exc_info.value.details["model"] == "LinearPrediction"
