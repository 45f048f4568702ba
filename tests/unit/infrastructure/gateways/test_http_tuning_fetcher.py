from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

import httpx
import pytest

from predictive_hpa.domain.entities.errors import TuningFetchError
from predictive_hpa.domain.entities.model import (
    HTTPHook,
    ModelConfig,
    ParameterMode,
    RuntimeTuningFetchHook,
)
from predictive_hpa.infrastructure.gateways.http_tuning_fetcher import (
    HTTPTuningFetcher,
)
from tests.conftest import make_history

_INVALID_JSON = object()


class _StubResponse:
    def __init__(self, status_code: int, payload: Any = None, text: str = "body"):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self) -> Any:
        if self._payload is _INVALID_JSON:
            raise json.JSONDecodeError("Expecting value", self.text, 0)
        return self._payload


class _StubAsyncClient:
    def __init__(
        self,
        response: Optional[_StubResponse] = None,
        error: Optional[Exception] = None,
    ):
        self._response = response
        self._error = error
        self.timeout: Optional[float] = None
        self.requests: List[Dict[str, Any]] = []

    async def __aenter__(self) -> "_StubAsyncClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    async def request(self, method, url, params=None, content=None, headers=None):
        self.requests.append(
            {
                "method": method,
                "url": url,
                "params": params,
                "content": content,
                "headers": headers,
            }
        )
        if self._error is not None:
            raise self._error
        return self._response


def _install(monkeypatch, client: _StubAsyncClient) -> _StubAsyncClient:
    def _factory(timeout):
        client.timeout = timeout
        return client

    monkeypatch.setattr("httpx.AsyncClient", _factory)
    return client


def _hook(
    parameter_mode: ParameterMode = ParameterMode.QUERY,
    success_codes: Optional[List[int]] = None,
) -> RuntimeTuningFetchHook:
    return RuntimeTuningFetchHook(
        timeout=2500,
        http=HTTPHook(
            method="GET",
            url="http://tuning/holt_winters",
            success_codes=success_codes or [200],
            parameter_mode=parameter_mode,
            headers={"X-Tenant": "phpa"},
        ),
    )


@pytest.mark.asyncio
async def test_fetch_sends_value_as_query_parameter(
    monkeypatch, holt_winters_model: ModelConfig
) -> None:
    client = _install(
        monkeypatch,
        _StubAsyncClient(_StubResponse(200, {"alpha": 0.9, "beta": 0.5, "gamma": 1})),
    )
    history = make_history([1, 2])

    parameters = await HTTPTuningFetcher().fetch(_hook(), holt_winters_model, history)

    assert (parameters.alpha, parameters.beta, parameters.gamma) == (0.9, 0.5, 1.0)
    assert client.timeout == 2.5
    request = client.requests[0]
    assert request["method"] == "GET"
    assert request["content"] is None
    assert request["headers"] == {"X-Tenant": "phpa"}
    value = json.loads(request["params"]["value"])
    assert value["model"]["name"] == "HoltWintersPrediction"
    assert value["model"]["holtWinters"]["seasonalPeriods"] == 4
    assert value["model"]["holtWinters"]["trend"] == "additive"
    assert value["evaluations"] == [stored.to_dict() for stored in history]


@pytest.mark.asyncio
async def test_fetch_sends_value_as_body(
    monkeypatch, holt_winters_model: ModelConfig
) -> None:
    client = _install(
        monkeypatch,
        _StubAsyncClient(_StubResponse(202, {"alpha": 0, "beta": 0, "gamma": 0})),
    )

    await HTTPTuningFetcher().fetch(
        _hook(ParameterMode.BODY, success_codes=[200, 202]),
        holt_winters_model,
        make_history([1]),
    )

    request = client.requests[0]
    assert request["params"] is None
    assert json.loads(request["content"])["model"]["type"] == "HoltWinters"
    assert request["headers"]["Content-Type"] == "application/json"


@pytest.mark.asyncio
async def test_unexpected_status_fails(
    monkeypatch, holt_winters_model: ModelConfig
) -> None:
    _install(monkeypatch, _StubAsyncClient(_StubResponse(500, {"alpha": 1})))

    with pytest.raises(TuningFetchError) as exc_info:
        await HTTPTuningFetcher().fetch(_hook(), holt_winters_model, [])

    assert exc_info.value.details["status_code"] == 500


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error, fragment",
    [
        (httpx.ReadTimeout("slow"), "timed out after 2500ms"),
        (httpx.ConnectError("refused"), "failed"),
    ],
)
async def test_transport_errors_fail(
    monkeypatch, holt_winters_model: ModelConfig, error: Exception, fragment: str
) -> None:
    _install(monkeypatch, _StubAsyncClient(error=error))

    with pytest.raises(TuningFetchError) as exc_info:
        await HTTPTuningFetcher().fetch(_hook(), holt_winters_model, [])

    assert fragment in exc_info.value.message


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        _INVALID_JSON,
        [0.1, 0.2, 0.3],
        {"alpha": 0.1, "beta": 0.2},
        {"alpha": 0.1, "beta": "0.2", "gamma": 0.3},
        {"alpha": True, "beta": 0.2, "gamma": 0.3},
    ],
)
async def test_malformed_response_fails(
    monkeypatch, holt_winters_model: ModelConfig, payload: Any
) -> None:
    _install(monkeypatch, _StubAsyncClient(_StubResponse(200, payload)))

    with pytest.raises(TuningFetchError):
        await HTTPTuningFetcher().fetch(_hook(), holt_winters_model, [])


@pytest.mark.asyncio
async def test_hook_without_http_block_fails(holt_winters_model: ModelConfig) -> None:
    with pytest.raises(TuningFetchError):
        await HTTPTuningFetcher().fetch(
            RuntimeTuningFetchHook(http=None), holt_winters_model, []
        )
