import uuid
from unittest.mock import AsyncMock, patch

import pytest
from fastapi import Request, Response

from dependent_filters.utilities.middleware import process_time_log_middleware, request_id_middleware


@pytest.mark.asyncio
async def test_request_id_middleware():
    request = Request(scope={"type": "http"})
    request.state._state = {}
    call_next = AsyncMock(return_value=Response())

    response = await request_id_middleware(request, call_next)

    call_next.assert_called_once_with(request)
    assert "X-Request-ID" in response.headers, "Response should have 'X-Request-ID' header"
    assert request.state.request_id == response.headers["X-Request-ID"]
    assert isinstance(uuid.UUID(request.state.request_id), uuid.UUID), "Request ID should be a valid UUID"


@pytest.mark.asyncio
async def test_process_time_log_middleware():
    request = Request(
        scope={
            "type": "http",
            "method": "GET",
            "path": "/users/filters/options",
            "headers": [
                (b"host", b"testserver"),
            ],
        }
    )
    request.state._state = {}
    response = Response()
    call_next = AsyncMock(return_value=response)

    with (
        patch("time.time") as mock_time,
        patch("dependent_filters.utilities.middleware.logger.info") as mock_logger,
    ):
        mock_time.side_effect = [100.0, 100.5]
        result = await process_time_log_middleware(request, call_next)

    assert result is response, "Middleware should return response from call_next"
    assert result.headers["X-Process-Time"] == "0.5"
    mock_logger.assert_called_once_with(
        "Method=%s Path=%s StatusCode=%s ProcessTime=%s",
        "GET",
        "/users/filters/options",
        200,
        "0.5",
    )
