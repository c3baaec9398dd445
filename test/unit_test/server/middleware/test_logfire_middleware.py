"""
Unit tests for Logfire middleware.

This test suite covers:
- Request/response processing
- Request ID propagation
- Error handling
- Slow request detection
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import Request
from starlette.responses import Response

from postboard.server.middleware.logfire_middleware import LogfireMiddleware


def _mock_request(method: str = "GET", path: str = "/api/v1/users", headers: dict | None = None):
    request = AsyncMock(spec=Request)
    request.method = method
    request.url.path = path
    request.headers = headers or {}
    request.state = MagicMock()
    return request


class TestLogfireMiddlewareDispatch:
    """Test LogfireMiddleware.dispatch method."""

    @pytest.mark.asyncio
    async def test_middleware_processes_successful_request(self):
        request = _mock_request()

        async def call_next(request):
            return Response(content="ok", status_code=200)

        middleware = LogfireMiddleware(app=AsyncMock())
        with patch("postboard.server.middleware.logfire_middleware.log_api_request") as mock_log:
            response = await middleware.dispatch(request, call_next)

        assert response.status_code == 200
        mock_log.assert_called_once()
        kwargs = mock_log.call_args[1]
        assert kwargs["method"] == "GET"
        assert kwargs["path"] == "/api/v1/users"
        assert kwargs["status_code"] == 200
        assert kwargs["duration_ms"] >= 0
        assert "X-Process-Time" in response.headers

    @pytest.mark.asyncio
    async def test_request_id_is_generated(self):
        request = _mock_request()

        async def call_next(request):
            return Response(status_code=204)

        middleware = LogfireMiddleware(app=AsyncMock())
        with patch("postboard.server.middleware.logfire_middleware.log_api_request"):
            response = await middleware.dispatch(request, call_next)

        request_id = response.headers["X-Request-ID"]
        assert len(request_id) == 32
        assert request.state.request_id == request_id

    @pytest.mark.asyncio
    async def test_request_id_is_propagated(self):
        request = _mock_request(headers={"X-Request-ID": "given-id"})

        async def call_next(request):
            return Response(status_code=200)

        middleware = LogfireMiddleware(app=AsyncMock())
        with patch("postboard.server.middleware.logfire_middleware.log_api_request"):
            response = await middleware.dispatch(request, call_next)

        assert response.headers["X-Request-ID"] == "given-id"

    @pytest.mark.asyncio
    async def test_exception_is_logged_and_reraised(self):
        request = _mock_request(method="POST")

        async def call_next(request):
            raise RuntimeError("handler failed")

        middleware = LogfireMiddleware(app=AsyncMock())
        with (
            patch("postboard.server.middleware.logfire_middleware.log_api_request") as mock_log,
            patch("postboard.server.middleware.logfire_middleware.logger") as mock_logger,
        ):
            with pytest.raises(RuntimeError, match="handler failed"):
                await middleware.dispatch(request, call_next)

        assert mock_log.call_args[1]["status_code"] == 500
        mock_logger.error.assert_called_once()

    @pytest.mark.asyncio
    async def test_slow_request_is_warned(self):
        request = _mock_request()

        async def call_next(request):
            return Response(status_code=200)

        middleware = LogfireMiddleware(app=AsyncMock())
        with (
            patch("postboard.server.middleware.logfire_middleware.log_api_request"),
            patch("postboard.server.middleware.logfire_middleware.logger") as mock_logger,
            patch("postboard.server.middleware.logfire_middleware.time.perf_counter", side_effect=[0.0, 2.5]),
        ):
            await middleware.dispatch(request, call_next)

        mock_logger.warning.assert_called_once()
        assert "Slow API request" in mock_logger.warning.call_args[0][0]
