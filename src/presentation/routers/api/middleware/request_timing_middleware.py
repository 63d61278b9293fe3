"""Request timing middleware.

Logs every request with its duration and warns when a request takes longer
than ``SLOW_REQUEST_THRESHOLD_MS``.
"""

import time
from typing import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from src.core.config import settings
from src.core.container import get_logger


class RequestTimingMiddleware(BaseHTTPMiddleware):
    """Measure wall-clock time per request.

    Attributes:
        _threshold_ms: Requests slower than this are logged as warnings.
    """

    def __init__(self, app: ASGIApp, threshold_ms: int | None = None) -> None:
        super().__init__(app)
        self._threshold_ms = (
            threshold_ms
            if threshold_ms is not None
            else settings.slow_request_threshold_ms
        )

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = int((time.perf_counter() - started) * 1000)

        logger = get_logger()
        context = {
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "elapsed_ms": elapsed_ms,
            "trace_id": getattr(request.state, "trace_id", None),
        }
        if elapsed_ms > self._threshold_ms:
            logger.warning("Slow request", threshold_ms=self._threshold_ms, **context)
        else:
            logger.debug("Request completed", **context)

        return response
