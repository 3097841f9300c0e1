# This project was developed with assistance from AI tools.
"""Request logging middleware.

Logs the status code and processing time (nanoseconds) of every request.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)


class RequestInfoMiddleware(BaseHTTPMiddleware):
    """Log method, path, status code and duration for each request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter_ns()
        response = await call_next(request)
        duration_ns = time.perf_counter_ns() - start
        logger.info(
            "%s %s status_code=%d duration=%dns",
            request.method,
            request.url.path,
            response.status_code,
            duration_ns,
        )
        return response
