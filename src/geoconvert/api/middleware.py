"""
FastAPI middleware for request correlation and logging.
"""

import logging
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from geoconvert.core.logging_config import LogContext

logger = logging.getLogger(__name__)


class RequestCorrelationMiddleware(BaseHTTPMiddleware):
    """
    Middleware to add request ID correlation.

    Takes the request ID from the incoming header or generates one, echoes
    it on the response and attaches it to every log record of the request.
    """

    def __init__(self, app, header_name: str = "X-Request-ID"):
        """
        Initialize RequestCorrelationMiddleware.

        Args:
            app: FastAPI application
            header_name: HTTP header name for request ID
        """
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(self.header_name, str(uuid.uuid4()))
        request.state.request_id = request_id

        with LogContext(request_id=request_id, method=request.method, path=request.url.path):
            logger.info(f"Request started: {request.method} {request.url.path}")
            start_time = time.perf_counter()

            try:
                response = await call_next(request)
            except Exception as e:
                duration_ms = (time.perf_counter() - start_time) * 1000
                logger.error(
                    f"Request failed: {request.method} {request.url.path} "
                    f"- Error: {type(e).__name__} - Duration: {duration_ms:.2f}ms",
                    exc_info=True,
                )
                raise

            duration_ms = (time.perf_counter() - start_time) * 1000
            response.headers[self.header_name] = request_id
            logger.info(
                f"Request completed: {request.method} {request.url.path} "
                f"- Status: {response.status_code} - Duration: {duration_ms:.2f}ms"
            )

        return response
