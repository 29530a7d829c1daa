"""
Zero Waste Chef Logging Middleware
Structured request/response logging with request ids and timing
"""

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
import structlog
import time
import uuid
from typing import Dict, Any

from utils.request_utils import get_client_ip, get_user_agent, mask_headers

logger = structlog.get_logger()


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs every request with a unique id that is bound into structlog's
    context variables and echoed back as X-Request-ID.
    """

    def __init__(self, app, slow_request_threshold: float = 2.0):
        super().__init__(app)
        self.slow_request_threshold = slow_request_threshold

        # Paths to exclude from detailed logging
        self.exclude_paths = {"/api/health", "/uploads", "/favicon.ico"}

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        if any(request.url.path.startswith(path) for path in self.exclude_paths):
            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id
            return response

        request_info = self._extract_request_info(request)
        logger.info("Request started", **request_info, event_type="request_start")

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Request failed",
                **request_info,
                process_time=round(time.time() - start_time, 4),
                error=str(e),
                error_type=type(e).__name__,
                event_type="request_error"
            )
            raise

        process_time = time.time() - start_time
        logger.log(
            self._determine_log_level(response.status_code),
            "Request completed",
            **request_info,
            status_code=response.status_code,
            process_time=round(process_time, 4),
            user_id=getattr(request.state, "user_id", None),
            event_type="request_complete"
        )
        if process_time > self.slow_request_threshold:
            logger.warning("Slow request detected", **request_info, process_time=process_time)

        response.headers["X-Request-ID"] = request_id
        return response

    def _extract_request_info(self, request: Request) -> Dict[str, Any]:
        return {
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client_ip": get_client_ip(request),
            "user_agent": get_user_agent(request),
            "headers": mask_headers(dict(request.headers)),
        }

    def _determine_log_level(self, status_code: int) -> int:
        """Determine appropriate log level based on status code"""
        if status_code >= 500:
            return 40  # ERROR
        elif status_code >= 400:
            return 30  # WARNING
        return 20  # INFO
