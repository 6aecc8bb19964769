"""
Request logging middleware.

Binds request ids and HTTP metadata into the log context so every log line
written while serving a request can be correlated.
"""
import time
import uuid
from typing import Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from src.api.errors import ErrorKind, GENERIC_ERROR_MESSAGE, build_error_response
from src.utils.logger import setup_logger, bind_log_context, reset_log_context

logger = setup_logger(__name__)

HEADER_REQUEST_ID = "X-Request-Id"
HEADER_CORRELATION_ID = "X-Correlation-Id"


def random_hex(length: int) -> str:
    return uuid.uuid4().hex[:length]


def first_non_blank(*candidates: Optional[str]) -> Optional[str]:
    for candidate in candidates:
        if candidate and candidate.strip():
            return candidate.strip()
    return None


def resolve_request_id(request: Request) -> str:
    return first_non_blank(
        request.headers.get(HEADER_REQUEST_ID),
        request.headers.get(HEADER_CORRELATION_ID),
    ) or str(uuid.uuid4())


def resolve_trace_id(request: Request) -> str:
    """Reuse the trace id of a W3C traceparent header when one is sent."""
    traceparent = request.headers.get("traceparent", "")
    parts = traceparent.split("-")
    if len(parts) == 4 and len(parts[1]) == 32:
        return parts[1]
    return random_hex(32)


def resolve_full_path(request: Request) -> str:
    path = request.url.path
    if request.url.query:
        path = f"{path}?{request.url.query}"
    return path


def resolve_client_ip(request: Request) -> Optional[str]:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded and forwarded.strip():
        return forwarded.split(",")[0].strip()
    real_ip = request.headers.get("X-Real-IP")
    if real_ip and real_ip.strip():
        return real_ip.strip()
    return request.client.host if request.client else None


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Populate the log context for the lifetime of each request."""

    async def dispatch(self, request: Request, call_next):
        request_id = resolve_request_id(request)
        token = bind_log_context(
            request_id=request_id,
            trace_id=resolve_trace_id(request),
            span_id=random_hex(16),
            http_method=request.method,
            http_path=resolve_full_path(request),
            http_client_ip=resolve_client_ip(request),
            http_user_agent=request.headers.get("User-Agent"),
        )

        start_time = time.perf_counter()
        status_code = 500
        try:
            try:
                response = await call_next(request)
            except Exception as e:
                # Errors not handled by the app still get the error body and request id
                logger.error(f"Internal error: {e}", exc_info=True)
                response = build_error_response(ErrorKind.INTERNAL, GENERIC_ERROR_MESSAGE, request.url.path)
            status_code = response.status_code
            response.headers[HEADER_REQUEST_ID] = request_id
            return response
        finally:
            bind_log_context(http_status=str(status_code))
            elapsed_ms = (time.perf_counter() - start_time) * 1000
            logger.info(f"{request.method} {request.url.path} completed with status {status_code} in {elapsed_ms:.1f} ms")
            reset_log_context(token)
