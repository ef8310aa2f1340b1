"""Trace ID middleware for request/response propagation."""

import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from stagecraft.logging_config import request_log_context
from stagecraft.models.common import TRACE_ID_MAX_LENGTH, TRACE_ID_MIN_LENGTH


def resolve_trace_id(header_value: str | None) -> str:
    """Reuse the caller's trace id when it fits the error envelope, else mint one."""
    if header_value and TRACE_ID_MIN_LENGTH <= len(header_value) <= TRACE_ID_MAX_LENGTH:
        return header_value
    return f"trc_{uuid.uuid4().hex[:16]}"


class TraceIdMiddleware(BaseHTTPMiddleware):
    """Extract X-Trace-Id from request or generate one, attach to response."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        trace_id = resolve_trace_id(request.headers.get("x-trace-id"))
        request.state.trace_id = trace_id

        with request_log_context(trace_id):
            response = await call_next(request)
        response.headers["X-Trace-Id"] = trace_id
        return response
