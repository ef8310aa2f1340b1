"""FastAPI exception handlers producing ErrorResponse envelopes."""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from stagecraft.errors.exceptions import StagecraftError
from stagecraft.models.common import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all custom exception handlers on the FastAPI app."""

    @app.exception_handler(StagecraftError)
    async def stagecraft_error_handler(request: Request, exc: StagecraftError):
        trace_id = getattr(request.state, "trace_id", "trc_unknown")
        if exc.status_code >= 500:
            logger.error(
                "request_failed",
                extra={"path": request.url.path, "code": exc.code, "trace_id": trace_id},
            )
        error_response = ErrorResponse(
            schema_version="1.0",
            error=ErrorDetail(
                code=exc.code,
                message=exc.message,
                details=exc.details,
                trace_id=trace_id,
                timestamp=datetime.now(timezone.utc),
            ),
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response.model_dump(mode="json", exclude_none=True),
        )
