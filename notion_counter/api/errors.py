"""Exception handlers mapping counter errors to JSON responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from notion_counter.api.models import ErrorResponse
from notion_counter.counter.exceptions import ConfigError, DetectionError, UpstreamError

logger = logging.getLogger(__name__)

SCHEMA_FAILED = "Failed to fetch database schema"
QUERY_FAILED = "Database query failed"
DETECTION_FIX = (
    "Open /api/count?debug=1 to see which property contains Finished, then set "
    "COUNTER_MODE=static or COUNTER_MODE=prefix with COUNTER_PROPERTY."
)


def _error_response(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
    """Report missing or invalid configuration as a 500."""
    logger.error(f"Counter configuration error: {exc}")
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorResponse(error=str(exc))
    )


async def detection_error_handler(request: Request, exc: DetectionError) -> JSONResponse:
    """Report a failed auto-detection as a 500 with a remediation hint."""
    logger.warning(f"Auto-detection failed: keyword={exc.keyword!r}")
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorResponse(error=str(exc), fix=DETECTION_FIX)
    )


async def upstream_error_handler(request: Request, exc: UpstreamError) -> JSONResponse:
    """Mirror the upstream status code and body."""
    logger.warning(f"Notion {exc.stage} request failed: status={exc.status_code}")
    if exc.stage == UpstreamError.SCHEMA or exc.selection is None:
        body = ErrorResponse(error=SCHEMA_FAILED, details=exc.details)
    else:
        body = ErrorResponse(
            error=QUERY_FAILED,
            details=exc.details,
            used_property=exc.selection.used_property,
            used_type=exc.selection.used_type,
            used_filter=exc.selection.filter.to_notion(),
        )
    return _error_response(exc.status_code, body)


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Report any other exception as a 500 with its string form."""
    logger.exception(f"Unhandled error: path={request.url.path}, error={exc}")
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorResponse(error=str(exc)))


def register_exception_handlers(application: FastAPI) -> None:
    """Attach the counter exception handlers to the application."""
    application.add_exception_handler(ConfigError, config_error_handler)
    application.add_exception_handler(DetectionError, detection_error_handler)
    application.add_exception_handler(UpstreamError, upstream_error_handler)
    application.add_exception_handler(Exception, unexpected_error_handler)
