"""
Exception Handlers for the FastAPI Application.

Every error response of the service is produced here, in one envelope shape:
``{"success": false, "error": {"code", "message", "details"}}``.

- ``AppError`` subclasses map to their own status code.
- Request-shape errors raised by FastAPI map to 400 ``VALIDATION_ERROR``.
- Anything else is reported to telemetry and answered with a 500 that carries
  an error id and the request id, never the exception text.
"""

from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from postboard.core.errors import AppError
from postboard.core.logging_config import get_logger
from postboard.core.monitoring import capture_exception

logger = get_logger(__name__)


def error_response(
    status_code: int, code: str, message: str, details: Optional[Dict[str, Any]] = None
) -> JSONResponse:
    """Build an error envelope response."""
    error: Dict[str, Any] = {"code": code, "message": message}
    if details:
        error["details"] = details
    return JSONResponse(status_code=status_code, content={"success": False, "error": error})


def _request_context(request: Request) -> Dict[str, Any]:
    return {
        "method": request.method,
        "path": request.url.path,
        "query_params": dict(request.query_params),
        "client": request.client.host if request.client else "unknown",
        "request_id": getattr(request.state, "request_id", None),
    }


def _server_error_details(request: Request, error_id: str) -> Dict[str, Any]:
    # unhandled 500s bypass the middleware and carry no X-Request-ID header
    details: Dict[str, Any] = {"error_id": error_id}
    request_id = getattr(request.state, "request_id", None)
    if request_id is not None:
        details["request_id"] = request_id
    return details


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """
    Translate a domain error into its HTTP response.

    Client errors (4xx) are logged only; server-side ``AppError``s are also
    captured by telemetry.
    """
    if exc.status_code >= 500:
        error_id = capture_exception(exc, _request_context(request))
        details = {**exc.details, **_server_error_details(request, error_id)}
        return error_response(exc.status_code, exc.code, exc.message, details)

    logger.info(
        f"{request.method} {request.url.path} -> {exc.status_code} {exc.code}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    payload = exc.to_dict()
    return error_response(exc.status_code, payload["code"], payload["message"], payload.get("details"))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Translate FastAPI request parsing errors into a 400 validation error.

    Field keys are the dotted error location without the leading ``body``/``query``.
    """
    fields: Dict[str, str] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        if len(loc) > 1 and loc[0] in ("body", "query", "path", "header"):
            loc = loc[1:]
        key = ".".join(loc) or "request"
        fields.setdefault(key, error.get("msg", "invalid value"))

    logger.info(f"{request.method} {request.url.path} -> 400 request validation failed: {sorted(fields)}")
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "VALIDATION_ERROR",
        "Request validation failed",
        {"fields": fields},
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler for unexpected errors.

    Reports the exception through the telemetry call and returns a 500 with an
    error id clients can quote when reporting the issue.
    """
    error_id = capture_exception(exc, _request_context(request))
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_ERROR",
        "Internal server error",
        _server_error_details(request, error_id),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")
