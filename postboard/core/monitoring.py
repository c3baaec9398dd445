"""
Monitoring and Error Telemetry Module.

This module integrates Pydantic Logfire as the single telemetry sink of the service:
- ``capture_exception`` is the one call every error path goes through before a
  response is produced (exception handlers, e-mail delivery failures).
- ``log_api_request`` records per-request latency and status.
- ``log_email_event`` records outbound e-mail attempts.

Configuration comes from ``settings.telemetry``. When no Logfire token is configured
everything still goes to the standard logger and Logfire calls are skipped.
"""

import uuid
from typing import Any, Dict, Optional

import logfire
from fastapi import FastAPI

from postboard.core.logging_config import get_logger
from postboard.server.core.config import settings

logger = get_logger(__name__)

_telemetry = settings.telemetry
LOGFIRE_ENABLED = _telemetry.enabled
LOGFIRE_SERVICE_NAME = _telemetry.service_name
LOGFIRE_SERVICE_VERSION = _telemetry.service_version
LOGFIRE_ENVIRONMENT = _telemetry.environment
LOGFIRE_SAMPLE_RATE = _telemetry.sample_rate

_configured = False


def is_configured() -> bool:
    """Whether ``initialize_logfire`` has successfully configured Logfire."""
    return _configured


def initialize_logfire(app: FastAPI | None = None) -> bool:
    """
    Initialize Pydantic Logfire for error telemetry and tracing.

    Sets up Logfire and instruments SQLAlchemy, HTTPX and, when ``app`` is given,
    the FastAPI application. A failing instrumentation is logged and skipped.

    Args:
        app: FastAPI application instance for endpoint tracing (optional).

    Returns:
        True when Logfire is configured, False when telemetry is disabled or failed.
    """
    global _configured

    if not LOGFIRE_ENABLED:
        logger.info("Logfire telemetry is disabled. Set LOGFIRE_TOKEN to enable.")
        return False

    try:
        logfire.configure(
            token=_telemetry.token,
            service_name=LOGFIRE_SERVICE_NAME,
            service_version=LOGFIRE_SERVICE_VERSION,
            environment=LOGFIRE_ENVIRONMENT,
            sampling=logfire.SamplingOptions(head=LOGFIRE_SAMPLE_RATE),
        )
    except Exception as e:
        logger.error(f"Failed to initialize Logfire: {e}", exc_info=True)
        return False

    _configured = True

    try:
        logfire.instrument_sqlalchemy()
        logger.info("Logfire: SQLAlchemy instrumentation enabled")
    except Exception as e:
        logger.warning(f"Failed to instrument SQLAlchemy: {e}")

    try:
        logfire.instrument_httpx()
        logger.info("Logfire: HTTPX instrumentation enabled")
    except Exception as e:
        logger.warning(f"Failed to instrument HTTPX: {e}")

    if app is not None:
        try:
            logfire.instrument_fastapi(app=app)
            logger.info("Logfire: FastAPI instrumentation enabled")
        except Exception as e:
            logger.warning(f"Failed to instrument FastAPI: {e}")

    logger.info(
        f"Logfire telemetry initialized: service={LOGFIRE_SERVICE_NAME}, environment={LOGFIRE_ENVIRONMENT}"
    )
    return True


def new_error_id() -> str:
    """Generate a short identifier clients can quote when reporting an error."""
    return uuid.uuid4().hex[:12]


def capture_exception(exc: BaseException, context: Optional[Dict[str, Any]] = None) -> str:
    """
    Report an exception to telemetry.

    The exception is always logged with its traceback; it is also forwarded to
    Logfire when telemetry is configured. This function never raises.

    Args:
        exc: The exception to report
        context: Additional attributes (request path, user id, ...)

    Returns:
        The error id attached to the report
    """
    error_id = new_error_id()
    attributes: Dict[str, Any] = {
        "error_id": error_id,
        "error_type": type(exc).__name__,
        **(context or {}),
    }

    logger.error(
        f"Captured exception [{error_id}] {type(exc).__name__}: {exc}",
        exc_info=(type(exc), exc, exc.__traceback__),
        extra={"telemetry": attributes},
    )

    if _configured:
        try:
            logfire.error(
                "{error_type}: {error_message}",
                error_message=str(exc),
                _exc_info=exc,
                **attributes,
            )
        except Exception:
            logger.debug(f"Could not send exception {error_id} to Logfire", exc_info=True)

    return error_id


def log_api_request(method: str, path: str, status_code: int, duration_ms: float) -> None:
    """
    Log an API request with performance metrics.

    Args:
        method: HTTP method
        path: Request path
        status_code: HTTP status code
        duration_ms: Request duration in milliseconds
    """
    logger.debug(f"{method} {path} -> {status_code} ({duration_ms:.2f}ms)")
    if not _configured:
        return
    try:
        logfire.info(
            "API request completed",
            method=method,
            path=path,
            status_code=status_code,
            duration_ms=duration_ms,
        )
    except Exception:
        logger.debug(f"Could not log API request to Logfire: {method} {path}")


def log_email_event(kind: str, recipient: str, ok: bool) -> None:
    """
    Log an outbound e-mail attempt.

    Args:
        kind: Logical e-mail type (e.g. ``welcome``)
        recipient: Destination address
        ok: Whether the provider accepted the message
    """
    logger.info(f"E-mail {kind} to {recipient}: {'sent' if ok else 'not sent'}")
    if not _configured:
        return
    try:
        logfire.info("E-mail dispatched", kind=kind, recipient=recipient, ok=ok)
    except Exception:
        logger.debug(f"Could not log e-mail event to Logfire: {kind}")
