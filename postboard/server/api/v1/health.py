"""
Health Check Endpoints.

Liveness, readiness and version endpoints used for monitoring and deployment verification.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from postboard.core.database import session as db_session
from postboard.server.core import constant

router = APIRouter()


@router.get(
    "/health",
    summary="Health Check",
    description="Check the operational status of the API server.",
    response_description="Status object.",
)
async def health_check():
    """
    Liveness endpoint.

    Returns a simple status indicator to confirm the server is running and reachable.
    """
    return {"status": "ok"}


@router.get(
    "/health/ready",
    summary="Readiness Check",
    description="Check that the server can reach its database.",
    responses={503: {"description": "Database unreachable"}},
)
async def readiness_check():
    """
    Readiness endpoint.

    Runs ``SELECT 1`` against the configured database.
    """
    if await db_session.ping():
        return {"status": "ok", "database": "ok"}
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "unavailable", "database": "unreachable"},
    )


@router.get(
    "/version",
    summary="Get Version",
    description="Retrieve version information for the API server.",
    response_description="Version object.",
)
async def version():
    """
    Get API version.

    Returns the current semantic version of the API and supported schema version.
    """
    return {"version": constant.API_VERSION, "schema_version": constant.SCHEMA_VERSION}
