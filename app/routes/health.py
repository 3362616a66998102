"""
ParamBinder Backend — Health Check Route
=========================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   The service has no database or upstream API, so the check reduces to
       "the process is up and routing requests".
Who:   Called by container health checks, load balancers and monitoring.
"""

import logging
import time

from fastapi import APIRouter

from app import __version__
from app.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Track when the service started for uptime reporting
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    """Report status, version and uptime."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
