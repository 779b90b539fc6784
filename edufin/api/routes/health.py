"""
Health check endpoints.
"""

import time

from fastapi import APIRouter, Depends

from edufin import __version__
from edufin.api.dependencies import get_drafts
from edufin.application.dto.responses import HealthResponse
from edufin.core.interfaces import IDraftRepository

router = APIRouter(prefix="/api/health", tags=["health"])

# Track startup time
_start_time = time.time()


@router.get("", response_model=HealthResponse)
async def health_check(drafts: IDraftRepository = Depends(get_drafts)) -> HealthResponse:
    """
    Basic health check.

    Returns service status, uptime, and how many drafts are held in memory.
    """
    return HealthResponse(
        status="healthy",
        version=__version__,
        uptime_seconds=time.time() - _start_time,
        open_drafts=drafts.count(),
    )
