"""
Zero Waste Chef Health Check Endpoint
"""

from fastapi import APIRouter, Depends, HTTPException, Request, status
import time

from core.config import Settings
from core.dependencies import get_settings

router = APIRouter()


@router.get("/health")
async def health_check(request: Request, settings: Settings = Depends(get_settings)):
    """Liveness plus a database round trip"""
    if not await request.app.state.db.check_connection():
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database unavailable"
        )

    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.VERSION,
        "database": "connected",
        "timestamp": time.time()
    }
