"""
Health check endpoints.

Reports whether the service is up and whether the store answers queries.
"""

import logging
from typing import Any, Dict
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from sqlalchemy import text
from datetime import datetime, timezone

from app.core.config import settings
from app.core.database import get_db

router = APIRouter(tags=["Health"])
logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@router.get("/", status_code=status.HTTP_200_OK)
def root() -> Dict[str, str]:
    """Root endpoint - service name and version"""
    return {
        "message": settings.PROJECT_NAME,
        "version": settings.VERSION,
    }


@router.get("/health", status_code=status.HTTP_200_OK)
def health_check(db: Session = Depends(get_db)) -> Any:
    """
    Health check with database connectivity.

    Returns 200 when ``SELECT 1`` succeeds against the store, 503 otherwise.
    Use this for uptime monitoring and load balancer health checks.
    """
    health_status: Dict[str, Any] = {
        "status": "healthy",
        "timestamp": utc_timestamp(),
        "version": settings.VERSION,
        "checks": {}
    }

    try:
        db.execute(text("SELECT 1"))
        health_status["checks"]["database"] = {
            "status": "healthy",
            "message": "Database connection successful"
        }
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        health_status["status"] = "unhealthy"
        health_status["checks"]["database"] = {
            "status": "unhealthy",
            "message": "Database unreachable"
        }
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=health_status)

    return health_status
