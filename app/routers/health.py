"""Health check endpoints."""

from fastapi import APIRouter

from app.config import settings
from app.database import Database

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "healthmate",
        "environment": settings.ENVIRONMENT,
        "analysis_configured": bool(settings.OPENAI_API_KEY),
    }


@router.get("/ready")
async def readiness_check():
    """Readiness check for Kubernetes/Docker."""
    return {
        "status": "ready" if Database.client is not None else "starting",
        "database": Database.client is not None,
    }
