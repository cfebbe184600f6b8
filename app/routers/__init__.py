"""FastAPI routers."""

from app.routers.health import router as health_router
from app.routers.analysis import router as analysis_router

__all__ = ["health_router", "analysis_router"]
