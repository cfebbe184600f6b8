"""HealthMate - personal health tracking with AI report analysis."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from app.config import settings
from app.database import Database
from app.core.logging import logger
from app.routers import health_router, analysis_router
from app.features.auth.router import router as auth_router
from app.features.reports.router import router as reports_router
from app.features.vitals.router import router as vitals_router
from app.features.dashboard.router import router as dashboard_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info("Starting HealthMate API...")

    if not settings.OPENAI_API_KEY:
        logger.warning("OPENAI_API_KEY is not set, report analysis will return fallback results")

    await Database.connect_db()

    logger.info(f"Service started on port {settings.PORT}")

    yield

    # Shutdown
    logger.info("Shutting down HealthMate API...")
    await Database.close_db()


app = FastAPI(
    title=settings.APP_NAME,
    description="Personal health tracking API with AI report analysis",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health_router)
app.include_router(auth_router, prefix=settings.API_V1_PREFIX)
app.include_router(analysis_router, prefix=settings.API_V1_PREFIX)
app.include_router(reports_router, prefix=settings.API_V1_PREFIX)
app.include_router(vitals_router, prefix=settings.API_V1_PREFIX)
app.include_router(dashboard_router, prefix=settings.API_V1_PREFIX)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": settings.APP_NAME,
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
    )
