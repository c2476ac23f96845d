"""
Bikestore Reports - Backend API
Read-only reports over the bicycle store database
"""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from bikestore.api import reports
from bikestore.core.config import settings
from bikestore.core.database import get_session
from bikestore.core.exceptions import ConnectionFailure

logger = logging.getLogger(__name__)

# Crear aplicación FastAPI
app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION,
)

# Include API routers
app.include_router(reports.router, prefix="/api/v1/reports", tags=["Reports"])


@app.exception_handler(ConnectionFailure)
async def connection_failure_handler(request: Request, exc: ConnectionFailure):
    """Database unreachable: 503 instead of a stack trace"""
    logger.error(f"Database unavailable for {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=503,
        content={"status": "error", "detail": "Database unavailable"},
    )


@app.get("/")
async def root():
    """Endpoint raíz - Verificación de estado de la API"""
    return {
        "message": "Bikestore Reports API",
        "status": "online",
        "version": settings.API_VERSION,
    }


@app.get("/health")
def health():
    """Health check endpoint - tests database connectivity"""
    db_error = None

    try:
        with get_session():
            db_status = "connected"
    except ConnectionFailure as e:
        db_status = "disconnected"
        db_error = e.message

    return {
        "status": "healthy" if db_status == "connected" else "degraded",
        "service": "bikestore-reports",
        "version": settings.API_VERSION,
        "database": {
            "status": db_status,
            "error": db_error,
        },
    }
