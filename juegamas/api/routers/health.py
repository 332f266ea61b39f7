"""
Health checks para monitoreo y orquestación (K8s, Docker, etc.)

- /health: liveness básico (siempre 200)
- /health/db: conectividad con la base de datos
- /health/ready: readiness (todas las dependencias sanas)

En modo in-memory no hay base de datos que revisar: se reporta como tal.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from juegamas.api.dependencies import get_session
from juegamas.config import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "juegamas-api"


async def _revisar_db(session: AsyncSession | None) -> str:
    if session is None:
        return "in_memory"
    result = await session.execute(text("SELECT 1"))
    result.scalar()
    return "healthy"


@router.get("/health")
async def health_check():
    """Liveness: 200 mientras la aplicación esté corriendo."""
    return {"status": "ok", "service": SERVICE_NAME}


@router.get("/health/live")
async def health_check_live():
    """Alias de /health para orquestadores que prefieren /health/live."""
    return {"status": "ok", "service": SERVICE_NAME}


@router.get("/health/db")
async def health_check_db(session: AsyncSession | None = Depends(get_session)):
    try:
        estado = await _revisar_db(session)
    except Exception as e:
        logger.error("Database health check failed", exc_info=e)
        return JSONResponse(
            status_code=503,
            content={
                "status": "unhealthy",
                "component": "database",
                "error": "Database connection failed",
            },
        )
    return {"status": estado, "component": "database"}


@router.get("/health/ready")
async def health_check_ready(
    settings: Settings = Depends(get_settings),
    session: AsyncSession | None = Depends(get_session),
):
    """Readiness: 503 si alguna dependencia no responde."""
    health_status = {
        "status": "ready",
        "mode": "in_memory" if settings.use_in_memory else "sql",
        "checks": {},
    }

    try:
        health_status["checks"]["database"] = await _revisar_db(session)
    except Exception as e:
        logger.error("Readiness check: Database unhealthy", exc_info=e)
        health_status["status"] = "not_ready"
        health_status["checks"]["database"] = "unhealthy"
        return JSONResponse(status_code=503, content=health_status)

    return health_status
