"""
Rotas de health check.

- /health: Liveness básico (sempre 200 se app rodando)
- /health/ready: Readiness (Supabase configurado e respondendo)
"""
from typing import Any, Callable

from fastapi import APIRouter, Depends, Response
import logging

from app.core.config import settings
from app.core.exceptions import ConfigurationError
from app.core.timezone import iso_utc
from app.repositories.deps import get_conector_db

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
async def health_check():
    """Liveness: app está de pé."""
    return {
        "status": "healthy",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "timestamp": iso_utc(),
    }


@router.get("/health/ready")
async def readiness_check(
    response: Response,
    conectar: Callable[[], Any] = Depends(get_conector_db),
):
    """Readiness: credenciais presentes e banco consultável."""
    try:
        db = conectar()
        db.table("correntistas").select("id").limit(1).execute()
    except ConfigurationError as e:
        logger.error(f"Readiness falhou: {e.message}")
        response.status_code = 503
        return {"status": "not_ready", "database": "not_configured", "error": e.message}
    except Exception as e:
        logger.error(f"Readiness falhou: {e}")
        response.status_code = 503
        return {"status": "not_ready", "database": "error", "error": str(e)}

    return {"status": "ready", "database": "connected"}
