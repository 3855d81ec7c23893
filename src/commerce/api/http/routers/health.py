"""Liveness and readiness probes."""

from typing import Any

from fastapi import APIRouter, Request
from loguru import logger
from starlette.responses import JSONResponse

from src.commerce.api.http.app_data import ApplicationDependencies
from src.commerce.runtime.config.config_data import ConfigData
from src.commerce.runtime.context import get_config

router = APIRouter(prefix="/health", tags=["health"])


def _database_check(deps: ApplicationDependencies, config: ConfigData) -> dict[str, Any]:
    try:
        reachable = deps.database_service.health_check()
    except Exception as exc:
        logger.warning("Database readiness check failed: {}", exc)
        return {"status": "unhealthy", "error": str(exc)}
    return {
        "status": "healthy" if reachable else "unhealthy",
        "type": "sqlite" if config.database.is_sqlite else "postgresql",
        "pool": deps.database_service.get_pool_status(),
    }


@router.get("")
async def health() -> dict[str, str]:
    return {"status": "healthy", "service": get_config().app.name}


@router.get("/ready", response_model=None)
async def readiness(request: Request) -> dict[str, Any] | JSONResponse:
    """Report dependency status; 503 while the database cannot be reached.

    Image search providers are listed for visibility only: without keys the
    search answers "not found" instead of failing.
    """
    config = get_config()
    image_search = config.image_search
    checks = {
        "database": _database_check(request.app.state.app_dependencies, config),
        "image_search": {
            "google": bool(image_search.google_api_key and image_search.google_cx_id),
            "unsplash": bool(image_search.unsplash_access_key),
        },
    }
    ready = checks["database"]["status"] == "healthy"
    body = {
        "status": "ready" if ready else "not_ready",
        "environment": config.app.environment,
        "checks": checks,
    }
    return body if ready else JSONResponse(status_code=503, content=body)
