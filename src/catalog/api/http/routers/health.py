"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Request
from starlette.responses import JSONResponse

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.runtime.context import get_config

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health() -> dict[str, str]:
    """Basic health check endpoint - checks if app is running.

    This is a liveness probe that returns 200 OK as long as the application
    process is running. It does not check dependencies.
    """
    return {"status": "healthy", "service": "book-catalog"}


@router.get("/ready", response_model=None)
async def readiness(request: Request) -> dict[str, Any] | JSONResponse:
    """Readiness check - returns 200 if book storage is usable, 503 otherwise."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    config = get_config()

    checks: dict[str, Any] = {}
    all_healthy = True

    if app_deps.memory_storage is not None:
        checks["storage"] = {
            "status": "healthy" if app_deps.memory_storage.is_available() else "unhealthy",
            "type": "memory",
        }
        all_healthy = app_deps.memory_storage.is_available()
    elif app_deps.database_service is not None:
        try:
            db_healthy = app_deps.database_service.health_check()
            checks["storage"] = {
                "status": "healthy" if db_healthy else "unhealthy",
                "type": "database",
                "dialect": app_deps.database_service.engine.dialect.name,
                "pool": app_deps.database_service.get_pool_status(),
            }
            all_healthy = db_healthy
        except Exception as e:
            checks["storage"] = {
                "status": "unhealthy",
                "type": "database",
                "error": str(e),
            }
            all_healthy = False
    else:
        checks["storage"] = {"status": "unconfigured"}
        all_healthy = False

    response = {
        "status": "ready" if all_healthy else "not_ready",
        "environment": config.app.environment,
        "checks": checks,
    }

    if not all_healthy:
        return JSONResponse(status_code=503, content=response)

    return response
