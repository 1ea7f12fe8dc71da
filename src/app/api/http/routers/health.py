"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Request
from starlette.responses import JSONResponse

from src.app.api.http.app_data import ApplicationDependencies
from src.app.runtime.context import get_config

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health() -> dict[str, str]:
    """Liveness probe: 200 OK as long as the process is running."""
    return {"status": "healthy", "service": "api"}


@router.get("/ready", response_model=None)
async def readiness(request: Request) -> dict[str, Any] | JSONResponse:
    """Readiness probe: 200 when the database answers, 503 otherwise."""
    app_deps: ApplicationDependencies | None = getattr(
        request.app.state, "app_dependencies", None
    )
    config = get_config()

    database_type = config.database.backend_name
    if app_deps is not None and app_deps.database_service.health_check():
        checks = {"database": {"status": "healthy", "type": database_type}}
        return {"status": "ready", "checks": checks}

    checks = {"database": {"status": "unhealthy", "type": database_type}}
    return JSONResponse(
        status_code=503, content={"status": "not_ready", "checks": checks}
    )
