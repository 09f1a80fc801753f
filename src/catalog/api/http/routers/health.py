"""Liveness and readiness checks."""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from src.catalog.api.http.app_data import ApplicationDependencies

router = APIRouter()


@router.get("/health")
def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@router.get("/ready")
def readiness(request: Request):
    """Readiness check endpoint; requires a reachable database."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    if not app_deps.database_service.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable", "database": "unreachable"},
        )
    return {"status": "ready", "database": "ok"}
