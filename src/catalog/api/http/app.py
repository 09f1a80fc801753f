"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.responses import JSONResponse

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.api.http.routers.health import router as health_router
from src.catalog.api.http.routers.service.book import router as book_router
from src.catalog.api.http.routers.user import router as user_router
from src.catalog.api.utils.app_startup import configure_logging
from src.catalog.core.exceptions import CatalogError
from src.catalog.core.services import DbSessionService, PasswordHasher
from src.catalog.runtime.context import get_config

configure_logging()


# --- FastAPI app setup ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    startup()
    try:
        yield
    finally:
        shutdown()


app = FastAPI(
    title="Book Catalog API",
    description="Manage book records and import them from a remote catalog.",
    lifespan=lifespan,
    docs_url=None if get_config().app.environment == "production" else "/docs",
    redoc_url=None if get_config().app.environment == "production" else "/redoc",
)

__all__ = ["app", "startup", "shutdown"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_config().app.cors.origins,
    allow_credentials=get_config().app.cors.allow_credentials,
    allow_methods=get_config().app.cors.allow_methods,
    allow_headers=get_config().app.cors.allow_headers,
)


# --- Error rendering ---
@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    """Render domain errors with the status their class carries."""
    log = logger.bind(status_code=exc.status_code, error_type=type(exc).__name__)
    if exc.status_code >= 500:
        log.error("request.failed: {}", exc.message)
    else:
        log.info("request.rejected: {}", exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# --- Request logging middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    xff = request.headers.get("x-forwarded-for")
    client_ip = (
        xff.split(",")[0].strip()
        if xff
        else request.client.host
        if request.client
        else "unknown"
    )

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": client_ip,
        "user_agent": request.headers.get("user-agent", "unknown"),
    }

    start = time.perf_counter()

    # Everything that logs within this block inherits base_ctx
    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal Server Error", "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )


# --- Router registration ---
app.include_router(health_router, tags=["health"])
app.include_router(book_router, prefix="/api/book", tags=["book"])
app.include_router(user_router, prefix="/api/user", tags=["user"])


# --- Lifecycle hooks ---
def startup() -> None:
    config = get_config()
    logger.info("Starting up application in {} environment", config.app.environment)

    if getattr(app.state, "app_dependencies", None) is not None:
        logger.info("Application dependencies already provided; skipping setup")
        return

    database_service = DbSessionService(config)
    if config.database.create_tables_on_startup:
        database_service.create_all()

    app.state.app_dependencies = ApplicationDependencies(
        database_service=database_service,
        http_client=httpx.Client(follow_redirects=True),
        password_hasher=PasswordHasher(config.security),
    )


def shutdown() -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies | None = getattr(
        app.state, "app_dependencies", None
    )
    if app_dependencies is None:
        return
    app_dependencies.http_client.close()
    app_dependencies.database_service.dispose()
    app.state.app_dependencies = None


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=get_config().app.host,
        port=get_config().app.port,
        access_log=False,  # Access logging happens in the middleware
    )
