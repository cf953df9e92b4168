"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.api.http.routers.book import router as book_router
from src.catalog.api.http.routers.health import router as health_router
from src.catalog.api.utils.app_startup import configure_logging
from src.catalog.core.services import DbSessionService
from src.catalog.core.storage.book_storage import InMemoryBookStorage
from src.catalog.runtime.context import get_config


# --- Security middleware ---
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault(
            "Referrer-Policy", "strict-origin-when-cross-origin"
        )
        # HSTS only in prod
        if get_config().app.environment == "production":
            response.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )
        return response


# --- Request logging middleware ---
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


# --- Lifecycle hooks ---
def build_dependencies() -> ApplicationDependencies:
    """Build the storage backend selected by ``config.storage.backend``."""
    config = get_config()
    logger.info(
        "Starting up application in {} environment with {} storage",
        config.app.environment,
        config.storage.backend,
    )

    if config.storage.backend == "memory":
        return ApplicationDependencies(memory_storage=InMemoryBookStorage())

    database_service = DbSessionService()
    database_service.create_all()
    return ApplicationDependencies(database_service=database_service)


def create_app(dependencies: ApplicationDependencies | None = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        dependencies: Prebuilt collaborators. When omitted they are built from
            the current configuration at startup.
    """
    config = get_config()
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.app_dependencies = dependencies or build_dependencies()
        try:
            yield
        finally:
            logger.info("Shutting down application")
            app.state.app_dependencies.close()

    is_production = config.app.environment == "production"
    app = FastAPI(
        title="Book Catalog API",
        lifespan=lifespan,
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
    )

    if is_production and "*" in config.app.cors.origins:
        raise RuntimeError(
            "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
        )

    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.app.cors.origins,
        allow_credentials=config.app.cors.allow_credentials,
        allow_methods=config.app.cors.allow_methods,
        allow_headers=config.app.cors.allow_headers,
    )
    app.middleware("http")(log_requests)

    app.include_router(health_router)
    app.include_router(book_router)

    return app


app = create_app()

__all__ = ["app", "create_app", "build_dependencies"]
