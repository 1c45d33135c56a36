"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, PlainTextResponse

from src.app.api.http.app_data import ApplicationDependencies
from src.app.api.http.routers import health
from src.app.api.http.routers.service import user
from src.app.api.utils.app_startup import configure_logging
from src.app.core.services import DbManageService, DbSessionService
from src.app.runtime.config.config_data import ConfigData
from src.app.runtime.context import get_config


# --- Security middleware ---
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault(
            "Referrer-Policy", "strict-origin-when-cross-origin"
        )
        return response


# --- Request logging middleware ---
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": request.client.host if request.client else "unknown",
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


# --- Error rendering ---
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(
        str(exc.detail), status_code=exc.status_code, headers=exc.headers
    )


def _describe_error(error: dict) -> str:
    if error.get("type") == "json_invalid":
        return "body: invalid JSON"
    # Drop the "body"/"path" marker from the location
    loc = [str(part) for part in error.get("loc", ())[1:]]
    field = ".".join(loc) or "body"
    return f"{field}: {error.get('msg', 'invalid value')}"


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
):
    messages = [_describe_error(error) for error in exc.errors()]
    logger.info("Request could not be parsed: {}", messages)
    return PlainTextResponse(
        "Validation errors: " + ", ".join(messages), status_code=400
    )


def create_app(config: ConfigData | None = None) -> FastAPI:
    """Build the application for the given (or the active) configuration."""
    main_config = config or get_config()
    configure_logging(main_config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await startup(app, main_config)
        try:
            yield
        finally:
            await shutdown(app)

    is_production = main_config.app.environment == "production"
    app = FastAPI(
        title=main_config.app.name,
        version=main_config.app.version,
        lifespan=lifespan,
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
    )

    app.add_middleware(SecurityHeadersMiddleware)

    # --- CORS configuration ---
    cors = main_config.app.cors
    if is_production and cors.allow_credentials and "*" in cors.origins:
        raise RuntimeError(
            "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors.origins,
        allow_credentials=cors.allow_credentials,
        allow_methods=cors.allow_methods,
        allow_headers=cors.allow_headers,
    )

    app.middleware("http")(log_requests)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(
        RequestValidationError, request_validation_exception_handler
    )

    # --- Router registration ---
    app.include_router(health.router)
    app.include_router(
        user.router, prefix=f"{main_config.app.api_prefix}/users", tags=["users"]
    )

    return app


# --- Lifecycle hooks ---
async def startup(app: FastAPI, config: ConfigData) -> None:
    logger.info("Starting up application in {} environment", config.app.environment)

    database_service = DbSessionService(config.database, config.app.environment)
    if config.database.create_tables:
        DbManageService(database_service.engine).create_all()

    app.state.app_dependencies = ApplicationDependencies(
        config=config,
        database_service=database_service,
    )


async def shutdown(app: FastAPI) -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies = app.state.app_dependencies
    app_dependencies.database_service.dispose()


app = create_app()

__all__ = ["app", "create_app", "startup", "shutdown"]
