"""ASGI application: middleware stack, error envelopes and router wiring."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import JSONResponse, Response

from src.commerce.api.http.app_data import ApplicationDependencies
from src.commerce.api.http.middleware.limiter import (
    close_rate_limiter,
    configure_rate_limiter,
)
from src.commerce.api.http.routers import admin, customer, delivery, health, seller
from src.commerce.api.http.schemas import failure
from src.commerce.api.utils.app_startup import configure_logging
from src.commerce.core.errors import CommerceError
from src.commerce.core.services import (
    DbManageService,
    DbSessionService,
    ImageSearchService,
    JwtService,
)
from src.commerce.runtime.context import get_config

__all__ = ["app", "create_app", "startup", "shutdown"]

_BASE_SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}
_HSTS = "max-age=31536000; includeSubDomains; preload"


def _client_ip(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Assigns a request id, logs the request lifecycle and stamps security headers.

    Anything that escapes the routers is logged and rendered as a 500 envelope.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        started = time.perf_counter()

        with logger.contextualize(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            client_ip=_client_ip(request),
        ):
            logger.info("request.start")
            try:
                response = await call_next(request)
            except Exception as exc:
                logger.bind(
                    status_code=500,
                    duration_ms=round((time.perf_counter() - started) * 1000, 1),
                    error_type=type(exc).__name__,
                ).exception("request.error")
                response = JSONResponse(
                    status_code=500,
                    content=failure("Internal Server Error", request_id=request_id),
                )
            else:
                logger.bind(
                    status_code=response.status_code,
                    duration_ms=round((time.perf_counter() - started) * 1000, 1),
                ).info("request.end")

        response.headers.setdefault("X-Request-ID", request_id)
        for name, value in _BASE_SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        if get_config().app.environment == "production":
            response.headers.setdefault("Strict-Transport-Security", _HSTS)
        return response


async def _commerce_error(request: Request, exc: CommerceError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("Unhandled domain error: {}", exc.message)
    else:
        logger.info("Request rejected ({}): {}", exc.status_code, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=failure(exc.message, request_id=_request_id(request)),
    )


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=failure(str(exc.detail), request_id=_request_id(request)),
        headers=getattr(exc, "headers", None),
    )


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]
    logger.info("Request validation failed with {} error(s)", len(errors))
    return JSONResponse(
        status_code=422,
        content=failure("Invalid request", errors=errors, request_id=_request_id(request)),
    )


async def startup(app: FastAPI) -> None:
    config = get_config()
    logger.info("Starting up application in {} environment", config.app.environment)

    database_service = DbSessionService()
    if config.database.is_sqlite:
        DbManageService(database_service.engine).create_all()

    app.state.app_dependencies = ApplicationDependencies(
        database_service=database_service,
        jwt_service=JwtService(config.auth),
        image_search_service=ImageSearchService(config.image_search),
    )
    configure_rate_limiter()


async def shutdown(app: FastAPI) -> None:
    logger.info("Shutting down application")
    await close_rate_limiter()
    app.state.app_dependencies.database_service.engine.dispose()


@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup(app)
    try:
        yield
    finally:
        await shutdown(app)


def create_app() -> FastAPI:
    config = get_config()
    production = config.app.environment == "production"
    cors = config.app.cors
    if production and "*" in cors.origins:
        raise RuntimeError("CORS misconfigured: wildcard origin with credentials in production")

    application = FastAPI(
        title="Geeta Commerce API",
        lifespan=lifespan,
        docs_url=None if production else "/docs",
        redoc_url=None if production else "/redoc",
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=cors.origins,
        allow_credentials=cors.allow_credentials,
        allow_methods=cors.allow_methods,
        allow_headers=cors.allow_headers,
    )
    application.add_middleware(RequestContextMiddleware)

    application.add_exception_handler(CommerceError, _commerce_error)
    application.add_exception_handler(StarletteHTTPException, _http_error)
    application.add_exception_handler(RequestValidationError, _validation_error)

    for module in (health, admin, seller, delivery, customer):
        application.include_router(module.router)
    return application


configure_logging()
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=get_config().app.host, port=get_config().app.port, access_log=False)
