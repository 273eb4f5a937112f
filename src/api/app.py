import logging
import time

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .error import ClientError, ServerError

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(
        status_code=exc.status_code, content={"error": error_dict}, headers=exc.headers
    )


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code} {exc.base_error.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    first = exc.errors()[0] if exc.errors() else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = f"Datos inválidos: {field}" if field else "Datos inválidos"
    logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": {"code": "VALIDATION_ERROR", "message": message}},
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": {"code": "INTERNAL_ERROR", "message": "Error interno del servidor"}},
    )


async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
    )
    return response


def create_app(ApplicationConfig) -> FastAPI:
    logging.basicConfig(level=getattr(logging, str(ApplicationConfig.LOG_LEVEL).upper(), logging.INFO))

    app = FastAPI(title="Case Portal API", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        app.middleware("http")(log_requests)

    from src.api.routes import (
        activity,
        ai,
        analytics,
        auth,
        cases,
        clients,
        cron,
        documents,
        health,
        messages,
        notifications,
        settings,
        superadmin,
        users,
    )

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health.router, prefix=prefix, tags=["Health"])
    app.include_router(auth.router, prefix=prefix, tags=["Authentication"])
    app.include_router(auth.password_router, prefix=prefix, tags=["Users"])
    app.include_router(cases.router, prefix=prefix, tags=["Cases"])
    app.include_router(clients.router, prefix=prefix, tags=["Clients"])
    app.include_router(documents.router, prefix=prefix, tags=["Documents"])
    app.include_router(messages.router, prefix=prefix, tags=["Messages"])
    app.include_router(notifications.router, prefix=prefix, tags=["Notifications"])
    app.include_router(activity.router, prefix=prefix, tags=["Activity"])
    app.include_router(users.router, prefix=prefix, tags=["Users"])
    app.include_router(settings.router, prefix=prefix, tags=["Settings"])
    app.include_router(analytics.router, prefix=prefix, tags=["Analytics"])
    app.include_router(ai.router, prefix=prefix, tags=["AI"])
    app.include_router(superadmin.router, prefix=prefix, tags=["Superadmin"])
    app.include_router(cron.router, prefix=prefix, tags=["Cron"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
