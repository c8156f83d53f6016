from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from libs.result import Error
from .error import ClientError, ServerError
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    logger.warning(f"Client error: {exc.base_error.code} {exc.base_error.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.body())


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error: {exc.base_error.code} {exc.base_error.reason or ''}")
    return JSONResponse(status_code=exc.status_code, content=exc.body())


async def handle_validation_error(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    fields = [".".join(str(part) for part in error.get("loc", ())) for error in errors]
    first = errors[0] if errors else {}
    error = ClientError(
        Error(
            "INVALID_REQUEST",
            "Invalid request",
            reason=f"{fields[0]}: {first.get('msg')}" if fields else None,
            details={"fields": fields},
        )
    )
    logger.warning(f"Request validation failed on {request.url.path}: {fields}")
    return JSONResponse(status_code=error.status_code, content=error.body())


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    error = ServerError(Error("INTERNAL_ERROR", "Internal server error"))
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=error.body())


def create_app(ApplicationConfig) -> FastAPI:
    app = FastAPI(title="Community Admin API", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import audit, communities, dashboard, health_check

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(dashboard.router, tags=["Dashboard"])
    app.include_router(communities.router, tags=["Communities"])
    app.include_router(audit.router, tags=["Audit"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
