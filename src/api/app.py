import logging
import traceback
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.adapter.database.mongo import MongoDatabase
from src.adapter.database.sql import SqlDatabase
from src.domain.errors import DuplicateKeyError
from .error import ClientError, ServerError
from .middleware import RateLimitMiddleware, RequestLoggingMiddleware
from .schemas import error_body

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    logger.warning(f"Client error: {exc.base_error.code} {exc.base_error.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(
            exc.base_error.message, code=exc.base_error.code, errors=exc.errors, **exc.extra
        ),
    )


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error", code=exc.base_error.code),
    )


def _field_errors(exc: RequestValidationError):
    errors = []
    for error in exc.errors():
        # Drop the request location ("body", "query") from the field path
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        message = error.get("msg", "Invalid value").removeprefix("Value error, ")
        errors.append({"field": ".".join(loc) or "body", "message": message})
    return errors


async def handle_validation_error(request: Request, exc: RequestValidationError):
    errors = _field_errors(exc)
    logger.warning(f"Validation error on {request.method} {request.url.path}: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Validation failed", code="VALIDATION_ERROR", errors=errors),
    )


async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = f"Route not found: {request.method} {request.url.path}"
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code, content=error_body(message), headers=exc.headers
    )


async def handle_duplicate_key(request: Request, exc: DuplicateKeyError):
    logger.warning(f"Duplicate key on {exc.field}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content=error_body(
            "Resource already exists",
            code="DUPLICATE_KEY",
            errors=[{"field": exc.field, "message": f'The value "{exc.value}" already exists'}],
        ),
    )


def build_unexpected_error_handler(environment: str):
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            f"Unhandled error on {request.method} {request.url.path}", exc_info=exc
        )
        body = error_body(str(exc) or "Internal server error", code="INTERNAL_ERROR")
        if environment != "production":
            body["stack"] = "".join(traceback.format_exception(exc))
        else:
            body["message"] = "Internal server error"
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body)

    return handle_unexpected_error


def create_app(
    ApplicationConfig,
    sql: Optional[SqlDatabase] = None,
    mongo: Optional[MongoDatabase] = None,
) -> FastAPI:
    sql = sql or SqlDatabase(
        ApplicationConfig.DB_URI,
        pool_size=ApplicationConfig.DB_POOL_SIZE,
        max_overflow=ApplicationConfig.DB_MAX_OVERFLOW,
    )
    mongo = mongo or MongoDatabase(ApplicationConfig.MONGO_URI, ApplicationConfig.MONGO_DB_NAME)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await sql.create_tables()
        await mongo.ensure_indexes()
        logger.info("Stores ready")
        yield
        await mongo.close()
        await sql.dispose()
        logger.info("Stores closed")

    app = FastAPI(title="Game Catalog API", version="0.1.0", lifespan=lifespan)
    app.state.config = ApplicationConfig
    app.state.sql = sql
    app.state.mongo = mongo

    if ApplicationConfig.RATE_LIMIT_ENABLED:
        app.add_middleware(
            RateLimitMiddleware,
            prefix=ApplicationConfig.API_PREFIX,
            trust_forwarded=ApplicationConfig.TRUST_FORWARDED_FOR,
        )
    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import audit, auth, games, health_check

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, prefix=prefix, tags=["Authentication"])
    app.include_router(games.router, prefix=prefix, tags=["Games"])
    app.include_router(audit.router, prefix=prefix, tags=["Audit"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(DuplicateKeyError, handle_duplicate_key)
    app.add_exception_handler(Exception, build_unexpected_error_handler(ApplicationConfig.ENVIRONMENT))

    return app
