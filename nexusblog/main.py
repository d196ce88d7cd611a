# nexusblog/main.py

"""Nexus Blog Backend - posts, search and JWT auth over FastAPI and SQLModel."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

from nexusblog.configs import settings
from nexusblog.db import ping_db
from nexusblog.errors import (
    DatabaseError,
    InvalidQueryTypeError,
    PasswordHashingError,
    UserAuthenticationError,
    auth_exception_handler,
    database_exception_handler,
    sqlalchemy_exception_handler,
    query_exception_handler,
    validation_exception_handler,
)
from nexusblog.managers import limiter, rate_limit_exceeded_handler
from nexusblog.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from nexusblog.routes import blog_router, user_router
from nexusblog.schemas import HealthCheckResponse
from nexusblog.utils import today_str

app = FastAPI(
    title=settings.APP_NAME,
    description="Nexus Blog Backend API",
    version=settings.VERSION,
    lifespan=lifespan,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)

routes = [user_router, blog_router]

_ = [app.include_router(router) for router in routes]

errors = [
    (UserAuthenticationError, auth_exception_handler),
    (PasswordHashingError, auth_exception_handler),
    (DatabaseError, database_exception_handler),
    (SQLAlchemyError, sqlalchemy_exception_handler),
    (InvalidQueryTypeError, query_exception_handler),
    (RequestValidationError, validation_exception_handler),
    (RateLimitExceeded, rate_limit_exceeded_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]

app.state.limiter = limiter


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "version": "1.0.0",
                        "status": "ok",
                        "timestamp": "2025-01-01 10:00:00",
                        "database": "ok",
                    },
                },
            },
        },
        503: {"description": "Database unavailable"},
    },
    operation_id="health_check",
)
@limiter.exempt
async def health_check(request: Request) -> ORJSONResponse:
    """
    Health check endpoint.

    Parameters
    ----------
    request : Request
        Current request context.

    Returns
    -------
    ORJSONResponse
        Version, status and database reachability; 503 when the database is down.
    """
    db_ok = await ping_db()
    health = HealthCheckResponse(
        version=app.version,
        status="ok" if db_ok else "degraded",
        timestamp=today_str(),
        database="ok" if db_ok else "unavailable",
    )
    return ORJSONResponse(
        health.model_dump(),
        status_code=200 if db_ok else HTTP_503_SERVICE_UNAVAILABLE,
    )


@app.get(
    "/",
    tags=["🏠 Root"],
    summary="Root access",
    response_model=dict[str, str],
    response_class=ORJSONResponse,
    operation_id="root_access",
)
async def root() -> ORJSONResponse:
    """Root endpoint."""
    return ORJSONResponse(content={"message": f"Welcome to {settings.APP_NAME}"})


if __name__ == "__main__":
    from uvicorn import run

    run(app, host="127.0.0.1", port=8787, log_level="info")
