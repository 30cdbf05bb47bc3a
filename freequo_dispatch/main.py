"""
Main FastAPI application entry point.

Wires the trace middleware, the RFC 7807 exception handlers and the v1
routers. The channel variants (mail backend, payment mode) are chosen once
by the container from settings.

Run:
    uvicorn freequo_dispatch.main:app
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from freequo_dispatch.core.config import get_settings
from freequo_dispatch.presentation.api.middleware import TraceMiddleware
from freequo_dispatch.presentation.api.v1 import v1_router
from freequo_dispatch.presentation.api.v1.errors import register_exception_handlers

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan.

    - Startup: create tables in development (migrations own the schema elsewhere)
    - Shutdown: dispose the connection pool
    """
    from freequo_dispatch.core.container import get_database, get_logger

    database = get_database()
    if settings.is_development:
        await database.create_all()

    get_logger().info(
        "application_started",
        environment=settings.environment.value,
        mail_backend=settings.mail_backend.value,
        payment_mode=settings.payment_mode.value,
    )

    yield

    await database.close()


app = FastAPI(
    title=settings.app_name,
    description="Side-effect dispatcher for job applications and payments",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Request correlation
app.add_middleware(TraceMiddleware)

# RFC 7807 error responses
register_exception_handlers(app)

app.include_router(v1_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """
    Health check endpoint for monitoring and load balancers.

    Returns:
        dict: Health status and active channel variants.
    """
    return {
        "status": "healthy",
        "version": settings.app_version,
        "payment_mode": settings.payment_mode.value,
        "mail_backend": settings.mail_backend.value,
    }
