"""
Main FastAPI application entry point.

Builds the FastAPI application: middleware (CORS, tracing, request timing),
RFC 9457 exception handlers, and the ``/api`` and system routers.

Run locally:
    uvicorn src.main:app --reload
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import settings
from src.core.container import get_database, get_logger
from src.presentation.routers import api_router, system_router
from src.presentation.routers.api.errors import register_exception_handlers
from src.presentation.routers.api.middleware.request_timing_middleware import (
    RequestTimingMiddleware,
)
from src.presentation.routers.api.middleware.trace_middleware import TraceMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    - Startup: log configuration summary
    - Shutdown: dispose the database engine
    """
    logger = get_logger()
    logger.info(
        "Application starting",
        environment=settings.environment.value,
        version=settings.app_version,
    )

    yield

    await get_database().close()
    logger.info("Application stopped")


app = FastAPI(
    title=settings.app_name,
    description="Restaurant listing API with dishes, accounts and policies",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Middleware runs outermost-last: CORS wraps tracing, tracing wraps timing
app.add_middleware(RequestTimingMiddleware)
app.add_middleware(TraceMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location", "X-Trace-Id"],
)

register_exception_handlers(app)

app.include_router(system_router)
app.include_router(api_router)
