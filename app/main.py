"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Annotated

import structlog
from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.common.auth_router import router as auth_router
from app.api.common.chat_router import router as chat_router
from app.api.common.topic_router import router as topic_router
from app.core.config import settings
from app.core.database import Base, engine, get_async_session, ping
from app.core.exceptions import (
    AppException,
    app_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.core.middleware import AuthMiddleware, RateLimitMiddleware
from app.core.rate_limit import RateLimiter
from app.core.redis import close_redis, init_redis
from app.schemas.response_schema import ApiResponse, success_response

logger = structlog.get_logger()

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info(
        "Starting application",
        app_name=settings.app.name,
        environment=settings.app.env,
        registration_mode=settings.app.registration_mode.value,
        llm_provider=settings.llm.provider,
    )
    await init_redis()
    if settings.app.is_development:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    yield
    await close_redis()
    await engine.dispose()
    logger.info("Shutting down application")


app = FastAPI(
    title=settings.app.name,
    description="Savage DSA tutor - roasts first, teaches always",
    version=VERSION,
    lifespan=lifespan,
    debug=settings.app.debug,
)

# Rate limiter (shared by the global middleware and the chat route dependency)
rate_limiter = RateLimiter.from_config(settings.rate_limit)
app.state.rate_limiter = rate_limiter

# Exception handlers
app.add_exception_handler(AppException, app_exception_handler)  # type: ignore[arg-type]
app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
app.add_exception_handler(Exception, unhandled_exception_handler)

# Middleware (registration order: inner→outer, execution order: outer→inner)
app.add_middleware(AuthMiddleware)
app.add_middleware(RateLimitMiddleware, limiter=rate_limiter)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.server.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/", response_model=ApiResponse[dict])
async def root() -> dict:
    """Root endpoint."""
    return success_response(
        {"app": settings.app.name, "version": VERSION, "docs": "/docs"},
        message="SuckDSA API - Ready to roast some code!",
    )


@app.get("/health", response_model=ApiResponse[dict])
async def health_check(
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> dict:
    """Health check endpoint."""
    database_ok = await ping(session)
    return success_response(
        {
            "status": "healthy" if database_ok else "degraded",
            "database": "connected" if database_ok else "disconnected",
            "environment": settings.app.env,
        }
    )


# Register routers
app.include_router(auth_router)
app.include_router(chat_router)
app.include_router(topic_router)


def run() -> None:
    """Serve the API with uvicorn on the configured address."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.app.is_development,
    )
