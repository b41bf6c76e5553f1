"""FastAPI application for the cinema catalog."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import Annotated

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from cinema.api import api_router
from cinema.config import get_settings
from cinema.constants import MSG_UNEXPECTED
from cinema.db import engine, get_db, init_db
from cinema.exceptions import DomainError, UnexpectedError
from cinema.models.schemas import ResponseEnvelope
from cinema.utils.logging import get_logger, setup_logging

VERSION = "0.1.0"

settings = get_settings()
setup_logging()
logger = get_logger(__name__)

_started_at = datetime.now(UTC)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    await init_db()
    logger.info(f"{settings.app_name} {VERSION} started ({settings.app_env})")

    yield

    await engine.dispose()
    logger.info("Engine disposed, shutdown complete")


app = FastAPI(title=settings.app_name, version=VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"] if settings.is_development else ["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"] if settings.is_development else ["Content-Type", "X-User-Id"],
)

app.include_router(api_router)


def _envelope_response(message: str, status_code: int) -> JSONResponse:
    body = ResponseEnvelope(warnings=[message])
    return JSONResponse(content=body.model_dump(mode="json"), status_code=status_code)


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Expected failures become an unsuccessful envelope with their status code."""
    logger.info(f"{request.method} {request.url.path} rejected: {exc} (user {exc.user_id})")
    return _envelope_response(exc.message, exc.status_code)


@app.exception_handler(UnexpectedError)
async def unexpected_error_handler(request: Request, exc: UnexpectedError) -> JSONResponse:
    """Log the wrapped failure with its traceback; the client gets a generic message."""
    logger.error(
        f"{request.method} {request.url.path} failed: {exc} (user {exc.user_id})",
        exc_info=exc.__cause__ or exc,
    )
    return _envelope_response(MSG_UNEXPECTED, exc.status_code)


@app.get("/health", tags=["monitoring"])
async def health_check(db: Annotated[AsyncSession, Depends(get_db)]) -> JSONResponse:
    """Liveness plus a round trip to the record store (503 when it fails)."""
    now = datetime.now(UTC)
    try:
        await db.execute(text("SELECT 1"))
        database = "healthy"
    except SQLAlchemyError:
        logger.exception("Health check: database unreachable")
        database = "unhealthy"

    status = "healthy" if database == "healthy" else "degraded"
    return JSONResponse(
        content={
            "status": status,
            "timestamp": now.isoformat(),
            "uptime_seconds": (now - _started_at).total_seconds(),
            "version": VERSION,
            "checks": {"database": {"status": database}},
        },
        status_code=200 if status == "healthy" else 503,
    )
