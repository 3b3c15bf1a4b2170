"""
Foe Finder — FastAPI Application Entry Point

Stateless scoring service.  Every endpoint computes over the snapshot in its
request body, so the process owns no state beyond the static catalogs.

Scoring handlers are plain ``def`` functions: aggregation is CPU-bound and
FastAPI runs sync handlers in its threadpool, keeping the event loop free
for other requests and for the timeout below.
"""

from __future__ import annotations

import asyncio
import logging
import time
import uuid
from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from foefinder.catalog import NEIGHBORHOODS, QUESTIONS
from foefinder.config import get_settings

settings = get_settings()

# ---------------------------------------------------------------------------
# Structured logging configuration
# ---------------------------------------------------------------------------

structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    ),
    context_class=dict,
    logger_factory=structlog.PrintLoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger("foefinder")

REQUEST_ID_HEADER = "X-Request-ID"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info(
        "startup",
        environment=settings.ENVIRONMENT,
        log_level=settings.LOG_LEVEL,
        questions=len(QUESTIONS),
        neighborhoods=len(NEIGHBORHOODS),
    )
    yield
    logger.info("shutdown")


# ---------------------------------------------------------------------------
# Request middleware
# ---------------------------------------------------------------------------

class RequestContextMiddleware(BaseHTTPMiddleware):
    """Per-request log context, wall-clock timeout, and access logging.

    A request id (taken from ``X-Request-ID`` or generated) is bound into
    structlog's contextvars together with method and path, so every event a
    handler logs carries them.  Handlers bind their own keys (``user_id``,
    ``population``) the same way.
    """

    def __init__(self, app, timeout_seconds: float = 30.0) -> None:
        super().__init__(app)
        self.timeout_seconds = timeout_seconds

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:12]
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )
        start = time.perf_counter()

        try:
            response = await asyncio.wait_for(call_next(request), timeout=self.timeout_seconds)
        except asyncio.TimeoutError:
            logger.warning("request_timeout", timeout=self.timeout_seconds)
            response = JSONResponse(status_code=504, content={"detail": "Request timed out"})
        except Exception:
            logger.exception("request_error", duration_ms=_elapsed_ms(start))
            raise
        finally:
            structlog.contextvars.clear_contextvars()

        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            "request_handled",
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=_elapsed_ms(start),
        )
        return response


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------

app = FastAPI(
    title="Foe Finder",
    description="Opinion scoring and population statistics for opposition matching",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if not settings.is_production else None,
    redoc_url="/redoc" if not settings.is_production else None,
)

# Last added runs first: CORS wraps the request context middleware
app.add_middleware(RequestContextMiddleware, timeout_seconds=settings.REQUEST_TIMEOUT_SECONDS)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[REQUEST_ID_HEADER],
)


@app.get("/health", tags=["health"])
def health_liveness() -> dict:
    return {"status": "healthy"}


@app.get("/health/deep", tags=["health"])
def health_deep() -> dict:
    """Readiness: both static catalogs are loaded and non-empty."""
    result: dict = {
        "status": "healthy",
        "questions": len(QUESTIONS),
        "neighborhoods": len(NEIGHBORHOODS),
    }
    if not QUESTIONS or not NEIGHBORHOODS:
        logger.error("health_catalog_empty", **result)
        result["status"] = "degraded"
    return result


from foefinder.api.router import router as api_router  # noqa: E402

app.include_router(api_router, prefix="/api/v1")
