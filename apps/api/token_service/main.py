"""FastAPI application issuing Agora RTC and RTM tokens."""
from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .routers import tokens as tokens_router
from .schemas.tokens import PingResponse
from .services.credentials import load_credentials

NO_CACHE_HEADERS = {
    "Cache-Control": "private, no-cache, no-store, must-revalidate",
    "Expires": "-1",
    "Pragma": "no-cache",
    "Access-Control-Allow-Origin": "*",
}
NO_CACHE_EXEMPT_PATHS = frozenset({"/ping"})

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load credentials before serving; any failure aborts startup."""

    if getattr(app.state, "credentials", None) is None:
        try:
            app.state.credentials = load_credentials(settings.secret_name)
        except Exception:
            logger.critical("Failed to load credentials; refusing to start", exc_info=True)
            raise
    yield


app = FastAPI(title="Agora Token Service", version="0.1.0", lifespan=lifespan)

if settings.cors_allow_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )


@app.middleware("http")
async def no_cache(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    """Disable client caching on every token response."""

    response = await call_next(request)
    if request.url.path not in NO_CACHE_EXEMPT_PATHS:
        response.headers.update(NO_CACHE_HEADERS)
    return response


@app.get("/ping", response_model=PingResponse, tags=["meta"])
async def ping() -> PingResponse:
    """Simple liveness probe."""

    return PingResponse()


app.include_router(tokens_router.router, tags=["tokens"])
