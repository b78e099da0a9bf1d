"""
Main entrypoint for the World Wonders API.

This module assembles the FastAPI application: it sets up logging,
loads the wonder dataset, registers error handlers, attaches the rate
limiter and the request observer (timeout, request log, Prometheus
metrics at ``/metrics``) and includes the versioned routers.
``create_app`` builds a configured instance; the module-level ``app``
is what ASGI servers pick up, e.g.::

    uvicorn world_wonders_api.app.main:app --reload

The dataset is loaded while the application is created.  If it is
invalid, ``DatasetError`` propagates and the application never comes
up.
"""

import asyncio
import logging
import time
from typing import List, Optional

from fastapi import FastAPI, Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v0.router import router as v0_router
from .core.config import Settings, settings as default_settings
from .core.errors import InvalidRequest, WonderError
from .core.logging_config import setup_logging
from .core.metrics import UNMATCHED_ROUTE, RequestMetrics
from .core.rate_limit import limiter
from .services.wonder_store import WonderStore

API_PREFIX = "/v0"
DOCS_ROUTE = f"{API_PREFIX}/docs"
NOT_FOUND_MESSAGE = "Whoops! Route not found. Nothing to see here"
TIMEOUT_MESSAGE = "Request took too long to process"

logger = logging.getLogger(__name__)


def _describe_validation_errors(errors: List[dict]) -> str:
    parts = []
    for error in errors:
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "query")
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts)


def register_exception_handlers(app: FastAPI) -> None:
    """Map service errors and parameter errors to ``400`` responses."""

    @app.exception_handler(WonderError)
    async def wonder_error_handler(request: Request, exc: WonderError) -> JSONResponse:
        logger.debug("Client error on %s: %s", request.url.path, exc.message)
        return JSONResponse(status_code=400, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        error = InvalidRequest(_describe_validation_errors(exc.errors()))
        return await wonder_error_handler(request, error)

    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
        logger.info("Rate limit hit by %s on %s", get_remote_address(request), request.url.path)
        return JSONResponse(
            status_code=429,
            content={"message": f"Too many requests, limit is {exc.detail}"},
            headers={"Retry-After": "1"},
        )

    @app.exception_handler(StarletteHTTPException)
    async def not_found_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=404)
        return await http_exception_handler(request, exc)


def register_request_observer(app: FastAPI, metrics: RequestMetrics, timeout: float) -> None:
    """Time out, log and count every request.

    Requests running longer than ``timeout`` seconds are cancelled and
    answered with ``408``.  Metrics are labelled with the matched route
    template, so ``/v0/wonders/name/{name}`` is one series.
    """

    @app.middleware("http")
    async def observe_request(request: Request, call_next) -> Response:
        start = time.perf_counter()
        try:
            response = await asyncio.wait_for(call_next(request), timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning("%s %s timed out after %.1fs", request.method, request.url.path, timeout)
            response = JSONResponse(status_code=408, content={"message": TIMEOUT_MESSAGE})
        elapsed = time.perf_counter() - start

        # The router stores the matched route in the shared scope
        route = getattr(request.scope.get("route"), "path", UNMATCHED_ROUTE)
        metrics.observe(request.method, route, response.status_code, elapsed)
        logger.debug(
            "%s %s (route %s) -> %d in %.1f ms",
            request.method,
            request.url.path,
            route,
            response.status_code,
            elapsed * 1000,
        )
        return response


def create_app(
    store: Optional[WonderStore] = None, config: Optional[Settings] = None
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[WonderStore]
        Wonder collection to serve.  When omitted the dataset file
        named by the settings is loaded.
    config : Optional[Settings]
        Settings to use instead of the module-level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI instance holding the store on
        ``app.state.store``.
    """
    config = config or default_settings
    setup_logging(config.log_level, config.log_file or None)

    if store is None:
        store = WonderStore.load(config.data_file)

    app = FastAPI(
        title=config.project_name,
        version=config.api_version,
        description="Free and open source API providing information about world wonders",
        docs_url=DOCS_ROUTE,
        openapi_url=f"{DOCS_ROUTE}/api.json",
        redoc_url=None,
    )
    app.state.store = store
    app.state.limiter = limiter
    app.state.metrics = RequestMetrics()

    register_exception_handlers(app)
    register_request_observer(app, app.state.metrics, config.request_timeout)
    app.include_router(v0_router, prefix=API_PREFIX)

    @app.get("/health", include_in_schema=False)
    async def health() -> dict:
        return {"status": "ok", "wonders": len(app.state.store)}

    @app.get("/metrics", include_in_schema=False)
    async def metrics() -> Response:
        return Response(app.state.metrics.render(), media_type=RequestMetrics.content_type)

    logger.info(
        "%s %s ready (%s environment, %d wonders)",
        config.project_name,
        config.api_version,
        config.environment,
        len(store),
    )
    return app


# Create the application instance at import time so that ASGI servers
# can discover it without calling create_app manually.
app = create_app()
