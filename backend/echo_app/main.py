"""Module: main."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from anyio import to_thread
from fastapi import FastAPI, Request
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from echo_app.api.api import api_router
from echo_app.core.config import settings
from echo_app.core.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Sync endpoints run on anyio's default thread pool; cap it at the configured size.
    limiter = to_thread.current_default_thread_limiter()
    limiter.total_tokens = settings.worker_pool_size
    app.state.worker_limiter = limiter
    logger.info(
        "[%s] Server started on port %d (workers=%d)",
        settings.service_tag,
        settings.port,
        settings.worker_pool_size,
    )
    yield
    logger.info("[%s] Server stopped", settings.service_tag)


app = FastAPI(
    title="Echo Service",
    version="0.1.0",
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
    redirect_slashes=False,
)

app.include_router(api_router)


# Unknown paths and unroutable methods answer with a bare status, like the handlers do.
@app.exception_handler(StarletteHTTPException)
async def empty_http_error(request: Request, exc: StarletteHTTPException) -> Response:
    return Response(status_code=exc.status_code, headers=exc.headers)


@app.middleware("http")
async def trace_requests(request: Request, call_next):
    logger.info("[%s] Received request: %s %s", settings.service_tag, request.method, request.url.path)
    response = await call_next(request)
    logger.info("[%s] Request processed: %d", settings.service_tag, response.status_code)
    return response


def run() -> None:
    configure_logging(settings.log_level)
    # log_config=None keeps our console handler; a failed bind makes uvicorn exit non-zero.
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
        access_log=False,
    )


if __name__ == "__main__":
    run()
