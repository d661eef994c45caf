"""Hello API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to a flat {"error": ...} JSON body
    - Logging configured once on startup via lifespan context manager
    - A listener that fails to bind ends the process with a non-zero exit code

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - uvicorn in a single process: handlers hold no shared state
"""

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from hello_api.api.error_handlers import register_error_handlers
from hello_api.api.routes import hello, users
from hello_api.config import get_settings
from hello_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Server listening on :{settings.port}...")
    yield
    logger.info("Hello API shutting down")


app = FastAPI(title="Hello API", version="1.0.0", lifespan=lifespan)

app.include_router(hello.router)
app.include_router(users.router)

register_error_handlers(app)


def run() -> None:
    """Serve the app on the configured host and port."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    config = uvicorn.Config(
        app, host=settings.host, port=settings.port, log_config=None,
    )
    server = uvicorn.Server(config)
    server.run()
    # uvicorn logs the bind error itself; never exit 0 without having served
    if not server.started:
        logger.critical(f"Listener failed on {settings.host}:{settings.port}")
        sys.exit(1)


if __name__ == "__main__":
    run()
