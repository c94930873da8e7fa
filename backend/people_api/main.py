"""
People API · FastAPI Application Factory
==========================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() wires middleware, exception handlers and routers;
       lifespan() owns the document store handle for the process lifetime.
Who:   Started by uvicorn (`uvicorn people_api.main:app`) or the
       `people-api` console script.

Application Layout:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:   Request ID → Request Logging         │
    │                                                     │
    │  Routes:       GET /   ·   /people/…   ·   /person/… │
    │                                                     │
    │  Exception Handlers (plain-text bodies):            │
    │    NotFoundError → 404 │ StoreFailureError → 500     │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Report configuration problems (never fatal)
    3. Attach a MongoStore to app.state and start connecting it in a
       separate task; the listener does not wait for the store
    4. Optionally seed sample people once connected

    Shutdown:
    1. Cancel a still-running connect task
    2. Close the Motor client
"""

import asyncio
import logging
import sys
from contextlib import asynccontextmanager, suppress
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from people_api import __version__
from people_api.config import settings
from people_api.database import MongoStore
from people_api.exceptions import NotFoundError, PeopleApiError, StoreFailureError
from people_api.middleware.logging import RequestLoggingMiddleware
from people_api.middleware.request_id import RequestIDMiddleware, request_id_var
from people_api.routes import people, root
from people_api.seed import seed_people

logger = logging.getLogger(__name__)

INTERNAL_ERROR_TEXT = "Internal Server Error"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # Replaced by people_api.access; the driver logs every heartbeat at DEBUG
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

async def bootstrap_store(store: MongoStore, seed: bool = False) -> None:
    """Connect the store and, when asked and connected, insert sample people."""
    connected = await store.connect()
    if connected and seed:
        await seed_people(store)


def log_bootstrap_failure(task: "asyncio.Task[None]") -> None:
    """Done callback for the connect task; surfaces errors connect() did not handle."""
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        logger.error("Store bootstrap failed: %s", str(error), exc_info=error)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("People API %s starting up...", __version__)

    try:
        settings.validate_required()
    except ValueError as e:
        # The server still starts; store-backed routes answer 500
        logger.error("Configuration error: %s", str(e))

    store = MongoStore.from_settings(settings)
    app.state.store = store
    connect_task = asyncio.create_task(
        bootstrap_store(store, seed=settings.seed_on_startup)
    )

    connect_task.add_done_callback(log_bootstrap_failure)

    logger.info("Server is running on port %d", settings.backend_port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("People API shutting down...")
    if not connect_task.done():
        connect_task.cancel()
        with suppress(asyncio.CancelledError):
            await connect_task
    store.close()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to plain-text responses.

    Handler hierarchy:
        NotFoundError        → 404, body is the exception message
        StoreFailureError    → 500, fixed body
        PeopleApiError       → 500, fixed body
        Exception (fallback) → 500, fixed body, stack trace logged

    No handler ever puts store or stack details in the response body.
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return PlainTextResponse(exc.message, status_code=404)

    @app.exception_handler(StoreFailureError)
    async def handle_store_failure(request: Request, exc: StoreFailureError):
        rid = request_id_var.get("")
        logger.error("[%s] Store failure: %s | Context: %s", rid, exc.message, exc.context)
        return PlainTextResponse(INTERNAL_ERROR_TEXT, status_code=500)

    @app.exception_handler(PeopleApiError)
    async def handle_app_error(request: Request, exc: PeopleApiError):
        rid = request_id_var.get("")
        logger.error(
            "[%s] %s: %s | Context: %s", rid, type(exc).__name__, exc.message, exc.context
        )
        return PlainTextResponse(INTERNAL_ERROR_TEXT, status_code=500)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return PlainTextResponse(INTERNAL_ERROR_TEXT, status_code=500)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: A configured FastAPI instance. The store handle is attached
             by lifespan(); tests override get_people_collection instead.
    """
    app = FastAPI(
        title="People API",
        description="Find, update and delete people stored in MongoDB.",
        version=__version__,
        lifespan=lifespan,
    )

    # Last added runs first: RequestID → Logging → routes
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(root.router)
    app.include_router(people.router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app on the configured host and port."""
    uvicorn.run(
        "people_api.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
