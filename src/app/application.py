"""FastAPI application factory."""
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Callable

from fastapi import Depends, FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from src.app.api.dependencies import require_store_connection
from src.app.api.v1 import appointments, clients, dashboard, technical_sheets
from src.app.containers import Container, WIRED_MODULES
from src.app.logging import get_logger
from src.shared.exceptions import StoreUnavailable

logger = get_logger(__name__)

# Type alias for lifespan context manager
LifespanType = Callable[[FastAPI], AsyncIterator[None]]


@asynccontextmanager
async def default_lifespan(app: FastAPI):
    """Connect to the database (with bounded retries) and create tables before serving."""
    container: Container = app.state.container
    logger.info("Starting Lash Studio API...")

    db = container.database()
    if await db.connect():
        await db.create_tables()
        logger.info("Database initialized successfully")
    else:
        logger.error("Serving without a database connection; API requests will be rejected")

    yield

    logger.info("Shutting down Lash Studio API...")
    await db.dispose()


async def store_unavailable_handler(request: Request, exc: StoreUnavailable) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": str(exc)})


async def store_failure_handler(request: Request, exc: SQLAlchemyError | OSError) -> JSONResponse:
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": str(exc)})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies and parameters are client errors, answered with 400 like missing fields."""
    logger.error(f"Invalid request on {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request", "errors": jsonable_encoder(exc.errors())},
    )


def create_app(container: Container, lifespan: LifespanType | None = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        container: DI container holding the settings and the shared database.
        lifespan: Optional lifespan context manager. If not provided, uses default_lifespan.

    Returns:
        Configured FastAPI application.
    """
    container.wire(modules=WIRED_MODULES)

    config = container.config()

    app = FastAPI(
        title=config.app_name,
        version=config.app_version,
        lifespan=lifespan or default_lifespan,
    )

    # Attach container to app state for access in lifespan and routes
    app.state.container = container

    app.add_exception_handler(StoreUnavailable, store_unavailable_handler)
    app.add_exception_handler(SQLAlchemyError, store_failure_handler)
    # Driver-level connection failures (refused, reset) surface as OSError
    app.add_exception_handler(OSError, store_failure_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    api_dependencies = [Depends(require_store_connection)]
    app.include_router(clients.router, prefix="/api", dependencies=api_dependencies)
    app.include_router(technical_sheets.router, prefix="/api", dependencies=api_dependencies)
    app.include_router(appointments.router, prefix="/api", dependencies=api_dependencies)
    app.include_router(dashboard.router, prefix="/api", dependencies=api_dependencies)

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    # Mounted last so the API routes take precedence
    if config.static_dir:
        app.mount("/", StaticFiles(directory=config.static_dir, html=True), name="pages")

    return app
