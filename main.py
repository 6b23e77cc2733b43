"""
main.py
-------
Entry point for the coffee orders API.

Responsibilities:
    - Build the FastAPI application and register the order routes.
    - Open the database connection pool on startup and close it on shutdown.
    - Map repository failures to HTTP error envelopes.
    - Run the uvicorn server.
"""

from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from config import DATABASE_URL, DB_MAX_CONNECTIONS, DB_MIN_CONNECTIONS, DB_POOL_TIMEOUT, HOST, PORT
from db.connection import ConnectionPool
from handlers import order_handler
from handlers.responses import error_response
from repositories.exceptions import OrderNotFound, StorageUnavailable
from utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open a pool from config unless one was injected by create_app()."""
    owns_pool = app.state.db_pool is None
    if owns_pool:
        logger.info("Initializing database...")
        app.state.db_pool = ConnectionPool(DATABASE_URL, DB_MIN_CONNECTIONS, DB_MAX_CONNECTIONS, DB_POOL_TIMEOUT)
    try:
        yield
    finally:
        if owns_pool:
            app.state.db_pool.close()
            app.state.db_pool = None


async def order_not_found_handler(request: Request, exc: OrderNotFound):
    return error_response(404, "order not found")


async def storage_unavailable_handler(request: Request, exc: StorageUnavailable):
    logger.warning(f"{request.method} {request.url.path} failed: database unavailable")
    return error_response(503, "database unavailable")


async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
    return error_response(422, "invalid request")


def create_app(db_pool: Optional[ConnectionPool] = None) -> FastAPI:
    """
    Build the application.

    Args:
        db_pool: Connection pool to use. When None, the pool is opened from
            config on startup and closed on shutdown.

    Returns:
        The configured FastAPI app.
    """
    app = FastAPI(title="Coffee Orders", lifespan=lifespan)
    app.state.db_pool = db_pool

    app.add_exception_handler(OrderNotFound, order_not_found_handler)
    app.add_exception_handler(StorageUnavailable, storage_unavailable_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(order_handler.router, prefix="/orders", tags=["orders"])

    @app.get("/", response_class=PlainTextResponse)
    def root():
        return "MAY THE FORCE BE WITH YOU"

    return app


app = create_app()


def main() -> None:
    """Run the API server."""
    setup_logging()
    logger.info(f"Listening on {HOST}:{PORT}")
    uvicorn.run(app, host=HOST, port=PORT, log_config=None)


if __name__ == "__main__":
    main()
