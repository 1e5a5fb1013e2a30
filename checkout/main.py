# checkout/main.py
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from checkout.api.errors import register_exception_handlers
from checkout.api.routers import cart, event_sessions, events, health, sold
from checkout.data.database import Database
from checkout.services.lock_service import LockService
from checkout.utils.settings import CORS_ORIGINS, HOST, PORT
from checkout.utils.logging import get_logger

logger = get_logger(__name__)


def create_app(
    database: Database | None = None,
    lock_service: LockService | None = None,
) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db = database or Database()
        locks = lock_service or LockService()

        logger.info("Initializing database")
        try:
            db.create_all()
        except Exception as e:
            logger.error(f"Failed to create tables: {e}")
            db.dispose()
            raise

        app.state.db = db
        app.state.lock_service = locks
        logger.info("Checkout API ready")

        yield

        locks.close()
        db.dispose()
        logger.info("Checkout API shut down")

    app = FastAPI(
        title="Event Checkout API",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept"],
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(health.router)
    app.include_router(events.router)
    app.include_router(event_sessions.router)
    app.include_router(cart.router)
    app.include_router(sold.router)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
