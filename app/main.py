from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from app.core.config import settings
from app.core.database import create_db_engine, init_db
from app.core.handlers import register_exception_handlers
from app.core.logging import logger
from app.api.v1.router import api_router
from app.services.student.store import StudentStore


def create_app(store: Optional[StudentStore] = None, migrate: Optional[bool] = None) -> FastAPI:
    """
    Build the FastAPI application around a StudentStore.

    The store is created from settings.DATABASE_URL unless one is passed in.
    On startup the database connection is checked and migrations applied
    (controlled by `migrate`, defaulting to APPLY_MIGRATIONS_ON_STARTUP).
    """
    if store is None:
        store = StudentStore(create_db_engine())
    if migrate is None:
        migrate = settings.APPLY_MIGRATIONS_ON_STARTUP

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.PROJECT_NAME} v{settings.APP_VERSION}")
        init_db(store.engine, migrate=migrate)
        yield
        store.engine.dispose()
        logger.info("Database engine disposed")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan
    )
    app.state.store = store

    register_exception_handlers(app)

    # Include API router
    app.include_router(api_router, prefix=settings.API_PREFIX)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
