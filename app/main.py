import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import db_check, products, users
from app.core.config import Settings, get_settings
from app.core.errors import register_error_handlers
from app.core.log import configure_logging
from app.core.security import PasswordHasher
from app.db.store import EntityStore, init_store

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[EntityStore] = None) -> FastAPI:
    """Build the application and the objects every request shares."""
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    store = store or init_store(settings.database_url, echo=settings.SQL_ECHO)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        store.dispose()

    app = FastAPI(title="E-Commerce API", lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store
    app.state.hasher = PasswordHasher(rounds=settings.BCRYPT_ROUNDS)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(db_check.router)
    app.include_router(users.router)
    app.include_router(products.router)
    return app


def run() -> None:
    settings = get_settings()
    app = create_app(settings)
    logger.info("Server running on port %s", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
