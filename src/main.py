"""Application factory: wires configuration, logging, storage and routes together."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from src.api.errors import register_error_handlers
from src.api.router import router
from src.core.config import Config, get_config
from src.db.database import build_engine, build_session_factory, init_db
from src.db.memory_repository import InMemoryGameRepository, InMemoryPlayerRepository


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    if app.state.config.STORAGE_BACKEND == "sql":
        init_db(app.state.engine)
    yield
    if app.state.config.STORAGE_BACKEND == "sql":
        app.state.engine.dispose()


def create_app(settings: Optional[type[Config]] = None) -> FastAPI:
    settings = settings or get_config()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Uno", lifespan=lifespan)
    app.state.config = settings
    if settings.STORAGE_BACKEND == "sql":
        app.state.engine = build_engine(settings)
        app.state.session_factory = build_session_factory(app.state.engine)
    else:
        app.state.game_repository = InMemoryGameRepository()
        app.state.player_repository = InMemoryPlayerRepository()

    register_error_handlers(app)
    app.include_router(router)

    logging.getLogger(__name__).info(
        "Uno backend ready (storage backend: %s)", settings.STORAGE_BACKEND
    )
    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("src.main:app", host="127.0.0.1", port=8000)
