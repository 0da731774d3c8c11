"""Database engine and session factory"""

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import Config
from src.db.schema import Base


def build_engine(settings: type[Config]) -> Engine:
    """Engine for the DATABASE_URL of the given configuration. Nothing connects until the first query."""
    # FastAPI runs sync endpoints in a threadpool, SQLite needs to allow that
    connect_args = (
        {"check_same_thread": False}
        if settings.DATABASE_URL.startswith("sqlite")
        else {}
    )
    return create_engine(
        settings.DATABASE_URL, echo=settings.DATABASE_ECHO, connect_args=connect_args
    )


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine)


def init_db(engine: Engine) -> None:
    """Ensure all tables are created"""
    Base.metadata.create_all(bind=engine)
