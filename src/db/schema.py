"""Database tables / schema"""

from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from sqlalchemy import JSON
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBGame(Base):
    __tablename__ = "games"
    id: Mapped[UUID] = mapped_column(primary_key=True)
    name: Mapped[str]
    password: Mapped[str] = mapped_column(default="")
    host: Mapped[str]
    # players (in turn order) are stored together with their hands
    players: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=list)
    current_player: Mapped[int] = mapped_column(default=0)
    direction: Mapped[bool] = mapped_column(default=True)
    draw_pile: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=list)
    discard_pile: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=list)
    status: Mapped[str]
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)


class DBPlayer(Base):
    __tablename__ = "players"
    id: Mapped[UUID] = mapped_column(primary_key=True)
    name: Mapped[str]
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
