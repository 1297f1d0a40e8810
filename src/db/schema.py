"""Database tables / schema"""

from datetime import datetime, timezone

from sqlalchemy import JSON
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBGame(Base):
    __tablename__ = "games"
    key: Mapped[str] = mapped_column(primary_key=True)  # user pair key
    board: Mapped[str]
    players: Mapped[dict[str, str]] = mapped_column(JSON)
    piece_to_move: Mapped[str]
    status: Mapped[str]
    result: Mapped[str]
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)
