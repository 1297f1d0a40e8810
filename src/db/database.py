"""Generate database sessions"""

from typing import Generator

from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.schema import Base


def create_session_factory(database_url: str, echo: bool = False) -> sessionmaker[Session]:
    """Engine + session factory for the given URL. Ensures all tables are created."""
    if database_url.startswith("sqlite") and ":memory:" in database_url:
        # every connection must see the same in-memory database
        engine = create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(database_url, echo=echo)
    Base.metadata.create_all(bind=engine)
    return sessionmaker(bind=engine)


def get_db(session_factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    db = session_factory()
    try:
        yield db
    finally:
        db.close()
