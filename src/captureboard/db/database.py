"""Generate database sessions"""

from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from captureboard.core.config import Settings, get_settings
from captureboard.db.schema import Base


def build_engine(settings: Settings) -> Engine:
    """Create the engine for the configured URL and make sure all tables exist."""
    engine = create_engine(settings.database_url, echo=settings.echo_sql)
    Base.metadata.create_all(bind=engine)
    return engine


def build_session_factory(settings: Settings | None = None) -> sessionmaker[Session]:
    engine = build_engine(settings or get_settings())
    return sessionmaker(bind=engine)


def get_db(
    session_factory: sessionmaker[Session],
) -> Generator[Session, None, None]:
    db = session_factory()
    try:
        yield db
    finally:
        db.close()
