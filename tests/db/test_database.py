"""Unit tests for src/captureboard/db/database.py"""

from sqlalchemy import inspect
from sqlalchemy.orm import Session

from captureboard.core.config import Settings
from captureboard.db.database import build_engine, build_session_factory, get_db


def test_build_engine_creates_tables() -> None:
    engine = build_engine(Settings(database_url="sqlite:///:memory:"))
    assert "games" in inspect(engine).get_table_names()


def test_get_db_yields_and_closes_session() -> None:
    session_factory = build_session_factory(Settings(database_url="sqlite:///:memory:"))
    generator = get_db(session_factory)
    session = next(generator)
    assert isinstance(session, Session)
    generator.close()
