from __future__ import annotations

from typing import Generator

import pytest
from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from ormbench.config import ConnectionSettings
from ormbench.database import connect, create_schema
from ormbench.database import session_factory as make_session_factory


@pytest.fixture
def settings(tmp_path) -> ConnectionSettings:
    """A throwaway SQLite store per test."""
    return ConnectionSettings(
        adapter="sqlite", database=str(tmp_path / "ormbench.db"), echo=False
    )


@pytest.fixture
def engine(settings: ConnectionSettings) -> Generator[Engine, None, None]:
    sync_engine = connect(settings)
    create_schema(sync_engine)
    try:
        yield sync_engine
    finally:
        sync_engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return make_session_factory(engine)


@pytest.fixture
def session(session_factory) -> Generator[Session, None, None]:
    with session_factory() as session:
        yield session
