from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from ormbench.config import ConnectionSettings
from ormbench.models import Base, Person, Profession, Professional, Workplace

logger = logging.getLogger(__name__)


def connect(settings: ConnectionSettings, **kwargs: Any) -> Engine:
    """Create the engine for ``settings``. Statement logging goes through the logging module."""
    logger.info(
        "Connecting to %s database %s",
        settings.adapter,
        settings.database,
    )
    return create_engine(settings.url, future=True, **kwargs)


def session_factory(engine: Engine) -> sessionmaker[Session]:
    # Saved records stay loaded so later phases read them without a refresh
    return sessionmaker(bind=engine, expire_on_commit=False)


def create_schema(engine: Engine) -> None:
    """Create any of the four benchmark tables that are missing."""
    with engine.begin() as conn:
        Base.metadata.create_all(conn)


def _create(session: Session, record: Any) -> Any:
    session.add(record)
    session.commit()
    return record


def create_workplace(session: Session) -> Workplace:
    return _create(session, Workplace())


def create_profession(session: Session) -> Profession:
    return _create(session, Profession())


def create_person(session: Session) -> Person:
    return _create(session, Person())


def create_professional(session: Session) -> Professional:
    return _create(session, Professional())
