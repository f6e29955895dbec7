"""
Performance test configuration and fixtures.

This module provides shared fixtures for the phase benchmarks:
- Database setup and teardown
- Data generation
- Driver construction
"""

from __future__ import annotations

from typing import Generator

import pytest
from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from ormbench.config import ConnectionSettings
from ormbench.database import connect, create_schema, session_factory
from ormbench.models import Base, Person, Profession, Professional, Workplace
from ormbench.sqlalchemy_driver import SqlalchemyDriver

NUM_PEOPLE = 200
NUM_WORKPLACES = 10
PROFESSIONS = ("Carpenter", "Baker", "Pilot", "Nurse", "Teacher", "Welder")


@pytest.fixture(scope="session")
def engine(tmp_path_factory) -> Generator[Engine, None, None]:
    """Create a database engine for performance tests."""
    settings = ConnectionSettings(
        adapter="sqlite",
        database=str(tmp_path_factory.mktemp("perf") / "ormbench.db"),
        echo=False,
    )
    sync_engine = connect(settings)

    try:
        yield sync_engine
    finally:
        sync_engine.dispose()


@pytest.fixture(scope="session", autouse=True)
def setup_database(engine: Engine):
    """Set up the schema and the benchmark population."""
    with engine.begin() as conn:
        Base.metadata.drop_all(conn)
    create_schema(engine)

    with session_factory(engine)() as session:
        create_test_data(session)


@pytest.fixture(scope="session")
def perf_session_factory(engine: Engine) -> sessionmaker[Session]:
    return session_factory(engine)


@pytest.fixture
def fresh_driver(perf_session_factory):
    """Build a driver on a new session, returning it with the queried people.

    Each call closes the session opened by the previous one, so that
    lazy loads are paid again on every benchmark round.
    """
    sessions: list[Session] = []

    def build() -> tuple[SqlalchemyDriver, list[Person]]:
        while sessions:
            sessions.pop().close()
        session = perf_session_factory()
        sessions.append(session)
        driver = SqlalchemyDriver(session)
        return driver, list(driver.test_queries())

    yield build

    for session in sessions:
        session.close()


def create_test_data(session: Session, num_people: int = NUM_PEOPLE) -> None:
    """
    Create the benchmark population.

    - NUM_WORKPLACES workplaces
    - one profession per name in PROFESSIONS
    - num_people people spread over the workplaces, each with 1-2 professions
    """
    workplaces = [
        Workplace(office_name=f"Office {i}", coffee_quality=i % 5)
        for i in range(NUM_WORKPLACES)
    ]
    professions = [Profession(name=name) for name in PROFESSIONS]
    session.add_all(workplaces + professions)
    session.flush()

    for i in range(num_people):
        person = Person(
            first_name=f"First {i}",
            last_name=f"Last {i}",
            age=i % 90,
            alive=True,
            bio=f"Bio {i}",
            workplace=workplaces[i % len(workplaces)],
        )
        session.add(person)
        for k in range(1 + i % 2):
            session.add(
                Professional(
                    person=person, profession=professions[(i + k) % len(professions)]
                )
            )

    session.commit()
