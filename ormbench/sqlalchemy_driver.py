from __future__ import annotations

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from ormbench.driver import BenchmarkDriver
from ormbench.models import Person, Profession, Professional


class SqlalchemyDriver(BenchmarkDriver):
    """Benchmark driver for plain SQLAlchemy ORM sessions.

    Every save is its own commit, so each person costs one round trip.
    """

    def __init__(self, session: Session) -> None:
        super().__init__()
        self.session = session

    def children(self) -> Sequence[Person]:
        return self.session.scalars(select(Person).where(Person.age < 18)).all()

    def adults(self) -> Sequence[Person]:
        return self.session.scalars(select(Person).where(Person.age >= 18)).all()

    def query_people(self) -> Sequence[Person]:
        self.children()
        self.adults()
        self.session.scalars(select(Profession)).all()
        self.session.scalars(select(Professional)).all()
        return self.session.scalars(select(Person)).all()

    def save(self, person: Person) -> None:
        self.session.add(person)
        self.session.commit()
