"""
Timed benchmark phases shared by every ORM driver.

A driver runs four phases in a fixed order over one in-memory list of
people:

1. ``test_queries``    - search the store, return every person
2. ``test_retrieval``  - read five fields from each person
3. ``test_persisting`` - rename, re-age and re-bio each person, saving each one
4. ``test_relations``  - walk professions and workplace colleagues (N+1)

Concrete drivers supply ``query_people`` and ``save``; everything else only
relies on attribute access on the records.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Sequence

from pydantic import BaseModel

logger = logging.getLogger(__name__)

FIRST_NAMES = (
    "Daniel",
    "Chris",
    "Joseph",
    "Renee",
    "Bethany",
    "Grace",
    "Karen",
    "Larry",
    "Moya",
)
LAST_NAMES = ("Smith", "Donovich", "Quieones", "Felger", "Gere", "Covis", "Dawes")

FIRST_AGE = 16

BIO = """\
This is the story of two mice.  Well, actually it's the story of more than 
two mice, but we only have time for the shortened version.  They (the mice)
were on this road one day, looking for upturned clods of grass - for you see,
this is what mice do - and they came across a peddler, peddling his wares.
After the usual confusion between 'ware', 'where' and 'were' (leading to some
dicy moments involving a silver bullet and frantic references to the impending
lunar cycle, the mice managed to extract a piece of useful information out of the
peddler's ramblings.  However, the remainder of this story, and the usefulness
of the peddlers account will have to wait for the SQL, which I am afraid is
going to be very late in arrival.
"""


class PhaseTimings(BaseModel):
    """Elapsed wall-clock milliseconds of one benchmark run."""

    queries: int
    retrieval: int
    persisting: int
    relations: int


class BenchmarkDriver(ABC):
    def __init__(self) -> None:
        self.elapsed: dict[str, int] = {}
        self._started: float | None = None

    @abstractmethod
    def query_people(self) -> Sequence[Any]:
        """Run the search queries and return every person."""

    @abstractmethod
    def save(self, person: Any) -> None:
        """Persist one person."""

    def test_queries(self) -> Sequence[Any]:
        self.start_timer()
        people = self.query_people()
        self._record("queries", "Queries")
        return people

    def test_retrieval(self, people: Sequence[Any]) -> None:
        self.start_timer()

        for person in people:
            person.first_name
            person.last_name
            person.age
            person.alive
            person.bio

        self._record("retrieval", "Retrieval")

    def test_persisting(self, people: Sequence[Any]) -> None:
        self.start_timer()

        for i, person in enumerate(people):
            person.first_name = FIRST_NAMES[i % len(FIRST_NAMES)]
            person.last_name = LAST_NAMES[i % len(LAST_NAMES)]
            self.save(person)

        for age, person in enumerate(people, start=FIRST_AGE):
            person.age = age
            # only people with even ages are still living
            person.alive = age % 2 == 0
            person.bio = BIO
            self.save(person)

        self._record("persisting", "Persistence")

    def test_relations(self, people: Sequence[Any]) -> None:
        self.start_timer()

        for person in people:
            for profession in person.professions:
                profession.name

            # nobody to visit without a workplace
            if person.workplace is None:
                continue
            for colleague in person.workplace.people:
                colleague.first_name
                colleague.last_name

        self._record("relations", "Relations")

    def start_timer(self) -> None:
        self._started = time.time()

    def stop_timer(self) -> int:
        if self._started is None:
            raise RuntimeError("stop_timer() called before start_timer()")
        return int((time.time() - self._started) * 1000)

    def _record(self, phase: str, label: str) -> None:
        elapsed = self.elapsed[phase] = self.stop_timer()
        logger.info("%s test: %d ms", label, elapsed)


def run_tests(driver: BenchmarkDriver) -> PhaseTimings:
    """Run the four phases once, in order, sharing the queried people."""
    people = driver.test_queries()
    driver.test_retrieval(people)
    driver.test_persisting(people)
    driver.test_relations(people)

    return PhaseTimings(**driver.elapsed)
