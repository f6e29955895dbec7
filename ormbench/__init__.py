"""
ormbench - Timing harness for object-relational mapping layers.

Measures bulk query, field retrieval, field persistence and relationship
traversal over a small people / professions / workplaces schema, so that
the numbers can be compared against ActiveObjects running on the JVM.
"""

__version__ = "0.1.0"
__author__ = "ormbench"
__email__ = "ormbench@example.com"

from ormbench.driver import BenchmarkDriver, PhaseTimings, run_tests
from ormbench.models import Base, Person, Profession, Professional, Workplace
from ormbench.sqlalchemy_driver import SqlalchemyDriver

__all__ = [
    "Base",
    "BenchmarkDriver",
    "PhaseTimings",
    "Person",
    "Profession",
    "Professional",
    "SqlalchemyDriver",
    "Workplace",
    "run_tests",
]
