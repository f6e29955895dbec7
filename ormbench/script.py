"""SQLAlchemy side of the benchmark: fixed MySQL store, one pass over the four phases."""

from __future__ import annotations

from ormbench.config import ConnectionSettings
from ormbench.database import connect, create_schema, session_factory
from ormbench.driver import PhaseTimings, run_tests
from ormbench.log import configure_logging
from ormbench.sqlalchemy_driver import SqlalchemyDriver


def run(settings: ConnectionSettings) -> PhaseTimings:
    engine = connect(settings)
    try:
        create_schema(engine)
        with session_factory(engine)() as session:
            return run_tests(SqlalchemyDriver(session))
    finally:
        engine.dispose()


def main() -> None:
    settings = ConnectionSettings()
    configure_logging(sql_echo=settings.echo)
    run(settings)


if __name__ == "__main__":
    main()
