"""ActiveObjects side of the benchmark, driven through the JVM reflection bridge.

The Java driver class runs and reports its own four phases when constructed.
"""

from __future__ import annotations

import logging

from ormbench.config import ClassPathSettings, ConnectionSettings
from ormbench.jvm.gateway import JvmRuntime
from ormbench.log import configure_logging

logger = logging.getLogger(__name__)

ENTITY_MANAGER = "net.java.ao.EntityManager"
NAME_CONVERTER = "net.java.ao.schema.PluralizedNameConverter"
PROFESSIONAL = "net.java.ao.benchmarks.schema.Professional"
DRIVER = "ActiveObjectsDriver"


def run(runtime: JvmRuntime, settings: ConnectionSettings) -> None:
    EntityManager = runtime.get_class(ENTITY_MANAGER)
    NameConverter = runtime.get_class(NAME_CONVERTER)
    Professional = runtime.get_class(PROFESSIONAL)
    Driver = runtime.get_class(DRIVER)

    manager = EntityManager.new(settings.jdbc_url, settings.username, settings.password)
    try:
        manager.setNameConverter(NameConverter.new())
        manager.migrate(runtime.class_array([Professional.java_class]))

        logger.info("Running %s against %s", Driver.name, settings.jdbc_url)
        Driver.new(manager)
    finally:
        manager.getProvider().dispose()


def main() -> None:
    configure_logging()
    settings = ConnectionSettings(database="ao_test")

    with JvmRuntime.launch(ClassPathSettings()) as runtime:
        run(runtime, settings)


if __name__ == "__main__":
    main()
