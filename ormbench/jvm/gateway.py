from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Iterable, Self

from py4j.java_gateway import JavaGateway, JavaObject

from ormbench.config import ClassPathSettings
from ormbench.exceptions import ClassPathError
from ormbench.jvm.bridge import ClassBridge

logger = logging.getLogger(__name__)

ARCHIVE_SUFFIXES = (".jar", ".war")


def discover_classpath(
    classes_dir: Path, libs_dir: Path, extra: Iterable[Path] = ()
) -> list[Path]:
    """Class search path: compiled classes, then every archive in ``libs_dir``, then ``extra``."""
    if not libs_dir.is_dir():
        raise ClassPathError(f"library directory {libs_dir} does not exist")

    archives = sorted(
        entry
        for entry in libs_dir.iterdir()
        if entry.is_file() and entry.suffix in ARCHIVE_SUFFIXES
    )
    return [
        classes_dir.resolve(),
        *(archive.resolve() for archive in archives),
        *(entry.resolve() for entry in extra),
    ]


class JvmRuntime:
    """A Py4J gateway plus the reflection helpers ``ClassBridge`` needs."""

    def __init__(self, gateway: JavaGateway) -> None:
        self.gateway = gateway
        self._lang = gateway.jvm.java.lang
        self._loader = self._lang.ClassLoader.getSystemClassLoader()

    @classmethod
    def launch(cls, settings: ClassPathSettings) -> Self:
        classpath = discover_classpath(
            settings.classes_dir, settings.libs_dir, settings.extra_paths
        )
        logger.info("Launching JVM with %d class path entries", len(classpath))
        logger.debug("Class path: %s", classpath)

        gateway = JavaGateway.launch_gateway(
            classpath=os.pathsep.join(str(entry) for entry in classpath),
            die_on_exit=True,
        )
        return cls(gateway)

    def for_name(self, name: str) -> Any:
        return self._lang.Class.forName(name, True, self._loader)

    def get_class(self, name: str) -> ClassBridge:
        return ClassBridge(self, self.for_name(name))

    def is_handle(self, value: Any) -> bool:
        return isinstance(value, JavaObject)

    def class_name(self, handle: Any) -> str:
        return handle.getClass().getName()

    def is_static(self, member: Any) -> bool:
        return self._lang.reflect.Modifier.isStatic(member.getModifiers())

    def _array(self, component: Any, values: Iterable[Any]) -> Any:
        values = list(values)
        array = self.gateway.new_array(component, len(values))
        for i, value in enumerate(values):
            array[i] = value
        return array

    def object_array(self, values: Iterable[Any]) -> Any:
        return self._array(self._lang.Object, values)

    def class_array(self, classes: Iterable[Any]) -> Any:
        return self._array(self._lang.Class, classes)

    def shutdown(self) -> None:
        self.gateway.shutdown()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.shutdown()
