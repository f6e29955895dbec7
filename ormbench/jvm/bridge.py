"""
Name-based access to constructors and static methods of a JVM class.

``ClassBridge`` reflects the wrapped class once and indexes its public
constructors (under ``new``) and public static methods by name and exact
parameter type names::

    EntityManager = ClassBridge(runtime, runtime.for_name("net.java.ao.EntityManager"))
    manager = EntityManager.new("jdbc:mysql://localhost/ao_test", "root", "mysqlroot")
    EntityManager.java_class  # the wrapped java.lang.Class

Arguments go through an explicit conversion table, see ``JavaArgument``.
Lookups that find nothing raise ``MemberNotFoundError``.

Static methods named like the bridge's own attributes (``name``, ``call``,
``members``, ``java_class``) are shadowed by them; reach those
through ``call``, e.g. ``bridge.call("name", ...)``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from ormbench.exceptions import ArgumentTypeError, MemberNotFoundError

if TYPE_CHECKING:
    from ormbench.jvm.gateway import JvmRuntime

CONSTRUCTOR = "new"

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class ArgKind(enum.Enum):
    STRING = "java.lang.String"
    INTEGER = "java.lang.Integer"
    HANDLE = None


# Python type -> JVM argument kind; handles are recognised by the runtime
CONVERSIONS: dict[type, ArgKind] = {
    str: ArgKind.STRING,
    int: ArgKind.INTEGER,
}


@dataclass(frozen=True)
class JavaArgument:
    kind: ArgKind
    value: Any
    type_name: str

    @classmethod
    def of(cls, value: Any, runtime: JvmRuntime) -> JavaArgument:
        # bool is an int subclass but has no Integer counterpart here
        kind = CONVERSIONS.get(type(value))
        if kind is ArgKind.INTEGER and not INT_MIN <= value <= INT_MAX:
            raise ArgumentTypeError(f"{value} does not fit in java.lang.Integer")
        if kind is not None:
            return cls(kind, value, kind.value)
        if runtime.is_handle(value):
            return cls(ArgKind.HANDLE, value, runtime.class_name(value))
        raise ArgumentTypeError(
            f"cannot pass {type(value).__name__} value {value!r} to the JVM"
        )


Signature = tuple[str, ...]


def _signature(member: Any) -> Signature:
    return tuple(param.getName() for param in member.getParameterTypes())


class ClassBridge:
    def __init__(self, runtime: JvmRuntime, clazz: Any) -> None:
        self._runtime = runtime
        self._class = clazz
        self._name: str = clazz.getName()
        self._members: dict[str, dict[Signature, Callable[[Any], Any]]] = {}

        for constructor in clazz.getConstructors():
            self._register(CONSTRUCTOR, _signature(constructor), constructor.newInstance)

        for method in clazz.getMethods():
            if runtime.is_static(method):
                self._register(
                    method.getName(),
                    _signature(method),
                    lambda args, method=method: method.invoke(None, args),
                )

    def _register(
        self, name: str, signature: Signature, invoke: Callable[[Any], Any]
    ) -> None:
        self._members.setdefault(name, {})[signature] = invoke

    @property
    def java_class(self) -> Any:
        return self._class

    @property
    def name(self) -> str:
        return self._name

    def members(self) -> dict[str, list[Signature]]:
        return {name: list(overloads) for name, overloads in self._members.items()}

    def new(self, *args: Any) -> Any:
        return self.call(CONSTRUCTOR, *args)

    def call(self, member: str, *args: Any) -> Any:
        arguments = [JavaArgument.of(arg, self._runtime) for arg in args]
        signature = tuple(arg.type_name for arg in arguments)

        invoke = self._members.get(member, {}).get(signature)
        if invoke is None:
            raise MemberNotFoundError(self._name, member, signature)

        return invoke(self._runtime.object_array(arg.value for arg in arguments))

    def __getattr__(self, member: str) -> Callable[..., Any]:
        if member.startswith("_") or member not in self._members:
            raise MemberNotFoundError(self.__dict__.get("_name", "?"), member)

        def static_method(*args: Any) -> Any:
            return self.call(member, *args)

        static_method.__name__ = member
        return static_method

    def __repr__(self) -> str:
        return f"<ClassBridge {self._name}>"

