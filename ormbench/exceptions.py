from __future__ import annotations


class BridgeError(Exception):
    """Base class for errors raised by the JVM reflection bridge."""


class MemberNotFoundError(BridgeError, AttributeError):
    """No constructor or static method matches the requested name and signature."""

    def __init__(self, class_name: str, member: str, signature: tuple[str, ...] = ()):
        self.class_name = class_name
        self.member = member
        self.signature = signature
        super().__init__(
            f"{class_name} has no public member {member}({', '.join(signature)})"
        )


class ArgumentTypeError(BridgeError, TypeError):
    """A Python value has no mapping onto a JVM argument type."""


class ClassPathError(BridgeError):
    """The JVM class search path could not be assembled."""
