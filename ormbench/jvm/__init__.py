from ormbench.jvm.bridge import ArgKind, ClassBridge, JavaArgument
from ormbench.jvm.gateway import JvmRuntime, discover_classpath

__all__ = [
    "ArgKind",
    "ClassBridge",
    "JavaArgument",
    "JvmRuntime",
    "discover_classpath",
]
