"""
JavaHead - Java packages and classes as Python objects

Quick use:
    import javahead

    circle = javahead.resolve_class("com.example.shapes.Circle")
    print(circle.run("3"))

The module-level helpers share one registry built from the environment on
first use. Build a Registry directly for explicit search roots.
"""

from typing import Optional, Tuple

from .core import JavaClass, NameKind, NameValidator, Package, Registry, SearchRoots, Toolchain
from .exceptions import ErrorKind, JavaHeadError

__version__ = "0.1.0"

_default_registry: Optional[Registry] = None


def default_registry() -> Registry:
    """The process-wide registry used by the helpers below."""
    global _default_registry
    if _default_registry is None:
        _default_registry = Registry()
    return _default_registry


def resolve_package(name: str) -> Package:
    return default_registry().resolve_package(name)


def resolve_class(name: str) -> JavaClass:
    return default_registry().resolve_class(name)


def resolve_member(name: str):
    """A Package or a JavaClass, depending on the format of name."""
    return default_registry().resolve_member(name)


def try_resolve(name: str) -> Tuple[Optional[object], Optional[JavaHeadError]]:
    return default_registry().try_resolve(name)


__all__ = [
    "ErrorKind",
    "JavaClass",
    "JavaHeadError",
    "NameKind",
    "NameValidator",
    "Package",
    "Registry",
    "SearchRoots",
    "Toolchain",
    "default_registry",
    "resolve_class",
    "resolve_member",
    "resolve_package",
    "try_resolve",
]
