"""
Core modules for JavaHead

1. Names (grammar checks and classification)
2. Search roots (where packages live on disk)
3. Registry (package identity cache, class resolution)
4. Toolchain (javac/java invocation)
"""

from .names import NameKind, NameValidator
from .search_roots import SearchRoots
from .toolchain import Toolchain
from .package import Package
from .java_class import JavaClass
from .registry import Registry

__all__ = [
    "NameKind",
    "NameValidator",
    "SearchRoots",
    "Toolchain",
    "Package",
    "JavaClass",
    "Registry",
]
