"""
Package - Handle to a Java package directory

Packages are created only by a Registry, which guarantees one instance per
full name. They are frozen; equality is identity.
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Union

from .names import NameKind, NameValidator

if TYPE_CHECKING:
    from .java_class import JavaClass
    from .registry import Registry

logger = logging.getLogger(__name__)

# Source files that follow the class naming convention, e.g. Circle.java
CLASS_FILE = re.compile(r"([A-Z][A-Za-z0-9_]*)\.java")


@dataclass(frozen=True, eq=False)
class Package:
    """
    A Java package backed by an existing directory.

    Attributes:
        name: Last dotted segment ("" for the default package)
        parent: Enclosing package, or None for top-level packages
        path: Canonical absolute directory of the package
        root: Search root the package was found under, as listed
    """
    name: str
    parent: Optional["Package"]
    path: Path
    root: Path
    registry: "Registry" = field(repr=False)

    @property
    def full_name(self) -> str:
        """Dotted name, e.g. com.example.shapes"""
        if self.parent is None or not self.parent.full_name:
            return self.name
        return f"{self.parent.full_name}.{self.name}"

    @property
    def depth(self) -> int:
        return len(self.full_name.split(".")) if self.full_name else 0

    def _qualify(self, name: str) -> str:
        return f"{self.full_name}.{name}" if self.full_name else name

    def subpackage(self, name: str) -> "Package":
        return self.registry.resolve_package(self._qualify(name))

    def java_class(self, name: str) -> "JavaClass":
        return self.registry.resolve_class(self._qualify(name))

    def member(self, name: str) -> Union["Package", "JavaClass"]:
        """
        Return a child class or subpackage depending on the format of name.

        Args:
            name: Name relative to this package, e.g. "shapes" or "shapes.Circle"

        Returns:
            The child Package or JavaClass
        """
        if NameValidator.classify(name) is NameKind.CLASS:
            return self.java_class(name)
        return self.subpackage(name)

    __getitem__ = member

    def classes(self) -> List["JavaClass"]:
        """All classes whose source file sits directly in this package. Not cached."""
        classes = []
        for entry in sorted(self.path.iterdir()):
            match = CLASS_FILE.fullmatch(entry.name)
            if match and entry.is_file():
                classes.append(self.java_class(match.group(1)))
        return classes

    def subpackages(self) -> List["Package"]:
        """Direct child directories that are valid package segments."""
        return [
            self.subpackage(entry.name)
            for entry in sorted(self.path.iterdir())
            if entry.is_dir() and NameValidator.SEGMENT_FORMAT.fullmatch(entry.name)
        ]

    def compile(self, *args) -> "Package":
        """Compile every class in the package, stopping at the first failure."""
        classes = self.classes()
        for java_class in classes:
            java_class.compile(*args)
        logger.info(f"Compiled {len(classes)} classes in package {self.full_name or '<default>'}")
        return self

    def is_compiled(self) -> bool:
        """True if every class in the package is compiled."""
        return all(java_class.is_compiled() for java_class in self.classes())

    def remove_compiled_artifacts(self) -> "Package":
        for java_class in self.classes():
            java_class.remove_compiled_artifacts()
        return self

    def __str__(self) -> str:
        return self.full_name

    def __repr__(self) -> str:
        return f"Package({self.full_name!r}, path='{self.path}')"
