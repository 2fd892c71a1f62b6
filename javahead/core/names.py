"""
Name Validator - Grammar checks for dotted Java names

Classifies a dotted name as a package or a class before any filesystem or
cache access, and vets the argument tokens handed to the Java toolchain.
"""

import re
from enum import Enum
from typing import Iterable, List, Tuple

from ..exceptions import (
    InvalidArgumentError,
    InvalidClassNameError,
    InvalidNameError,
    InvalidPackageNameError,
)


class NameKind(Enum):
    """Result of classifying a dotted name."""
    PACKAGE = "package"
    CLASS = "class"


class NameValidator:
    """
    Validates package names, class names and toolchain arguments.

    Grammars (matched against the entire string):
    - package: lowercase segments, e.g. com.example.shapes or _internal
    - class: optional package prefix plus one capitalized segment, e.g. com.example.Circle
    - argument: a single shell-safe token, e.g. -g:none or a=1
    """

    SEGMENT = r"[a-z_][a-z0-9_]*"

    PACKAGE_FORMAT = re.compile(rf"{SEGMENT}(?:\.{SEGMENT})*")
    CLASS_FORMAT = re.compile(rf"(?:{SEGMENT}\.)*[A-Z][A-Za-z0-9_]*")
    SEGMENT_FORMAT = re.compile(SEGMENT)
    ARGUMENT_FORMAT = re.compile(r"[-A-Za-z0-9@_./][-A-Za-z0-9@_./:=,+\"']*")

    @classmethod
    def is_package_name(cls, name: str) -> bool:
        return cls.PACKAGE_FORMAT.fullmatch(name) is not None

    @classmethod
    def is_class_name(cls, name: str) -> bool:
        return cls.CLASS_FORMAT.fullmatch(name) is not None

    @classmethod
    def is_argument(cls, arg: str) -> bool:
        return cls.ARGUMENT_FORMAT.fullmatch(arg) is not None

    @classmethod
    def classify(cls, name: str) -> NameKind:
        """
        Decide whether a dotted name denotes a class or a package.

        Args:
            name: Dotted name, e.g. "com.example" or "com.example.Circle"

        Returns:
            NameKind.CLASS or NameKind.PACKAGE

        Raises:
            InvalidNameError: If the name matches neither grammar
        """
        if cls.is_class_name(name):
            return NameKind.CLASS
        if cls.is_package_name(name):
            return NameKind.PACKAGE
        raise InvalidNameError(f"Invalid name {name!r}: neither a package nor a class name")

    @classmethod
    def validate_package_name(cls, name: str) -> str:
        if not cls.is_package_name(name):
            raise InvalidPackageNameError(f"Invalid package name {name!r}")
        return name

    @classmethod
    def validate_class_name(cls, name: str) -> str:
        if not cls.is_class_name(name):
            raise InvalidClassNameError(f"Invalid class name {name!r}")
        return name

    @classmethod
    def validate_arguments(cls, args: Iterable[object]) -> List[str]:
        """
        Convert arguments to strings and check each against the argument grammar.

        Raises:
            InvalidArgumentError: On the first argument that is not a safe token
        """
        checked = []
        for arg in args:
            arg = str(arg)
            if not cls.is_argument(arg):
                raise InvalidArgumentError(f"Invalid argument {arg!r}")
            checked.append(arg)
        return checked

    @staticmethod
    def split(name: str) -> Tuple[List[str], str]:
        """Split "a.b.C" into (["a", "b"], "C")."""
        segments = name.split(".")
        return segments[:-1], segments[-1]
