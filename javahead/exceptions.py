"""
Exceptions - Error taxonomy for JavaHead

Every error raised by the package derives from JavaHeadError and carries an
ErrorKind so callers can branch on the kind without importing every class.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Kinds of failure surfaced to callers."""
    INVALID_NAME = "invalid_name"
    DUPLICATE_ENTITY = "duplicate_entity"
    NOT_FOUND = "not_found"
    INVALID_ARGUMENT = "invalid_argument"
    COMPILATION_FAILED = "compilation_failed"
    NOT_COMPILED = "not_compiled"
    TOOLCHAIN = "toolchain"


class JavaHeadError(Exception):
    """Base class for all JavaHead errors."""

    kind: Optional[ErrorKind] = None


class InvalidNameError(JavaHeadError, ValueError):
    """A dotted name matches neither the package nor the class grammar."""

    kind = ErrorKind.INVALID_NAME


class InvalidPackageNameError(InvalidNameError):
    pass


class InvalidClassNameError(InvalidNameError):
    pass


class DuplicateEntityError(JavaHeadError):
    """Direct construction collided with an entry already in the cache."""

    kind = ErrorKind.DUPLICATE_ENTITY


class DuplicatePackageError(DuplicateEntityError):
    pass


class NotFoundError(JavaHeadError, LookupError):
    """No search root contains the expected directory or file."""

    kind = ErrorKind.NOT_FOUND


class PackageNotFoundError(NotFoundError):
    pass


class SourceNotFoundError(NotFoundError):
    pass


class InvalidArgumentError(JavaHeadError, ValueError):
    """A compiler or runtime argument contains disallowed characters."""

    kind = ErrorKind.INVALID_ARGUMENT


class CompilationFailedError(JavaHeadError):
    """No compiled artifact exists after invoking the compiler."""

    kind = ErrorKind.COMPILATION_FAILED


class NotCompiledError(JavaHeadError):
    """Execution was attempted before a compiled artifact exists."""

    kind = ErrorKind.NOT_COMPILED


class ToolchainError(JavaHeadError):
    """The compiler or runtime binary is missing or timed out."""

    kind = ErrorKind.TOOLCHAIN
