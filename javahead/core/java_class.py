"""
JavaClass - Handle to one Java source file

Wraps a validated source path and orchestrates the compile/execute calls.
Whether a class is compiled is never stored: it is re-read from the
filesystem on every call.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from ..exceptions import CompilationFailedError, JavaHeadError, NotCompiledError
from ..utils.paths import working_directory
from .names import NameValidator
from .package import Package

logger = logging.getLogger(__name__)

SOURCE_EXTENSION = ".java"
ARTIFACT_EXTENSION = ".class"


@dataclass(frozen=True)
class JavaClass:
    """
    A Java class backed by an existing source file.

    Attributes:
        name: Simple class name, e.g. Circle
        package: Owning package (the default package for top-level classes)
        source_path: package.path / Circle.java
    """
    name: str
    package: Package
    source_path: Path

    @property
    def full_name(self) -> str:
        """Fully qualified name, e.g. com.example.shapes.Circle"""
        if self.package.full_name:
            return f"{self.package.full_name}.{self.name}"
        return self.name

    @property
    def class_file(self) -> Path:
        return self.package.path / f"{self.name}{ARTIFACT_EXTENSION}"

    def is_compiled(self) -> bool:
        return self.class_file.exists()

    def compile(self, *args) -> "JavaClass":
        """
        Compile the class in place.

        Existing artifacts are removed first so a failed build cannot be masked
        by a stale .class file. The compiler's exit status is ignored; the
        presence of the artifact decides success.

        Args:
            *args: Extra compiler arguments, e.g. "-g:none"

        Returns:
            This class

        Raises:
            InvalidArgumentError: If an argument is not a safe token
            CompilationFailedError: If no artifact exists afterwards
        """
        if self.is_compiled():
            self.remove_compiled_artifacts()

        checked = NameValidator.validate_arguments(args)
        with working_directory(self.package.root):
            self.package.registry.toolchain.compile(checked, self.source_path)

        if not self.is_compiled():
            raise CompilationFailedError(f"Class {self.full_name} could not compile")

        logger.info(f"Compiled {self.full_name}")
        return self

    def remove_compiled_artifacts(self) -> bool:
        """
        Delete Name.class and any Name$*.class artifacts.

        Returns:
            True if the primary artifact was removed, False if it was absent
        """
        for inner in sorted(self.package.path.glob(f"{self.name}$*{ARTIFACT_EXTENSION}")):
            inner.unlink(missing_ok=True)
        try:
            self.class_file.unlink()
        except FileNotFoundError:
            logger.debug(f"Nothing to remove for {self.full_name}")
            return False
        return True

    def execute(self, *args) -> str:
        """
        Run the compiled class.

        Args:
            *args: Command-line arguments for the program

        Returns:
            The program's standard output, verbatim

        Raises:
            NotCompiledError: If the class has not been compiled
            InvalidArgumentError: If an argument is not a safe token
        """
        if not self.is_compiled():
            raise NotCompiledError(f"Class {self.full_name} cannot be run because it is not compiled")

        checked = NameValidator.validate_arguments(args)
        with working_directory(self.package.root):
            result = self.package.registry.toolchain.execute(
                self.full_name, checked, self.classpath()
            )
        return result.stdout

    def run(self, *args) -> str:
        """Compile, execute and clean up. Arguments go to the program."""
        try:
            self.compile()
            return self.execute(*args)
        finally:
            self.remove_compiled_artifacts()

    def test(self, *args) -> Optional["JavaClass"]:
        """
        Check that the class compiles, leaving no artifacts behind.

        Returns:
            This class, or None if compilation failed
        """
        try:
            self.compile(*args)
        except CompilationFailedError as e:
            logger.warning(f"Compilation failed: {e}")
            return None
        except JavaHeadError as e:
            logger.error(f"{type(e).__name__} while compiling {self.full_name}: {e}")
            return None
        finally:
            self.remove_compiled_artifacts()
        return self

    def classpath(self) -> List[Path]:
        """The package root followed by the remaining search roots."""
        root = self.package.root
        return [root] + [r for r in self.package.registry.search_roots if r != root]

    def __str__(self) -> str:
        return self.full_name

    def __repr__(self) -> str:
        state = "compiled" if self.is_compiled() else "not compiled"
        return f"JavaClass({self.full_name!r}, path='{self.source_path}', {state})"
