"""
Toolchain - Invocation of the external Java compiler and runtime

Commands are run as argument lists, never through a shell. Nothing from the
compiler's output is parsed; callers inspect the filesystem afterwards.
"""

import logging
import os
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

from ..config import Config
from ..exceptions import ToolchainError

logger = logging.getLogger(__name__)


class Toolchain:
    """
    Thin wrapper around javac and java.

    Every call blocks until the subprocess exits. With timeout=None (the
    default unless JAVAHEAD_TIMEOUT is set) a hanging tool hangs the caller.
    """

    def __init__(
        self,
        javac: Optional[str] = None,
        java: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.javac = javac or Config.JAVAC
        self.java = java or Config.JAVA
        if timeout is not None and timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {timeout}")
        self.timeout = timeout if timeout is not None else Config.timeout()

    def _run(self, command: List[str]) -> subprocess.CompletedProcess:
        logger.debug(f"Running: {subprocess.list2cmdline(command)}")
        try:
            return subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError as e:
            raise ToolchainError(f"Executable {command[0]!r} not found") from e
        except subprocess.TimeoutExpired as e:
            raise ToolchainError(f"{command[0]} timed out after {self.timeout} seconds") from e

    def compile(self, args: Sequence[str], source_path: Path) -> subprocess.CompletedProcess:
        """
        Compile one source file.

        Args:
            args: Validated compiler arguments
            source_path: The .java file

        Returns:
            The finished process; its exit status is informational only
        """
        result = self._run([self.javac, *args, str(source_path)])
        output = (result.stdout + result.stderr).strip()
        if result.returncode != 0:
            logger.warning(f"{self.javac} exited with status {result.returncode} for {source_path}")
            if output:
                logger.warning(output)
        elif output:
            logger.debug(output)
        return result

    def execute(self, full_name: str, args: Sequence[str], classpath: Sequence[Path]) -> subprocess.CompletedProcess:
        """
        Run a compiled class.

        Args:
            full_name: Fully qualified class name
            args: Validated program arguments
            classpath: Directories passed with -cp, in order

        Returns:
            The finished process with captured text output
        """
        command = [self.java]
        if classpath:
            command += ["-cp", _join_classpath(classpath)]
        command += [full_name, *args]

        result = self._run(command)
        if result.returncode != 0:
            logger.warning(f"{full_name} exited with status {result.returncode}")
            if result.stderr.strip():
                logger.warning(result.stderr.strip())
        return result


def _join_classpath(classpath: Sequence[Path]) -> str:
    return os.pathsep.join(str(p) for p in classpath)
