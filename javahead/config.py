"""
Configuration module for JavaHead

Loads search roots, toolchain binaries and logging settings from environment
variables (and a .env file, if present).
"""

import os
import shutil
from pathlib import Path
from typing import List, Optional
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _parse_timeout(value: Optional[str]) -> Optional[float]:
    """Parse a timeout in seconds; empty or unset means no timeout."""
    if value is None or not value.strip():
        return None
    timeout = float(value)
    if timeout <= 0:
        raise ValueError(f"JAVAHEAD_TIMEOUT must be positive, got {value}")
    return timeout


class Config:
    """
    Centralized configuration for JavaHead.

    Toolchain and logging settings are read once at import. Search roots are
    read from the environment every time extra_search_roots() is called, so
    callers can change CLASSPATH at runtime.
    """

    # Toolchain
    JAVAC: str = os.getenv("JAVAC", "javac")
    JAVA: str = os.getenv("JAVA", "java")
    TIMEOUT_RAW: Optional[str] = os.getenv("JAVAHEAD_TIMEOUT")

    # Search roots
    CLASSPATH_FILE: Path = Path(os.getenv("JAVAHEAD_CLASSPATH_FILE", "classpath.txt"))

    # Logging
    LOG_LEVEL: str = os.getenv("JAVAHEAD_LOG_LEVEL", "WARNING").upper()
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    @classmethod
    def timeout(cls) -> Optional[float]:
        """
        Timeout applied to every compiler and runtime invocation.

        Returns:
            Seconds, or None when invocations may block indefinitely

        Raises:
            ValueError: If JAVAHEAD_TIMEOUT is not a positive number
        """
        return _parse_timeout(cls.TIMEOUT_RAW)

    @classmethod
    def log_level(cls) -> str:
        return "DEBUG" if cls.DEBUG else cls.LOG_LEVEL

    @classmethod
    def extra_search_roots(cls, classpath_file: Optional[Path] = None) -> List[Path]:
        """
        Collect the search roots supplied by configuration.

        Entries from the CLASSPATH environment variable come first, followed by
        the lines of the classpath file. Relative file entries are resolved
        against the file's directory.

        Args:
            classpath_file: Override for JAVAHEAD_CLASSPATH_FILE

        Returns:
            The configured roots in listed order (not yet deduplicated)
        """
        roots: List[Path] = []

        env_value = os.environ.get("CLASSPATH", "")
        for entry in env_value.split(os.pathsep):
            if entry.strip():
                roots.append(Path(entry.strip()).expanduser())

        path = classpath_file or cls.CLASSPATH_FILE
        if path.is_file():
            base = path.resolve().parent
            for line in path.read_text(encoding="utf-8").splitlines():
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                entry = Path(line).expanduser()
                roots.append(entry if entry.is_absolute() else base / entry)

        return roots

    @classmethod
    def java_available(cls) -> bool:
        """True if both the compiler and the runtime are on PATH."""
        return shutil.which(cls.JAVAC) is not None and shutil.which(cls.JAVA) is not None

    @classmethod
    def validate(cls) -> bool:
        """
        Validate the configuration.

        Returns:
            True if configuration is valid

        Raises:
            ValueError: If the toolchain is missing or a value is malformed
        """
        errors = []

        if shutil.which(cls.JAVAC) is None:
            errors.append(f"Compiler '{cls.JAVAC}' was not found on PATH (set JAVAC)")
        if shutil.which(cls.JAVA) is None:
            errors.append(f"Runtime '{cls.JAVA}' was not found on PATH (set JAVA)")

        try:
            cls.timeout()
        except ValueError as e:
            errors.append(f"Invalid JAVAHEAD_TIMEOUT: {e}")

        if errors:
            error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            raise ValueError(error_msg)

        return True
