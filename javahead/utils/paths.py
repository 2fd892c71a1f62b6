"""
Filesystem helpers
"""

import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Union


@contextmanager
def working_directory(path: Union[str, Path]) -> Iterator[Path]:
    """
    Temporarily change the working directory.

    The previous directory is restored on every exit path, including
    exceptions raised inside the block.
    """
    previous = Path.cwd()
    os.chdir(path)
    try:
        yield Path(path)
    finally:
        os.chdir(previous)
