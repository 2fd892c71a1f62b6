"""
SearchRoots - Ordered base directories for name resolution

The first root that contains a matching directory wins. Instances are plain
mutable values owned by a Registry; appending while another thread resolves
names is not supported.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from ..config import Config
from ..exceptions import NotFoundError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class SearchRoots:
    """
    Ordered, deduplicated list of absolute directories.

    Entries are canonicalized on the way in; duplicates keep their first
    position.
    """

    def __init__(self, roots: Iterable[PathLike] = ()):
        self._roots: List[Path] = []
        for root in roots:
            self.append(root)

    @classmethod
    def initialize(cls, cwd: Optional[PathLike] = None, classpath_file: Optional[Path] = None) -> "SearchRoots":
        """
        Build the default roots: the working directory, then configured roots.

        Args:
            cwd: Directory to use instead of the current working directory
            classpath_file: Override for the configured classpath file

        Returns:
            A new SearchRoots instance
        """
        roots = cls([cwd if cwd is not None else Path.cwd()])
        for root in Config.extra_search_roots(classpath_file):
            roots.append(root)
        logger.debug(f"Search roots: {', '.join(str(r) for r in roots)}")
        return roots

    @staticmethod
    def _canonical(path: PathLike) -> Path:
        return Path(path).expanduser().resolve()

    def append(self, path: PathLike) -> Path:
        """Add a root at the end. Returns the canonical path."""
        root = self._canonical(path)
        if root not in self._roots:
            self._roots.append(root)
        return root

    def locate(self, segments: Sequence[str]) -> Tuple[Path, Path]:
        """
        Find the first root containing the directory root/segments.

        Args:
            segments: Path segments, e.g. ["com", "example"]

        Returns:
            (root, directory): the matching root as listed, and the
            canonical absolute directory beneath it

        Raises:
            NotFoundError: If no root contains the directory
        """
        for root in self._roots:
            candidate = root.joinpath(*segments)
            if candidate.is_dir():
                return root, candidate.resolve()
        raise NotFoundError(
            f"No search root contains directory {'/'.join(segments)!r} "
            f"(searched {len(self._roots)} roots)"
        )

    def resolve_directory(self, segments: Sequence[str]) -> Path:
        """The canonical directory for segments in the first matching root."""
        return self.locate(segments)[1]

    @property
    def first(self) -> Path:
        if not self._roots:
            raise NotFoundError("No search roots configured")
        return self._roots[0]

    def __iter__(self) -> Iterator[Path]:
        return iter(list(self._roots))

    def __len__(self) -> int:
        return len(self._roots)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, Path)):
            return False
        return self._canonical(path) in self._roots

    def __repr__(self) -> str:
        return f"SearchRoots({[str(r) for r in self._roots]!r})"
