"""
Registry - Name resolution and package identity cache

Maps dotted names to Package and JavaClass handles. One Registry owns its
search roots, its toolchain and its cache; there is no hidden global state.
The cache is not locked: use a registry from one thread at a time.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from ..exceptions import (
    DuplicatePackageError,
    JavaHeadError,
    NotFoundError,
    PackageNotFoundError,
    SourceNotFoundError,
)
from .java_class import SOURCE_EXTENSION, JavaClass
from .names import NameKind, NameValidator
from .package import Package
from .search_roots import PathLike, SearchRoots
from .toolchain import Toolchain

logger = logging.getLogger(__name__)

Member = Union[Package, JavaClass]


class Registry:
    """
    Central registry for Java packages and classes.

    Provides:
    - One canonical Package per full name (resolved on first request)
    - Validated JavaClass handles
    - Dispatch from a dotted name to the right kind of entity
    """

    def __init__(
        self,
        search_roots: Optional[SearchRoots] = None,
        toolchain: Optional[Toolchain] = None,
    ):
        self.search_roots = search_roots if search_roots is not None else SearchRoots.initialize()
        self.toolchain = toolchain or Toolchain()
        self._packages: Dict[str, Package] = {}

    def add_search_root(self, path: PathLike) -> Path:
        """Extend resolution to another root. Already cached packages keep their paths."""
        return self.search_roots.append(path)

    def resolve_package(self, name: str) -> Package:
        """
        Get the package for a dotted name, constructing it on first request.

        Args:
            name: Package name, e.g. com.example.shapes

        Returns:
            The cached Package for name

        Raises:
            InvalidPackageNameError: If name is not a valid package name
            PackageNotFoundError: If no search root contains the directory
        """
        NameValidator.validate_package_name(name)
        cached = self._packages.get(name)
        if cached is not None:
            return cached
        return self._build_package(name)

    def create_package(self, name: str) -> Package:
        """
        Construct a package directly, bypassing the cache lookup.

        Raises:
            DuplicatePackageError: If a package with this name already exists
        """
        NameValidator.validate_package_name(name)
        if name in self._packages:
            raise DuplicatePackageError(f"Package {name} already exists")
        return self._build_package(name)

    def _build_package(self, name: str) -> Package:
        segments = name.split(".")
        try:
            root, path = self.search_roots.locate(segments)
        except NotFoundError as e:
            raise PackageNotFoundError(f"Could not find directory for package {name}") from e

        simple_name = segments.pop()
        parent = self.resolve_package(".".join(segments)) if segments else None

        package = Package(name=simple_name, parent=parent, path=path, root=root, registry=self)
        self._packages[name] = package
        logger.debug(f"Resolved package {name} -> {path}")
        return package

    @property
    def default_package(self) -> Package:
        """The unnamed package, rooted at the first search root."""
        package = self._packages.get("")
        if package is None:
            root = self.search_roots.first
            package = Package(name="", parent=None, path=root, root=root, registry=self)
            self._packages[""] = package
        return package

    def resolve_class(self, name: str) -> JavaClass:
        """
        Get a handle to the class for a dotted name.

        Args:
            name: Class name, e.g. com.example.shapes.Circle or Circle

        Returns:
            A new JavaClass (classes are not cached)

        Raises:
            InvalidClassNameError: If name is not a valid class name
            PackageNotFoundError: If the owning package cannot be found
            SourceNotFoundError: If the package has no matching source file
        """
        NameValidator.validate_class_name(name)
        prefix, simple_name = NameValidator.split(name)
        package = self.resolve_package(".".join(prefix)) if prefix else self.default_package

        source_path = package.path / f"{simple_name}{SOURCE_EXTENSION}"
        if not source_path.is_file():
            raise SourceNotFoundError(f"Location not found for class {name}: {source_path}")

        return JavaClass(name=simple_name, package=package, source_path=source_path)

    def resolve_member(self, name: str) -> Member:
        """
        Resolve a dotted name to a package or a class, depending on its format.

        Raises:
            InvalidNameError: If name matches neither grammar
        """
        kind = NameValidator.classify(name)
        if kind is NameKind.CLASS:
            return self.resolve_class(name)
        return self.resolve_package(name)

    def try_resolve(self, name: str) -> Tuple[Optional[Member], Optional[JavaHeadError]]:
        """
        Resolve a member without raising.

        Returns:
            (entity, None) on success, (None, error) on failure
        """
        try:
            return self.resolve_member(name), None
        except JavaHeadError as e:
            return None, e

    def packages(self) -> List[Package]:
        """All packages resolved so far, sorted by full name."""
        return sorted(self._packages.values(), key=lambda p: p.full_name)

    def __contains__(self, name: object) -> bool:
        return name in self._packages

    def stats(self) -> Dict[str, int]:
        """Get registry statistics."""
        return {
            "packages": len(self._packages),
            "search_roots": len(self.search_roots),
        }
