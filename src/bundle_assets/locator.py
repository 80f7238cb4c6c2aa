"""Virtual filesystem lookup for stream URIs.

A stream URI such as 'assets://vendor/lib.js' names a file relative to a
scheme. Each scheme (and optionally a path prefix within it) is bound to
an ordered list of real directories; a lookup returns the first directory
that actually contains the file. Registering several directories under one
scheme lets later layers (sprinkles, themes, plugins) act as fallbacks.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, runtime_checkable

from .exceptions import InvalidArgumentError, InvalidStreamPathError
from .util import normalize_path, validate_path_safety

logger = logging.getLogger(__name__)

SCHEME_SEPARATOR = "://"


@runtime_checkable
class ResourceLocator(Protocol):
    """Protocol for anything that can resolve stream URIs to files.

    The asset facade and URL builders only need these two calls, so any
    object providing them can stand in for UniformResourceLocator.
    """

    def resolve(self, uri: str) -> str | None:
        """Return the absolute path of the first match, or None."""
        ...

    def resolve_relative(self, uri: str) -> str | None:
        """Return the first match relative to the locator base, or None."""
        ...


def split_stream_uri(uri: str) -> tuple[str, str]:
    """Split 'scheme://path' into ('scheme', 'path').

    Raises:
        InvalidStreamPathError: If uri has no '://' separator or an empty scheme
    """
    scheme, separator, path = uri.partition(SCHEME_SEPARATOR)
    if not separator or not scheme:
        raise InvalidStreamPathError(f"Invalid stream path given: '{uri}'.")
    return scheme, path


@dataclass
class _Root:
    """One directory bound to a scheme prefix."""

    prefix: str
    path: Path


@dataclass
class UniformResourceLocator:
    """Filesystem implementation of ResourceLocator.

    Directories are given relative to base_path (or absolute). Prefixes are
    matched on whole path segments, longest first; within a prefix, directories
    are tried in the order they were added.

    Example:
        >>> locator = UniformResourceLocator(Path('/srv/app'))
        >>> locator.add_path('assets', '', ['sprinkles/site/assets', 'sprinkles/core/assets'])
        >>> locator.add_path('assets', 'vendor', 'node_modules')
        >>> locator.resolve_relative('assets://js/app.js')
        'sprinkles/core/assets/js/app.js'
    """

    base_path: Path
    _schemes: dict[str, list[_Root]] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self.base_path = Path(self.base_path).resolve()

    def add_path(self, scheme: str, prefix: str, paths: str | Path | list[str | Path]) -> None:
        """Bind one or more directories to 'scheme://prefix'.

        Args:
            scheme: Scheme name without '://', e.g. 'assets'
            prefix: Path prefix within the scheme ('' for the whole scheme)
            paths: Directory or ordered list of directories

        Raises:
            InvalidArgumentError: If scheme is empty
        """
        if not isinstance(scheme, str) or not scheme:
            raise InvalidArgumentError("Scheme must be a non-empty string.")

        normalized_prefix = normalize_path(prefix)
        if normalized_prefix is None:
            raise InvalidArgumentError(f"Prefix '{prefix}' escapes the scheme root.")

        if isinstance(paths, (str, Path)):
            paths = [paths]

        roots = self._schemes.setdefault(scheme, [])
        for path in paths:
            directory = Path(path)
            if not directory.is_absolute():
                directory = self.base_path / directory
            directory = directory.resolve()
            roots.append(_Root(prefix=normalized_prefix, path=directory))
            logger.debug("Bound %s://%s to %s", scheme, normalized_prefix, directory)

    def get_base(self) -> Path:
        """Return the directory relative paths are reported against."""
        return self.base_path

    def list_schemes(self) -> list[str]:
        """List registered scheme names in registration order."""
        return list(self._schemes.keys())

    def is_stream(self, uri: str) -> bool:
        """Check whether uri uses a registered scheme."""
        scheme, separator, _ = uri.partition(SCHEME_SEPARATOR)
        return bool(separator) and scheme in self._schemes

    def resolve(self, uri: str) -> str | None:
        """Return the absolute path of the first existing match, or None."""
        candidates = self._find(uri, first_only=True)
        return str(candidates[0]) if candidates else None

    def resolve_relative(self, uri: str) -> str | None:
        """Return the first existing match relative to the base path, or None.

        Matches outside the base path are returned as absolute paths.
        """
        candidates = self._find(uri, first_only=True)
        return self._relative(candidates[0]) if candidates else None

    def resolve_all(self, uri: str) -> list[str]:
        """Return every existing match in precedence order, as absolute paths."""
        return [str(candidate) for candidate in self._find(uri, first_only=False)]

    def _relative(self, path: Path) -> str:
        if path.is_relative_to(self.base_path):
            return path.relative_to(self.base_path).as_posix()
        return path.as_posix()

    def _find(self, uri: str, first_only: bool) -> list[Path]:
        scheme, raw_path = split_stream_uri(uri)
        roots = self._schemes.get(scheme)
        if not roots:
            return []

        path = normalize_path(raw_path)
        if path is None:
            logger.debug("Rejected %s: path escapes scheme root", uri)
            return []

        found: list[Path] = []
        for root in sorted(roots, key=lambda r: len(r.prefix), reverse=True):
            remainder = self._match_prefix(path, root.prefix)
            if remainder is None:
                continue

            candidate = root.path / remainder if remainder else root.path
            if not candidate.exists():
                continue

            try:
                validate_path_safety(candidate, root.path)
            except ValueError:
                # Symlink pointing outside its root
                logger.debug("Rejected %s: %s escapes %s", uri, candidate, root.path)
                continue

            logger.debug("Resolved %s to %s", uri, candidate)
            found.append(candidate)
            if first_only:
                break
        return found

    @staticmethod
    def _match_prefix(path: str, prefix: str) -> str | None:
        if not prefix:
            return path
        if path == prefix:
            return ""
        if path.startswith(prefix + "/"):
            return path[len(prefix) + 1:]
        return None
