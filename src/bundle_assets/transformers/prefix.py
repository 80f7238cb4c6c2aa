"""Reversible prefix rewriting between file paths and URLs."""

from ..exceptions import InvalidArgumentError, OutOfRangeError
from ..util import strip_prefix
from .base import PathTransformer


class PrefixTransformer(PathTransformer):
    """Rewrites path prefixes to URL prefixes, reversibly.

    Each definition pairs a path prefix with a URL prefix. Neither side may
    be shared by two definitions, which is what makes every transformation
    reversible. Lookups take the first definition (in registration order)
    whose prefix matches.

    Matching is a plain string prefix test, so prefixes should end on a
    natural boundary: with 'assets' defined, 'assets2/app.js' matches too.

    Example:
        >>> transformer = PrefixTransformer()
        >>> transformer.define('sprinkles/core/assets/', 'core/')
        >>> transformer.path_to_url('sprinkles/core/assets/js/app.js')
        'core/js/app.js'
        >>> transformer.url_to_path('core/js/app.js')
        'sprinkles/core/assets/js/app.js'
    """

    def __init__(self) -> None:
        # path prefix -> url prefix, in registration order
        self._definitions: dict[str, str] = {}

    @property
    def definitions(self) -> dict[str, str]:
        """Copy of the registered path prefix -> URL prefix pairs."""
        return dict(self._definitions)

    def define(self, path_prefix: str, url_prefix: str) -> None:
        """Define a reversible prefix transformation.

        Args:
            path_prefix: The file path prefix
            url_prefix: The URL prefix

        Raises:
            InvalidArgumentError: If either prefix is not a string, or either
                side already belongs to another definition
        """
        if not isinstance(path_prefix, str):
            raise InvalidArgumentError(
                f"Path prefix must be a string (currently: {type(path_prefix).__name__})."
            )

        if not isinstance(url_prefix, str):
            raise InvalidArgumentError(
                f"URL prefix must be a string (currently: {type(url_prefix).__name__})."
            )

        if path_prefix in self._definitions:
            raise InvalidArgumentError(
                "Irreversible prefix transformation detected. "
                f"Provided path prefix '{path_prefix}' already has a transformation definition."
            )

        if url_prefix in self._definitions.values():
            raise InvalidArgumentError(
                "Irreversible prefix transformation detected. "
                f"Provided URL prefix '{url_prefix}' already has a transformation definition."
            )

        self._definitions[path_prefix] = url_prefix

    def path_to_url(self, relative_path: str) -> str:
        path_prefix, url_prefix = self._get_transformation(relative_path, match_path=True)
        return url_prefix + strip_prefix(relative_path, path_prefix)

    def url_to_path(self, relative_url: str) -> str:
        path_prefix, url_prefix = self._get_transformation(relative_url, match_path=False)
        return path_prefix + strip_prefix(relative_url, url_prefix)

    def _get_transformation(self, subject: str, match_path: bool) -> tuple[str, str]:
        """Return the first definition whose path (or URL) prefix starts subject.

        Raises:
            OutOfRangeError: If no definition matches
        """
        for path_prefix, url_prefix in self._definitions.items():
            prefix = path_prefix if match_path else url_prefix
            if subject.startswith(prefix):
                return path_prefix, url_prefix
        raise OutOfRangeError(f"No prefix transformation pair matched '{subject}'.")
