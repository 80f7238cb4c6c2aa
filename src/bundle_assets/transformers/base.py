"""Base path transformer class.

This module defines the interface for transformers that rewrite relative
file paths into more URL friendly forms and back again.
"""

from abc import ABC, abstractmethod


class PathTransformer(ABC):
    """Abstract base class for reversible path transformations.

    Typically used in development scenarios together with the dev asset
    server, to produce readable and debuggable asset URLs while still being
    able to map a requested URL back to the file it came from.
    """

    @abstractmethod
    def path_to_url(self, relative_path: str) -> str:
        """Transform a relative file path into its URL form.

        Args:
            relative_path: Path relative to the locator scheme

        Returns:
            The relative URL

        Raises:
            OutOfRangeError: If the transformer cannot handle the path
        """
        pass

    @abstractmethod
    def url_to_path(self, relative_url: str) -> str:
        """Revert the transformation applied by path_to_url.

        Args:
            relative_url: Relative URL previously produced by path_to_url

        Returns:
            The original relative file path

        Raises:
            OutOfRangeError: If the transformer cannot handle the URL
        """
        pass
