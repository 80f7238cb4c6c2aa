"""Absolute URL construction for individual assets.

Two builders are provided: one that checks the layered filesystem for the
highest-priority copy of an asset (raw assets during development), and one
that trusts the path it is given (compiled assets, whose existence was
verified by the build step that wrote the manifest).
"""

import logging
from abc import ABC, abstractmethod

from .exceptions import AssetNotFoundError
from .locator import ResourceLocator
from .util import strip_prefix


def normalize_base_url(base_url: str) -> str:
    """Ensure a base URL ends with exactly one slash."""
    return base_url.rstrip("/") + "/"


class AssetUrlBuilder(ABC):
    """Abstract base class for asset URL builders.

    Attributes:
        scheme: Locator scheme the builder looks assets up under, or None
            if it accepts paths without checking them
    """

    scheme: str | None = None

    @abstractmethod
    def get_asset_url(self, path: str, declaration_source: str | None = None) -> str:
        """Generate the absolute URL of an asset.

        Args:
            path: Asset path relative to the assets root
            declaration_source: Optional '<manifest> [<bundle>]' string used
                in error messages

        Returns:
            Fully qualified URL for the asset

        Raises:
            AssetNotFoundError: If the builder checks existence and the asset is missing
        """
        pass


class LocatorAssetUrlBuilder(AssetUrlBuilder):
    """Builds URLs from the highest-priority match in a locator scheme.

    The locator reports which root satisfied the lookup (e.g.
    'sprinkles/core/assets/js/app.js'); remove_prefix is stripped from that
    relative path before base_url is prepended.

    Example:
        >>> builder = LocatorAssetUrlBuilder(locator, 'https://example.com/assets-raw', 'sprinkles')
        >>> builder.get_asset_url('js/app.js')
        'https://example.com/assets-raw/core/assets/js/app.js'
    """

    def __init__(
        self,
        locator: ResourceLocator,
        base_url: str,
        remove_prefix: str = "",
        scheme: str = "assets",
        logger: logging.Logger | None = None,
    ):
        """Initialize the builder.

        Args:
            locator: Locator used to search for asset files
            base_url: Base URL for assets, e.g. https://example.com/assets-raw/
            remove_prefix: Prefix to remove from the matched relative path
            scheme: Locator scheme to search under
            logger: Optional logger for diagnostic messages
        """
        self.locator = locator
        self.base_url = normalize_base_url(base_url)
        self.remove_prefix = remove_prefix.rstrip("/\\") + "/" if remove_prefix else ""
        self.scheme = scheme
        self.logger = logger or logging.getLogger(__name__)

    def get_asset_url(self, path: str, declaration_source: str | None = None) -> str:
        relative_path = self.locator.resolve_relative(f"{self.scheme}://{path}")

        if not relative_path:
            message = f"The asset '{path}' could not be found."
            if declaration_source:
                message += f" Referenced in '{declaration_source}'."
            raise AssetNotFoundError(message, path=path, declaration_source=declaration_source)

        self.logger.debug("Stripping '%s' from '%s'", self.remove_prefix, relative_path)
        return self.base_url + strip_prefix(relative_path, self.remove_prefix)


class CompiledAssetUrlBuilder(AssetUrlBuilder):
    """Builds URLs by concatenating the base URL and the asset path."""

    def __init__(self, base_url: str):
        self.base_url = normalize_base_url(base_url)

    def get_asset_url(self, path: str, declaration_source: str | None = None) -> str:
        return self.base_url + path.lstrip("/\\")
