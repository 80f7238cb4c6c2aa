"""Base abstractions for bundle manifest adapters.

This module defines the interface every asset bundling system adapter must
implement so the Assets facade can aggregate bundles from several manifests.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from ..exceptions import BundleNotFoundError


class AssetBundles(ABC):
    """Abstract base class for a collection of asset bundles.

    Implementations parse a manifest in some bundler's format. The facade
    works with any implementation without knowing the format.
    """

    @abstractmethod
    def get_css_bundle_assets(self, bundle_name: str) -> list[str]:
        """Get asset paths in the specified CSS bundle.

        Args:
            bundle_name: Name of the bundle

        Returns:
            Asset paths relative to the locator scheme, in declaration order

        Raises:
            BundleNotFoundError: If the bundle is not defined here
        """
        pass

    @abstractmethod
    def get_js_bundle_assets(self, bundle_name: str) -> list[str]:
        """Get asset paths in the specified JS bundle.

        Args:
            bundle_name: Name of the bundle

        Returns:
            Asset paths relative to the locator scheme, in declaration order

        Raises:
            BundleNotFoundError: If the bundle is not defined here
        """
        pass


class GulpBundleAssetsBundles(AssetBundles):
    """Bundles loaded from a gulp-bundle-assets file.

    Subclasses read their manifest once, in __init__, filling css_bundles
    and js_bundles.

    Attributes:
        path: Manifest the bundles were read from
        css_bundles: Bundle name -> ordered CSS asset paths
        js_bundles: Bundle name -> ordered JS asset paths
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.css_bundles: dict[str, list[str]] = {}
        self.js_bundles: dict[str, list[str]] = {}

    def get_css_bundle_assets(self, bundle_name: str) -> list[str]:
        if bundle_name not in self.css_bundles:
            raise BundleNotFoundError(f"CSS asset bundle '{bundle_name}' does not exist.", bundle_name)
        return list(self.css_bundles[bundle_name])

    def get_js_bundle_assets(self, bundle_name: str) -> list[str]:
        if bundle_name not in self.js_bundles:
            raise BundleNotFoundError(f"JS asset bundle '{bundle_name}' does not exist.", bundle_name)
        return list(self.js_bundles[bundle_name])

    def bundle_names(self) -> list[str]:
        """List every bundle name defining CSS or JS assets."""
        names = dict.fromkeys(self.css_bundles)
        names.update(dict.fromkeys(self.js_bundles))
        return list(names)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r})"
