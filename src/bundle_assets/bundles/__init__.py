"""Bundle manifest adapters.

This package contains the AssetBundles interface and the
gulp-bundle-assets implementations. The gulp formats register
themselves with BundlesRegistry when imported.
"""

from pathlib import Path

from ..registry import BundlesRegistry
from .base import AssetBundles, GulpBundleAssetsBundles
from .gulp import GulpBundleAssetsCompiledBundles, GulpBundleAssetsRawBundles, standardise_bundle


def _create_raw_bundles(path: str | Path, **kwargs) -> GulpBundleAssetsRawBundles:
    """Factory for bundle.config.json manifests."""
    return GulpBundleAssetsRawBundles(path)


def _create_compiled_bundles(path: str | Path, **kwargs) -> GulpBundleAssetsCompiledBundles:
    """Factory for bundle.result.json manifests."""
    return GulpBundleAssetsCompiledBundles(path)


# Auto-register at module import
BundlesRegistry.register_factory('gulp-raw', _create_raw_bundles)
BundlesRegistry.register_factory('gulp-compiled', _create_compiled_bundles)

__all__ = [
    "AssetBundles",
    "GulpBundleAssetsBundles",
    "GulpBundleAssetsCompiledBundles",
    "GulpBundleAssetsRawBundles",
    "standardise_bundle",
]
