"""Bundle Assets - asset indirection for gulp-bundle-assets manifests.

This package resolves logical asset references, declared in bundle manifests
produced by a front-end build, to absolute URLs or HTML tags, and can serve
the underlying files during development.
"""

# Core library interface
from .assets import Assets
from .bundles import (
    AssetBundles,
    GulpBundleAssetsBundles,
    GulpBundleAssetsCompiledBundles,
    GulpBundleAssetsRawBundles,
)
from .locator import ResourceLocator, UniformResourceLocator
from .registry import BundlesRegistry
from .schema import Asset, AssetBundle, AssetBundleSchema
from .transformers import PathTransformer, PrefixTransformer
from .url_builders import AssetUrlBuilder, CompiledAssetUrlBuilder, LocatorAssetUrlBuilder

# Rendering and serving
from .loader import AssetLoader
from .manager import AssetManager, AssetsTemplatePlugin
from .serve import AssetResponse, AssetServer, serve_asset

# Core utilities
from .core import CollisionPolicy, read_manifest, validate_manifest, validate_manifest_with_error_details
from .exceptions import (
    AssetNotFoundError,
    AssetsError,
    BundleCollisionError,
    BundleNotFoundError,
    ConfigurationError,
    InvalidArgumentError,
    InvalidBundlesFileError,
    InvalidStreamPathError,
    ManifestJsonError,
    OutOfRangeError,
)

__version__ = "0.1.0"

__all__ = [
    # Primary library interface
    "Assets",
    "AssetBundles",
    "GulpBundleAssetsBundles",
    "GulpBundleAssetsCompiledBundles",
    "GulpBundleAssetsRawBundles",
    "BundlesRegistry",
    "ResourceLocator",
    "UniformResourceLocator",
    "PathTransformer",
    "PrefixTransformer",
    "AssetUrlBuilder",
    "CompiledAssetUrlBuilder",
    "LocatorAssetUrlBuilder",
    "Asset",
    "AssetBundle",
    "AssetBundleSchema",
    # Rendering and serving
    "AssetLoader",
    "AssetManager",
    "AssetsTemplatePlugin",
    "AssetResponse",
    "AssetServer",
    "serve_asset",
    # Core utilities
    "CollisionPolicy",
    "read_manifest",
    "validate_manifest",
    "validate_manifest_with_error_details",
    # Errors
    "AssetsError",
    "AssetNotFoundError",
    "BundleCollisionError",
    "BundleNotFoundError",
    "ConfigurationError",
    "InvalidArgumentError",
    "InvalidBundlesFileError",
    "InvalidStreamPathError",
    "ManifestJsonError",
    "OutOfRangeError",
]
