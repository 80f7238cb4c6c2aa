"""Bundle format registry for factory-based manifest loading.

This module provides a central registry of bundle manifest formats,
so callers (the CLI in particular) can load a manifest by format name
without importing the adapter classes themselves.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from .bundles.base import AssetBundles


class BundlesRegistry:
    """Central registry for bundle manifest factories.

    Formats register themselves when the bundles package is imported.
    Third-party bundler adapters can register additional formats.
    """

    _factories: dict[str, Callable[..., "AssetBundles"]] = {}

    @classmethod
    def register_factory(cls, name: str, factory: Callable[..., "AssetBundles"]) -> None:
        """Register a factory function for a manifest format.

        Args:
            name: Name of the format (e.g., 'gulp-raw', 'gulp-compiled')
            factory: Callable taking a manifest path and returning AssetBundles

        Example:
            >>> BundlesRegistry.register_factory('webpack', WebpackManifestBundles)
        """
        cls._factories[name] = factory

    @classmethod
    def create(cls, format_name: str, path: str | Path, **kwargs) -> "AssetBundles":
        """Load a manifest using a registered format.

        Args:
            format_name: Name of the registered format
            path: Path to the manifest file
            **kwargs: Additional arguments passed to the factory

        Returns:
            AssetBundles parsed from the manifest

        Raises:
            ValueError: If format_name is not registered

        Example:
            >>> bundles = BundlesRegistry.create('gulp-raw', 'bundle.config.json')
        """
        if format_name not in cls._factories:
            available = ', '.join(cls._factories.keys()) or 'none'
            raise ValueError(
                f"Unknown bundle format: '{format_name}'. Available formats: {available}"
            )

        return cls._factories[format_name](path, **kwargs)

    @classmethod
    def list_formats(cls) -> list[str]:
        """List all registered format names.

        Example:
            >>> BundlesRegistry.list_formats()
            ['gulp-raw', 'gulp-compiled']
        """
        return list(cls._factories.keys())
