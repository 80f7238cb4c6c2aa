"""gulp-bundle-assets manifest adapters.

Two manifest shapes are supported:

- bundle.config.json (raw): the build configuration, listing the source
  files of every bundle under a top-level 'bundle' key. Used in development,
  where each source file is served individually.
- bundle.result.json (compiled): the build results, naming the single
  fingerprinted output file of every bundle. Used in production.
"""

import logging
from pathlib import Path
from typing import Any

from ..core.manifest import (
    compiled_bundle_definitions,
    raw_bundle_definitions,
    read_manifest,
    require_definition_object,
)
from ..exceptions import InvalidBundlesFileError
from ..util import type_name
from .base import GulpBundleAssetsBundles

logger = logging.getLogger(__name__)

# Manifest field -> attribute holding that asset type's bundles
ASSET_FIELDS = {
    "styles": "css_bundles",
    "scripts": "js_bundles",
}


def standardise_bundle(value: Any) -> list[str]:
    """Normalise a 'string or list of strings' field into a list.

    Args:
        value: Decoded field value

    Returns:
        List of asset paths

    Raises:
        TypeError: If value is neither a string nor a list of strings
    """
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        for asset in value:
            if not isinstance(asset, str):
                raise TypeError(f"Input was array, so string expected but encountered {type_name(asset)}")
        return list(value)
    raise TypeError(f"Expected string or string[] but input was {type_name(value)}")


class GulpBundleAssetsRawBundles(GulpBundleAssetsBundles):
    """Bundles read from a gulp-bundle-assets configuration file.

    Only the 'styles' and 'scripts' lists are understood; advanced
    gulp-bundle-assets options (pre-minified variants, transforms, ...)
    are ignored.

    Example:
        >>> bundles = GulpBundleAssetsRawBundles('bundle.config.json')
        >>> bundles.get_js_bundle_assets('js/main')
        ['vendor/jquery/dist/jquery.js', 'js/app.js']
    """

    def __init__(self, path: str | Path):
        """Read and parse the configuration file.

        Raises:
            AssetNotFoundError: If the file cannot be found
            ManifestJsonError: If the file cannot be parsed as JSON
            InvalidBundlesFileError: If a bundle field has an unexpected type
        """
        super().__init__(path)

        document = read_manifest(self.path)
        for bundle_name, definition in raw_bundle_definitions(document, self.path).items():
            definition = require_definition_object(definition, bundle_name, self.path)

            for field, attribute in ASSET_FIELDS.items():
                value = definition.get(field)
                if value is None:
                    continue
                try:
                    getattr(self, attribute)[bundle_name] = standardise_bundle(value)
                except TypeError as e:
                    raise InvalidBundlesFileError(
                        f"Encountered issue processing {field} property for '{bundle_name}' "
                        f"for file '{self.path}': {e}",
                        path=str(self.path),
                        bundle_name=bundle_name,
                        field=field,
                        expected="string or string[]",
                        actual=type_name(value),
                    ) from e

        logger.debug("Loaded %d raw bundles from %s", len(self.bundle_names()), self.path)


class GulpBundleAssetsCompiledBundles(GulpBundleAssetsBundles):
    """Bundles read from a gulp-bundle-assets results file.

    Example:
        >>> bundles = GulpBundleAssetsCompiledBundles('bundle.result.json')
        >>> bundles.get_css_bundle_assets('css/main')
        ['css/main-930fa5c1ee.css']
    """

    def __init__(self, path: str | Path):
        """Read and parse the results file.

        Raises:
            AssetNotFoundError: If the file cannot be found
            ManifestJsonError: If the file cannot be parsed as JSON
            InvalidBundlesFileError: If a bundle field is not a string
        """
        super().__init__(path)

        document = read_manifest(self.path)
        for bundle_name, definition in compiled_bundle_definitions(document, self.path).items():
            definition = require_definition_object(definition, bundle_name, self.path)

            for field, attribute in ASSET_FIELDS.items():
                value = definition.get(field)
                if value is None:
                    continue
                if not isinstance(value, str):
                    raise InvalidBundlesFileError(
                        f"Expected {field} property for '{bundle_name}' to be of type string "
                        f"but was {type_name(value)}. For '{self.path}'",
                        path=str(self.path),
                        bundle_name=bundle_name,
                        field=field,
                        expected="string",
                        actual=type_name(value),
                    )
                getattr(self, attribute).setdefault(bundle_name, []).append(value)

        logger.debug("Loaded %d compiled bundles from %s", len(self.bundle_names()), self.path)
