"""Asset bundle schema: named bundles of CSS and JS assets, rendered as tags.

An AssetBundleSchema is filled from one or more gulp-bundle-assets manifests
at startup. When several manifests define the same bundle name, the bundle's
'options.sprinkle.onCollision' setting decides what happens.
"""

import html
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator

from .core.manifest import (
    compiled_bundle_definitions,
    declaration_source,
    raw_bundle_definitions,
    read_manifest,
    require_definition_object,
)
from .core.types import CollisionPolicy
from .exceptions import BundleCollisionError, BundleNotFoundError, InvalidBundlesFileError
from .url_builders import AssetUrlBuilder
from .util import type_name

logger = logging.getLogger(__name__)

SCRIPT_FLAGS = ("async", "defer")
SCRIPT_ATTRIBUTES = ("id", "type")
STYLE_ATTRIBUTES = ("id", "media")


@dataclass(frozen=True)
class Asset:
    """A single asset reference (JS file, CSS file, ...).

    Attributes:
        path: Path relative to the assets root, leading slashes removed
        declaration_source: '<manifest> [<bundle>]' string for error messages
        options: Tag attributes declared alongside the asset in its manifest
    """

    path: str
    declaration_source: str = ""
    options: dict[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", self.path.lstrip("/\\"))


def _attribute(name: str, value: Any) -> str:
    return f'{name}="{html.escape(str(value), quote=True)}"'


class AssetBundle:
    """A named bundle holding ordered CSS and JS assets.

    Order matters: tags are emitted in insertion order, which is the order
    the browser loads and executes them.
    """

    def __init__(self, name: str, url_builder: AssetUrlBuilder):
        self.name = name
        self.url_builder = url_builder
        self.css_assets: list[Asset] = []
        self.js_assets: list[Asset] = []

    def add_css_asset(self, asset: Asset) -> None:
        self.css_assets.append(asset)

    def add_javascript_asset(self, asset: Asset) -> None:
        self.js_assets.append(asset)

    def get_asset_url(self, asset: Asset) -> str:
        """Resolve an asset to its absolute URL.

        Raises:
            AssetNotFoundError: If the URL builder cannot find the asset
        """
        return self.url_builder.get_asset_url(asset.path, asset.declaration_source or None)

    def render_script(self, asset: Asset, options: dict[str, Any] | None = None) -> str:
        """Render an asset as a <script> tag.

        Options are merged over the asset's own options. 'async' and 'defer'
        are emitted as bare words when truthy; 'id' and 'type' as attributes.
        """
        options = {**asset.options, **(options or {})}

        attributes = [_attribute("src", self.get_asset_url(asset))]
        attributes.extend(flag for flag in SCRIPT_FLAGS if options.get(flag))
        attributes.extend(
            _attribute(name, options[name]) for name in SCRIPT_ATTRIBUTES if options.get(name) is not None
        )

        return f"<script {' '.join(attributes)}></script>"

    def render_scripts(self, options: dict[str, Any] | None = None) -> str:
        """Generate <script> tags for every JS asset, separated by newlines."""
        return "\n".join(self.render_script(asset, options) for asset in self.js_assets)

    def render_style(self, asset: Asset, options: dict[str, Any] | None = None) -> str:
        """Render an asset as a CSS <link> tag.

        'rel' defaults to 'stylesheet' and 'type' to 'text/css'; 'id' and
        'media' are added when given.
        """
        options = {**asset.options, **(options or {})}

        attributes = [
            _attribute("rel", options.get("rel") or "stylesheet"),
            _attribute("type", options.get("type") or "text/css"),
            _attribute("href", self.get_asset_url(asset)),
        ]
        attributes.extend(
            _attribute(name, options[name]) for name in STYLE_ATTRIBUTES if options.get(name) is not None
        )

        return f"<link {' '.join(attributes)}>"

    def render_styles(self, options: dict[str, Any] | None = None) -> str:
        """Generate <link> tags for every CSS asset, separated by newlines."""
        return "\n".join(self.render_style(asset, options) for asset in self.css_assets)

    def __repr__(self) -> str:
        return f"AssetBundle({self.name!r}, css={len(self.css_assets)}, js={len(self.js_assets)})"


class AssetBundleSchema:
    """Registry of named asset bundles loaded from manifest files.

    At most one AssetBundle exists per name. Loading a manifest that
    redefines a bundle applies that bundle's collision policy:

    - replace (default): discard the existing bundle and start fresh
    - merge: append the new assets to the existing bundle
    - ignore: keep the existing bundle, drop the new definition
    - error: raise BundleCollisionError

    Example:
        >>> schema = AssetBundleSchema(CompiledAssetUrlBuilder('https://example.com/assets'))
        >>> schema.load_compiled_schema_file('bundle.result.json')
        >>> print(schema.get('js/main').render_scripts())
        <script src="https://example.com/assets/js/main-930fa5c1ee.js"></script>
    """

    def __init__(self, url_builder: AssetUrlBuilder):
        self.url_builder = url_builder
        self._bundles: dict[str, AssetBundle] = {}

    def get(self, name: str) -> AssetBundle:
        """Get a bundle by name.

        Raises:
            BundleNotFoundError: If no loaded manifest defines the bundle
        """
        if name not in self._bundles:
            raise BundleNotFoundError(f"Bundle '{name}' not found in loaded bundles.", name)
        return self._bundles[name]

    def names(self) -> list[str]:
        return list(self._bundles)

    def __contains__(self, name: object) -> bool:
        return name in self._bundles

    def __len__(self) -> int:
        return len(self._bundles)

    def __iter__(self) -> Iterator[AssetBundle]:
        return iter(self._bundles.values())

    def load_raw_schema_file(self, path: str | Path) -> None:
        """Load bundles from a gulp-bundle-assets configuration file.

        Raises:
            AssetNotFoundError: If the file cannot be found
            ManifestJsonError: If the file cannot be parsed as JSON
            InvalidBundlesFileError: If a bundle definition is malformed
            ConfigurationError: On an unknown or 'error' collision policy
        """
        document = read_manifest(path)
        self._load_bundles(raw_bundle_definitions(document, path), path)

    def load_compiled_schema_file(self, path: str | Path) -> None:
        """Load bundles from a gulp-bundle-assets results file.

        Raises:
            AssetNotFoundError: If the file cannot be found
            ManifestJsonError: If the file cannot be parsed as JSON
            InvalidBundlesFileError: If a bundle definition is malformed
            ConfigurationError: On an unknown or 'error' collision policy
        """
        document = read_manifest(path)
        self._load_bundles(compiled_bundle_definitions(document, path), path)

    def _load_bundles(self, definitions: dict[str, Any], path: str | Path) -> None:
        # Parse everything first so a malformed manifest leaves the schema untouched
        parsed = []
        for bundle_name, definition in definitions.items():
            definition = require_definition_object(definition, bundle_name, path)
            scripts = self._assets(definition, "scripts", bundle_name, path)
            styles = self._assets(definition, "styles", bundle_name, path)
            parsed.append((bundle_name, definition, scripts, styles))

        bundles = dict(self._bundles)
        for bundle_name, definition, scripts, styles in parsed:
            source = declaration_source(path, bundle_name)
            existing = bundles.get(bundle_name)
            bundle = AssetBundle(bundle_name, self.url_builder)

            if existing is not None:
                policy = CollisionPolicy.from_definition(definition, bundle_name)
                if policy is CollisionPolicy.REPLACE:
                    logger.info("Bundle '%s' replaced by %s", bundle_name, source)
                elif policy is CollisionPolicy.IGNORE:
                    logger.info("Bundle '%s' already defined, ignoring %s", bundle_name, source)
                    continue
                elif policy is CollisionPolicy.ERROR:
                    raise BundleCollisionError(
                        f"The bundle '{bundle_name}' is already defined. Redefined in '{source}'.",
                        bundle_name,
                        declaration_source=source,
                    )
                else:
                    logger.debug("Merging %s into bundle '%s'", source, bundle_name)
                    bundle.js_assets.extend(existing.js_assets)
                    bundle.css_assets.extend(existing.css_assets)

            for asset in scripts:
                bundle.add_javascript_asset(asset)
            for asset in styles:
                bundle.add_css_asset(asset)
            bundles[bundle_name] = bundle

        self._bundles = bundles

    @staticmethod
    def _assets(definition: dict[str, Any], field_name: str, bundle_name: str, path: str | Path) -> list[Asset]:
        """Convert a 'scripts' or 'styles' field into Assets.

        Accepts a string, an object with a string 'src', or a list of either.
        """
        value = definition.get(field_name)
        if value is None:
            return []

        entries = value if isinstance(value, list) else [value]
        source = declaration_source(path, bundle_name)

        assets = []
        for entry in entries:
            if isinstance(entry, str):
                assets.append(Asset(entry, source))
            elif isinstance(entry, dict) and isinstance(entry.get("src"), str):
                options = {key: option for key, option in entry.items() if key != "src"}
                assets.append(Asset(entry["src"], source, options))
            else:
                raise InvalidBundlesFileError(
                    f"Expected {field_name} entry for '{bundle_name}' to be a string or an object "
                    f"with a 'src' string but was {type_name(entry)}. For '{path}'",
                    path=str(path),
                    bundle_name=bundle_name,
                    field=field_name,
                    expected="string or {src: string}",
                    actual=type_name(entry),
                )
        return assets
