"""Template helpers for linking assets from HTML templates.

Two flavours exist. AssetsTemplatePlugin renders from the Assets facade
(bundles aggregated across manifests, URLs through the locator).
AssetManager renders from an AssetBundleSchema, where each asset may carry
its own tag attributes from the manifest.

Both expose js(), css() and url(), so either can be handed to a template
engine as a global (e.g. Jinja2 `env.globals['assets'] = plugin`).
"""

import html
from collections.abc import Mapping
from typing import Any

from .assets import ABSOLUTE_URL_SCHEMES, Assets, StreamPath, split_stream_path
from .exceptions import InvalidStreamPathError
from .locator import SCHEME_SEPARATOR
from .schema import AssetBundleSchema
from .url_builders import AssetUrlBuilder


def convert_attributes(attributes: Mapping[str, Any]) -> str:
    """Convert attributes into an HTML attribute string.

    True values become bare words (async, defer); None and False are omitted.

    Example:
        >>> convert_attributes({'src': 'app.js', 'defer': True, 'id': None})
        'src="app.js" defer'
    """
    output = []
    for name, value in attributes.items():
        if value is None or value is False:
            continue
        if value is True:
            output.append(name)
        else:
            output.append(f'{name}="{html.escape(str(value), quote=True)}"')
    return " ".join(output)


def make_regular_tag(tag_name: str, attributes: Mapping[str, Any] | None = None, content: str = "") -> str:
    """Generate an opening/closing tag pair."""
    output = f"<{tag_name}"
    if attributes:
        output += " " + convert_attributes(attributes)
    return f"{output}>{content}</{tag_name}>"


def make_self_closing_tag(tag_name: str, attributes: Mapping[str, Any] | None = None, closing_slash: bool = True) -> str:
    """Generate a void tag such as <link />."""
    output = f"<{tag_name}"
    if attributes:
        output += " " + convert_attributes(attributes)
    return output + (" />" if closing_slash else ">")


class AssetsTemplatePlugin:
    """Template functions backed by the Assets facade.

    Example:
        >>> plugin = AssetsTemplatePlugin(assets)
        >>> plugin.js('js/main', {'defer': True})
        '<script src="https://cdn.example.com/js/app.js" defer></script>'
    """

    def __init__(self, assets: Assets):
        self.assets = assets

    def js(self, bundle_name: str = "js/main", attributes: Mapping[str, Any] | None = None) -> str:
        """Return <script> tags for every asset in a JS bundle.

        Raises:
            BundleNotFoundError: If the bundle is not defined
            AssetNotFoundError: If an asset cannot be resolved
        """
        return "".join(
            make_regular_tag("script", {"src": url, **(attributes or {})})
            for url in self.assets.get_js_bundle_assets(bundle_name)
        )

    def css(self, bundle_name: str = "css/main", attributes: Mapping[str, Any] | None = None) -> str:
        """Return <link> tags for every asset in a CSS bundle.

        Raises:
            BundleNotFoundError: If the bundle is not defined
            AssetNotFoundError: If an asset cannot be resolved
        """
        attributes = {"rel": "stylesheet", "type": "text/css", **(attributes or {})}
        return "".join(
            make_self_closing_tag("link", {"href": url, **attributes})
            for url in self.assets.get_css_bundle_assets(bundle_name)
        )

    def url(self, stream_path: StreamPath) -> str:
        """Return the URL of the asset named by a stream path.

        Args:
            stream_path: 'assets://path/to' or ('assets', 'path/to')
        """
        return self.assets.get_absolute_url(stream_path)


class AssetManager:
    """Template functions backed by an AssetBundleSchema.

    Handles rendering of asset reference tags (<link>, <script>) for
    bundles loaded into the schema.
    """

    def __init__(self, url_builder: AssetUrlBuilder, bundle_schema: AssetBundleSchema):
        self.url_builder = url_builder
        self.set_bundle_schema(bundle_schema)

    def set_bundle_schema(self, bundle_schema: AssetBundleSchema) -> None:
        """Swap the schema used for rendering.

        Replacing the whole schema object (rather than reloading the current
        one) keeps in-flight renders on a consistent set of bundles.
        """
        self.bundle_schema = bundle_schema

    def js(self, bundle_name: str = "js/main", options: dict[str, Any] | None = None) -> str:
        """Generate <script> tag(s) for the JS assets of a bundle."""
        return self.bundle_schema.get(bundle_name).render_scripts(options)

    def css(self, bundle_name: str = "css/main", options: dict[str, Any] | None = None) -> str:
        """Generate <link> tag(s) for the CSS assets of a bundle."""
        return self.bundle_schema.get(bundle_name).render_styles(options)

    def url(self, stream_path: StreamPath) -> str:
        """Get the absolute URL for an asset named by a stream path.

        http(s) URLs are returned unchanged. Any other scheme must be the one
        the URL builder resolves under (any scheme, for builders without one).

        Raises:
            InvalidStreamPathError: If stream_path is not 'scheme://path' or a
                pair, or names a scheme the URL builder does not serve
            AssetNotFoundError: If the URL builder cannot find the asset
        """
        scheme, path = split_stream_path(stream_path)

        if scheme.lower() in ABSOLUTE_URL_SCHEMES:
            return f"{scheme}{SCHEME_SEPARATOR}{path}"

        expected = self.url_builder.scheme
        if expected is not None and scheme != expected:
            raise InvalidStreamPathError(
                f"Stream path '{scheme}{SCHEME_SEPARATOR}{path}' does not use the '{expected}' scheme."
            )
        return self.url_builder.get_asset_url(path)
