"""Tests for the template helpers."""

from pathlib import Path

import pytest

from bundle_assets import (
    AssetBundleSchema,
    AssetManager,
    Assets,
    AssetsTemplatePlugin,
    BundleNotFoundError,
    CompiledAssetUrlBuilder,
    GulpBundleAssetsRawBundles,
    InvalidStreamPathError,
    LocatorAssetUrlBuilder,
    UniformResourceLocator,
)
from bundle_assets.manager import convert_attributes, make_regular_tag, make_self_closing_tag


class TestTagHelpers:
    """Test HTML tag generation."""

    def test_convert_attributes(self) -> None:
        assert convert_attributes({"src": "app.js", "defer": True, "async": False, "id": None}) == 'src="app.js" defer'

    def test_convert_attributes_escapes_values(self) -> None:
        assert convert_attributes({"title": 'a "b" <c>'}) == 'title="a &quot;b&quot; &lt;c&gt;"'

    def test_regular_tag(self) -> None:
        assert make_regular_tag("script", {"src": "app.js"}) == '<script src="app.js"></script>'
        assert make_regular_tag("p", content="hi") == "<p>hi</p>"

    def test_self_closing_tag(self) -> None:
        assert make_self_closing_tag("link", {"href": "a.css"}) == '<link href="a.css" />'
        assert make_self_closing_tag("br", closing_slash=False) == "<br>"


class TestAssetsTemplatePlugin:
    """Test rendering from the Assets facade."""

    @pytest.fixture
    def plugin(self, assets: Assets, raw_manifest: Path) -> AssetsTemplatePlugin:
        assets.add_asset_bundles(GulpBundleAssetsRawBundles(raw_manifest))
        return AssetsTemplatePlugin(assets)

    def test_js(self, plugin: AssetsTemplatePlugin) -> None:
        assert plugin.js("test") == (
            '<script src="https://assets.example.com/vendor/bootstrap/js/bootstrap.js"></script>'
            '<script src="https://assets.example.com/vendor/bootstrap/js/npm.js"></script>'
        )

    def test_js_attributes(self, plugin: AssetsTemplatePlugin) -> None:
        assert plugin.js("site", {"defer": True}) == (
            '<script src="https://assets.example.com/js/app.js" defer></script>'
        )

    def test_css(self, plugin: AssetsTemplatePlugin) -> None:
        assert plugin.css("test") == (
            '<link href="https://assets.example.com/vendor/bootstrap/css/bootstrap.css" '
            'rel="stylesheet" type="text/css" />'
        )

    def test_css_attributes_override_defaults(self, plugin: AssetsTemplatePlugin) -> None:
        assert plugin.css("test", {"rel": "preload", "media": "print"}) == (
            '<link href="https://assets.example.com/vendor/bootstrap/css/bootstrap.css" '
            'rel="preload" type="text/css" media="print" />'
        )

    def test_default_bundle_name(self, plugin: AssetsTemplatePlugin) -> None:
        with pytest.raises(BundleNotFoundError, match="'js/main'"):
            plugin.js()

    def test_url(self, plugin: AssetsTemplatePlugin) -> None:
        assert plugin.url("assets://js/hawks.js") == "https://assets.example.com/js/hawks.js"


class TestAssetManager:
    """Test rendering from a bundle schema."""

    @pytest.fixture
    def manager(self, locator: UniformResourceLocator, raw_manifest: Path) -> AssetManager:
        url_builder = LocatorAssetUrlBuilder(locator, "https://example.com/raw", "sprinkles")
        schema = AssetBundleSchema(url_builder)
        schema.load_raw_schema_file(raw_manifest)
        return AssetManager(url_builder, schema)

    def test_js(self, manager: AssetManager) -> None:
        assert manager.js("site") == '<script src="https://example.com/raw/owls/assets/js/app.js"></script>'

    def test_js_options(self, manager: AssetManager) -> None:
        assert manager.js("site", {"async": True, "type": "module"}) == (
            '<script src="https://example.com/raw/owls/assets/js/app.js" async type="module"></script>'
        )

    def test_css(self, manager: AssetManager) -> None:
        assert manager.css("test") == (
            '<link rel="stylesheet" type="text/css" '
            'href="https://example.com/raw/node_modules/bootstrap/css/bootstrap.css">'
        )

    def test_unknown_bundle(self, manager: AssetManager) -> None:
        with pytest.raises(BundleNotFoundError):
            manager.css()

    def test_url(self, manager: AssetManager) -> None:
        assert manager.url("assets://js/hawks.js") == "https://example.com/raw/hawks/assets/js/hawks.js"
        assert manager.url(("assets", "js/app.js")) == "https://example.com/raw/owls/assets/js/app.js"

    def test_url_http_passthrough(self, manager: AssetManager) -> None:
        assert manager.url("https://cdn.example.com/lib.js") == "https://cdn.example.com/lib.js"
        assert manager.url(("http", "cdn.example.com/lib.js")) == "http://cdn.example.com/lib.js"

    @pytest.mark.parametrize("stream_path", ["js/app.js", ("assets",), ("a", "b", "c"), None, 42])
    def test_url_rejects_invalid_stream_paths(self, manager: AssetManager, stream_path) -> None:
        with pytest.raises(InvalidStreamPathError):
            manager.url(stream_path)

    def test_url_rejects_other_schemes(self, manager: AssetManager) -> None:
        """Test that a scheme the builder does not search under is not silently swapped."""
        with pytest.raises(InvalidStreamPathError, match="does not use the 'assets' scheme"):
            manager.url("fonts://x.woff")
        with pytest.raises(InvalidStreamPathError):
            manager.url(("fonts", "js/app.js"))

    def test_url_compiled_builder_accepts_any_scheme(self, compiled_manifest: Path) -> None:
        url_builder = CompiledAssetUrlBuilder("https://cdn.example.com/")
        schema = AssetBundleSchema(url_builder)
        schema.load_compiled_schema_file(compiled_manifest)
        manager = AssetManager(url_builder, schema)

        assert manager.url("dist://test-930fa5c1ee.js") == "https://cdn.example.com/test-930fa5c1ee.js"

    def test_set_bundle_schema(self, manager: AssetManager, compiled_manifest: Path) -> None:
        schema = AssetBundleSchema(CompiledAssetUrlBuilder("https://cdn.example.com/"))
        schema.load_compiled_schema_file(compiled_manifest)

        manager.set_bundle_schema(schema)

        assert manager.js("test") == '<script src="https://cdn.example.com/test-930fa5c1ee.js"></script>'
        with pytest.raises(BundleNotFoundError):
            manager.js("site")
