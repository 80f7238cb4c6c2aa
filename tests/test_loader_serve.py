"""Tests for the development asset loader and server."""

import os
from datetime import datetime, timezone
from pathlib import Path

import pytest

from bundle_assets import AssetLoader, Assets, AssetServer, serve_asset
from bundle_assets.serve import http_date

# 2026-01-02 03:04:05 UTC
MTIME = 1767323045


@pytest.fixture
def app_js(asset_tree: Path) -> Path:
    path = asset_tree / "sprinkles/owls/assets/js/app.js"
    os.utime(path, (MTIME, MTIME))
    return path


class TestAssetLoader:
    """Test file lookup and metadata."""

    def test_load_existing_asset(self, assets: Assets, app_js: Path) -> None:
        loader = AssetLoader(assets)

        assert loader.load_asset("js/app.js")
        assert loader.full_path == app_js.resolve()
        assert loader.get_content() == b"// owls app"
        assert loader.get_length() == len(b"// owls app")
        assert loader.get_last_modified() == datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        ("url_path", "mime_type"),
        [
            ("js/app.js", "javascript"),
            ("css/site.css", "text/css"),
            ("allowed.txt", "text/plain"),
        ],
    )
    def test_mime_type(self, assets: Assets, url_path: str, mime_type: str) -> None:
        loader = AssetLoader(assets)
        loader.load_asset(url_path)

        assert mime_type in loader.get_type()

    def test_unknown_extension(self, assets: Assets, asset_tree: Path) -> None:
        (asset_tree / "sprinkles/owls/assets/blob.unknownext").write_bytes(b"\x00")
        loader = AssetLoader(assets)
        loader.load_asset("blob.unknownext")

        assert loader.get_type() == "application/octet-stream"

    def test_missing_asset(self, assets: Assets) -> None:
        loader = AssetLoader(assets)

        assert not loader.load_asset("js/ducks.js")
        assert loader.full_path is None

    def test_traversal(self, assets: Assets) -> None:
        assert not AssetLoader(assets).load_asset("../forbidden.txt")

    def test_accessors_require_loaded_asset(self, assets: Assets) -> None:
        with pytest.raises(RuntimeError, match="load_asset"):
            AssetLoader(assets).get_content()


class TestServeAsset:
    """Test HTTP response construction."""

    def test_http_date(self) -> None:
        assert http_date(datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)) == "Fri, 02 Jan 2026 03:04:05 GMT"

    def test_ok(self, assets: Assets, app_js: Path) -> None:
        response = serve_asset(AssetLoader(assets), "js/app.js")

        assert response.status == 200
        assert response.body == b"// owls app"
        assert response.headers["Content-Length"] == str(len(b"// owls app"))
        assert "javascript" in response.headers["Content-Type"]
        assert response.headers["Cache-Control"] == "no-cache"
        assert response.headers["Last-Modified"] == "Fri, 02 Jan 2026 03:04:05 GMT"

    def test_not_found(self, assets: Assets) -> None:
        response = serve_asset(AssetLoader(assets), "js/ducks.js")

        assert response.status == 404
        assert response.body == b""

    def test_not_modified(self, assets: Assets, app_js: Path) -> None:
        response = serve_asset(AssetLoader(assets), "js/app.js", "Fri, 02 Jan 2026 03:04:05 GMT")

        assert response.status == 304
        assert response.body == b""
        assert response.headers == {"Last-Modified": "Fri, 02 Jan 2026 03:04:05 GMT"}

    def test_stale_if_modified_since(self, assets: Assets, app_js: Path) -> None:
        response = serve_asset(AssetLoader(assets), "js/app.js", "Thu, 01 Jan 2026 00:00:00 GMT")

        assert response.status == 200


class TestAssetServer:
    """Test the callable server."""

    def test_serves_each_request_independently(self, assets: Assets, app_js: Path) -> None:
        server = AssetServer(assets)

        assert server("js/app.js").status == 200
        assert server("js/ducks.js").status == 404
        assert server("vendor/bootstrap/js/npm.js").body == b"// npm"
