"""Shared fixtures: a layered asset tree and manifests in a temporary directory."""

import json
from pathlib import Path

import pytest

from bundle_assets import Assets, UniformResourceLocator

BASE_URL = "https://assets.example.com/"

# Relative path -> file content
ASSET_FILES = {
    "forbidden.txt": "not an asset",
    "sprinkles/owls/assets/js/app.js": "// owls app",
    "sprinkles/owls/assets/css/site.css": "body { color: brown; }",
    "sprinkles/hawks/assets/js/app.js": "// hawks app",
    "sprinkles/hawks/assets/js/hawks.js": "// hawks only",
    "sprinkles/hawks/assets/allowed.txt": "allowed",
    "node_modules/bootstrap/js/bootstrap.js": "// bootstrap",
    "node_modules/bootstrap/js/npm.js": "// npm",
    "node_modules/bootstrap/css/bootstrap.css": ".btn {}",
}


def write_json(path: Path, document) -> Path:
    """Write a JSON document and return its path."""
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


@pytest.fixture
def asset_tree(tmp_path: Path) -> Path:
    """Create the layered asset tree and return its base directory."""
    for relative_path, content in ASSET_FILES.items():
        file_path = tmp_path / relative_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")
    return tmp_path


@pytest.fixture
def locator(asset_tree: Path) -> UniformResourceLocator:
    """Locator with owls layered over hawks, and vendor/ mapped to node_modules."""
    locator = UniformResourceLocator(asset_tree)
    locator.add_path("assets", "", ["sprinkles/owls/assets", "sprinkles/hawks/assets"])
    locator.add_path("assets", "vendor", "node_modules")
    return locator


@pytest.fixture
def assets(locator: UniformResourceLocator) -> Assets:
    return Assets(locator, "assets", BASE_URL)


@pytest.fixture
def raw_manifest(tmp_path: Path) -> Path:
    """A bundle.config.json defining a 'test' bundle."""
    return write_json(
        tmp_path / "bundle.config.json",
        {
            "bundle": {
                "test": {
                    "scripts": ["vendor/bootstrap/js/bootstrap.js", "vendor/bootstrap/js/npm.js"],
                    "styles": "vendor/bootstrap/css/bootstrap.css",
                },
                "site": {
                    "scripts": "js/app.js",
                },
            }
        },
    )


@pytest.fixture
def compiled_manifest(tmp_path: Path) -> Path:
    """A bundle.result.json defining a 'test' bundle."""
    return write_json(
        tmp_path / "bundle.result.json",
        {
            "test": {
                "scripts": "test-930fa5c1ee.js",
                "styles": "test-930fa5c1ee.css",
            }
        },
    )


@pytest.fixture
def make_manifest(tmp_path: Path):
    """Factory writing a JSON manifest into the temporary directory."""

    def _make(name: str, document) -> Path:
        return write_json(tmp_path / name, document)

    return _make
