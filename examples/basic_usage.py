"""Basic bundle resolution example.

This example demonstrates how to:
- Layer several asset directories under one locator scheme
- Load a gulp-bundle-assets configuration file
- Print the URLs and tags of a bundle
- Map a requested URL path back to its file
"""

import sys
from pathlib import Path

from bundle_assets import (
    Assets,
    AssetsError,
    AssetsTemplatePlugin,
    BundlesRegistry,
    UniformResourceLocator,
)


def main():
    # Change this to your application directory
    app_dir = Path.cwd()
    manifest = app_dir / "bundle.config.json"

    if not manifest.exists():
        print(f"Manifest not found: {manifest}", file=sys.stderr)
        print("Run this script from a directory containing bundle.config.json", file=sys.stderr)
        return

    # Site assets override core assets; vendor/ is served from node_modules
    locator = UniformResourceLocator(app_dir)
    locator.add_path('assets', '', ['sprinkles/site/assets', 'sprinkles/core/assets'])
    locator.add_path('assets', 'vendor', 'node_modules')

    assets = Assets(locator, 'assets', 'http://localhost:8080/assets-raw/')
    assets.add_asset_bundles(BundlesRegistry.create('gulp-raw', manifest))

    try:
        urls = assets.get_js_bundle_assets('js/main')
    except AssetsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return

    print(f"\n✓ Bundle js/main resolved", file=sys.stderr)
    for url in urls:
        print(f"  {url}", file=sys.stderr)

    print(f"\nTags:", file=sys.stderr)
    print(AssetsTemplatePlugin(assets).js('js/main', {'defer': True}))

    request_path = urls[0][len(assets.base_url):]
    print(f"\n{request_path} is served from {assets.url_path_to_absolute_path(request_path)}", file=sys.stderr)


if __name__ == '__main__':
    main()
