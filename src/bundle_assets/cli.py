"""Command-line interface for inspecting asset bundles.

This module provides the CLI entry point for validating manifests and
resolving bundles, stream paths and URL paths against a set of asset roots.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .assets import Assets
from .core.manifest import read_manifest
from .core.validator import MANIFEST_KINDS, validate_manifest_with_error_details
from .exceptions import AssetsError
from .locator import UniformResourceLocator
from .manager import AssetsTemplatePlugin
from .registry import BundlesRegistry

# Manifest kind -> registered bundle format
MANIFEST_FORMATS = {
    "raw": "gulp-raw",
    "compiled": "gulp-compiled",
}


def parse_root(value: str) -> tuple[str, str, str]:
    """Parse a --root option of the form SCHEME[:PREFIX]=DIR.

    Example:
        "assets:vendor=node_modules" -> ("assets", "vendor", "node_modules")

    Raises:
        argparse.ArgumentTypeError: If the value is malformed
    """
    target, separator, directory = value.partition("=")
    scheme, _, prefix = target.partition(":")
    if not separator or not scheme or not directory:
        raise argparse.ArgumentTypeError(f"Expected SCHEME[:PREFIX]=DIR but got '{value}'")
    return scheme, prefix, directory


def build_assets(args: argparse.Namespace) -> Assets:
    """Create an Assets facade from parsed command-line options."""
    locator = UniformResourceLocator(Path(args.base_dir))
    for scheme, prefix, directory in args.roots:
        locator.add_path(scheme, prefix, directory)

    assets = Assets(locator, args.scheme, args.base_url)
    for kind, path in args.manifests:
        print(f"Loading {kind} manifest: {path}", file=sys.stderr)
        assets.add_asset_bundles(BundlesRegistry.create(MANIFEST_FORMATS[kind], path))
    return assets


def cmd_validate(args: argparse.Namespace) -> int:
    print(f"Validating {args.kind} manifest {args.manifest} against schema...", file=sys.stderr)
    document = read_manifest(args.manifest)
    is_valid, error_msg = validate_manifest_with_error_details(document, args.kind)

    if not is_valid:
        print("Error: Manifest validation failed:", file=sys.stderr)
        print(error_msg, file=sys.stderr)
        return 1

    print("Validation successful!", file=sys.stderr)
    return 0


def cmd_bundle(args: argparse.Namespace) -> int:
    assets = build_assets(args)
    if args.type == "js":
        urls = assets.get_js_bundle_assets(args.name)
    else:
        urls = assets.get_css_bundle_assets(args.name)

    json.dump(urls, sys.stdout, indent=2)
    print()
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    plugin = AssetsTemplatePlugin(build_assets(args))
    attributes = dict(args.attributes)
    print(plugin.js(args.name, attributes) if args.type == "js" else plugin.css(args.name, attributes))
    return 0


def cmd_url(args: argparse.Namespace) -> int:
    print(build_assets(args).get_absolute_url(args.stream_path))
    return 0


def cmd_resolve(args: argparse.Namespace) -> int:
    path = build_assets(args).url_path_to_absolute_path(args.url_path)
    if path is None:
        print(f"Error: No asset found for URL path: {args.url_path}", file=sys.stderr)
        return 1
    print(path)
    return 0


def parse_attribute(value: str) -> tuple[str, str | bool]:
    """Parse NAME=VALUE, or a bare NAME flag such as 'defer'."""
    name, separator, attribute = value.partition("=")
    return (name, attribute) if separator else (name, True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bundle-assets",
        description="Resolve gulp-bundle-assets bundles to asset URLs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check a manifest before deploying
  bundle-assets validate bundle.config.json --kind raw

  # URLs of a JS bundle, assets layered over two sprinkles
  bundle-assets bundle js/main --type js --base-url https://example.com/assets \\
      --root assets=sprinkles/site/assets --root assets=sprinkles/core/assets \\
      --raw bundle.config.json

  # Map a requested URL path back to its file
  bundle-assets resolve js/app.js --root assets=public/assets
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log resolution steps to stderr")

    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="Validate a manifest against its JSON schema")
    validate.add_argument("manifest", help="Path to the manifest file")
    validate.add_argument("--kind", choices=MANIFEST_KINDS, default="raw", help="Manifest kind (default: raw)")
    validate.set_defaults(handler=cmd_validate)

    # Options shared by every command that needs an Assets facade
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--base-dir", default=".", help="Directory asset roots are relative to (default: .)")
    common.add_argument(
        "--root",
        dest="roots",
        action="append",
        type=parse_root,
        default=[],
        metavar="SCHEME[:PREFIX]=DIR",
        help="Bind a directory to a locator scheme (repeatable, first match wins)",
    )
    common.add_argument("--scheme", default="assets", help="Locator scheme for assets (default: assets)")
    common.add_argument("--base-url", default="/", help="Base URL prepended to asset paths (default: /)")
    common.add_argument(
        "--raw",
        dest="manifests",
        action="append",
        type=lambda path: ("raw", path),
        default=[],
        metavar="FILE",
        help="bundle.config.json manifest (repeatable)",
    )
    common.add_argument(
        "--compiled",
        dest="manifests",
        action="append",
        type=lambda path: ("compiled", path),
        metavar="FILE",
        help="bundle.result.json manifest (repeatable)",
    )

    bundle = subparsers.add_parser("bundle", parents=[common], help="Print the URLs of a bundle as JSON")
    bundle.add_argument("name", help="Bundle name, e.g. js/main")
    bundle.add_argument("--type", choices=("js", "css"), required=True, help="Asset type")
    bundle.set_defaults(handler=cmd_bundle)

    render = subparsers.add_parser("render", parents=[common], help="Print the HTML tags of a bundle")
    render.add_argument("name", help="Bundle name, e.g. css/main")
    render.add_argument("--type", choices=("js", "css"), required=True, help="Asset type")
    render.add_argument(
        "--attr",
        dest="attributes",
        action="append",
        type=parse_attribute,
        default=[],
        metavar="NAME[=VALUE]",
        help="Tag attribute (repeatable), e.g. --attr defer --attr media=print",
    )
    render.set_defaults(handler=cmd_render)

    url = subparsers.add_parser("url", parents=[common], help="Print the URL of a stream path")
    url.add_argument("stream_path", help="Stream path, e.g. assets://vendor/lib.js")
    url.set_defaults(handler=cmd_url)

    resolve = subparsers.add_parser("resolve", parents=[common], help="Print the file behind a URL path")
    resolve.add_argument("url_path", help="URL path, e.g. js/app.js")
    resolve.set_defaults(handler=cmd_resolve)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the bundle-assets command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        status = args.handler(args)
    except AssetsError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    sys.exit(status)


if __name__ == "__main__":
    main()
