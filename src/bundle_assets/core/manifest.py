"""Reading gulp-bundle-assets manifest files.

Both the bundle parsers (bundles/) and the rendering schema (schema.py)
load manifests through this module, so file and JSON errors are reported
the same way regardless of which layer reads the file.
"""

import json
import logging
from pathlib import Path
from typing import Any

from ..exceptions import AssetNotFoundError, InvalidBundlesFileError, ManifestJsonError
from ..util import type_name
from .types import CompiledManifest, RawBundleDefinition

logger = logging.getLogger(__name__)


def read_manifest(path: str | Path) -> Any:
    """Read and decode a JSON manifest file.

    Args:
        path: Path to the manifest

    Returns:
        The decoded JSON document

    Raises:
        AssetNotFoundError: If the file doesn't exist or cannot be read
        ManifestJsonError: If the file is not valid UTF-8 or not a valid JSON document
    """
    path = Path(path)
    try:
        content = path.read_bytes()
    except OSError as e:
        raise AssetNotFoundError(f"The schema '{path}' could not be found.", path=str(path)) from e

    try:
        document = json.loads(content.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise ManifestJsonError(
            f"The schema '{path}' does not contain a valid JSON document. "
            f"JSON error: malformed UTF-8 ({e.reason} at byte {e.start})",
            path=str(path),
            msg=str(e),
        ) from e
    except json.JSONDecodeError as e:
        raise ManifestJsonError(
            f"The schema '{path}' does not contain a valid JSON document. "
            f"JSON error: {e.msg} (line {e.lineno}, column {e.colno})",
            path=str(path),
            msg=e.msg,
            lineno=e.lineno,
            colno=e.colno,
        ) from e

    logger.info("Read bundle manifest %s", path)
    return document


def declaration_source(path: str | Path, bundle_name: str) -> str:
    """Describe where a bundle was declared, e.g. 'bundle.config.json [js/main]'."""
    return f"{path} [{bundle_name}]"


def raw_bundle_definitions(document: Any, path: str | Path) -> dict[str, RawBundleDefinition]:
    """Extract bundle definitions from a raw (bundle.config.json) document.

    A document without a 'bundle' key is valid and defines no bundles,
    since the same file may configure unrelated top-level keys.

    Args:
        document: Decoded manifest
        path: Manifest path (for error messages)

    Returns:
        Mapping of bundle name to bundle definition, in document order

    Raises:
        InvalidBundlesFileError: If the document or its 'bundle' value is not an object
    """
    if not isinstance(document, dict):
        raise InvalidBundlesFileError(
            f"Expected '{path}' to contain an object but found {type_name(document)}.",
            path=str(path),
            expected="object",
            actual=type_name(document),
        )

    bundles = document.get("bundle")
    if bundles is None:
        return {}
    if not isinstance(bundles, dict):
        raise InvalidBundlesFileError(
            f"Expected 'bundle' property to be an object but was {type_name(bundles)}. For '{path}'",
            path=str(path),
            field="bundle",
            expected="object",
            actual=type_name(bundles),
        )
    return bundles


def compiled_bundle_definitions(document: Any, path: str | Path) -> CompiledManifest:
    """Extract bundle definitions from a compiled (bundle.result.json) document.

    Args:
        document: Decoded manifest
        path: Manifest path (for error messages)

    Returns:
        Mapping of bundle name to bundle definition, in document order

    Raises:
        InvalidBundlesFileError: If the document is not an object
    """
    if not isinstance(document, dict):
        raise InvalidBundlesFileError(
            f"Expected '{path}' to contain an object but found {type_name(document)}.",
            path=str(path),
            expected="object",
            actual=type_name(document),
        )
    return document


def require_definition_object(definition: Any, bundle_name: str, path: str | Path) -> dict[str, Any]:
    """Check that a single bundle definition is a JSON object.

    Raises:
        InvalidBundlesFileError: If it is not
    """
    if not isinstance(definition, dict):
        raise InvalidBundlesFileError(
            f"Expected bundle '{bundle_name}' to be an object but was {type_name(definition)}. For '{path}'",
            path=str(path),
            bundle_name=bundle_name,
            expected="object",
            actual=type_name(definition),
        )
    return definition
