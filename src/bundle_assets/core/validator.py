"""JSON Schema validation for bundle manifests.

This module loads the formal JSON Schemas shipped with the package and
validates raw (bundle.config.json) and compiled (bundle.result.json)
manifests against them.
"""

import json
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match

# Schema files live next to the package modules
# src/bundle_assets/core/validator.py -> src/bundle_assets/schemas/
SCHEMA_DIR = Path(__file__).parent.parent / "schemas"

MANIFEST_KINDS = ("raw", "compiled")


def schema_path(kind: str) -> Path:
    """Return the path of the schema for a manifest kind.

    Raises:
        ValueError: If kind is not 'raw' or 'compiled'
    """
    if kind not in MANIFEST_KINDS:
        raise ValueError(f"Unknown manifest kind: '{kind}'. Expected one of: {', '.join(MANIFEST_KINDS)}")
    return SCHEMA_DIR / f"{kind}.schema.json"


def load_schema(kind: str) -> dict[str, Any]:
    """Read the packaged schema describing one manifest kind.

    Raises:
        FileNotFoundError: If the package was installed without its schemas
        json.JSONDecodeError: If a packaged schema is corrupt
    """
    path = schema_path(kind)
    if not path.is_file():
        raise FileNotFoundError(f"No {kind} manifest schema at {path}")
    return json.loads(path.read_text(encoding="utf-8"))  # type: ignore[no-any-return]


def validate_manifest(document: Any, kind: str) -> None:
    """Check a decoded bundle.config.json or bundle.result.json document.

    When several parts of the document are wrong, the most relevant
    error (the deepest one inside the bundle definitions) is raised.

    Raises:
        ValidationError: If the document does not match the schema of its kind
        FileNotFoundError: If the schema is missing
        json.JSONDecodeError: If the schema is corrupt
    """
    validator = Draft202012Validator(load_schema(kind))
    error = best_match(validator.iter_errors(document))
    if error is not None:
        raise error


def describe_error(error: ValidationError) -> str:
    """Render a schema violation as e.g. 'Manifest error at bundle -> js/main -> scripts: ...'."""
    location = " -> ".join(str(part) for part in error.absolute_path) or "root"
    description = f"Manifest error at {location}: {error.message}"
    if error.instance is not None:
        description += f"\nOffending value: {json.dumps(error.instance)}"
    return description


def validate_manifest_with_error_details(document: Any, kind: str) -> tuple[bool, str | None]:
    """Validate a manifest without raising, for command-line reporting.

    Returns:
        (True, None) for a valid manifest, otherwise (False, description)
    """
    try:
        validate_manifest(document, kind)
    except ValidationError as e:
        return False, describe_error(e)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        return False, f"Cannot load the {kind} manifest schema: {e}"
    return True, None
