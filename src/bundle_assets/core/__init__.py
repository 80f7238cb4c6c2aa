"""Core utilities for reading bundle manifests.

This package contains schema validation, type definitions,
and the manifest reader used by both the bundle parsers and
the rendering schema.
"""

from .manifest import (
    compiled_bundle_definitions,
    declaration_source,
    raw_bundle_definitions,
    read_manifest,
)
from .types import (
    CollisionPolicy,
    CompiledBundleDefinition,
    CompiledManifest,
    RawBundleDefinition,
    RawManifest,
)
from .validator import validate_manifest, validate_manifest_with_error_details

__all__ = [
    "CollisionPolicy",
    "CompiledBundleDefinition",
    "CompiledManifest",
    "RawBundleDefinition",
    "RawManifest",
    "compiled_bundle_definitions",
    "declaration_source",
    "raw_bundle_definitions",
    "read_manifest",
    "validate_manifest",
    "validate_manifest_with_error_details",
]
