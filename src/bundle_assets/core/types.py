"""Type definitions for gulp-bundle-assets manifests.

This module defines TypedDict classes that mirror the JSON schema structure
defined in schemas/raw.schema.json and schemas/compiled.schema.json.
"""

from enum import Enum
from typing import TypedDict, Union

from ..exceptions import ConfigurationError


class AssetEntry(TypedDict, total=False):
    """Object form of a single asset reference in a raw manifest."""

    src: str  # Path relative to the locator scheme
    # Any other key is rendered as a tag attribute (id, media, defer, ...)


# A styles/scripts field: one path, one object, or a list of either
AssetReference = Union[str, AssetEntry, list[Union[str, AssetEntry]]]


class SprinkleOptions(TypedDict, total=False):
    """Options consumed when several manifests define the same bundle."""

    onCollision: str  # 'replace' | 'merge' | 'ignore' | 'error'


class BundleOptions(TypedDict, total=False):
    """The 'options' block of a raw bundle definition."""

    sprinkle: SprinkleOptions


class RawBundleDefinition(TypedDict, total=False):
    """A bundle in a bundle.config.json file (pre-build sources)."""

    styles: AssetReference
    scripts: AssetReference
    options: BundleOptions


class RawManifest(TypedDict, total=False):
    """Complete bundle.config.json document."""

    bundle: dict[str, RawBundleDefinition]


class CompiledBundleDefinition(TypedDict, total=False):
    """A bundle in a bundle.result.json file (single built output per type)."""

    styles: str  # Fingerprinted path, e.g. 'css/main-930fa5c1ee.css'
    scripts: str


# bundle.result.json maps bundle names straight to their definitions
CompiledManifest = dict[str, CompiledBundleDefinition]


class CollisionPolicy(str, Enum):
    """What to do when a bundle name is defined more than once."""

    REPLACE = "replace"
    MERGE = "merge"
    IGNORE = "ignore"
    ERROR = "error"

    @classmethod
    def parse(cls, value: object, bundle_name: str) -> "CollisionPolicy":
        """Convert an 'onCollision' value to a policy.

        Args:
            value: Raw value from the manifest
            bundle_name: Bundle the value was declared on (for the error message)

        Returns:
            The matching policy

        Raises:
            ConfigurationError: If value is not a known policy name
        """
        for policy in cls:
            if policy.value == value:
                return policy
        raise ConfigurationError(
            f"Invalid value '{value}' provided for 'onCollision' key in bundle '{bundle_name}'."
        )

    @classmethod
    def from_definition(cls, definition: dict, bundle_name: str) -> "CollisionPolicy":
        """Read the policy of a bundle definition, defaulting to REPLACE."""
        options = definition.get("options")
        if not isinstance(options, dict):
            return cls.REPLACE
        sprinkle = options.get("sprinkle")
        if not isinstance(sprinkle, dict) or "onCollision" not in sprinkle:
            return cls.REPLACE
        return cls.parse(sprinkle["onCollision"], bundle_name)
