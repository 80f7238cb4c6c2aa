"""Assets facade: bundle lookup, URL generation and reverse lookup.

This module provides the main interface for resolving assets. It is
format-agnostic: bundles come from any number of AssetBundles adapters,
and files are found through any ResourceLocator.
"""

import logging
import re
from collections.abc import Callable, Sequence
from pathlib import Path

from .bundles.base import AssetBundles
from .exceptions import (
    AssetNotFoundError,
    BundleNotFoundError,
    InvalidArgumentError,
    InvalidStreamPathError,
    OutOfRangeError,
)
from .locator import SCHEME_SEPARATOR, ResourceLocator
from .transformers.base import PathTransformer
from .url_builders import normalize_base_url
from .util import normalize_path, strip_prefix

logger = logging.getLogger(__name__)

QUERY_STRING = re.compile(r"\?.*", re.DOTALL)
ABSOLUTE_URL_SCHEMES = ("http", "https")

StreamPath = str | Sequence[str]


def split_stream_path(stream_path: StreamPath) -> tuple[str, str]:
    """Split 'scheme://path' or a (scheme, path) pair into its two parts.

    Raises:
        InvalidStreamPathError: For anything else, including None, numbers,
            strings without '://' and sequences not holding exactly two strings
    """
    if isinstance(stream_path, str):
        scheme, separator, path = stream_path.partition(SCHEME_SEPARATOR)
        if not separator:
            raise InvalidStreamPathError(f"Invalid stream path given: '{stream_path}'.")
        return scheme, path

    if (
        not isinstance(stream_path, Sequence)
        or len(stream_path) != 2
        or not all(isinstance(part, str) for part in stream_path)
    ):
        raise InvalidStreamPathError(f"Invalid stream path given: {stream_path!r}.")
    return stream_path[0], stream_path[1]


class Assets:
    """Convenient access to assets and asset bundles.

    Useful for both production and development: bundle manifests are
    registered with add_asset_bundles, and every asset path they name is
    resolved through the locator under locator_scheme before being turned
    into a URL below base_url.

    Example:
        >>> locator = UniformResourceLocator(Path('/srv/app'))
        >>> locator.add_path('assets', '', 'public/assets')
        >>> assets = Assets(locator, 'assets', 'https://cdn.example.com/')
        >>> assets.add_asset_bundles(GulpBundleAssetsRawBundles('bundle.config.json'))
        >>> assets.get_js_bundle_assets('js/main')
        ['https://cdn.example.com/js/app.js']
    """

    def __init__(
        self,
        locator: ResourceLocator,
        locator_scheme: str,
        base_url: str,
        path_transformer: PathTransformer | None = None,
    ):
        """Initialize the facade.

        Args:
            locator: Resource locator used to find assets
            locator_scheme: Scheme to use in the locator, without '://'
            base_url: Site base URL, optionally including an assets directory
            path_transformer: Optional reversible rewriting applied to the
                relative part of generated URLs

        Raises:
            InvalidArgumentError: If locator_scheme or base_url is invalid
        """
        self.locator = locator
        self.path_transformer = path_transformer
        self._asset_bundles: list[AssetBundles] = []
        self.locator_scheme = locator_scheme
        self.base_url = base_url

    @property
    def base_url(self) -> str:
        """Base URL, always ending with a single slash."""
        return self._base_url

    @base_url.setter
    def base_url(self, base_url: str) -> None:
        if not isinstance(base_url, str):
            raise InvalidArgumentError(f"base_url must be of type str but was {type(base_url).__name__}")
        self._base_url = normalize_base_url(base_url)

    @property
    def locator_scheme(self) -> str:
        """Locator scheme including the '://' suffix, e.g. 'assets://'."""
        return self._locator_scheme + SCHEME_SEPARATOR

    @locator_scheme.setter
    def locator_scheme(self, locator_scheme: str) -> None:
        if not isinstance(locator_scheme, str):
            raise InvalidArgumentError(
                f"locator_scheme must be of type str but was {type(locator_scheme).__name__}"
            )
        if locator_scheme == "":
            raise InvalidArgumentError("locator_scheme must not be an empty string.")
        self._locator_scheme = locator_scheme

    def add_asset_bundles(self, asset_bundles: AssetBundles) -> None:
        """Register a bundle manifest. Later registrations append their assets."""
        self._asset_bundles.append(asset_bundles)

    def reset_asset_bundles(self) -> None:
        """Remove all registered bundle manifests."""
        self._asset_bundles = []

    @property
    def asset_bundles(self) -> list[AssetBundles]:
        return list(self._asset_bundles)

    def get_js_bundle_assets(self, bundle_name: str) -> list[str]:
        """Get the URLs of every asset in a JS bundle.

        A bundle may be split across several manifests; their assets are
        concatenated in registration order.

        Raises:
            BundleNotFoundError: If no registered manifest defines the bundle
            AssetNotFoundError: If an asset in the bundle cannot be resolved
        """
        paths = self._collect(bundle_name, lambda bundles: bundles.get_js_bundle_assets(bundle_name))
        if not paths:
            raise BundleNotFoundError(f"JS asset bundle '{bundle_name}' does not exist.", bundle_name)
        return [self.get_absolute_url(self.locator_scheme + path) for path in paths]

    def get_css_bundle_assets(self, bundle_name: str) -> list[str]:
        """Get the URLs of every asset in a CSS bundle.

        Raises:
            BundleNotFoundError: If no registered manifest defines the bundle
            AssetNotFoundError: If an asset in the bundle cannot be resolved
        """
        paths = self._collect(bundle_name, lambda bundles: bundles.get_css_bundle_assets(bundle_name))
        if not paths:
            raise BundleNotFoundError(f"CSS asset bundle '{bundle_name}' does not exist.", bundle_name)
        return [self.get_absolute_url(self.locator_scheme + path) for path in paths]

    def _collect(self, bundle_name: str, lookup: Callable[[AssetBundles], list[str]]) -> list[str]:
        paths: list[str] = []
        for asset_bundles in self._asset_bundles:
            try:
                paths.extend(lookup(asset_bundles))
            except OutOfRangeError:
                # Bundles may be split across manifests, a miss here is expected
                logger.debug("%r does not define bundle '%s'", asset_bundles, bundle_name)
        return paths

    def get_absolute_url(self, stream_path: StreamPath) -> str:
        """Transform a stream path into a URL a browser can request.

        'assets://vendor/lib.js' (or ('assets', 'vendor/lib.js')) becomes
        'https://cdn.example.com/vendor/lib.js'. The asset must exist.
        http(s) URLs are returned unchanged.

        Args:
            stream_path: 'scheme://path' string or (scheme, path) pair

        Raises:
            InvalidStreamPathError: If stream_path is neither 'scheme://path'
                nor a pair of strings
            AssetNotFoundError: If no file can be resolved for the stream path
        """
        scheme, path = split_stream_path(stream_path)
        stream_path = f"{scheme}{SCHEME_SEPARATOR}{path}"

        if scheme.lower() in ABSOLUTE_URL_SCHEMES:
            return stream_path

        if not self.locator.resolve(stream_path):
            raise AssetNotFoundError(
                f"No file could be resolved for the stream path '{stream_path}'.", path=stream_path
            )

        relative_path = strip_prefix(stream_path, self.locator_scheme)
        if self.path_transformer is not None:
            relative_path = self._transform(relative_path, self.path_transformer.path_to_url)

        return self.base_url + relative_path

    def url_path_to_absolute_path(self, unclean_relative_path: str) -> str | None:
        """Map a requested URL path back to the file it names.

        Applies protections against attempts to access restricted files.

        Args:
            unclean_relative_path: Potentially dangerous relative path from a URL

        Returns:
            Absolute filesystem path, or None if no regular file exists there
        """
        uri = self.url_path_to_stream_uri(unclean_relative_path)
        if uri is None:
            return None

        resource = self.locator.resolve(uri)
        if not resource:
            return None

        absolute_path = Path(resource).resolve()
        if not absolute_path.is_file():
            return None
        return str(absolute_path)

    def url_path_to_stream_uri(self, url_path: str) -> str | None:
        """Map a requested URL path back to its stream URI.

        Args:
            url_path: Relative path (or full URL below base_url) from a request

        Returns:
            'scheme://path' URI, or None if the locator cannot resolve it
        """
        url_path = QUERY_STRING.sub("", url_path)
        url_path = strip_prefix(url_path, self.base_url)

        # Collapse '.' and '..' to prevent directory traversal
        normalized = normalize_path(url_path)
        if normalized is None:
            logger.debug("Rejected URL path '%s': escapes the asset root", url_path)
            return None

        if self.path_transformer is not None:
            normalized = self._transform(normalized, self.path_transformer.url_to_path)
            normalized = normalize_path(normalized)
            if normalized is None:
                return None

        uri = self.locator_scheme + normalized
        if not self.locator.resolve(uri):
            return None
        return uri

    @staticmethod
    def _transform(subject: str, transform: Callable[[str], str]) -> str:
        # Paths without a matching definition are left as they are
        try:
            return transform(subject)
        except OutOfRangeError:
            return subject
