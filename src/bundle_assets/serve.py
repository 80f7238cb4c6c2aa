"""Framework-neutral asset server for development.

Serving static files from the application is slow and only intended for
development; production deployments should serve compiled assets from a
web server or CDN.

A web framework adapter extracts the asset path and the If-Modified-Since
header from the request, calls serve_asset, and copies status, headers and
body onto its own response object.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from email.utils import format_datetime

from .assets import Assets
from .loader import AssetLoader

logger = logging.getLogger(__name__)


@dataclass
class AssetResponse:
    """What to send back for an asset request."""

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""


def http_date(moment: datetime) -> str:
    """Format a UTC datetime as an RFC 7231 IMF-fixdate.

    Example:
        'Mon, 19 Oct 2026 10:00:00 GMT'
    """
    return format_datetime(moment, usegmt=True)


def serve_asset(loader: AssetLoader, url_path: str, if_modified_since: str | None = None) -> AssetResponse:
    """Build the response for a request for url_path.

    Args:
        loader: Loader resolving URL paths to files
        url_path: Asset path captured from the request URL
        if_modified_since: Value of the request's If-Modified-Since header

    Returns:
        404 if the asset cannot be found, 304 if If-Modified-Since matches
        the file's Last-Modified exactly, otherwise 200 with the file content
    """
    if not loader.load_asset(url_path):
        logger.debug("Asset not found: %s", url_path)
        return AssetResponse(status=404)

    last_modified = http_date(loader.get_last_modified())

    if if_modified_since is not None and if_modified_since == last_modified:
        return AssetResponse(status=304, headers={"Last-Modified": last_modified})

    return AssetResponse(
        status=200,
        headers={
            "Content-Type": loader.get_type(),
            "Content-Length": str(loader.get_length()),
            "Cache-Control": "no-cache",
            "Last-Modified": last_modified,
        },
        body=loader.get_content(),
    )


class AssetServer:
    """Callable serving assets of an Assets facade.

    Each request gets its own AssetLoader, since a loader remembers the
    file it last resolved.

    Example:
        >>> server = AssetServer(assets)
        >>> response = server('js/app.js', request.headers.get('If-Modified-Since'))
    """

    def __init__(self, assets: Assets):
        self.assets = assets

    def __call__(self, url_path: str, if_modified_since: str | None = None) -> AssetResponse:
        return serve_asset(AssetLoader(self.assets), url_path, if_modified_since)
