"""Loading assets from the filesystem for the development asset server."""

import mimetypes
from datetime import datetime, timezone
from pathlib import Path

from .assets import Assets

DEFAULT_MIME_TYPE = "application/octet-stream"


class AssetLoader:
    """Resolves a URL path to a file and exposes what is needed to serve it.

    Call load_asset first; the other methods operate on the file it found.

    Example:
        >>> loader = AssetLoader(assets)
        >>> if loader.load_asset('js/app.js'):
        ...     body = loader.get_content()
    """

    def __init__(self, assets: Assets):
        self.assets = assets
        self.full_path: Path | None = None

    def load_asset(self, relative_path: str) -> bool:
        """Compute the filesystem path for a relative URL path.

        Args:
            relative_path: Path extracted from a request URL

        Returns:
            True if the file exists, False otherwise
        """
        absolute_path = self.assets.url_path_to_absolute_path(relative_path)
        self.full_path = Path(absolute_path) if absolute_path else None
        return self.full_path is not None and self.full_path.is_file()

    def _target(self) -> Path:
        if self.full_path is None:
            raise RuntimeError("No asset loaded. Call load_asset() first.")
        return self.full_path

    def get_content(self) -> bytes:
        """Raw contents of the loaded file."""
        return self._target().read_bytes()

    def get_length(self) -> int:
        """Size of the loaded file in bytes."""
        return self._target().stat().st_size

    def get_type(self) -> str:
        """Best-guess MIME type, from the file extension."""
        mime_type, _ = mimetypes.guess_type(self._target().name)
        return mime_type or DEFAULT_MIME_TYPE

    def get_last_modified(self) -> datetime:
        """Modification time of the loaded file, in UTC."""
        return datetime.fromtimestamp(self._target().stat().st_mtime, tz=timezone.utc)
