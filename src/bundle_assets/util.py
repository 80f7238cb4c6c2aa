"""Path and string helpers shared by the resolution pipeline.

This module handles prefix stripping and path normalisation with
protection against directory traversal.
"""

from pathlib import Path


def strip_prefix(subject: str, prefix: str) -> str:
    """Remove a literal prefix from a string.

    Matching is a plain string test, not path-segment aware, so
    'assets2/x' loses an 'assets' prefix too.

    Args:
        subject: String to strip
        prefix: Prefix to remove

    Returns:
        subject without prefix, or subject unchanged if it does not start with prefix
    """
    if prefix and subject.startswith(prefix):
        return subject[len(prefix):]
    return subject


def normalize_path(path: str) -> str | None:
    """Collapse '.', '..' and empty segments of a relative path.

    Backslashes are treated as separators. Leading and trailing slashes
    are dropped.

    Example:
        "css/../js/./app.js" -> "js/app.js"

    Args:
        path: Potentially dangerous relative path

    Returns:
        The normalised path, or None if '..' segments climb above the root
    """
    segments: list[str] = []
    for segment in path.replace("\\", "/").split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if not segments:
                return None
            segments.pop()
            continue
        segments.append(segment)
    return "/".join(segments)


def validate_path_safety(path: Path, base_dir: Path) -> None:
    """Validate that a path stays within the base directory.

    Symlinks are resolved before the check.

    Args:
        path: Path to validate
        base_dir: Base directory that path must be within

    Raises:
        ValueError: If path escapes the base directory
    """
    resolved_path = path.resolve()
    resolved_base = base_dir.resolve()

    if not resolved_path.is_relative_to(resolved_base):
        raise ValueError(f"Path {path} escapes base directory {base_dir}")


def type_name(value: object) -> str:
    """Name a decoded JSON value's type the way JSON does."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
