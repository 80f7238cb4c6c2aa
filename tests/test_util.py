"""Tests for util module."""

import tempfile
from pathlib import Path

import pytest

from bundle_assets.util import normalize_path, strip_prefix, type_name, validate_path_safety


class TestStripPrefix:
    """Test literal prefix removal."""

    def test_removes_matching_prefix(self) -> None:
        assert strip_prefix("assets://js/app.js", "assets://") == "js/app.js"

    def test_missing_prefix_is_a_no_op(self) -> None:
        assert strip_prefix("js/app.js", "assets://") == "js/app.js"

    def test_matches_partial_segments(self) -> None:
        """Test that matching is not segment aware."""
        assert strip_prefix("assets2/app.js", "assets") == "2/app.js"

    def test_empty_prefix(self) -> None:
        assert strip_prefix("js/app.js", "") == "js/app.js"


class TestNormalizePath:
    """Test relative path normalisation."""

    def test_collapses_dot_segments(self) -> None:
        assert normalize_path("css/../js/./app.js") == "js/app.js"

    def test_strips_slashes_and_backslashes(self) -> None:
        assert normalize_path("/js//vendor\\lib.js/") == "js/vendor/lib.js"

    def test_rejects_escaping_paths(self) -> None:
        """Test that paths climbing above the root are rejected."""
        assert normalize_path("../forbidden.txt") is None
        assert normalize_path("js/../../forbidden.txt") is None
        assert normalize_path("..\\..\\windows\\system32") is None

    def test_root_is_empty_string(self) -> None:
        assert normalize_path("js/..") == ""


class TestValidatePathSafety:
    """Test path traversal prevention."""

    def test_allows_paths_within_base(self) -> None:
        """Test that paths within base directory are allowed."""
        with tempfile.TemporaryDirectory() as tmpdir:
            base = Path(tmpdir)
            safe_path = base / "subdir" / "file.txt"
            # Should not raise
            validate_path_safety(safe_path, base)

    def test_rejects_path_traversal(self) -> None:
        """Test that path traversal attempts are rejected."""
        with tempfile.TemporaryDirectory() as tmpdir:
            base = Path(tmpdir)
            dangerous_path = base / ".." / ".." / "etc" / "passwd"

            with pytest.raises(ValueError, match="escapes base directory"):
                validate_path_safety(dangerous_path, base)

    def test_allows_symlinks_within_base(self) -> None:
        """Test that symlinks within base directory are allowed."""
        with tempfile.TemporaryDirectory() as tmpdir:
            base = Path(tmpdir)
            target = base / "target.txt"
            link = base / "link.txt"

            target.touch()
            link.symlink_to(target)

            # Should not raise since link resolves within base
            validate_path_safety(link, base)


class TestTypeName:
    """Test JSON type naming used in error messages."""

    def test_names_json_types(self) -> None:
        assert type_name(None) == "null"
        assert type_name(True) == "boolean"
        assert type_name(3) == "number"
        assert type_name(1.5) == "number"
        assert type_name("x") == "string"
        assert type_name([]) == "array"
        assert type_name({}) == "object"
