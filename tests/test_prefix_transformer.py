"""Tests for the reversible prefix transformer."""

import pytest

from bundle_assets import InvalidArgumentError, OutOfRangeError, PrefixTransformer


@pytest.fixture
def transformer() -> PrefixTransformer:
    transformer = PrefixTransformer()
    transformer.define("sprinkles/hawks/assets/", "hawks/")
    transformer.define("sprinkles/owls/assets/", "owls/")
    transformer.define("node_modules/", "vendor/")
    return transformer


class TestDefine:
    """Test definition validation."""

    def test_rejects_non_string_path_prefix(self) -> None:
        with pytest.raises(InvalidArgumentError, match="Path prefix must be a string"):
            PrefixTransformer().define(42, "b")  # type: ignore[arg-type]

    def test_rejects_non_string_url_prefix(self) -> None:
        with pytest.raises(InvalidArgumentError, match="URL prefix must be a string"):
            PrefixTransformer().define("a", None)  # type: ignore[arg-type]

    def test_rejects_duplicate_path_prefix(self) -> None:
        transformer = PrefixTransformer()
        transformer.define("a", "b")

        with pytest.raises(InvalidArgumentError, match="path prefix 'a'"):
            transformer.define("a", "c")

    def test_rejects_duplicate_url_prefix(self) -> None:
        transformer = PrefixTransformer()
        transformer.define("a", "b")

        with pytest.raises(InvalidArgumentError, match="URL prefix 'b'"):
            transformer.define("c", "b")

    def test_definitions_keep_registration_order(self, transformer: PrefixTransformer) -> None:
        assert list(transformer.definitions) == [
            "sprinkles/hawks/assets/",
            "sprinkles/owls/assets/",
            "node_modules/",
        ]

    def test_definitions_is_a_copy(self, transformer: PrefixTransformer) -> None:
        transformer.definitions["x/"] = "y/"
        assert "x/" not in transformer.definitions


class TestTransform:
    """Test path <-> URL transformation."""

    def test_path_to_url(self, transformer: PrefixTransformer) -> None:
        assert transformer.path_to_url("sprinkles/owls/assets/js/app.js") == "owls/js/app.js"
        assert transformer.path_to_url("node_modules/bootstrap/js/npm.js") == "vendor/bootstrap/js/npm.js"

    def test_url_to_path(self, transformer: PrefixTransformer) -> None:
        assert transformer.url_to_path("hawks/allowed.txt") == "sprinkles/hawks/assets/allowed.txt"

    @pytest.mark.parametrize(
        "path",
        [
            "sprinkles/hawks/assets/js/hawks.js",
            "sprinkles/owls/assets/css/site.css",
            "node_modules/bootstrap/css/bootstrap.css",
        ],
    )
    def test_round_trip(self, transformer: PrefixTransformer, path: str) -> None:
        """Test that url_to_path reverses path_to_url."""
        assert transformer.url_to_path(transformer.path_to_url(path)) == path

    def test_no_matching_path_prefix(self, transformer: PrefixTransformer) -> None:
        with pytest.raises(OutOfRangeError):
            transformer.path_to_url("public/js/app.js")

    def test_no_matching_url_prefix(self, transformer: PrefixTransformer) -> None:
        with pytest.raises(OutOfRangeError):
            transformer.url_to_path("ducks/app.js")

    def test_first_definition_wins(self) -> None:
        transformer = PrefixTransformer()
        transformer.define("assets/", "a/")
        transformer.define("assets/vendor/", "v/")

        assert transformer.path_to_url("assets/vendor/lib.js") == "a/vendor/lib.js"

    def test_prefix_match_is_not_segment_aware(self) -> None:
        """Test the documented sharp edge: 'assets' also matches 'assets2'."""
        transformer = PrefixTransformer()
        transformer.define("assets", "static")

        assert transformer.path_to_url("assets2/app.js") == "static2/app.js"
