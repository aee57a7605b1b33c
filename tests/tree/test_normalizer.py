"""Tests for NameNormalizer: PascalCase transliteration, tag prefixing and keys.

Covers free-text layer names, camelCase / PascalCase / snake_case /
kebab-case inputs, symbols, digits, empty names, the case-insensitive
prefix rule and ``#`` suffix stripping.
"""

import pytest

from components2code.tree.normalizer import NameNormalizer


@pytest.fixture
def normalizer() -> NameNormalizer:
    """Provide a shared NameNormalizer instance for all tests."""
    return NameNormalizer()


class TestToPascalCase:
    """Transliteration of layer names to PascalCase."""

    def test_single_word(self, normalizer: NameNormalizer) -> None:
        assert normalizer.to_pascal_case("button") == "Button"

    def test_rest_of_token_is_lowercased(self, normalizer: NameNormalizer) -> None:
        assert normalizer.to_pascal_case("BUTTON") == "Button"

    def test_camel_case_boundary(self, normalizer: NameNormalizer) -> None:
        assert normalizer.to_pascal_case("iconButton") == "IconButton"

    def test_pascal_case_is_stable(self, normalizer: NameNormalizer) -> None:
        assert normalizer.to_pascal_case("NavBar") == "NavBar"

    def test_kebab_case(self, normalizer: NameNormalizer) -> None:
        assert normalizer.to_pascal_case("nav-bar") == "NavBar"

    def test_snake_case(self, normalizer: NameNormalizer) -> None:
        assert normalizer.to_pascal_case("nav_bar") == "NavBar"

    def test_symbols_collapse_to_one_boundary(self, normalizer: NameNormalizer) -> None:
        assert normalizer.to_pascal_case("Button / Primary") == "ButtonPrimary"

    def test_digits_are_kept(self, normalizer: NameNormalizer) -> None:
        assert normalizer.to_pascal_case("icon 24") == "Icon24"

    def test_prefixed_lowercase_name(self, normalizer: NameNormalizer) -> None:
        assert normalizer.to_pascal_case("Utag") == "Utag"

    def test_non_ascii_letters_are_dropped(self, normalizer: NameNormalizer) -> None:
        assert normalizer.to_pascal_case("按钮 button") == "Button"

    @pytest.mark.parametrize("name", ["", "   ", "---", "/"])
    def test_empty_result(self, normalizer: NameNormalizer, name: str) -> None:
        assert normalizer.to_pascal_case(name) == ""


class TestTagName:
    """Prefix is added unless the PascalCase name already starts with it."""

    def test_prefix_added(self, normalizer: NameNormalizer) -> None:
        assert normalizer.tag_name("Button", "U") == "UButton"

    def test_prefix_not_doubled(self, normalizer: NameNormalizer) -> None:
        assert normalizer.tag_name("Utag", "U") == "Utag"

    def test_leading_capitals_are_one_token(self, normalizer: NameNormalizer) -> None:
        # no lower->upper boundary inside "UButton"
        assert normalizer.tag_name("UButton", "U") == "Ubutton"

    def test_camel_case_prefix_is_kept(self, normalizer: NameNormalizer) -> None:
        assert normalizer.tag_name("uButton", "U") == "UButton"

    def test_prefix_check_is_case_insensitive(self, normalizer: NameNormalizer) -> None:
        assert normalizer.tag_name("u-button", "U") == "UButton"

    def test_custom_prefix(self, normalizer: NameNormalizer) -> None:
        assert normalizer.tag_name("button", "El") == "ElButton"

    def test_empty_prefix(self, normalizer: NameNormalizer) -> None:
        assert normalizer.tag_name("button", "") == "Button"

    def test_empty_name_degrades_to_prefix(self, normalizer: NameNormalizer) -> None:
        assert normalizer.tag_name("", "U") == "U"


class TestStripKeySuffix:
    def test_suffix_removed(self, normalizer: NameNormalizer) -> None:
        assert normalizer.strip_key_suffix("Show icon#12:3") == "Show icon"

    def test_no_suffix(self, normalizer: NameNormalizer) -> None:
        assert normalizer.strip_key_suffix("size") == "size"

    def test_only_first_hash_counts(self, normalizer: NameNormalizer) -> None:
        assert normalizer.strip_key_suffix("a#b#c") == "a"


class TestIsPrivate:
    def test_underscore(self, normalizer: NameNormalizer) -> None:
        assert normalizer.is_private("_hidden", ("_", "."))

    def test_dot(self, normalizer: NameNormalizer) -> None:
        assert normalizer.is_private(".base", ("_", "."))

    def test_public(self, normalizer: NameNormalizer) -> None:
        assert not normalizer.is_private("UButton", ("_", "."))

    def test_empty_marker_ignored(self, normalizer: NameNormalizer) -> None:
        assert not normalizer.is_private("UButton", ("",))
