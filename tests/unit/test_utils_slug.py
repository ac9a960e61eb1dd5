"""Unit tests for slug utilities."""

import pytest

from src.errors import InvalidFormatError
from src.utils.slug import (
    is_valid_slug,
    normalize_slug,
    suffixed_slug,
    transliterate_slug,
    validate_slug,
)

SAMPLE_NAMES = [
    "My Button!!",
    "Hello World",
    "  Leading and trailing  ",
    "---dashes---everywhere---",
    "Test (2024) - Part 1",
    "Café résumé",
    "日本語タイトル",
    "ALL CAPS",
    "a--b",
    "",
    "   ",
    "***",
    "already-a-slug",
    "tab\tand\nnewline",
    "_under_scores_",
]


class TestNormalizeSlug:
    """Test normalize_slug function."""

    def test_basic_normalization(self) -> None:
        """Test basic slug normalization."""
        assert normalize_slug("My Button!!") == "my-button"
        assert normalize_slug("Hello World") == "hello-world"

    def test_special_characters_collapse(self) -> None:
        """Test that runs of punctuation collapse to a single hyphen."""
        assert normalize_slug("AI & ML: The Future!") == "ai-ml-the-future"
        assert normalize_slug("Test (2024) - Part 1") == "test-2024-part-1"
        assert normalize_slug("a--b") == "a-b"

    def test_strips_leading_and_trailing_separators(self) -> None:
        """Test that leading/trailing hyphens are removed."""
        assert normalize_slug("---dashes---everywhere---") == "dashes-everywhere"
        assert normalize_slug("  padded  ") == "padded"

    def test_underscores_are_separators(self) -> None:
        """Test that underscores are not kept."""
        assert normalize_slug("_under_scores_") == "under-scores"

    def test_non_ascii_is_not_transliterated(self) -> None:
        """Test that non-ASCII letters act as separators."""
        assert normalize_slug("Café résumé") == "caf-r-sum"
        assert normalize_slug("日本語タイトル") == ""

    def test_empty_and_punctuation_only(self) -> None:
        """Test inputs with no alphanumeric characters."""
        assert normalize_slug("") == ""
        assert normalize_slug("   ") == ""
        assert normalize_slug("***") == ""

    @pytest.mark.parametrize("name", SAMPLE_NAMES)
    def test_idempotent(self, name: str) -> None:
        """Test that normalizing twice changes nothing."""
        once = normalize_slug(name)
        assert normalize_slug(once) == once

    @pytest.mark.parametrize("name", SAMPLE_NAMES)
    def test_output_is_valid_or_empty(self, name: str) -> None:
        """Test that output always satisfies the validator or is empty."""
        slug = normalize_slug(name)
        assert slug == "" or is_valid_slug(slug)


class TestIsValidSlug:
    """Test is_valid_slug function."""

    def test_accepts_valid_slugs(self) -> None:
        """Test valid slugs."""
        assert is_valid_slug("button")
        assert is_valid_slug("my-button")
        assert is_valid_slug("my-button-2")
        assert is_valid_slug("a1-b2-c3")

    def test_rejects_uppercase(self) -> None:
        """Test that uppercase letters are rejected."""
        assert not is_valid_slug("My-Button")

    def test_rejects_bad_hyphens(self) -> None:
        """Test leading, trailing and doubled hyphens."""
        assert not is_valid_slug("-button")
        assert not is_valid_slug("button-")
        assert not is_valid_slug("my--button")

    def test_rejects_other_characters(self) -> None:
        """Test spaces, punctuation and empty input."""
        assert not is_valid_slug("")
        assert not is_valid_slug("Invalid Slug!")
        assert not is_valid_slug("my_button")
        assert not is_valid_slug("my-button\n")


class TestValidateSlug:
    """Test validate_slug function."""

    def test_returns_valid_slug(self) -> None:
        """Test that valid slugs pass through."""
        assert validate_slug("my-button") == "my-button"

    def test_raises_on_invalid(self) -> None:
        """Test that invalid slugs raise InvalidFormatError."""
        with pytest.raises(InvalidFormatError) as exc_info:
            validate_slug("Invalid Slug!")

        assert exc_info.value.candidate == "Invalid Slug!"
        assert exc_info.value.recoverable is False


class TestTransliterateSlug:
    """Test transliterate_slug function."""

    def test_transliterates_unicode(self) -> None:
        """Test that non-Latin names still produce a slug."""
        assert transliterate_slug("日本語") == "ri-ben-yu"
        assert transliterate_slug("Café") == "cafe"

    def test_symbols_only_stay_empty(self) -> None:
        """Test that names without letters stay empty."""
        assert transliterate_slug("***") == ""


class TestSuffixedSlug:
    """Test suffixed_slug function."""

    def test_no_suffix(self) -> None:
        """Test base without suffix."""
        assert suffixed_slug("my-button", None) == "my-button"

    def test_with_suffix(self) -> None:
        """Test base with numeric suffix."""
        assert suffixed_slug("my-button", 3) == "my-button-3"
