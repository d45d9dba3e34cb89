# test_text.py

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from termstyle import text


class TestDisplayWidth:
    """Test suite for column measurement and cropping."""

    def test_ascii_width(self):
        assert text.display_width("") == 0
        assert text.display_width("abc") == 3

    def test_wide_characters_count_double(self):
        assert text.display_width("日本") == 4
        assert text.display_width("a日b") == 4

    def test_crop_ascii(self):
        assert text.crop("abcdef", 3) == "abc"
        assert text.crop("abc", 10) == "abc"

    def test_crop_drops_straddling_wide_character(self):
        assert text.crop("日本語", 3) == "日"
        assert text.crop("日本語", 4) == "日本"

    def test_crop_non_positive_width(self):
        assert text.crop("abc", 0) == ""
        assert text.crop("abc", -2) == ""


class TestTruncate:
    """Test suite for truncation with an ellipsis."""

    def test_text_that_fits_is_unchanged(self):
        assert text.truncate("short", 10) == "short"
        assert text.truncate("exactly", 10) == "exactly"

    def test_truncates_with_default_ellipsis(self):
        assert text.truncate("Hello World", 8) == "Hello..."

    def test_trailing_whitespace_is_trimmed_before_ellipsis(self):
        assert text.truncate("Hello World", 9) == "Hello..."

    def test_custom_ellipsis(self):
        assert text.truncate("abcdef", 4, "…") == "abc…"
        assert text.truncate("abcdef", 4, "") == "abcd"

    def test_wide_characters(self):
        assert text.truncate("日本語テキスト", 7) == "日本..."

    @pytest.mark.parametrize("limit", [3, 4, 5, 8, 12, 40])
    def test_result_fits_limit(self, limit):
        result = text.truncate("The quick brown fox jumps over 日本語", limit)
        assert text.display_width(result) <= limit


class TestFixedWidth:
    """Test suite for forcing a width."""

    def test_pads_short_text(self):
        assert text.fixed_width("ab", 5) == "ab   "

    def test_exact_length_is_unchanged(self):
        assert text.fixed_width("abc", 3) == "abc"

    def test_crops_long_text(self):
        assert text.fixed_width("abcdef", 3) == "abc"

    def test_crop_trims_trailing_whitespace(self):
        assert text.fixed_width("ab cd", 3) == "ab"

    def test_padding_counts_codepoints(self):
        # Two wide characters are two codepoints, so one space is added
        assert text.fixed_width("日本", 3) == "日本 "
        assert text.display_width(text.fixed_width("日本", 3)) == 5

    def test_cropping_counts_columns(self):
        assert text.fixed_width("日本語x", 3) == "日"

    @pytest.mark.parametrize("width", [0, 1, 4, 10, 25])
    def test_width_invariant_for_narrow_text(self, width):
        assert text.display_width(text.fixed_width("terminal text", width)) == width


class TestCaseTransforms:
    """Test suite for case and format conversions."""

    def test_uppercase(self):
        assert text.uppercase("hello") == "HELLO"
        assert text.uppercase("émile") == "ÉMILE"

    def test_lowercase(self):
        assert text.lowercase("HeLLo") == "hello"
        assert text.lowercase("ÉCOLE") == "école"

    def test_capitalize(self):
        assert text.capitalize("hello world") == "Hello World"
        assert text.capitalize("hELLO wORLD") == "Hello World"
        assert text.capitalize("élan vital") == "Élan Vital"

    @pytest.mark.parametrize("source, expected", [
        ("it's a test", "It's A Test"),
        ("don't STOP", "Don't Stop"),
        ("o'neil-smith", "O'neil-Smith"),
        ("x1 y_z", "X1 Y_Z"),
    ])
    def test_capitalize_word_boundaries(self, source, expected):
        assert text.capitalize(source) == expected

    @pytest.mark.parametrize("source", ["Mixed Case", "ÀÉÎ õü", "already upper", ""])
    def test_case_transforms_are_idempotent(self, source):
        assert text.uppercase(text.uppercase(source)) == text.uppercase(source)
        assert text.lowercase(text.lowercase(source)) == text.lowercase(source)

    @pytest.mark.parametrize("source, expected", [
        ("HelloWorld", "hello_world"),
        ("helloWorld", "hello_world"),
        ("XMLHttpRequest", "xml_http_request"),
        ("version2Beta", "version2_beta"),
        ("already_snake", "already_snake"),
        ("plain", "plain"),
    ])
    def test_snakecase(self, source, expected):
        assert text.snakecase(source) == expected
