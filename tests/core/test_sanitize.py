"""Tests for field coercion helpers."""

import json
import math

import pytest

from kinetic_lyrics.core.sanitize import (
    canonical_token,
    match_enum,
    sanitize_enum,
    sanitize_mapping,
    sanitize_str,
    sanitize_text,
    sanitize_time,
)
from kinetic_lyrics.models import AnimationType, FontFamily


class TestCanonicalToken:
    """Tests for canonical_token()."""

    def test_lowercases_and_strips_separators(self):
        assert canonical_token("Slide_Up") == "slideup"
        assert canonical_token("ZOOM-IN") == "zoomin"
        assert canonical_token("dela_gothic-x") == "delagothicx"

    def test_keeps_other_characters(self):
        assert canonical_token("blur in!") == "blur in!"


class TestMatchEnum:
    """Tests for match_enum()."""

    @pytest.mark.parametrize(
        "raw", ["slide-up", "Slide_Up", "SLIDEUP", "slide_up", "Slide-Up"]
    )
    def test_matches_formatting_variants(self, raw):
        assert match_enum(raw, AnimationType) is AnimationType.SLIDE_UP

    def test_matches_font(self):
        assert match_enum("Zen_Maru", FontFamily) is FontFamily.ZEN_MARU

    def test_no_match_returns_none(self):
        assert match_enum("spin-around", AnimationType) is None

    @pytest.mark.parametrize("raw", [None, "", 42, ["fade"], {"a": 1}])
    def test_non_string_returns_none(self, raw):
        assert match_enum(raw, AnimationType) is None


class TestSanitizeEnum:
    """Tests for sanitize_enum()."""

    def test_match_returns_canonical_value(self):
        assert sanitize_enum("Typewriter", AnimationType, "slide-up") == "typewriter"

    def test_missing_returns_default(self):
        assert sanitize_enum(None, AnimationType, "slide-up") == "slide-up"
        assert sanitize_enum("", AnimationType, "slide-up") == "slide-up"

    def test_non_string_returns_default(self):
        assert sanitize_enum(3, AnimationType, "slide-up") == "slide-up"

    def test_unknown_kept_raw_when_lenient(self):
        assert sanitize_enum("Spin_Around", AnimationType, "slide-up") == "Spin_Around"

    def test_unknown_defaulted_when_strict(self):
        assert sanitize_enum("Spin_Around", AnimationType, "slide-up", strict=True) == "slide-up"


class TestSanitizeTime:
    """Tests for sanitize_time()."""

    def test_numbers_pass_through(self):
        assert sanitize_time(3) == 3.0
        assert sanitize_time(2.75) == 2.75
        assert isinstance(sanitize_time(3), float)

    @pytest.mark.parametrize("raw", [None, "12.5", "abc", [1], {"s": 1}, True, False])
    def test_non_numbers_become_zero(self, raw):
        assert sanitize_time(raw) == 0.0

    @pytest.mark.parametrize("raw", [math.nan, math.inf, -math.inf, -1.5])
    def test_non_finite_and_negative_become_zero(self, raw):
        assert sanitize_time(raw) == 0.0

    def test_int_too_large_for_float_becomes_zero(self):
        huge = json.loads("1" + "0" * 400)
        assert isinstance(huge, int)
        assert sanitize_time(huge) == 0.0


class TestSanitizeScalars:
    """Tests for string, text and mapping coercion."""

    def test_str_defaults_on_blank(self):
        assert sanitize_str("#123456", "#ffffff") == "#123456"
        assert sanitize_str("   ", "#ffffff") == "#ffffff"
        assert sanitize_str(None, "#ffffff") == "#ffffff"
        assert sanitize_str(123, "#ffffff") == "#ffffff"

    def test_text(self):
        assert sanitize_text("hello\nworld") == "hello\nworld"
        assert sanitize_text(7) == "7"
        assert sanitize_text(None) == ""
        assert sanitize_text(True) == ""

    def test_mapping(self):
        assert sanitize_mapping({"a": 1}) == {"a": 1}
        assert sanitize_mapping(["a"]) == {}
        assert sanitize_mapping(None) == {}
