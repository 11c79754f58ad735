"""Tests for identifier input normalization."""

import pytest

from emirates_kit.preprocessing import normalize_input, strip_chars, is_ascii_digits


class TestNormalizeInput:

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_empty(self, value):
        assert normalize_input(value) == ""

    def test_fullwidth_digits(self):
        assert normalize_input("７８４") == "784"

    def test_zero_width_removed(self):
        assert normalize_input("784\u200b1990\ufeff") == "7841990"

    def test_dashes_unified(self):
        assert normalize_input("784\u20131990\u2014x\u2212y") == "784-1990-x-y"

    def test_trims(self):
        assert normalize_input("\t A1234567 \n") == "A1234567"


class TestHelpers:

    def test_strip_chars(self):
        assert strip_chars("(050) 123-4567", " -()") == "0501234567"

    @pytest.mark.parametrize("value, expected", [
        ("0123456789", True),
        ("", False),
        ("12a", False),
        ("\u0661\u0662", False),
    ])
    def test_is_ascii_digits(self, value, expected):
        assert is_ascii_digits(value) is expected
