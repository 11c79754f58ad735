"""Tests for UAE passport number validation."""

import pytest

from emirates_kit.validators import passport, ErrorCode


class TestValidate:
    """Tests for passport.validate()."""

    @pytest.mark.parametrize("value", ["A1234567", "Z9999999", "B0000000", "a1234567", "A123 4567"])
    def test_valid(self, value):
        assert passport.check(value)

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_empty_input(self, value):
        assert passport.validate(value).error_code == ErrorCode.EMPTY_INPUT

    @pytest.mark.parametrize("value", ["A123456", "A123456789"])
    def test_wrong_length(self, value):
        assert passport.validate(value).error_code == ErrorCode.INVALID_LENGTH

    @pytest.mark.parametrize("value", ["12345678", "AB123456", "A123456B"])
    def test_wrong_format(self, value):
        assert passport.validate(value).error_code == ErrorCode.INVALID_FORMAT
