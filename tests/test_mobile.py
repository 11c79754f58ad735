"""Tests for UAE mobile number validation."""

import pytest

from emirates_kit.validators import mobile, ErrorCode


class TestValidate:
    """Tests for mobile.validate()."""

    @pytest.mark.parametrize("value", [
        "+971501234567",
        "00971501234567",
        "971501234567",
        "0501234567",
        "501234567",
        "+971 50 123 4567",
        "(050) 123-4567",
    ])
    def test_all_shapes_normalize_to_e164(self, value):
        info = mobile.validate(value)
        assert info.is_valid
        assert info.normalized_number == "+971501234567"
        assert info.prefix == "050"

    def test_etisalat_carrier(self):
        assert "Etisalat" in mobile.validate("0501234567").carrier

    def test_du_carrier(self):
        assert mobile.validate("+971551234567").carrier == "du"

    def test_international_format(self):
        formatted = mobile.validate("0501234567").international_format
        assert formatted.startswith("+971 ")
        assert formatted.replace(" ", "") == "+971501234567"

    @pytest.mark.parametrize("value", [None, "", "  "])
    def test_empty_input(self, value):
        assert mobile.validate(value).error_code == ErrorCode.EMPTY_INPUT

    def test_wrong_length(self):
        assert mobile.validate("+97150123456").error_code == ErrorCode.INVALID_LENGTH

    def test_non_digit(self):
        assert mobile.validate("+97150123456X").error_code == ErrorCode.INVALID_CHARACTERS

    def test_landline_prefix(self):
        info = mobile.validate("+971401234567")
        assert info.error_code == ErrorCode.INVALID_PREFIX
        assert not mobile.check("+971401234567")

    def test_unassigned_mobile_prefix(self):
        info = mobile.validate("+971531234567")
        assert info.error_code == ErrorCode.INVALID_MOBILE_PREFIX
        assert "053" in info.error_message
