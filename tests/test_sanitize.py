"""Tests for Emirates ID and mobile sanitize()."""

import pytest

from emirates_kit.validators import emirates_id, mobile


class TestEmiratesIdSanitize:

    @pytest.mark.parametrize("value", [
        "784199012345676",
        "784 1990 1234567 6",
        "784-1990-1234567-6",
        " 784-1990 1234567-6 ",
    ])
    def test_formats_to_canonical(self, value):
        assert emirates_id.sanitize(value) == "784-1990-1234567-6"

    @pytest.mark.parametrize("value", ["784199012345676", "784 1990 1234567 6", "784-1990-1234567-6"])
    def test_sanitized_value_validates(self, value):
        assert emirates_id.check(emirates_id.sanitize(value))

    def test_does_not_validate(self):
        # Bad checksum still gets reformatted
        assert emirates_id.sanitize("784199000000000") == "784-1990-0000000-0"

    def test_empty_for_none(self):
        assert emirates_id.sanitize(None) == ""

    def test_unparseable_returned_unchanged(self):
        assert emirates_id.sanitize("not-valid") == "not-valid"


class TestMobileSanitize:

    @pytest.mark.parametrize("value", [
        "+971501234567",
        "00971501234567",
        "971501234567",
        "0501234567",
        "501234567",
        "+971 50 123 4567",
    ])
    def test_normalizes_to_plus971(self, value):
        assert mobile.sanitize(value) == "+971501234567"

    def test_does_not_check_carrier_prefix(self):
        assert mobile.sanitize("0531234567") == "+971531234567"

    def test_empty_for_none(self):
        assert mobile.sanitize(None) == ""

    @pytest.mark.parametrize("value", ["12345", "+9715012", "401234567"])
    def test_unrecognized_returned_unchanged(self, value):
        assert mobile.sanitize(value) == value
