"""Tests for the shared result model and lookup tables."""

import pytest

from emirates_kit.data import resolve_bank, is_known_bank, get_carrier, is_valid_prefix, UAE_BANK_CODES
from emirates_kit.validators import ValidationResult, IbanInfo, ErrorCode, luhn_validate, mod97_validate


class TestValidationResult:

    def test_success_has_no_error(self):
        result = ValidationResult.success()
        assert result.is_valid
        assert result.error_code is None
        assert result.error_message is None
        assert bool(result)

    def test_fail_carries_code(self):
        result = IbanInfo.fail(ErrorCode.INVALID_LENGTH, "too short")
        assert isinstance(result, IbanInfo)
        assert not result
        assert result.to_dict()["error_code"] == "INVALID_LENGTH"
        assert result.bank_code is None

    def test_valid_with_error_rejected(self):
        with pytest.raises(ValueError):
            ValidationResult(is_valid=True, error_code="EMPTY_INPUT")

    def test_failure_without_code_rejected(self):
        with pytest.raises(ValueError):
            ValidationResult(is_valid=False)

    def test_error_code_str(self):
        assert str(ErrorCode.INVALID_CHECKSUM) == "INVALID_CHECKSUM"


class TestChecksums:

    def test_luhn(self):
        assert luhn_validate("784199012345676")
        assert not luhn_validate("784199012345677")

    def test_mod97(self):
        assert mod97_validate("AE070331234567890123456")
        assert not mod97_validate("AE080331234567890123456")


class TestLookupTables:

    def test_bank_resolution(self):
        assert resolve_bank("033") == "Emirates NBD"
        assert resolve_bank("999") is None
        assert is_known_bank("035")

    def test_carriers(self):
        assert get_carrier("055") == "du"
        assert get_carrier("050") == "e& (Etisalat)"
        assert get_carrier("053") is None
        assert is_valid_prefix("058")

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            UAE_BANK_CODES["999"] = "New Bank"
