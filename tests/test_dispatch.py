"""Tests for routing by identifier kind."""

import pytest

from emirates_kit.validators import (
    IdentifierKind,
    validate_identifier,
    check_identifier,
    mask_identifier,
    get_supported_identifiers,
    EmiratesIdInfo,
    IbanInfo,
    MobileInfo,
    ValidationResult,
)


class TestDispatch:

    @pytest.mark.parametrize("kind, value, result_type", [
        (IdentifierKind.EMIRATES_ID, "784-1990-1234567-6", EmiratesIdInfo),
        (IdentifierKind.IBAN, "AE070331234567890123456", IbanInfo),
        (IdentifierKind.MOBILE, "0501234567", MobileInfo),
        (IdentifierKind.TRN, "100123456700003", ValidationResult),
        (IdentifierKind.PASSPORT, "A1234567", ValidationResult),
    ])
    def test_validate_routes_to_kind(self, kind, value, result_type):
        result = validate_identifier(kind, value)
        assert isinstance(result, result_type)
        assert result.is_valid

    def test_accepts_kind_value_strings(self):
        assert check_identifier("trn", "100123456700003")
        assert not check_identifier("trn", "200123456700003")
        assert mask_identifier("passport", "A1234567") == "A****567"

    def test_unknown_kind_raises(self):
        with pytest.raises(ValueError, match="Unsupported identifier kind"):
            validate_identifier("ssn", "123-45-6789")

    def test_supported_identifiers_cover_every_kind(self):
        supported = get_supported_identifiers()
        assert set(supported) == {kind.value for kind in IdentifierKind}
