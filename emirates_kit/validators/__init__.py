"""
UAE identifier validators.

Each identifier kind has its own module with the same free-function API:
validate(), check(), mask() and parse_many(); emirates_id and mobile also
provide sanitize().

Usage:
    from emirates_kit.validators import iban, validate_identifier

    iban.validate("AE07 0331 2345 6789 0123 456").bank_name
    validate_identifier("mobile", "0501234567").normalized_number
"""

from enum import Enum
from typing import Dict, Optional, Union

from . import emirates_id, iban, mobile, passport, trn
from .batch import parse_many
from .checksums import luhn_validate, luhn_check_digit, mod97_validate
from .masking import mask_middle
from .results import (
    BatchEntry,
    EmiratesIdInfo,
    ErrorCode,
    IbanInfo,
    MobileInfo,
    ValidationResult,
)


class IdentifierKind(Enum):
    """Identifier kinds supported by the validators."""
    EMIRATES_ID = "emirates_id"
    IBAN = "iban"
    TRN = "trn"
    MOBILE = "mobile"
    PASSPORT = "passport"


_MODULES = {
    IdentifierKind.EMIRATES_ID: emirates_id,
    IdentifierKind.IBAN: iban,
    IdentifierKind.TRN: trn,
    IdentifierKind.MOBILE: mobile,
    IdentifierKind.PASSPORT: passport,
}


def _module_for(kind: Union[IdentifierKind, str]):
    try:
        return _MODULES[IdentifierKind(kind)]
    except ValueError:
        raise ValueError(f"Unsupported identifier kind: {kind!r}") from None


def validate_identifier(kind: Union[IdentifierKind, str], text: Optional[str]) -> ValidationResult:
    """
    Validate text as the given identifier kind.

    Args:
        kind: IdentifierKind or its value (e.g. "iban")
        text: The identifier to validate

    Returns:
        The kind's result type (EmiratesIdInfo, IbanInfo, MobileInfo or
        ValidationResult)

    Raises:
        ValueError: If kind is not supported
    """
    return _module_for(kind).validate(text)


def check_identifier(kind: Union[IdentifierKind, str], text: Optional[str]) -> bool:
    """True if text is a valid identifier of the given kind."""
    return _module_for(kind).check(text)


def mask_identifier(kind: Union[IdentifierKind, str], text: Optional[str]) -> str:
    """Mask text for display using the rules of the given identifier kind."""
    return _module_for(kind).mask(text)


def get_supported_identifiers() -> Dict[str, str]:
    """
    Get the supported identifier kinds.

    Returns:
        Dict mapping kind value to display name
    """
    return {
        IdentifierKind.EMIRATES_ID.value: "Emirates ID",
        IdentifierKind.IBAN.value: "UAE IBAN",
        IdentifierKind.TRN.value: "Tax Registration Number",
        IdentifierKind.MOBILE.value: "UAE Mobile Number",
        IdentifierKind.PASSPORT.value: "UAE Passport Number",
    }


__all__ = [
    # Validator modules
    "emirates_id",
    "iban",
    "trn",
    "mobile",
    "passport",
    # Dispatch
    "IdentifierKind",
    "validate_identifier",
    "check_identifier",
    "mask_identifier",
    "get_supported_identifiers",
    # Result model
    "ErrorCode",
    "ValidationResult",
    "EmiratesIdInfo",
    "IbanInfo",
    "MobileInfo",
    "BatchEntry",
    # Helpers
    "parse_many",
    "mask_middle",
    "luhn_validate",
    "luhn_check_digit",
    "mod97_validate",
]
