"""
EmiratesKit - UAE identifier validation

Validates, normalizes and masks Emirates IDs, UAE IBANs, TRNs, mobile
numbers and passport numbers.
"""

from .kit_config import VERSION, KitConfig, get_config, set_config
from .validators import (
    emirates_id,
    iban,
    trn,
    mobile,
    passport,
    IdentifierKind,
    validate_identifier,
    check_identifier,
    mask_identifier,
    get_supported_identifiers,
    ErrorCode,
    ValidationResult,
    EmiratesIdInfo,
    IbanInfo,
    MobileInfo,
    BatchEntry,
)

__version__ = VERSION

__all__ = [
    "emirates_id",
    "iban",
    "trn",
    "mobile",
    "passport",
    "IdentifierKind",
    "validate_identifier",
    "check_identifier",
    "mask_identifier",
    "get_supported_identifiers",
    "ErrorCode",
    "ValidationResult",
    "EmiratesIdInfo",
    "IbanInfo",
    "MobileInfo",
    "BatchEntry",
    "KitConfig",
    "get_config",
    "set_config",
]
