"""
UAE IBAN validation.

Format: AE + 2 check digits + 3-digit bank code + 16-digit account (23 chars)
Checksum: ISO 13616 Mod-97
"""

import logging
from typing import Iterable, List, Optional

from emirates_kit.data import resolve_bank
from emirates_kit.preprocessing import normalize_input, is_ascii_digits
from .batch import parse_many as _parse_many
from .checksums import mod97_validate
from .masking import mask_middle
from .results import BatchEntry, ErrorCode, IbanInfo

logger = logging.getLogger(__name__)

COUNTRY_CODE = "AE"
IBAN_LENGTH = 23


def _fail(code: ErrorCode, message: str) -> IbanInfo:
    logger.debug(f"IBAN rejected: {code}")
    return IbanInfo.fail(code, message)


def _compact(text: Optional[str]) -> str:
    return normalize_input(text).replace(" ", "").upper()


def validate(text: Optional[str]) -> IbanInfo:
    """
    Validate a UAE IBAN and split it into its fields.

    Args:
        text: IBAN with or without spaces, any case

    Returns:
        IbanInfo; bank_name is None for bank codes not in the table,
        which does not make the IBAN invalid
    """
    iban = _compact(text)
    if not iban:
        return _fail(ErrorCode.EMPTY_INPUT, "IBAN cannot be empty.")

    if not iban.startswith(COUNTRY_CODE):
        return _fail(ErrorCode.INVALID_COUNTRY_CODE, f"Must start with {COUNTRY_CODE}. Got: {iban[:2]}.")

    if len(iban) != IBAN_LENGTH:
        return _fail(ErrorCode.INVALID_LENGTH, f"UAE IBAN must be {IBAN_LENGTH} chars. Got {len(iban)}.")

    if not is_ascii_digits(iban[2:]):
        return _fail(ErrorCode.INVALID_CHARACTERS, f"Only digits are allowed after {COUNTRY_CODE}.")

    if not mod97_validate(iban):
        return _fail(ErrorCode.INVALID_CHECKSUM, "IBAN checksum is invalid (Mod-97).")

    bank_code = iban[4:7]
    return IbanInfo.success(
        raw_iban=iban,
        country_code=COUNTRY_CODE,
        check_digits=iban[2:4],
        bank_code=bank_code,
        bank_name=resolve_bank(bank_code),
        account_number=iban[7:],
    )


def check(text: Optional[str]) -> bool:
    """True if text is a valid UAE IBAN."""
    return validate(text).is_valid


def mask(text: Optional[str]) -> str:
    """
    Mask a UAE IBAN for display.

    Keeps country code, check digits, bank code and the last 5 account digits.
    Example: AE070331234567890123456 -> AE07033***********23456
    """
    if not text or not text.strip():
        return ""
    iban = _compact(text)
    if len(iban) != IBAN_LENGTH or not iban.startswith(COUNTRY_CODE):
        return iban
    return mask_middle(iban, 7, 5)


def parse_many(inputs: Iterable[Optional[str]]) -> List[BatchEntry]:
    """Validate a sequence of IBANs, one BatchEntry per input."""
    return _parse_many(validate, inputs)
