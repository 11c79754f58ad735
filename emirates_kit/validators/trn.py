"""
UAE Tax Registration Number (TRN) validation.

A TRN is 15 digits starting with 100. It carries no check digit.
"""

import logging
from typing import Iterable, List, Optional

from emirates_kit.preprocessing import normalize_input, strip_chars, is_ascii_digits
from .batch import parse_many as _parse_many
from .masking import mask_middle
from .results import BatchEntry, ErrorCode, ValidationResult

logger = logging.getLogger(__name__)

TRN_LENGTH = 15
TRN_PREFIX = "100"


def _fail(code: ErrorCode, message: str) -> ValidationResult:
    logger.debug(f"TRN rejected: {code}")
    return ValidationResult.fail(code, message)


def _compact(text: Optional[str]) -> str:
    return strip_chars(normalize_input(text), '- ')


def validate(text: Optional[str]) -> ValidationResult:
    """Validate a TRN, ignoring spaces and dashes."""
    trn = _compact(text)
    if not trn:
        return _fail(ErrorCode.EMPTY_INPUT, "TRN cannot be empty.")

    if len(trn) != TRN_LENGTH:
        return _fail(ErrorCode.INVALID_LENGTH, f"TRN must be {TRN_LENGTH} digits. Got {len(trn)}.")

    if not is_ascii_digits(trn):
        return _fail(ErrorCode.INVALID_CHARACTERS, "TRN must contain digits only.")

    if not trn.startswith(TRN_PREFIX):
        return _fail(ErrorCode.INVALID_PREFIX, f"TRN must start with {TRN_PREFIX}.")

    return ValidationResult.success()


def check(text: Optional[str]) -> bool:
    """True if text is a valid TRN."""
    return validate(text).is_valid


def mask(text: Optional[str]) -> str:
    """
    Mask a TRN for display, keeping the first and last 3 digits.

    Example: 100123456700003 -> 100*********003
    """
    if not text or not text.strip():
        return ""
    trn = _compact(text)
    if len(trn) != TRN_LENGTH or not is_ascii_digits(trn):
        return text.strip()
    return mask_middle(trn, 3, 3)


def parse_many(inputs: Iterable[Optional[str]]) -> List[BatchEntry]:
    """Validate a sequence of TRNs, one BatchEntry per input."""
    return _parse_many(validate, inputs)
