"""
UAE passport number validation.

Format: one letter followed by 7 digits (A1234567). No check digit.
"""

import logging
import re
from typing import Iterable, List, Optional

from emirates_kit.preprocessing import normalize_input
from .batch import parse_many as _parse_many
from .masking import mask_middle
from .results import BatchEntry, ErrorCode, ValidationResult

logger = logging.getLogger(__name__)

PASSPORT_LENGTH = 8
PASSPORT_PATTERN = re.compile(r'[A-Z][0-9]{7}')


def validate(text: Optional[str]) -> ValidationResult:
    """Validate a UAE passport number, ignoring spaces and case."""
    passport = normalize_input(text).replace(" ", "").upper()
    if not passport:
        code, message = ErrorCode.EMPTY_INPUT, "Passport number cannot be empty."
    elif len(passport) != PASSPORT_LENGTH:
        code, message = ErrorCode.INVALID_LENGTH, f"Passport number must be {PASSPORT_LENGTH} chars. Got {len(passport)}."
    elif not PASSPORT_PATTERN.fullmatch(passport):
        code, message = ErrorCode.INVALID_FORMAT, "Passport number format: 1 letter + 7 digits (A1234567)."
    else:
        return ValidationResult.success()

    logger.debug(f"Passport rejected: {code}")
    return ValidationResult.fail(code, message)


def check(text: Optional[str]) -> bool:
    """True if text is a valid UAE passport number."""
    return validate(text).is_valid


def mask(text: Optional[str]) -> str:
    """
    Mask a passport number, keeping the letter and the last 3 digits.

    Example: A1234567 -> A****567
    """
    if not text or not text.strip():
        return ""
    passport = normalize_input(text).upper()
    if not PASSPORT_PATTERN.fullmatch(passport):
        return passport
    return mask_middle(passport, 1, 3)


def parse_many(inputs: Iterable[Optional[str]]) -> List[BatchEntry]:
    """Validate a sequence of passport numbers, one BatchEntry per input."""
    return _parse_many(validate, inputs)
