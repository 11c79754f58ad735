"""
Emirates ID (UAE national identity number) validation.

Format: 784-YYYY-NNNNNNN-C (15 digits, dashes optional)
- 784: ISO 3166 numeric country code of the UAE
- YYYY: Year of birth
- NNNNNNN: Sequence number
- C: Luhn check digit over the preceding 14 digits

Usage:
    from emirates_kit.validators import emirates_id

    info = emirates_id.validate("784-1990-1234567-6")
    if info.is_valid:
        print(info.birth_year, info.approximate_age)
"""

import logging
import re
from typing import Iterable, List, Optional

from emirates_kit.preprocessing import normalize_input, strip_chars, is_ascii_digits
from .batch import parse_many as _parse_many
from .checksums import luhn_validate, luhn_check_digit
from .masking import mask_char
from .results import BatchEntry, EmiratesIdInfo, ErrorCode, current_year

logger = logging.getLogger(__name__)

COUNTRY_CODE = "784"
TOTAL_DIGITS = 15
MIN_BIRTH_YEAR = 1900

FORMATTED_PATTERN = re.compile(r'784-[0-9]{4}-[0-9]{7}-[0-9]')


def _fail(code: ErrorCode, message: str) -> EmiratesIdInfo:
    logger.debug(f"Emirates ID rejected: {code}")
    return EmiratesIdInfo.fail(code, message)


def validate(text: Optional[str]) -> EmiratesIdInfo:
    """
    Validate an Emirates ID and parse its fields.

    Args:
        text: Raw 15-digit or dash-formatted Emirates ID

    Returns:
        EmiratesIdInfo; on failure error_code tells what was wrong
    """
    trimmed = normalize_input(text)
    if not trimmed:
        return _fail(ErrorCode.EMPTY_INPUT, "Emirates ID cannot be empty.")

    if '-' in trimmed:
        # Formatted input must have dashes exactly at 784-YYYY-NNNNNNN-C
        if not FORMATTED_PATTERN.fullmatch(trimmed):
            return _fail(
                ErrorCode.INVALID_FORMAT,
                "Emirates ID must be in format 784-YYYY-NNNNNNN-C "
                "(e.g. 784-1990-1234567-6). Check dash positions and digit counts.",
            )
        digits = trimmed.replace('-', '')
    else:
        if len(trimmed) != TOTAL_DIGITS:
            return _fail(
                ErrorCode.INVALID_LENGTH,
                f"Emirates ID must be {TOTAL_DIGITS} digits. Got {len(trimmed)}.",
            )
        if not is_ascii_digits(trimmed):
            return _fail(
                ErrorCode.INVALID_CHARACTERS,
                "Emirates ID must contain digits only (or use format 784-YYYY-NNNNNNN-C).",
            )
        if not trimmed.startswith(COUNTRY_CODE):
            return _fail(ErrorCode.INVALID_COUNTRY_CODE, f"Emirates ID must start with {COUNTRY_CODE}.")
        digits = trimmed

    year_digits = digits[3:7]
    if not is_ascii_digits(year_digits):
        return _fail(ErrorCode.INVALID_BIRTH_YEAR, "Invalid birth year in Emirates ID.")

    birth_year = int(year_digits)
    this_year = current_year()
    if not MIN_BIRTH_YEAR <= birth_year <= this_year:
        return _fail(
            ErrorCode.INVALID_BIRTH_YEAR_RANGE,
            f"Birth year {birth_year} is out of valid range ({MIN_BIRTH_YEAR}-{this_year}).",
        )

    if not luhn_validate(digits):
        return _fail(ErrorCode.INVALID_CHECKSUM, "Emirates ID checksum is invalid (Luhn algorithm failed).")

    return EmiratesIdInfo.success(
        raw_id=digits,
        country_code=digits[:3],
        birth_year=birth_year,
        sequence_number=digits[7:14],
        check_digit=int(digits[14]),
    )


def check(text: Optional[str]) -> bool:
    """True if text is a valid Emirates ID."""
    return validate(text).is_valid


def compute_check_digit(first_14_digits: str) -> int:
    """
    Compute the Luhn check digit for the first 14 digits of an Emirates ID.

    Raises:
        ValueError: If the argument is not exactly 14 digits
    """
    if not isinstance(first_14_digits, str) or len(first_14_digits) != 14 \
            or not is_ascii_digits(first_14_digits):
        raise ValueError(f"Must be exactly 14 digits: {first_14_digits!r}")
    return luhn_check_digit(first_14_digits)


def meets_minimum_age(text: Optional[str], minimum_age: int) -> Optional[bool]:
    """
    Check a minimum age using the birth year in an Emirates ID.

    Only the birth year is encoded, so someone born in the threshold year
    may or may not have had their birthday yet.

    Args:
        text: Emirates ID
        minimum_age: Required age in years (>= 0)

    Returns:
        True if old enough for certain, False if too young for certain,
        None if the ID is invalid or the birth year is the threshold year

    Raises:
        ValueError: If minimum_age is negative
    """
    if minimum_age < 0:
        raise ValueError(f"minimum_age must be non-negative, got {minimum_age}")

    info = validate(text)
    if not info.is_valid:
        return None

    threshold = current_year() - minimum_age
    if info.birth_year < threshold:
        return True
    if info.birth_year > threshold:
        return False
    return None


def _compact(text: Optional[str]) -> str:
    return strip_chars(normalize_input(text), '- ')


def sanitize(text: Optional[str]) -> str:
    """
    Reformat an Emirates ID to canonical 784-YYYY-NNNNNNN-C.

    Accepts raw digits, spaces or dashes as separators. Does not validate;
    input that is not 15 digits is returned trimmed but otherwise unchanged.
    """
    if not text or not text.strip():
        return ""
    digits = _compact(text)
    if len(digits) != TOTAL_DIGITS or not is_ascii_digits(digits):
        return text.strip()
    return f"{digits[:3]}-{digits[3:7]}-{digits[7:14]}-{digits[14]}"


def mask(text: Optional[str]) -> str:
    """
    Mask an Emirates ID for display, hiding birth year and sequence.

    Example: 784199012345676 -> 784-****-*******-6
    """
    if not text or not text.strip():
        return ""
    digits = _compact(text)
    if len(digits) != TOTAL_DIGITS or not is_ascii_digits(digits):
        return text.strip()
    char = mask_char()
    return f"{COUNTRY_CODE}-{char * 4}-{char * 7}-{digits[14]}"


def parse_many(inputs: Iterable[Optional[str]]) -> List[BatchEntry]:
    """Validate a sequence of Emirates IDs, one BatchEntry per input."""
    return _parse_many(validate, inputs)
