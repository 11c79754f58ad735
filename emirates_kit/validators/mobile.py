"""
UAE mobile number validation.

Accepted input shapes (spaces, dashes and parentheses are ignored):
- +971 5X XXX XXXX   international
- 00971 5X XXX XXXX  international, 00 dialling prefix
- 971 5X XXX XXXX    international without "+" (12 digits)
- 05X XXX XXXX       national (10 digits)
- 5X XXX XXXX        bare subscriber number (9 digits)

Libraries used:
- phonenumbers: E.164 and international formatting of valid numbers
"""

import logging
from typing import Iterable, List, Optional

import phonenumbers
from phonenumbers import PhoneNumberFormat

from emirates_kit.data import get_carrier
from emirates_kit.preprocessing import normalize_input, strip_chars, is_ascii_digits
from .batch import parse_many as _parse_many
from .masking import mask_middle
from .results import BatchEntry, ErrorCode, MobileInfo

logger = logging.getLogger(__name__)

COUNTRY_CALLING_CODE = 971
LOCAL_LENGTH = 9


def _compact(text: Optional[str]) -> str:
    return strip_chars(normalize_input(text), ' -()')


def _local_part(number: str) -> str:
    """Strip the country/trunk prefix, most specific first."""
    if number.startswith("+971"):
        return number[4:]
    if number.startswith("00971"):
        return number[5:]
    if number.startswith("971") and len(number) == 12:
        return number[3:]
    if number.startswith("0") and len(number) == 10:
        return number[1:]
    return number


def _fail(code: ErrorCode, message: str) -> MobileInfo:
    logger.debug(f"Mobile number rejected: {code}")
    return MobileInfo.fail(code, message)


def validate(text: Optional[str]) -> MobileInfo:
    """
    Validate a UAE mobile number and resolve its carrier.

    Args:
        text: Mobile number in any accepted shape

    Returns:
        MobileInfo with the E.164 number, national prefix and carrier
    """
    number = _compact(text)
    if not number:
        return _fail(ErrorCode.EMPTY_INPUT, "Mobile number cannot be empty.")

    local = _local_part(number)

    if len(local) != LOCAL_LENGTH:
        return _fail(ErrorCode.INVALID_LENGTH, f"Must be {LOCAL_LENGTH} digits after the country code.")

    if not is_ascii_digits(local):
        return _fail(ErrorCode.INVALID_CHARACTERS, "Mobile number must contain digits only.")

    if local[0] != "5":
        return _fail(ErrorCode.INVALID_PREFIX, "UAE mobile numbers start with 5 after the country code.")

    prefix = "0" + local[:2]
    carrier = get_carrier(prefix)
    if carrier is None:
        return _fail(ErrorCode.INVALID_MOBILE_PREFIX, f"'{prefix}' is not a valid UAE mobile prefix.")

    parsed = phonenumbers.PhoneNumber(country_code=COUNTRY_CALLING_CODE, national_number=int(local))
    return MobileInfo.success(
        normalized_number=phonenumbers.format_number(parsed, PhoneNumberFormat.E164),
        prefix=prefix,
        carrier=carrier,
        international_format=phonenumbers.format_number(parsed, PhoneNumberFormat.INTERNATIONAL),
    )


def check(text: Optional[str]) -> bool:
    """True if text is a valid UAE mobile number."""
    return validate(text).is_valid


def sanitize(text: Optional[str]) -> str:
    """
    Normalize a UAE mobile number to +971XXXXXXXXX by prefix shape only.

    Carrier prefix and digits are not checked; use validate() for that.
    Unrecognized shapes are returned trimmed but otherwise unchanged.
    """
    if not text or not text.strip():
        return ""
    number = _compact(text)

    if number.startswith("+971") and len(number) == 13:
        return number
    if number.startswith("00971") and len(number) == 14:
        return "+" + number[2:]
    if number.startswith("971") and len(number) == 12:
        return "+" + number
    if number.startswith("0") and len(number) == 10:
        return "+971" + number[1:]
    if number.startswith("5") and len(number) == LOCAL_LENGTH:
        return "+971" + number

    return text.strip()


def mask(text: Optional[str]) -> str:
    """
    Mask a valid mobile number in E.164 form, hiding the middle 4 digits.

    Example: 0501234567 -> +9715****567
    """
    if not text or not text.strip():
        return ""
    info = validate(text)
    if not info.is_valid:
        return text.strip()
    return mask_middle(info.normalized_number, 6, 3)


def parse_many(inputs: Iterable[Optional[str]]) -> List[BatchEntry]:
    """Validate a sequence of mobile numbers, one BatchEntry per input."""
    return _parse_many(validate, inputs)
