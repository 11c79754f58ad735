"""
Validation result model shared by all identifier validators.

Every validate() call returns a fresh, immutable result. The base
ValidationResult carries the outcome; EmiratesIdInfo, IbanInfo and
MobileInfo add the fields parsed out of a valid identifier. TRN and
passport validation return the base type.
"""

from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Dict, Any


class ErrorCode(str, Enum):
    """
    Machine-readable failure codes.

    Members are str subclasses, so ``result.error_code == "EMPTY_INPUT"``
    holds for both the member and its plain token.
    """
    EMPTY_INPUT = "EMPTY_INPUT"
    INVALID_LENGTH = "INVALID_LENGTH"
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_CHARACTERS = "INVALID_CHARACTERS"
    INVALID_COUNTRY_CODE = "INVALID_COUNTRY_CODE"
    INVALID_CHECKSUM = "INVALID_CHECKSUM"
    INVALID_PREFIX = "INVALID_PREFIX"
    INVALID_MOBILE_PREFIX = "INVALID_MOBILE_PREFIX"
    INVALID_BIRTH_YEAR = "INVALID_BIRTH_YEAR"
    INVALID_BIRTH_YEAR_RANGE = "INVALID_BIRTH_YEAR_RANGE"

    def __str__(self) -> str:
        return self.value


def current_year() -> int:
    """Current calendar year in UTC."""
    return datetime.now(timezone.utc).year


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one identifier."""
    is_valid: bool
    error_code: Optional[str] = None
    error_message: Optional[str] = None

    def __post_init__(self):
        if self.is_valid and (self.error_code or self.error_message):
            raise ValueError("A valid result cannot carry an error")
        if not self.is_valid and not self.error_code:
            raise ValueError("A failed result needs an error code")

    def __bool__(self) -> bool:
        return self.is_valid

    @classmethod
    def success(cls, **fields) -> "ValidationResult":
        return cls(is_valid=True, **fields)

    @classmethod
    def fail(cls, error_code: str, error_message: str) -> "ValidationResult":
        return cls(is_valid=False, error_code=error_code, error_message=error_message)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        if data["error_code"] is not None:
            data["error_code"] = str(data["error_code"])
        return data


@dataclass(frozen=True)
class EmiratesIdInfo(ValidationResult):
    """Emirates ID result. Parsed fields are None on failure."""
    raw_id: Optional[str] = None
    country_code: Optional[str] = None
    birth_year: Optional[int] = None
    sequence_number: Optional[str] = None
    check_digit: Optional[int] = None

    @property
    def approximate_age(self) -> Optional[int]:
        """
        Age in whole years from the birth year alone.

        The ID holds no day or month, so this can be one year too high
        for anyone whose birthday has not come yet this year.
        """
        if self.birth_year is None:
            return None
        return current_year() - self.birth_year

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["approximate_age"] = self.approximate_age
        return data


@dataclass(frozen=True)
class IbanInfo(ValidationResult):
    """UAE IBAN result. bank_name is None for unlisted bank codes."""
    raw_iban: Optional[str] = None
    country_code: Optional[str] = None
    check_digits: Optional[str] = None
    bank_code: Optional[str] = None
    bank_name: Optional[str] = None
    account_number: Optional[str] = None


@dataclass(frozen=True)
class MobileInfo(ValidationResult):
    """UAE mobile result."""
    normalized_number: Optional[str] = None     # +971501234567
    prefix: Optional[str] = None                # 050
    carrier: Optional[str] = None               # e& (Etisalat)
    international_format: Optional[str] = None  # +971 50 123 4567


@dataclass(frozen=True)
class BatchEntry:
    """Pairs one batch input, as given, with its validation result."""
    input: Optional[str]
    result: ValidationResult

    @property
    def is_valid(self) -> bool:
        return self.result.is_valid

    @property
    def error_code(self) -> Optional[str]:
        return self.result.error_code
