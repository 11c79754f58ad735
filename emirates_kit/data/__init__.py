"""
Data modules for EmiratesKit.

Static lookup tables used to enrich validation results.
"""

from .bank_codes import UAE_BANK_CODES, resolve_bank, is_known_bank
from .mobile_prefixes import MOBILE_PREFIXES, get_carrier, is_valid_prefix

__all__ = [
    "UAE_BANK_CODES",
    "resolve_bank",
    "is_known_bank",
    "MOBILE_PREFIXES",
    "get_carrier",
    "is_valid_prefix",
]
