"""
UAE mobile network prefixes.

Prefixes are written in national form ("0" + the first two digits of the
9-digit subscriber number).
"""

from types import MappingProxyType
from typing import Optional

ETISALAT = "e& (Etisalat)"
DU = "du"

MOBILE_PREFIXES = MappingProxyType({
    # e& (Etisalat)
    "050": ETISALAT,
    "052": ETISALAT,
    "054": ETISALAT,
    "056": ETISALAT,
    "057": ETISALAT,
    # du
    "055": DU,
    "058": DU,
    "059": DU,
})


def get_carrier(prefix: str) -> Optional[str]:
    """Return the carrier for a 3-digit prefix such as "050", or None."""
    return MOBILE_PREFIXES.get(prefix)


def is_valid_prefix(prefix: str) -> bool:
    return prefix in MOBILE_PREFIXES
