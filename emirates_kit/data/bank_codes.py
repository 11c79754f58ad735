"""
UAE bank codes for IBAN bank resolution.

The bank code is the 3-digit field at positions 5-7 of a UAE IBAN
(AE + 2 check digits + bank code + 16-digit account number).
"""

from types import MappingProxyType
from typing import Optional

UAE_BANK_CODES = MappingProxyType({
    "010": "National Bank of Fujairah (NBF)",
    "012": "Invest Bank",
    "016": "National Bank of Ras Al-Khaimah (RAKBANK)",
    "020": "Mashreq Bank",
    "022": "Standard Chartered UAE",
    "023": "Commercial Bank of Dubai (CBD)",
    "025": "Abu Dhabi Islamic Bank (ADIB)",
    "030": "Abu Dhabi Commercial Bank (ADCB)",
    "031": "HSBC UAE",
    "032": "Emirates Islamic Bank",
    "033": "Emirates NBD",
    "035": "First Abu Dhabi Bank (FAB)",
    "040": "Dubai Islamic Bank (DIB)",
    "045": "Sharjah Islamic Bank",
    "046": "Bank of Sharjah",
    "048": "Lloyds Bank UAE",
    "052": "Barclays UAE",
    "057": "Citibank UAE",
    "060": "United Arab Bank (UAB)",
    "065": "Ajman Bank",
})


def resolve_bank(bank_code: str) -> Optional[str]:
    """Return the bank name for a 3-digit code, or None if unknown."""
    return UAE_BANK_CODES.get(bank_code)


def is_known_bank(bank_code: str) -> bool:
    return bank_code in UAE_BANK_CODES
