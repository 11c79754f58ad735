"""
Checksum algorithms used by the UAE identifier validators.

Libraries used:
- python-stdnum: Luhn (Emirates ID) and ISO 7064 Mod 97-10 (IBAN)
"""

from stdnum import luhn
from stdnum.iso7064 import mod_97_10


def luhn_validate(number: str) -> bool:
    """
    Validate a digit string with the Luhn mod-10 algorithm.

    Scanning right to left, every second digit starting with the one left
    of the check digit is doubled (minus 9 if above 9); the digit sum must
    be a multiple of 10.
    """
    return luhn.is_valid(number)


def luhn_check_digit(number: str) -> int:
    """
    Calculate the Luhn check digit to append to a digit string.

    Doubling starts at the rightmost digit of ``number`` because the check
    digit will sit to its right. Result is (10 - sum mod 10) mod 10.
    """
    return int(luhn.calc_check_digit(number))


def mod97_validate(iban: str) -> bool:
    """
    Validate an IBAN using ISO 13616 Mod-97.

    The first 4 characters move to the end, letters become two-digit
    numbers (A=10 ... Z=35) and the resulting numeral must be 1 mod 97.
    """
    rearranged = iban[4:] + iban[:4]
    return mod_97_10.checksum(rearranged) == 1
