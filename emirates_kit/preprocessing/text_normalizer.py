"""
Input normalization for identifier validation.

Identifiers are often pasted from PDFs, web forms and chat apps, which
bring along characters that look right but break exact matching:
- Fullwidth characters (０ → 0, Ａ → A)
- Zero-width characters that split digit runs
- Typographic hyphens and dashes in formatted IDs (784‐1990‐...)
"""

import re
import unicodedata
from typing import Iterable, Optional

# U+200B-U+200F: zero width space/joiners and direction marks
# U+2060: Word Joiner, U+FEFF: Zero Width No-Break Space (BOM)
_ZERO_WIDTH = re.compile(r'[\u200b-\u200f\u2060\ufeff]')

# U+2010-U+2015: hyphen, non-breaking hyphen, figure dash, en/em dash, bar
# U+2212: minus sign
_DASHES = re.compile(r'[\u2010-\u2015\u2212]')

_ASCII_DIGITS = re.compile(r'[0-9]+')


def normalize_input(text: Optional[str]) -> str:
    """
    Normalize raw identifier input.

    Args:
        text: Raw input, may be None

    Returns:
        NFKC-normalized text with zero-width characters removed, dashes
        unified to "-" and surrounding whitespace trimmed ("" for None)
    """
    if not text:
        return ""

    text = unicodedata.normalize('NFKC', text)
    text = _ZERO_WIDTH.sub('', text)
    text = _DASHES.sub('-', text)
    return text.strip()


def strip_chars(text: str, chars: Iterable[str]) -> str:
    """Remove every occurrence of the given separator characters."""
    for char in chars:
        text = text.replace(char, '')
    return text


def is_ascii_digits(text: str) -> bool:
    """True if text is non-empty and made of 0-9 only."""
    return _ASCII_DIGITS.fullmatch(text) is not None
