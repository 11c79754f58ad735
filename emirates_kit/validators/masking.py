"""
Display redaction helpers.

Masking hides the middle of an identifier for logs and UIs. It is not
encryption: the kept characters and the length are still visible.
"""

from typing import Optional

from emirates_kit.kit_config import get_config


def mask_char() -> str:
    """The configured mask character (default "*")."""
    return get_config().mask_char


def mask_middle(value: str, keep_start: int, keep_end: int, char: Optional[str] = None) -> str:
    """
    Replace everything between the first keep_start and last keep_end
    characters with the mask character, preserving length.

    Args:
        value: Text to mask
        keep_start: Leading characters left visible
        keep_end: Trailing characters left visible
        char: Mask character (default: configured mask_char)

    Returns:
        Masked text of the same length, or value unchanged when it is too
        short to hide anything
    """
    hidden = len(value) - keep_start - keep_end
    if hidden <= 0:
        return value
    char = char or mask_char()
    return value[:keep_start] + char * hidden + value[len(value) - keep_end:]
