"""Preprocessing applied to raw identifier input before validation."""

from .text_normalizer import (
    normalize_input,
    strip_chars,
    is_ascii_digits,
)

__all__ = [
    'normalize_input',
    'strip_chars',
    'is_ascii_digits',
]
