"""Text and numeric field formatters.

Both formatters fail with FieldTooLongError instead of truncating: a
silently shortened name or amount would corrupt the filing.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal

from unidecode import unidecode

from efw2.core.exceptions import FieldTooLongError, InvalidCharacterError

_HUNDRED = Decimal("100")
_WHOLE = Decimal("1")
_WHITESPACE_CONTROLS = re.compile(r"[\t\n\r\v\f]+")
_NOT_PRINTABLE = re.compile(r"[^ -~]")


def normalize_text(value: str, field_name: str | None = None) -> str:
    """Transliterate to plain ASCII and uppercase.

    Line breaks and tabs collapse to a single space; any other character
    outside printable ASCII raises InvalidCharacterError.
    """
    text = _WHITESPACE_CONTROLS.sub(" ", unidecode(value)).upper()
    if _NOT_PRINTABLE.search(text):
        raise InvalidCharacterError(text, field_name)
    return text


def format_text(value: str, width: int, pad_char: str = " ", field_name: str | None = None) -> str:
    """Left-justify normalized text in a ``width``-character slot."""
    text = normalize_text(value, field_name)
    if len(text) > width:
        raise FieldTooLongError(text, width, field_name)
    return text.ljust(width, pad_char)


def to_cents(value: Decimal | int | str | float) -> int:
    """Convert a dollar amount to integer cents, rounding half away from zero."""
    if isinstance(value, float):
        value = str(value)
    amount = Decimal(value)
    if amount < 0:
        raise ValueError(f"amount must not be negative, got {amount}")
    return int((amount * _HUNDRED).quantize(_WHOLE, rounding=ROUND_HALF_UP))


def format_number(value: int, width: int, field_name: str | None = None) -> str:
    """Right-justify a non-negative integer, zero-filled to ``width`` digits."""
    if value < 0:
        raise ValueError(f"number must not be negative, got {value}")
    digits = str(value)
    if len(digits) > width:
        raise FieldTooLongError(digits, width, field_name)
    return digits.zfill(width)


def format_amount(value: Decimal | int | str | float, width: int, field_name: str | None = None) -> str:
    """Encode a dollar amount as zero-filled integer cents."""
    return format_number(to_cents(value), width, field_name)
