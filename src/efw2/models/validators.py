"""Shared normalizers for identifiers, ZIP codes and money amounts."""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Any

_SEPARATORS = re.compile(r"[\s\-().+/]")
_AMOUNT_IGNORE = re.compile(r"[\s$,]")
CENT = Decimal("0.01")


def strip_separators(value: str) -> str:
    """Remove punctuation commonly used to group digits (``12-3456789``)."""
    return _SEPARATORS.sub("", value)


def require_digits(value: str, label: str, length: int | None = None, max_length: int | None = None) -> str:
    digits = strip_separators(value)
    if digits and not digits.isdigit():
        raise ValueError(f"{label} must contain only digits")
    if length is not None and len(digits) != length:
        raise ValueError(f"{label} must be {length} digits, got {len(digits)}")
    if max_length is not None and len(digits) > max_length:
        raise ValueError(f"{label} must be at most {max_length} digits")
    return digits


def normalize_zip(value: str) -> str:
    """Validate a 5-digit ZIP or ZIP+4 and return it as 5 or 9 bare digits."""
    digits = strip_separators(value)
    if not digits.isdigit() or len(digits) not in (5, 9):
        raise ValueError("ZIP code must be 5 digits or ZIP+4")
    return digits


def parse_amount(value: Any) -> Any:
    """Coerce a text amount to Decimal without passing through binary float.

    Blank strings are returned unchanged so required fields still fail
    validation and defaulted fields can map them to zero.
    """
    if isinstance(value, float):
        return Decimal(str(value))
    if not isinstance(value, str):
        return value
    text = _AMOUNT_IGNORE.sub("", value)
    if not text:
        return text
    try:
        return Decimal(text)
    except InvalidOperation as exc:
        raise ValueError(f"invalid amount {value!r}") from exc


def check_amount(value: Decimal) -> Decimal:
    if not value.is_finite():
        raise ValueError("amount must be a finite number")
    if value < 0:
        raise ValueError("amount must not be negative")
    try:
        exact = value == value.quantize(CENT)
    except InvalidOperation as exc:
        raise ValueError("amount is out of range") from exc
    if not exact:
        raise ValueError("amount must not be finer than one cent")
    return value
