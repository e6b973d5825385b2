"""EFW2 exception hierarchy."""

from __future__ import annotations


class EFW2Error(Exception):
    """Base exception for all EFW2 errors."""


class ConfigurationError(EFW2Error):
    """Employer configuration or run parameters are missing or malformed."""


class InputParseError(EFW2Error):
    """A wage data row could not be parsed into an employee wage record."""

    def __init__(self, message: str, row_number: int | None = None) -> None:
        self.row_number = row_number
        if row_number is not None:
            message = f"Row {row_number}: {message}"
        super().__init__(message)


class FieldTooLongError(EFW2Error):
    """A formatted value does not fit its column range."""

    def __init__(self, value: str, width: int, field_name: str | None = None) -> None:
        self.value = value
        self.width = width
        self.field_name = field_name
        label = f"Field {field_name!r}" if field_name else "Field"
        super().__init__(
            f"{label} value {value!r} is {len(value)} characters; at most {width} allowed"
        )


class InternalLengthInvariantError(EFW2Error):
    """An assembled record is not exactly 512 characters (encoder defect)."""

    def __init__(self, record_id: str, length: int, detail: str = "") -> None:
        self.record_id = record_id
        self.length = length
        message = f"{record_id} record is {length} characters, expected 512"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class InvalidCharacterError(EFW2Error):
    """A text value still holds non-printable characters after transliteration."""

    def __init__(self, value: str, field_name: str | None = None) -> None:
        self.value = value
        self.field_name = field_name
        label = f"Field {field_name!r}" if field_name else "Field"
        super().__init__(f"{label} value {value!r} contains characters that are not printable ASCII")
