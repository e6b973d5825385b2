"""Employee wage record: one W-2 worth of data, one RW record.

Every row of the wage file is parsed into this schema. Amounts are held as
Decimal at cent precision so totals never drift.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from efw2.models.validators import check_amount, normalize_zip, parse_amount, require_digits

# Monetary fields that are encoded on RW and summed onto RT, in column order.
SUMMABLE_FIELDS: tuple[str, ...] = (
    "wages",
    "federal_tax",
    "ss_wages",
    "ss_tax",
    "medicare_wages",
    "medicare_tax",
    "ss_tips",
)

_OPTIONAL_AMOUNTS = ("ss_tips", "state_wages", "state_tax")


class EmployeeWageRecord(BaseModel):
    """Single employee's annual wage and withholding record."""

    # --- Identity Fields ---
    ssn: str

    # --- Name Fields ---
    first_name: str = Field(min_length=1)
    middle_initial: str = ""
    last_name: str = Field(min_length=1)
    suffix: str = ""

    # --- Address Fields ---
    address_1: str = ""
    address_2: str = ""
    city: str = ""
    state: str = Field(default="", max_length=2)
    zip: str
    email: str = ""

    # --- Federal Wage Fields (Boxes 1-7) ---
    wages: Decimal
    federal_tax: Decimal
    ss_wages: Decimal
    ss_tax: Decimal
    medicare_wages: Decimal
    medicare_tax: Decimal
    ss_tips: Decimal = Decimal("0")

    # --- State Fields (Boxes 15-17) ---
    taxing_state: str = ""
    state_id: str = ""
    state_wages: Decimal = Decimal("0")
    state_tax: Decimal = Decimal("0")

    model_config = {"str_strip_whitespace": True, "frozen": True}

    @field_validator("ssn")
    @classmethod
    def _ssn_is_nine_digits(cls, v: str) -> str:
        return require_digits(v, "SSN", length=9)

    @field_validator("zip")
    @classmethod
    def _zip_is_valid(cls, v: str) -> str:
        return normalize_zip(v)

    @field_validator("state", "taxing_state", mode="before")
    @classmethod
    def _upper(cls, v: object) -> object:
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator(*SUMMABLE_FIELDS, "state_wages", "state_tax", mode="before")
    @classmethod
    def _destring(cls, v: object, info: ValidationInfo) -> object:
        v = parse_amount(v)
        if v == "" and info.field_name in _OPTIONAL_AMOUNTS:
            return Decimal("0")
        return v

    @field_validator(*SUMMABLE_FIELDS, "state_wages", "state_tax")
    @classmethod
    def _cent_precision(cls, v: Decimal) -> Decimal:
        return check_amount(v)

    @property
    def zip5(self) -> str:
        return self.zip[:5]

    @property
    def zip_ext(self) -> str:
        return self.zip[5:]

    @property
    def amounts(self) -> dict[str, Decimal]:
        """The seven summable amounts keyed by field name, in column order."""
        return {name: getattr(self, name) for name in SUMMABLE_FIELDS}
