"""Employer / submitter identity shared by the RA and RE records.

Loaded once per run from the sidecar configuration file and never mutated.
The same identity fills both the "company" and the "submitter" blocks of
the RA record, since a single employer files for itself.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from efw2.models.validators import normalize_zip, require_digits


class EmployerConfig(BaseModel):
    """Submitter and employer identity for one filing."""

    # --- Identity Fields ---
    ein: str
    user_id: str  # SSA Business Services Online user ID
    vendor_code: str = Field(default="", max_length=4)
    software_code: Literal["98", "99"] = "98"  # 98 = in-house, 99 = off-the-shelf

    # --- Company Block ---
    company_name: str = Field(min_length=1)
    address_1: str = ""  # street / delivery line
    address_2: str = ""  # suite / attention line
    city: str = ""
    state: str = Field(default="", max_length=2)
    zip: str

    # --- Contact Block ---
    contact_name: str = ""
    phone: str = ""
    phone_ext: str = ""
    email: str = ""
    fax: str = ""

    # --- Employer Classification ---
    employment_code: Literal["A", "H", "M", "Q", "R", "X", "F"] = "R"
    kind_of_employer: Literal["F", "S", "T", "Y", "N"] = "N"
    third_party_sick_pay: bool = False
    preparer_code: Literal["A", "L", "S", "P", "O"] = "L"

    model_config = {"str_strip_whitespace": True, "frozen": True}

    @field_validator("ein")
    @classmethod
    def _ein_is_nine_digits(cls, v: str) -> str:
        return require_digits(v, "EIN", length=9)

    @field_validator("user_id")
    @classmethod
    def _user_id_is_eight_chars(cls, v: str) -> str:
        if len(v) != 8:
            raise ValueError(f"user ID must be exactly 8 characters, got {len(v)}")
        return v

    @field_validator("zip")
    @classmethod
    def _zip_is_valid(cls, v: str) -> str:
        return normalize_zip(v)

    @field_validator("phone")
    @classmethod
    def _phone_digits(cls, v: str) -> str:
        return require_digits(v, "phone", max_length=15)

    @field_validator("phone_ext")
    @classmethod
    def _phone_ext_digits(cls, v: str) -> str:
        return require_digits(v, "phone extension", max_length=5)

    @field_validator("fax")
    @classmethod
    def _fax_digits(cls, v: str) -> str:
        return require_digits(v, "fax", max_length=10)

    @field_validator("state", "employment_code", "kind_of_employer", "preparer_code", mode="before")
    @classmethod
    def _upper(cls, v: object) -> object:
        return v.strip().upper() if isinstance(v, str) else v

    @property
    def zip5(self) -> str:
        return self.zip[:5]

    @property
    def zip_ext(self) -> str:
        return self.zip[5:]
