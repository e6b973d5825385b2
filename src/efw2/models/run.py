"""Per-run parameters supplied on the command line."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator


def previous_tax_year() -> int:
    return date.today().year - 1


class RunParameters(BaseModel):
    """Tax year, resubmission and final-year settings for one filing."""

    tax_year: int = Field(default_factory=previous_tax_year, ge=1000, le=9999)
    resub_wfid: Optional[str] = Field(default=None, max_length=6)
    final_year: bool = False

    model_config = {"str_strip_whitespace": True, "frozen": True}

    @field_validator("resub_wfid")
    @classmethod
    def _blank_is_absent(cls, v: Optional[str]) -> Optional[str]:
        return v or None

    @property
    def is_resubmission(self) -> bool:
        return self.resub_wfid is not None
