"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from efw2.core.types import AddressOrder, PadName

PAD_CHARS: dict[str, str] = {"space": " ", "nul": "\x00"}


class EncodingConfig(BaseSettings):
    """Target-format variant: one deliberate choice per run."""

    model_config = {"env_prefix": "EFW2_ENCODING_"}

    pad: PadName = "space"
    address_order: AddressOrder = "location_delivery"

    @property
    def pad_char(self) -> str:
        return PAD_CHARS[self.pad]

    def address_slots(self, address_1: str, address_2: str) -> tuple[str, str]:
        """Return (location, delivery) column values for a street/secondary pair."""
        if self.address_order == "location_delivery":
            return address_2, address_1
        return address_1, address_2


class AppSettings(BaseSettings):
    """Root application settings."""

    model_config = {"env_prefix": "EFW2_"}

    log_level: str = "INFO"
    config_file: Path | None = None  # employer sidecar; defaults beside the executable

    # built per AppSettings() so a bad EFW2_ENCODING_* value fails there, not at import
    encoding: EncodingConfig = Field(default_factory=EncodingConfig)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level {v!r}")
        return level
