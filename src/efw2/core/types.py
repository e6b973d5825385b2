"""Type aliases used across the EFW2 encoder."""

from __future__ import annotations

from typing import Literal

PadName = Literal["space", "nul"]
AddressOrder = Literal["location_delivery", "delivery_location"]
