"""Wearable companion schemas: snapshot out, dialed value in."""

from pydantic import BaseModel, Field

from barlog.core.constants import MAX_WEIGHT
from barlog.core.enums import Unit


class WatchSnapshot(BaseModel):
    weight: float
    unit: Unit
    label: str = Field(..., description='Display weight, e.g. "225 lb"')
    logs: str = Field(..., description="Plate description of the current loadout")


class WatchDial(BaseModel):
    number: float = Field(..., le=MAX_WEIGHT, description="Value dialed on the watch; ignored unless positive")
