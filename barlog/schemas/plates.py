"""Plate calculator and shared loadout schemas."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from barlog.core.constants import MAX_WEIGHT
from barlog.core.enums import Unit


class PlateCount(BaseModel):
    weight: float = Field(..., description="Weight of one plate, in the response unit")
    count: int = Field(..., ge=0, description="Plates of this weight on one side")


class PlateCalculationRead(BaseModel):
    target_weight: float
    bar_weight: float
    unit: Unit
    barbell_id: Optional[str] = None
    per_side: float = Field(..., description="Requested plate weight per side (may not be reachable)")
    plates: list[PlateCount] = Field(default_factory=list, description="Plates per side, heaviest first")
    description: str
    total_weight: float = Field(..., description="Bar + plates actually loaded")


class DenominationsRead(BaseModel):
    unit: Unit
    plates: list[float]


class LoadoutUpdate(BaseModel):
    target_weight: float = Field(..., le=MAX_WEIGHT, description="Total weight to load, in `unit`")
    unit: Unit = Unit.LB
    barbell_id: str = Field("1", min_length=1, max_length=16)


class LoadoutRead(BaseModel):
    target_weight: Optional[float] = None
    unit: Optional[Unit] = None
    barbell_id: Optional[str] = None
    plates: list[PlateCount] = Field(default_factory=list)
    description: str
