"""Weight log schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from barlog.core.constants import MAX_WEIGHT
from barlog.core.enums import Unit


class WeightLogCreate(BaseModel):
    weight: float = Field(..., ge=0, le=MAX_WEIGHT, description="Total weight lifted, in `unit`")
    unit: Unit
    barbell_id: str = Field(..., min_length=1, max_length=16)
    plate_description: Optional[str] = Field(
        None,
        max_length=255,
        description="Plates used. If omitted, computed from weight, unit and barbell.",
    )


class WeightLogRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    timestamp: int = Field(..., description="Milliseconds since epoch; identifies the entry")
    weight: float
    unit: Unit
    barbell_id: str
    plate_description: str
    created_at: datetime
