"""Barbell reference schemas."""

from pydantic import BaseModel, ConfigDict


class BarbellRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    lbs: float
    kg: float
    label: str
    description: str
