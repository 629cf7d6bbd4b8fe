"""User preference schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from barlog.core.enums import Unit


class PreferencesRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    unit: Unit
    barbell_id: str
    saw_coach_mark: bool


class PreferencesUpdate(BaseModel):
    unit: Optional[Unit] = None
    barbell_id: Optional[str] = Field(None, min_length=1, max_length=16)
    saw_coach_mark: Optional[bool] = None
