"""User preferences: singleton row with last unit, last bar and the coach-mark flag."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from barlog.core.config import Settings
from barlog.core.enums import Unit
from barlog.models.preferences import UserPreferences
from barlog.schemas.preferences import PreferencesRead, PreferencesUpdate
from barlog.services.plate_resolver import convert_to_lb, find_matching_by_id

logger = logging.getLogger(__name__)

# Singleton user until auth: one row with this UUID as primary key.
PREFERENCES_ID = uuid.UUID("00000000-0000-0000-0000-000000000001")


async def get_preferences_row(db: AsyncSession) -> UserPreferences | None:
    result = await db.execute(select(UserPreferences).where(UserPreferences.id == PREFERENCES_ID))
    return result.scalar_one_or_none()


def resolve_preferences(row: UserPreferences | None, settings: Settings) -> PreferencesRead:
    """
    Stored preferences with defaults filled in.
    A stored bar id that is no longer in the reference list falls back to the default bar.
    """
    if row is None:
        return PreferencesRead(
            unit=Unit(settings.default_unit),
            barbell_id=settings.default_barbell_id,
            saw_coach_mark=False,
        )
    barbell_id = row.barbell_id
    if find_matching_by_id(barbell_id) is None:
        logger.warning("Stored barbell id %r not found, using %r", barbell_id, settings.default_barbell_id)
        barbell_id = settings.default_barbell_id
    try:
        unit = Unit(row.unit)
    except ValueError:
        unit = Unit(settings.default_unit)
    return PreferencesRead(unit=unit, barbell_id=barbell_id, saw_coach_mark=row.saw_coach_mark)


async def update_preferences(
    db: AsyncSession, payload: PreferencesUpdate, settings: Settings
) -> PreferencesRead:
    """Create or partially update the singleton row."""
    row = await get_preferences_row(db)
    if row is None:
        row = UserPreferences(
            id=PREFERENCES_ID,
            unit=settings.default_unit,
            barbell_id=settings.default_barbell_id,
            saw_coach_mark=False,
        )
        db.add(row)

    data = payload.model_dump(exclude_unset=True)
    if data.get("unit") is not None:
        row.unit = Unit(data["unit"]).value
    if data.get("barbell_id") is not None:
        row.barbell_id = data["barbell_id"]
    if data.get("saw_coach_mark") is not None:
        row.saw_coach_mark = data["saw_coach_mark"]

    await db.flush()
    await db.refresh(row)
    return resolve_preferences(row, settings)


async def mark_coach_mark_seen(db: AsyncSession, settings: Settings) -> None:
    row = await get_preferences_row(db)
    if row is not None and row.saw_coach_mark:
        return
    await update_preferences(db, PreferencesUpdate(saw_coach_mark=True), settings)


async def note_target_weight(db: AsyncSession, settings: Settings, target_weight: float, unit: Unit) -> None:
    """Mark the coach mark seen once a target beyond the threshold (in lb) is dialed."""
    if convert_to_lb(target_weight, unit) > settings.coach_mark_threshold:
        await mark_coach_mark_seen(db, settings)
