"""User preferences: last unit, last bar, onboarding coach mark."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from barlog.core.config import Settings, get_settings
from barlog.db.session import get_db
from barlog.schemas.preferences import PreferencesRead, PreferencesUpdate
from barlog.services.preferences import get_preferences_row, resolve_preferences, update_preferences

router = APIRouter()


@router.get("", response_model=PreferencesRead)
async def get_preferences(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Stored preferences, or defaults when nothing has been saved yet."""
    row = await get_preferences_row(db)
    return resolve_preferences(row, settings)


@router.put("", response_model=PreferencesRead)
async def put_preferences(
    payload: PreferencesUpdate,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Create or partially update preferences. Session is committed by get_db after this returns."""
    return await update_preferences(db, payload, settings)
