"""Wearable companion: snapshot for the watch face, values dialed on the watch."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from barlog.core.config import Settings, get_settings
from barlog.db.session import get_db
from barlog.schemas.watch import WatchDial, WatchSnapshot
from barlog.services.loadout import apply_target
from barlog.services.plate_loader import PlateLoader, get_plate_loader
from barlog.services.preferences import get_preferences_row, note_target_weight, resolve_preferences
from barlog.services.watch import build_snapshot

router = APIRouter()


@router.get("/snapshot", response_model=WatchSnapshot)
async def watch_snapshot(
    loader: PlateLoader = Depends(get_plate_loader),
    settings: Settings = Depends(get_settings),
):
    return build_snapshot(loader, settings)


@router.post("/dial", response_model=WatchSnapshot)
async def watch_dial(
    payload: WatchDial,
    loader: PlateLoader = Depends(get_plate_loader),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Apply a value dialed on the watch to the shared loadout, keeping the current
    unit and bar (or the stored preferences when nothing is loaded yet).
    Zero or negative values are ignored.
    """
    if payload.number > 0:
        if loader.inputs is not None:
            unit, barbell_id = loader.inputs.unit, loader.inputs.barbell_id
        else:
            prefs = resolve_preferences(await get_preferences_row(db), settings)
            unit, barbell_id = prefs.unit, prefs.barbell_id
        apply_target(loader, payload.number, unit, barbell_id)
        await note_target_weight(db, settings, payload.number, unit)
    return build_snapshot(loader, settings)
