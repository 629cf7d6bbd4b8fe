"""Shared current loadout: what is on the bar right now."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from barlog.core.config import Settings, get_settings
from barlog.db.session import get_db
from barlog.schemas.plates import LoadoutRead, LoadoutUpdate
from barlog.services.loadout import apply_target, read_loadout
from barlog.services.plate_loader import PlateLoader, get_plate_loader
from barlog.services.preferences import note_target_weight

router = APIRouter()


@router.get("", response_model=LoadoutRead)
async def get_loadout(loader: PlateLoader = Depends(get_plate_loader)):
    return read_loadout(loader)


@router.put("", response_model=LoadoutRead)
async def set_loadout(
    payload: LoadoutUpdate,
    loader: PlateLoader = Depends(get_plate_loader),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Recompute plates for a new target/bar/unit and replace the shared loadout."""
    apply_target(loader, payload.target_weight, payload.unit, payload.barbell_id)
    await note_target_weight(db, settings, payload.target_weight, payload.unit)
    return read_loadout(loader)


@router.delete("", response_model=LoadoutRead)
async def unload(loader: PlateLoader = Depends(get_plate_loader)):
    """Take every plate off."""
    loader.unload()
    return read_loadout(loader)
