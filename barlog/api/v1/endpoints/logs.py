"""Weight log: list, append, delete by timestamp, clear."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from barlog.core.config import Settings, get_settings
from barlog.db.session import get_db
from barlog.schemas.weight_log import WeightLogCreate, WeightLogRead
from barlog.services.weight_log import add_log, clear_logs, delete_log, list_logs

router = APIRouter()


@router.get("", response_model=list[WeightLogRead])
async def list_weight_logs(
    on_date: Optional[date] = Query(None, alias="date", description="Only entries from this UTC day"),
    db: AsyncSession = Depends(get_db),
):
    """Entries newest first."""
    return await list_logs(db, on_date)


@router.post("", response_model=WeightLogRead, status_code=201)
async def create_weight_log(
    payload: WeightLogCreate,
    response: Response,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Log a lift. Repeating the latest entry's weight is a no-op: returns that entry with 200.
    Only the most recent `max_weight_logs` entries are kept.
    """
    entry, created = await add_log(db, payload, settings.max_weight_logs)
    if not created:
        response.status_code = 200
    return entry


@router.delete("/{timestamp}", status_code=204)
async def delete_weight_log(timestamp: int, db: AsyncSession = Depends(get_db)):
    if not await delete_log(db, timestamp):
        raise HTTPException(status_code=404, detail="Weight log not found")


@router.delete("", status_code=204)
async def clear_weight_logs(db: AsyncSession = Depends(get_db)):
    await clear_logs(db)
