"""Weight log store: append newest-first, skip repeats, keep the most recent N."""

from __future__ import annotations

import logging
import time
from datetime import date, datetime, time as dtime, timedelta, timezone

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from barlog.core.enums import Unit
from barlog.models.weight_log import WeightLog
from barlog.schemas.weight_log import WeightLogCreate
from barlog.services.loadout import resolve_barbell
from barlog.services.plate_resolver import calculate_plates, describe_plate_set

logger = logging.getLogger(__name__)

INSERT_ATTEMPTS = 3


def _now_ms() -> int:
    return int(time.time() * 1000)


def describe_for_log(weight: float, unit: Unit, barbell_id: str) -> str:
    """Plate description for a logged weight on the given bar."""
    barbell = resolve_barbell(barbell_id)
    plates = calculate_plates(weight, barbell.weight_in(unit), unit)
    return describe_plate_set(plates, unit)


async def get_latest_log(db: AsyncSession) -> WeightLog | None:
    result = await db.execute(select(WeightLog).order_by(WeightLog.timestamp.desc()).limit(1))
    return result.scalar_one_or_none()


async def add_log(db: AsyncSession, payload: WeightLogCreate, max_logs: int) -> tuple[WeightLog, bool]:
    """
    Append a log entry. Returns (entry, created).

    If the latest entry already has the same weight nothing is written and the
    latest entry is returned with created=False. After writing, entries beyond
    the newest ``max_logs`` are deleted.
    """
    latest = await get_latest_log(db)
    if latest is not None and latest.weight == payload.weight:
        logger.debug("Skipping duplicate weight log: %s %s", payload.weight, payload.unit.value)
        return latest, False

    timestamp = _now_ms()
    # timestamps identify entries, keep them strictly increasing
    if latest is not None and timestamp <= latest.timestamp:
        timestamp = latest.timestamp + 1

    description = payload.plate_description
    if description is None:
        description = describe_for_log(payload.weight, payload.unit, payload.barbell_id)

    # A concurrent request may have read the same latest entry and taken this
    # timestamp; insert in a savepoint and move past the newest on a clash.
    for attempt in range(1, INSERT_ATTEMPTS + 1):
        entry = WeightLog(
            timestamp=timestamp,
            weight=payload.weight,
            unit=payload.unit.value,
            barbell_id=payload.barbell_id,
            plate_description=description,
        )
        try:
            async with db.begin_nested():
                db.add(entry)
            break
        except IntegrityError:
            if attempt == INSERT_ATTEMPTS:
                raise
            logger.warning("Weight log timestamp %s already taken, retrying", timestamp)
            newest = await get_latest_log(db)
            timestamp = max(timestamp, newest.timestamp if newest is not None else 0) + 1

    await _trim(db, max_logs)
    await db.refresh(entry)
    logger.info("Logged %s %s (%s)", entry.weight, entry.unit, entry.plate_description)
    return entry, True


async def _trim(db: AsyncSession, max_logs: int) -> None:
    overflow = await db.execute(
        select(WeightLog.id).order_by(WeightLog.timestamp.desc()).offset(max_logs)
    )
    stale_ids = list(overflow.scalars().all())
    if stale_ids:
        await db.execute(delete(WeightLog).where(WeightLog.id.in_(stale_ids)))
        logger.info("Trimmed %d old weight logs", len(stale_ids))


async def list_logs(db: AsyncSession, on_date: date | None = None) -> list[WeightLog]:
    """All entries newest first; optionally only those whose timestamp falls on a UTC day."""
    stmt = select(WeightLog).order_by(WeightLog.timestamp.desc())
    if on_date is not None:
        start = datetime.combine(on_date, dtime.min, tzinfo=timezone.utc)
        end = start + timedelta(days=1)
        stmt = stmt.where(
            WeightLog.timestamp >= int(start.timestamp() * 1000),
            WeightLog.timestamp < int(end.timestamp() * 1000),
        )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def delete_log(db: AsyncSession, timestamp: int) -> bool:
    """Delete the entry with this timestamp. Returns False if there was none."""
    result = await db.execute(delete(WeightLog).where(WeightLog.timestamp == timestamp))
    deleted = result.rowcount > 0
    if deleted:
        logger.info("Deleted weight log %s", timestamp)
    return deleted


async def clear_logs(db: AsyncSession) -> int:
    result = await db.execute(delete(WeightLog))
    logger.info("Cleared %d weight logs", result.rowcount)
    return result.rowcount
