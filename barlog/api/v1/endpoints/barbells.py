"""Barbell reference data: list, lookup by id, reconcile a raw bar weight."""

from fastapi import APIRouter, HTTPException, Query

from barlog.core.barbells import BARBELLS
from barlog.core.enums import Unit
from barlog.schemas.barbell import BarbellRead
from barlog.services.plate_resolver import find_matching_barbell, find_matching_by_id

router = APIRouter()


@router.get("", response_model=list[BarbellRead])
async def list_barbells():
    """All known bars, in reference order."""
    return list(BARBELLS)


@router.get("/match", response_model=BarbellRead)
async def match_barbell(
    weight: float = Query(..., description="Raw bar weight, e.g. a previously stored value"),
    unit: Unit = Unit.LB,
):
    """Bar whose own weight is within 0.1 of `weight` in `unit`."""
    barbell = find_matching_barbell(weight, unit)
    if barbell is None:
        raise HTTPException(status_code=404, detail="No barbell matches that weight")
    return barbell


@router.get("/{barbell_id}", response_model=BarbellRead)
async def get_barbell(barbell_id: str):
    barbell = find_matching_by_id(barbell_id)
    if barbell is None:
        raise HTTPException(status_code=404, detail="Barbell not found")
    return barbell
