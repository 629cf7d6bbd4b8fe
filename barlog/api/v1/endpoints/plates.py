"""Plate calculator (pure logic, no DB)."""

from typing import Optional

from fastapi import APIRouter, Query

from barlog.core.constants import MAX_WEIGHT
from barlog.core.enums import Unit
from barlog.schemas.plates import DenominationsRead, PlateCalculationRead
from barlog.services.loadout import plate_counts, resolve_barbell
from barlog.services.plate_resolver import (
    calculate_plates,
    denominations,
    describe_plate_set,
    find_matching_barbell,
    loaded_weight,
)

router = APIRouter()


@router.get("/calculate", response_model=PlateCalculationRead)
async def plate_calculator(
    target_weight: float = Query(..., le=MAX_WEIGHT, description="Total weight to load, in `unit`"),
    unit: Unit = Unit.LB,
    barbell_id: Optional[str] = Query(None, description="Reference bar id; default bar if unknown"),
    bar_weight: Optional[float] = Query(None, ge=0, le=MAX_WEIGHT, description="Raw bar weight; overrides barbell_id"),
):
    """
    Returns which plates to put on each side of the bar to reach the target weight.
    Anything below the smallest plate is left off, so total_weight never exceeds the target.
    """
    if bar_weight is not None:
        bar = bar_weight
        matched = find_matching_barbell(bar_weight, unit)
        resolved_id = matched.id if matched else None
    else:
        barbell = resolve_barbell(barbell_id)
        bar = barbell.weight_in(unit)
        resolved_id = barbell.id

    plates = calculate_plates(target_weight, bar, unit)
    return PlateCalculationRead(
        target_weight=target_weight,
        bar_weight=bar,
        unit=unit,
        barbell_id=resolved_id,
        per_side=round(max(target_weight - bar, 0) / 2, 2),
        plates=plate_counts(plates),
        description=describe_plate_set(plates, unit),
        total_weight=loaded_weight(plates, bar),
    )


@router.get("/denominations", response_model=DenominationsRead)
async def plate_denominations(unit: Unit = Unit.LB):
    """Available plate sizes for a unit, heaviest first."""
    return DenominationsRead(unit=unit, plates=list(denominations(unit)))
