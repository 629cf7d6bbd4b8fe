"""Recompute the shared loadout from a target weight, and render it for clients."""

from __future__ import annotations

import logging

from barlog.core.barbells import DEFAULT_BARBELL_ID, BarbellSpec
from barlog.core.enums import Unit
from barlog.schemas.plates import LoadoutRead, PlateCount
from barlog.services.plate_loader import LoadoutInputs, PlateLoader
from barlog.services.plate_resolver import (
    PlateSet,
    calculate_plates,
    describe_plate_set,
    find_matching_by_id,
)

logger = logging.getLogger(__name__)


def resolve_barbell(barbell_id: str | None) -> BarbellSpec:
    """Barbell for an id, falling back to the default bar on a miss."""
    barbell = find_matching_by_id(barbell_id) if barbell_id else None
    if barbell is None:
        logger.debug("Unknown barbell id %r, using default bar", barbell_id)
        barbell = find_matching_by_id(DEFAULT_BARBELL_ID)
    return barbell


def plate_counts(plate_set: PlateSet) -> list[PlateCount]:
    """Non-zero plates, heaviest first."""
    return [
        PlateCount(weight=w, count=c)
        for w, c in sorted(plate_set.items(), key=lambda item: item[0], reverse=True)
        if c > 0
    ]


def apply_target(loader: PlateLoader, target_weight: float, unit: Unit, barbell_id: str | None) -> LoadoutInputs:
    """Compute plates for the target and replace the shared loadout with them."""
    barbell = resolve_barbell(barbell_id)
    plates = calculate_plates(target_weight, barbell.weight_in(unit), unit)
    inputs = LoadoutInputs(target_weight=target_weight, unit=unit, barbell_id=barbell.id)
    loader.load(plates, inputs)
    return inputs


def read_loadout(loader: PlateLoader) -> LoadoutRead:
    inputs = loader.inputs
    plates = loader.plates
    unit = inputs.unit if inputs else Unit.LB
    return LoadoutRead(
        target_weight=inputs.target_weight if inputs else None,
        unit=inputs.unit if inputs else None,
        barbell_id=inputs.barbell_id if inputs else None,
        plates=plate_counts(plates),
        description=describe_plate_set(plates, unit),
    )
