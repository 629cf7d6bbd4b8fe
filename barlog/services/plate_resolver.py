"""Plate resolver: which plates to load per side for a target barbell weight.

Pure functions, no I/O and no state. Weights are always in the scale of the
unit they are passed with. Degenerate input (target at or below the bar,
non-numeric or non-finite values, an unknown unit) never raises; it resolves
to an empty loadout or an absent lookup result.
"""

from __future__ import annotations

import math
from typing import Mapping

from barlog.core.barbells import BARBELLS, BarbellSpec
from barlog.core.constants import (
    BARBELL_MATCH_TOLERANCE,
    KG_TO_LB,
    LB_TO_KG,
    MINOR_UNITS_PER_UNIT,
    NO_PLATES_DESCRIPTION,
    PLATE_DENOMINATIONS,
    PLATE_SEPARATOR,
)
from barlog.core.enums import Unit

# Plate weight -> number of plates of that weight on ONE side of the bar.
PlateSet = dict[float, int]


def _coerce_unit(unit: Unit | str) -> Unit | None:
    try:
        return Unit(unit)
    except ValueError:
        return None


def _as_weight(value) -> float | None:
    """Float value of a numeric input, or None when it is not a usable number."""
    try:
        w = float(value)
    except (TypeError, ValueError):
        return None
    return w if math.isfinite(w) else None


def _to_minor(weight: float) -> int:
    # round() first so 1.13 * 100 == 112.99999999999999 floors to 113, not 112
    return math.floor(round(weight * MINOR_UNITS_PER_UNIT, 6))


def denominations(unit: Unit | str) -> tuple[float, ...]:
    """Plate sizes available in a unit, heaviest first. Empty for an unknown unit."""
    active = _coerce_unit(unit)
    if active is None:
        return ()
    return tuple(float(p) for p in PLATE_DENOMINATIONS[active])


def calculate_plates(target_weight: float, barbell_own_weight: float, unit: Unit | str) -> PlateSet:
    """
    Greedy per-side decomposition of (target - bar) / 2 into the unit's plates.

    Every denomination of the unit is present in the result (zero when unused).
    Works in integer hundredths so float drift never adds a plate; whatever is
    left below the smallest plate is dropped, so the loadout never overshoots.
    """
    plates = denominations(unit)
    result: PlateSet = {p: 0 for p in plates}

    target = _as_weight(target_weight)
    bar = _as_weight(barbell_own_weight)
    if target is None or bar is None or target <= bar:
        return result

    per_side = (target - bar) / 2
    # huge finite inputs overflow once scaled to minor units
    if not math.isfinite(per_side * MINOR_UNITS_PER_UNIT):
        return result

    remaining = _to_minor(per_side)
    for plate in plates:
        count, remaining = divmod(remaining, _to_minor(plate))
        result[plate] = count
    return result


def loaded_weight(plate_set: Mapping[float, int], barbell_own_weight: float) -> float:
    """Total weight on the bar: bar + both sides of plates."""
    per_side = sum(_to_minor(float(w)) * int(c) for w, c in plate_set.items() if c > 0)
    return round(barbell_own_weight + 2 * per_side / MINOR_UNITS_PER_UNIT, 2)


def format_plate_weight(weight: float, unit: Unit | str) -> str:
    """Display precision: whole numbers as-is, kg under 2 with 2 decimals, else 1 decimal."""
    if float(weight).is_integer():
        return f"{weight:.0f}"
    if _coerce_unit(unit) == Unit.KG and weight < 2:
        return f"{weight:.2f}"
    return f"{weight:.1f}"


def describe_plate_set(plate_set: Mapping[float, int], unit: Unit | str) -> str:
    """
    Human-readable summary, heaviest plate first: "2 × 45 lb 🔘 1 × 5 lb".
    Zero counts and plates not in the unit's ladder are left out.
    """
    active = _coerce_unit(unit)
    if active is None:
        return NO_PLATES_DESCRIPTION
    valid = denominations(active)

    entries: list[tuple[float, int]] = []
    for weight, count in plate_set.items():
        w = _as_weight(weight)
        if w is None or w not in valid or not count or count <= 0:
            continue
        entries.append((w, int(count)))
    if not entries:
        return NO_PLATES_DESCRIPTION

    entries.sort(key=lambda e: e[0], reverse=True)
    return PLATE_SEPARATOR.join(
        f"{count} × {format_plate_weight(w, active)} {active.value}" for w, count in entries
    )


def convert_to_kg(weight: float, unit: Unit | str) -> float:
    return weight if _coerce_unit(unit) == Unit.KG else weight * LB_TO_KG


def convert_to_lb(weight: float, unit: Unit | str) -> float:
    return weight if _coerce_unit(unit) == Unit.LB else weight * KG_TO_LB


def find_matching_by_id(barbell_id: str) -> BarbellSpec | None:
    """Barbell with exactly this id, or None."""
    return next((b for b in BARBELLS if b.id == barbell_id), None)


def find_matching_barbell(weight: float, unit: Unit | str) -> BarbellSpec | None:
    """
    Reconcile a raw stored bar weight against the reference list.
    Returns the closest barbell within BARBELL_MATCH_TOLERANCE in that unit, or None.
    """
    active = _coerce_unit(unit)
    w = _as_weight(weight)
    if active is None or w is None:
        return None
    candidates = [b for b in BARBELLS if abs(b.weight_in(active) - w) < BARBELL_MATCH_TOLERANCE]
    if not candidates:
        return None
    return min(candidates, key=lambda b: abs(b.weight_in(active) - w))
