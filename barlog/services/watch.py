"""Wearable companion: the snapshot pushed to the watch face."""

from barlog.core.config import Settings
from barlog.core.enums import Unit
from barlog.schemas.watch import WatchSnapshot
from barlog.services.plate_loader import PlateLoader
from barlog.services.plate_resolver import describe_plate_set


def watch_label(weight: float, unit: Unit) -> str:
    """Short display weight: kg rounded to whole, lb with at most one decimal ("97.5 lb")."""
    if unit == Unit.KG or float(weight).is_integer():
        return f"{weight:.0f} {unit.value}"
    return f"{weight:.1f} {unit.value}"


def build_snapshot(loader: PlateLoader, settings: Settings) -> WatchSnapshot:
    inputs = loader.inputs
    if inputs is None:
        unit = Unit(settings.default_unit)
        weight = 0.0
    else:
        unit = inputs.unit
        weight = inputs.target_weight
    return WatchSnapshot(
        weight=weight,
        unit=unit,
        label=watch_label(weight, unit),
        logs=describe_plate_set(loader.plates, unit),
    )
