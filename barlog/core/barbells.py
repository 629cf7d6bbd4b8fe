"""Barbell reference data — hardcoded, immutable, looked up by id.

Each bar carries its own unloaded weight in both units so lookups never
convert. Ids are stable: they are stored in preferences and weight logs.
"""

from dataclasses import dataclass

from barlog.core.enums import Unit


@dataclass(frozen=True)
class BarbellSpec:
    id: str
    lbs: float
    kg: float
    label: str
    description: str

    def weight_in(self, unit: Unit) -> float:
        """Own weight of the bar in the given unit."""
        return self.kg if unit == Unit.KG else self.lbs


BARBELLS: tuple[BarbellSpec, ...] = (
    BarbellSpec("1", 45, 20.4, "US Olympic Bar", "US standard Olympic weightlifting bar"),
    BarbellSpec("2", 44, 20, "International Olympic Bar", "International standard Olympic weightlifting bar"),
    BarbellSpec("3", 35, 15.9, "Women's Olympic Bar", "Standard women's Olympic weightlifting bar"),
    BarbellSpec("4", 33, 15, "Metric Training Bar", "Common metric standard training bar"),
    BarbellSpec("5", 22, 10, "Heavy Training Bar", "Heavier training bar for progressive loading"),
    BarbellSpec("6", 20, 9.1, "Standard Training Bar", "Common training bar for general use and skill development"),
    BarbellSpec("7", 18, 8.2, "Training Bar", "Lightweight training bar for beginners and technique work"),
    BarbellSpec("8", 17, 7.7, "Junior Bar", "Youth training bar for beginners and young athletes"),
    BarbellSpec("9", 15, 6.8, "Technique Bar", "Lightweight aluminum bar for learning form and technique"),
)

DEFAULT_BARBELL_ID = "1"
