"""Application constants."""

from barlog.core.enums import Unit

# Unit conversion
KG_TO_LB = 2.20462262
LB_TO_KG = 0.453592

# Available plates per unit, heaviest first.
# The kg ladder is derived from the lb plates (45 lb ~ 20.4 kg), not round metric sizes.
PLATE_DENOMINATIONS: dict[Unit, tuple[float, ...]] = {
    Unit.LB: (45, 35, 25, 15, 10, 5, 2.5),
    Unit.KG: (20.4, 15.9, 11.3, 6.8, 4.5, 2.3, 1.13),
}

# Plate math is done in hundredths of the unit (1.13 kg -> 113)
MINOR_UNITS_PER_UNIT = 100

# Plate description rendering
PLATE_SEPARATOR = " 🔘 "
NO_PLATES_DESCRIPTION = "0 Plates"

# Barbell lookup by raw weight
BARBELL_MATCH_TOLERANCE = 0.1

# Upper bound accepted for any weight coming in over HTTP (either unit)
MAX_WEIGHT = 10_000
