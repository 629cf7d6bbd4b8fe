"""Plate resolver: greedy decomposition, descriptions, barbell lookups."""

import math

import pytest

from barlog.core.constants import NO_PLATES_DESCRIPTION, PLATE_DENOMINATIONS
from barlog.core.enums import Unit
from barlog.services.plate_resolver import (
    calculate_plates,
    convert_to_kg,
    convert_to_lb,
    denominations,
    describe_plate_set,
    find_matching_barbell,
    find_matching_by_id,
    format_plate_weight,
    loaded_weight,
)


def _nonzero(plates):
    return {w: c for w, c in plates.items() if c}


# =============================================================================
# calculate_plates
# =============================================================================


@pytest.mark.parametrize(
    "target, expected",
    [
        (95, {25: 1}),
        (135, {45: 1}),
        (225, {45: 2}),
        (242.5, {45: 2, 5: 1, 2.5: 1}),
        (315, {45: 3}),
        (50, {2.5: 1}),
    ],
)
def test_pound_scenarios_on_45_lb_bar(target, expected):
    assert _nonzero(calculate_plates(target, 45, Unit.LB)) == expected


def test_every_denomination_present_in_result():
    plates = calculate_plates(225, 45, Unit.LB)
    assert list(plates) == [45, 35, 25, 15, 10, 5, 2.5]
    assert plates[35] == 0


@pytest.mark.parametrize("target", [44, 45, 0, -100])
def test_target_at_or_below_bar_is_all_zero(target):
    plates = calculate_plates(target, 45, Unit.LB)
    assert set(plates) == set(PLATE_DENOMINATIONS[Unit.LB])
    assert all(count == 0 for count in plates.values())


def test_kilogram_ladder():
    plates = calculate_plates(100, 20.4, Unit.KG)
    assert _nonzero(plates) == {20.4: 1, 15.9: 1, 2.3: 1, 1.13: 1}


def test_float_drift_does_not_drop_a_plate():
    # (22.66 - 20.4) / 2 is not exactly 1.13 in binary floating point
    assert _nonzero(calculate_plates(22.66, 20.4, Unit.KG)) == {1.13: 1}
    assert _nonzero(calculate_plates(45.6, 45, "lb")) == {}


def test_string_unit_accepted():
    assert calculate_plates(135, 45, "lb") == calculate_plates(135, 45, Unit.LB)


def test_unknown_unit_resolves_to_empty():
    assert calculate_plates(135, 45, "stone") == {}


@pytest.mark.parametrize("bad", [math.nan, math.inf, None, "heavy"])
def test_non_numeric_target_is_all_zero(bad):
    plates = calculate_plates(bad, 45, Unit.LB)
    assert all(count == 0 for count in plates.values())


@pytest.mark.parametrize("target, bar", [(1e308, 45), (1e308, -1e308), (1e307, 0)])
def test_huge_finite_target_resolves_to_all_zero(target, bar):
    plates = calculate_plates(target, bar, Unit.LB)
    assert set(plates) == set(PLATE_DENOMINATIONS[Unit.LB])
    assert all(count == 0 for count in plates.values())


def test_calculate_is_idempotent():
    assert calculate_plates(287.5, 45, Unit.LB) == calculate_plates(287.5, 45, Unit.LB)


@pytest.mark.parametrize("unit, bar", [(Unit.LB, 45), (Unit.LB, 33), (Unit.KG, 20.4), (Unit.KG, 15)])
def test_never_overshoots_and_leftover_below_smallest_plate(unit, bar):
    smallest = min(PLATE_DENOMINATIONS[unit])
    for step in range(0, 1200):
        target = bar + step * 0.37
        plates = calculate_plates(target, bar, unit)
        achieved = bar + 2 * sum(w * c for w, c in plates.items())
        assert achieved <= target + 1e-9
        assert (target - achieved) / 2 < smallest + 1e-9


def test_loaded_weight():
    assert loaded_weight(calculate_plates(242.5, 45, Unit.LB), 45) == 240
    assert loaded_weight({}, 45) == 45


def test_denominations():
    assert denominations(Unit.KG) == (20.4, 15.9, 11.3, 6.8, 4.5, 2.3, 1.13)
    assert denominations("oz") == ()


# =============================================================================
# describe_plate_set
# =============================================================================


@pytest.mark.parametrize(
    "target, expected",
    [
        (95, "1 × 25 lb"),
        (135, "1 × 45 lb"),
        (225, "2 × 45 lb"),
        (242.5, "2 × 45 lb 🔘 1 × 5 lb 🔘 1 × 2.5 lb"),
    ],
)
def test_describe_pound_scenarios(target, expected):
    assert describe_plate_set(calculate_plates(target, 45, Unit.LB), Unit.LB) == expected


def test_describe_empty_is_sentinel():
    assert describe_plate_set(calculate_plates(44, 45, Unit.LB), Unit.LB) == NO_PLATES_DESCRIPTION
    assert describe_plate_set({}, Unit.KG) == NO_PLATES_DESCRIPTION


def test_describe_orders_heaviest_first_regardless_of_input_order():
    assert describe_plate_set({2.5: 1, 45: 1, 10: 2}, Unit.LB) == "1 × 45 lb 🔘 2 × 10 lb 🔘 1 × 2.5 lb"


def test_describe_kilogram_precision():
    text = describe_plate_set(calculate_plates(100, 20.4, Unit.KG), Unit.KG)
    assert text == "1 × 20.4 kg 🔘 1 × 15.9 kg 🔘 1 × 2.3 kg 🔘 1 × 1.13 kg"


def test_describe_ignores_plates_from_the_other_unit():
    assert describe_plate_set({45: 1, 20.4: 1}, Unit.KG) == "1 × 20.4 kg"
    assert describe_plate_set({20.4: 2}, Unit.LB) == NO_PLATES_DESCRIPTION


def test_describe_unknown_unit_is_sentinel():
    assert describe_plate_set({45: 1}, "stone") == NO_PLATES_DESCRIPTION


@pytest.mark.parametrize(
    "weight, unit, expected",
    [
        (45, Unit.LB, "45"),
        (2.5, Unit.LB, "2.5"),
        (20.4, Unit.KG, "20.4"),
        (1.13, Unit.KG, "1.13"),
        (10.0, Unit.KG, "10"),
    ],
)
def test_format_plate_weight(weight, unit, expected):
    assert format_plate_weight(weight, unit) == expected


# =============================================================================
# Barbell lookups and conversion
# =============================================================================


def test_find_matching_by_id():
    bar = find_matching_by_id("1")
    assert bar is not None
    assert (bar.lbs, bar.kg) == (45, 20.4)
    assert find_matching_by_id("does-not-exist") is None


@pytest.mark.parametrize(
    "weight, unit, expected_id",
    [(45, Unit.LB, "1"), (44, Unit.LB, "2"), (20.0, Unit.KG, "2"), (20.45, Unit.KG, "1"), (15.9, "kg", "3")],
)
def test_find_matching_barbell(weight, unit, expected_id):
    assert find_matching_barbell(weight, unit).id == expected_id


def test_find_matching_barbell_miss():
    assert find_matching_barbell(50, Unit.LB) is None
    assert find_matching_barbell(45, "stone") is None


def test_conversions():
    assert convert_to_kg(45, Unit.KG) == 45
    assert convert_to_kg(100, Unit.LB) == pytest.approx(45.3592)
    assert convert_to_lb(20, Unit.KG) == pytest.approx(44.0924524)
    assert convert_to_lb(45, Unit.LB) == 45
