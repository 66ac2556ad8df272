# tests/test_materials.py
import pytest

from compoundmiter.materials import (
    calculate_board_feet,
    calculate_cubic_meters,
    calculate_piece_length,
    calculate_surface_area,
    estimate_material,
    material_cost_estimate,
)
from compoundmiter.model import UnitSystem
from compoundmiter.units import INCH_TO_MM, cubic_meters_to_board_feet


def test_piece_length_is_slant_height():
    assert calculate_piece_length(100.0, 90) == pytest.approx(100.0)
    assert calculate_piece_length(100.0, 30) == pytest.approx(200.0)


def test_board_feet_for_known_boards():
    # Four 12" x 6" x 1" boards = 2 board feet.
    board_feet = calculate_board_feet(12 * INCH_TO_MM, 6 * INCH_TO_MM, INCH_TO_MM, 4, 90)
    assert board_feet == pytest.approx(2.0)


def test_waste_multiplies_by_exactly_ten_percent():
    for side_angle in (20, 45, 70, 90):
        args = (250.0, 90.0, 19.0, 8, side_angle)
        plain = calculate_board_feet(*args, include_waste=False)
        padded = calculate_board_feet(*args, include_waste=True)
        assert padded == pytest.approx(plain * 1.1)

        plain_m3 = calculate_cubic_meters(*args)
        padded_m3 = calculate_cubic_meters(*args, include_waste=True)
        assert padded_m3 == pytest.approx(plain_m3 * 1.1)


def test_cubic_meters_for_known_boards():
    assert calculate_cubic_meters(1000.0, 100.0, 10.0, 4, 90) == pytest.approx(0.004)


def test_board_feet_and_cubic_meters_describe_the_same_pieces():
    args = (300.0, 120.0, 19.0, 6, 65)
    board_feet = calculate_board_feet(*args)
    cubic_meters = calculate_cubic_meters(*args)
    assert board_feet == pytest.approx(cubic_meters_to_board_feet(cubic_meters), rel=1e-5)


def test_surface_area():
    assert calculate_surface_area(1000.0, 100.0, 4, 90) == pytest.approx(400_000.0)
    assert calculate_surface_area(500.0, 100.0, 4, 30) == pytest.approx(400_000.0)


def test_material_cost_estimate():
    assert material_cost_estimate(2.0) is None
    assert material_cost_estimate(2.0, 0.0) is None
    assert material_cost_estimate(2.0, 5.0) == pytest.approx(10.0)


def test_estimate_material_picks_unit_by_system():
    args = (1000.0, 100.0, 10.0, 4, 90)

    imperial = estimate_material(*args, unit_system=UnitSystem.IMPERIAL, include_waste=True)
    assert imperial.cubic_meters is None
    assert imperial.board_feet == pytest.approx(calculate_board_feet(*args, include_waste=True))
    assert imperial.includes_waste is True
    assert imperial.unit == "bd ft"
    assert imperial.label == "Board Feet"

    metric = estimate_material(*args, unit_system=UnitSystem.METRIC)
    assert metric.board_feet is None
    assert metric.value == pytest.approx(0.004)
    assert metric.unit == "m³"
    assert metric.includes_waste is False
