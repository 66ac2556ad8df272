# tests/test_angles.py
import math

import pytest

from compoundmiter.geometry import calculate_angles, exceeds_miter_gauge_limit
from compoundmiter.validation import InvalidGeometry

GRID_SIDES = [3, 4, 5, 6, 8, 10, 12, 20, 30, 60]
GRID_ANGLES = [1, 10, 20, 30, 45, 60, 75, 85, 90]
SAW_FIELDS = (
    "blade_tilt",
    "blade_tilt_complement",
    "miter_gauge",
    "miter_gauge_complement",
    "trim_angle",
    "miter_angle",
)


def test_four_sides_at_seventy_degrees_matches_reference_sheet():
    angles = calculate_angles(4, 70)

    assert angles.blade_tilt == pytest.approx(41.6)
    assert angles.blade_tilt_complement == pytest.approx(48.4)
    assert angles.miter_gauge == pytest.approx(71.1)
    assert angles.miter_gauge_complement == pytest.approx(18.9)
    assert angles.trim_angle == 70


def test_triangle_at_forty_five_degrees():
    angles = calculate_angles(3, 45)

    assert angles.miter_angle == 60
    assert angles.interior_angle == 60
    assert angles.blade_tilt == pytest.approx(37.76, abs=0.05)
    assert angles.miter_gauge == pytest.approx(39.23, abs=0.05)
    assert angles.miter_gauge_complement == pytest.approx(50.77, abs=0.05)


def test_hexagon_with_vertical_walls_is_pure_bevel():
    angles = calculate_angles(6, 90)

    assert angles.blade_tilt == 30.0
    assert angles.blade_tilt_complement == 60.0
    # cos(90°) = 0 collapses the complement; the gauge stays square.
    assert angles.miter_gauge == pytest.approx(90.0)
    assert angles.miter_gauge_complement == pytest.approx(0.0)
    assert angles.interior_angle == 120
    assert angles.miter_angle == 30


def test_octagon_and_square_reference_values():
    octagon = calculate_angles(8, 60)
    assert octagon.blade_tilt == pytest.approx(19.35, abs=0.05)
    assert octagon.miter_gauge == pytest.approx(78.30, abs=0.05)
    assert octagon.interior_angle == 135
    assert octagon.miter_angle == 22.5

    square = calculate_angles(4, 45)
    assert square.blade_tilt == pytest.approx(30.0)
    assert square.miter_gauge == pytest.approx(54.74, abs=0.05)
    assert square.miter_gauge_complement == pytest.approx(35.26, abs=0.05)
    assert square.interior_angle == 90


@pytest.mark.parametrize(
    "sides, interior", [(3, 60), (4, 90), (6, 120), (8, 135), (60, 174)]
)
def test_interior_angle_formula(sides, interior):
    angles = calculate_angles(sides, 45)
    assert angles.interior_angle == interior
    assert angles.miter_angle == pytest.approx((180 - interior) / 2)


def test_nearly_flat_walls_give_tiny_bevel():
    angles = calculate_angles(4, 1)
    assert angles.blade_tilt < 1
    assert angles.miter_gauge > 0
    assert angles.trim_angle == 1


def test_complements_sum_to_ninety_and_values_stay_finite_across_grid():
    for sides in GRID_SIDES:
        for side_angle in GRID_ANGLES:
            angles = calculate_angles(sides, side_angle)

            assert angles.blade_tilt + angles.blade_tilt_complement == 90.0
            assert angles.miter_gauge + angles.miter_gauge_complement == 90.0
            assert angles.trim_angle == side_angle
            for name in SAW_FIELDS:
                value = getattr(angles, name)
                assert math.isfinite(value), (sides, side_angle, name)
                assert 0.0 <= value <= 90.0, (sides, side_angle, name, value)
            assert 0.0 < angles.interior_angle < 180.0


@pytest.mark.parametrize("sides", [2, 61])
def test_side_count_out_of_range_raises(sides):
    with pytest.raises(InvalidGeometry, match="between 3 and 60"):
        calculate_angles(sides, 45)


@pytest.mark.parametrize("side_angle", [0, 91, float("nan")])
def test_side_angle_out_of_range_raises(side_angle):
    with pytest.raises(InvalidGeometry, match="between 1 and 90 degrees"):
        calculate_angles(4, side_angle)


def test_fractional_side_count_is_rejected():
    with pytest.raises(InvalidGeometry, match="whole number"):
        calculate_angles(4.5, 45)


def test_invalid_geometry_is_a_value_error():
    with pytest.raises(ValueError):
        calculate_angles(1, 100)


def test_miter_gauge_limit_check():
    angles = calculate_angles(4, 70)  # gauge 71.1°
    assert exceeds_miter_gauge_limit(angles, 60)
    assert not exceeds_miter_gauge_limit(calculate_angles(4, 45), 60)


def test_exact_half_tenths_round_up():
    # 16 sides: (180 - 157.5) / 2 = 11.25 exactly
    assert calculate_angles(16, 45).miter_angle == 11.3
    assert calculate_angles(16, 45).interior_angle == 157.5
    assert calculate_angles(4, 45.25).trim_angle == 45.3


def test_complements_stay_exact_on_a_fine_side_angle_sweep():
    for sides in (3, 7, 16, 60):
        for tenths in range(10, 901, 7):
            angles = calculate_angles(sides, tenths / 10)
            assert angles.blade_tilt + angles.blade_tilt_complement == 90.0
            assert angles.miter_gauge + angles.miter_gauge_complement == 90.0
