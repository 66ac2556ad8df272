# tests/test_validation.py
from compoundmiter.model import CalculatorInputs, PolygonSpec, VesselDimensions
from compoundmiter.validation import (
    InvalidGeometry,
    check_polygon,
    validate_all,
    validate_inputs,
    validate_polygon,
    validate_vessel,
)

import pytest


def make_dims(**overrides) -> VesselDimensions:
    params = dict(height_mm=254.0, diameter_mm=254.0, thickness_mm=19.05)
    params.update(overrides)
    return VesselDimensions(**params)


def test_validate_polygon_accepts_inclusive_bounds():
    for sides in (3, 60):
        for side_angle in (1, 90):
            assert validate_polygon(sides, side_angle) == []


def test_validate_polygon_flags_both_parameters():
    errors = validate_polygon(2, 95)
    assert any("between 3 and 60" in e for e in errors)
    assert any("between 1 and 90 degrees" in e for e in errors)


def test_validate_polygon_rejects_non_integral_and_bool_sides():
    assert validate_polygon(6.5, 45) == ["Number of sides must be a whole number"]
    assert validate_polygon(True, 45) == ["Number of sides must be a whole number"]
    assert validate_polygon(6.0, 45) == []


def test_check_polygon_raises_with_all_messages():
    with pytest.raises(InvalidGeometry) as excinfo:
        check_polygon(61, 0)
    assert "Number of sides" in str(excinfo.value)
    assert "Side angle" in str(excinfo.value)


def test_validate_vessel_flags_negative_and_nonfinite():
    errors = validate_vessel(make_dims(height_mm=-1.0, thickness_mm=float("inf")))
    assert any("height_mm must be >= 0" in e for e in errors)
    assert any("thickness_mm must be a finite number" in e for e in errors)


def test_thick_material_is_not_a_validation_error():
    # Over-thick walls yield a zero volume, not an error.
    assert validate_vessel(make_dims(thickness_mm=500.0)) == []


def test_validate_all_collects_errors():
    errors = validate_all(PolygonSpec(2, 45), make_dims(diameter_mm=-5.0))
    assert len(errors) == 2


def test_string_values_are_reported_not_raised():
    errors = validate_polygon("6", "45")
    assert errors == [
        "Number of sides must be a whole number",
        "Side angle must be a number of degrees",
    ]
    assert validate_vessel(make_dims(height_mm="10")) == ["height_mm must be a number"]


def test_validate_inputs_checks_user_unit_lengths():
    inputs = CalculatorInputs(side_angle_deg="45", height="10", thickness=-0.5)
    errors = validate_inputs(inputs)
    assert "Side angle must be a number of degrees" in errors
    assert "height must be a number" in errors
    assert "thickness must be >= 0" in errors
    assert validate_inputs(CalculatorInputs()) == []
