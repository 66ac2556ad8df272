# validation.py
from __future__ import annotations

import math
from typing import List

from .model import CalculatorInputs, PolygonSpec, VesselDimensions

MIN_SIDES = 3
MAX_SIDES = 60
MIN_SIDE_ANGLE_DEG = 1.0
MAX_SIDE_ANGLE_DEG = 90.0


class InvalidGeometry(ValueError):
    """Side count or side angle outside the domain the angle engine supports."""


def _is_number(value) -> bool:
    # bool is an int subclass; TOML strings like "45" are not numbers
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_polygon(number_of_sides, side_angle_deg) -> List[str]:
    errors: List[str] = []

    if not _is_number(number_of_sides):
        errors.append("Number of sides must be a whole number")
    elif not (MIN_SIDES <= number_of_sides <= MAX_SIDES):
        errors.append(f"Number of sides must be between {MIN_SIDES} and {MAX_SIDES}")
    elif not float(number_of_sides).is_integer():
        errors.append("Number of sides must be a whole number")

    if not _is_number(side_angle_deg):
        errors.append("Side angle must be a number of degrees")
    # Written so NaN fails too.
    elif not (MIN_SIDE_ANGLE_DEG <= side_angle_deg <= MAX_SIDE_ANGLE_DEG):
        errors.append(
            f"Side angle must be between {MIN_SIDE_ANGLE_DEG:g} and "
            f"{MAX_SIDE_ANGLE_DEG:g} degrees"
        )

    return errors


def check_polygon(number_of_sides, side_angle_deg) -> None:
    """
    Raise InvalidGeometry if the polygon inputs are out of range.

    The message names every violated bound, e.g.
    "Number of sides must be between 3 and 60".
    """
    errors = validate_polygon(number_of_sides, side_angle_deg)
    if errors:
        raise InvalidGeometry("; ".join(errors))


def _validate_lengths(values: dict) -> List[str]:
    errors: List[str] = []
    for name, value in values.items():
        if not _is_number(value):
            errors.append(f"{name} must be a number")
        elif not math.isfinite(value):
            errors.append(f"{name} must be a finite number")
        elif value < 0:
            errors.append(f"{name} must be >= 0")
    return errors


def validate_vessel(dimensions: VesselDimensions) -> List[str]:
    return _validate_lengths(
        {
            "height_mm": dimensions.height_mm,
            "diameter_mm": dimensions.diameter_mm,
            "thickness_mm": dimensions.thickness_mm,
        }
    )


def validate_inputs(inputs: CalculatorInputs) -> List[str]:
    """Check raw user inputs (lengths still in the user's unit) before any conversion."""
    errors: List[str] = []
    errors += validate_polygon(inputs.number_of_sides, inputs.side_angle_deg)
    errors += _validate_lengths(
        {"height": inputs.height, "diameter": inputs.diameter, "thickness": inputs.thickness}
    )
    return errors


def validate_all(polygon: PolygonSpec, dimensions: VesselDimensions) -> List[str]:
    errors: List[str] = []
    errors += validate_polygon(polygon.number_of_sides, polygon.side_angle_deg)
    errors += validate_vessel(dimensions)
    return errors
