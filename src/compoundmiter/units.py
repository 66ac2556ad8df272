# units.py
from __future__ import annotations

import logging
from typing import Dict, Union

from .model import LengthUnit, UnitSystem, VolumeUnit

log = logging.getLogger(__name__)

# Length
INCH_TO_MM = 25.4
FOOT_TO_INCH = 12.0
CM_TO_MM = 10.0

# Volume
GALLON_TO_CUBIC_INCHES = 231.0
QUART_TO_GALLONS = 0.25
FLUID_OUNCES_PER_GALLON = 128.0
LITER_TO_CUBIC_CM = 1000.0
CUBIC_METER_TO_CUBIC_CM = 1_000_000.0

# Board feet (12" x 12" x 1")
BOARD_FOOT_TO_CUBIC_INCHES = 144.0
CUBIC_METER_TO_BOARD_FEET = 423.776

_MM_PER_LENGTH_UNIT: Dict[LengthUnit, float] = {
    LengthUnit.MILLIMETERS: 1.0,
    LengthUnit.CENTIMETERS: CM_TO_MM,
    LengthUnit.INCHES: INCH_TO_MM,
    LengthUnit.FEET: FOOT_TO_INCH * INCH_TO_MM,
}

_UNIT_LABELS: Dict[str, str] = {
    LengthUnit.INCHES: "in",
    LengthUnit.FEET: "ft",
    LengthUnit.MILLIMETERS: "mm",
    LengthUnit.CENTIMETERS: "cm",
    VolumeUnit.CUBIC_INCHES: "in³",
    VolumeUnit.GALLONS: "gal",
    VolumeUnit.QUARTS: "qt",
    VolumeUnit.FLUID_OUNCES: "fl oz",
    VolumeUnit.CUBIC_CENTIMETERS: "cm³",
    VolumeUnit.LITERS: "L",
    VolumeUnit.MILLILITERS: "mL",
    VolumeUnit.CUBIC_METERS: "m³",
}


def to_millimeters(value: float, unit: LengthUnit) -> float:
    """
    Convert a length in `unit` to millimeters, the base unit for all calculations.

    Unknown units pass the value through unchanged; that only happens when a
    caller hands over a unit this module does not know, so it is logged.
    """
    factor = _MM_PER_LENGTH_UNIT.get(unit)
    if factor is None:
        log.warning("Unrecognized length unit %r; passing value through", unit)
        return value
    return value * factor


def from_millimeters(value_mm: float, unit: LengthUnit) -> float:
    """Convert millimeters to `unit` (pass-through for unknown units)."""
    factor = _MM_PER_LENGTH_UNIT.get(unit)
    if factor is None:
        log.warning("Unrecognized length unit %r; passing value through", unit)
        return value_mm
    return value_mm / factor


def convert_volume(cubic_mm: float, target_unit: VolumeUnit) -> float:
    """
    Convert a volume in cubic millimeters to `target_unit`.

    Imperial units go through cubic inches, metric ones through cubic
    centimeters. Unknown units return the cubic-millimeter value.
    """
    cubic_inches = cubic_mm / INCH_TO_MM**3
    cubic_cm = cubic_mm / CM_TO_MM**3
    gallons = cubic_inches / GALLON_TO_CUBIC_INCHES

    if target_unit == VolumeUnit.CUBIC_INCHES:
        return cubic_inches
    if target_unit == VolumeUnit.GALLONS:
        return gallons
    if target_unit == VolumeUnit.QUARTS:
        return gallons / QUART_TO_GALLONS
    if target_unit == VolumeUnit.FLUID_OUNCES:
        return gallons * FLUID_OUNCES_PER_GALLON
    if target_unit in (VolumeUnit.CUBIC_CENTIMETERS, VolumeUnit.MILLILITERS):
        return cubic_cm
    if target_unit == VolumeUnit.LITERS:
        return cubic_cm / LITER_TO_CUBIC_CM
    if target_unit == VolumeUnit.CUBIC_METERS:
        return cubic_cm / CUBIC_METER_TO_CUBIC_CM

    log.warning("Unrecognized volume unit %r; returning cubic millimeters", target_unit)
    return cubic_mm


def smart_volume_unit(cubic_mm: float, unit_system: UnitSystem) -> VolumeUnit:
    """
    Pick the most readable volume unit for a magnitude.

    Imperial: fluid ounces below a quarter gallon, quarts below a gallon,
    gallons otherwise. Metric: milliliters below 0.1 L, liters below 1000 L,
    cubic meters otherwise.
    """
    if unit_system == UnitSystem.IMPERIAL:
        gallons = convert_volume(cubic_mm, VolumeUnit.GALLONS)
        if gallons < 0.25:
            return VolumeUnit.FLUID_OUNCES
        if gallons < 1:
            return VolumeUnit.QUARTS
        return VolumeUnit.GALLONS

    liters = convert_volume(cubic_mm, VolumeUnit.LITERS)
    if liters < 0.1:
        return VolumeUnit.MILLILITERS
    if liters < 1000:
        return VolumeUnit.LITERS
    return VolumeUnit.CUBIC_METERS


def default_length_unit(unit_system: UnitSystem) -> LengthUnit:
    return LengthUnit.INCHES if unit_system == UnitSystem.IMPERIAL else LengthUnit.MILLIMETERS


def cubic_meters_to_board_feet(cubic_meters: float) -> float:
    return cubic_meters * CUBIC_METER_TO_BOARD_FEET


def unit_label(unit: Union[LengthUnit, VolumeUnit, str]) -> str:
    """Short display label for a unit; unknown units render as themselves."""
    label = _UNIT_LABELS.get(unit)
    if label is not None:
        return label
    return unit.value if isinstance(unit, (LengthUnit, VolumeUnit)) else str(unit)


def format_number(value: float, precision: int = 2) -> str:
    return f"{value:.{precision}f}"
