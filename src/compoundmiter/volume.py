# volume.py
from __future__ import annotations

import math

from .model import ProjectType, UnitSystem

DRAINAGE_FACTOR = 0.9
SOIL_BAG_GALLONS = 1.5
SOIL_BAG_LITERS = 5.0


def polygon_area(diameter_mm: float, number_of_sides: int) -> float:
    """Area of a regular polygon inscribed in a circle of the given diameter: N r² sin(360°/N) / 2."""
    radius = diameter_mm / 2.0
    return number_of_sides * radius**2 * math.sin(2.0 * math.pi / number_of_sides) / 2.0


def calculate_interior_volume(
    diameter_mm: float,
    height_mm: float,
    number_of_sides: int,
    side_angle_deg: float,
    thickness_mm: float,
) -> float:
    """
    Approximate interior capacity (mm³) of the tapered vessel.

    The inside is treated as a frustum between the interior base polygon and
    the interior rim polygon:

        V = h/3 * (A1 + A2 + sqrt(A1 * A2))

    A compound-angle frustum is not exactly self-similar at every height, but
    the difference is negligible at woodworking proportions.

    Degenerate cases return values, not errors:
      - material at least half the diameter thick -> 0
      - walls meeting before full height -> cone over the base, A1 * h / 3
    """
    interior_base_diameter = diameter_mm - 2.0 * thickness_mm
    if interior_base_diameter <= 0:
        return 0.0

    taper_rad = math.radians(90.0 - side_angle_deg)
    diameter_reduction = 2.0 * height_mm * math.tan(taper_rad)
    interior_top_diameter = interior_base_diameter - diameter_reduction

    base_area = polygon_area(interior_base_diameter, number_of_sides)

    if interior_top_diameter <= 0:
        return base_area * height_mm / 3.0

    top_area = polygon_area(interior_top_diameter, number_of_sides)
    return (height_mm / 3.0) * (base_area + top_area + math.sqrt(base_area * top_area))


def apply_drainage_reduction(volume: float, apply: bool = True) -> float:
    """Hold back 10% of a planter's volume for drainage."""
    return volume * DRAINAGE_FACTOR if apply else volume


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'' if count == 1 else 's'}"


def describe_volume(
    volume_gallons: float,
    volume_liters: float,
    project_type: ProjectType,
    unit_system: UnitSystem,
) -> str:
    """Short context sentence for a volume, tuned to the kind of project."""
    imperial = unit_system == UnitSystem.IMPERIAL
    volume = volume_gallons if imperial else volume_liters

    if project_type == ProjectType.PLANTER:
        if imperial:
            bags = math.ceil(volume_gallons / SOIL_BAG_GALLONS)
        else:
            bags = math.ceil(volume_liters / SOIL_BAG_LITERS)
        return f"≈ {_plural(bags, 'bag')} of potting soil"

    if project_type == ProjectType.STORAGE:
        if volume < 1:
            return "Small storage container"
        if volume < 5:
            return "Medium storage box"
        return "Large storage container"

    if project_type == ProjectType.DECORATIVE:
        small, medium = (0.5, 2.0) if imperial else (2.0, 8.0)
        if volume < small:
            return "Small decorative vessel"
        if volume < medium:
            return "Medium decorative container"
        return "Large decorative piece"

    if volume < 1:
        return "Compact interior space"
    if volume < 5:
        return "Moderate interior capacity"
    return "Spacious interior volume"
