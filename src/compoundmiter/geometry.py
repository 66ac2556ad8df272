# geometry.py
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from .model import AngleResult, PolygonSpec, VesselDimensions, VesselMetrics
from .validation import check_polygon

# Floor for cos(α) so vertical walls give a large finite stock width instead
# of a division by zero.
_COS_FLOOR = 1e-12
_TENTH = Decimal("0.1")


def _round1(value: float) -> float:
    # Ties on the exact binary value round up (11.25 -> 11.3); +0.0 folds -0.0 into 0.0
    return float(Decimal(value).quantize(_TENTH, rounding=ROUND_HALF_UP)) + 0.0


def calculate_angles(number_of_sides: int, side_angle_deg: float) -> AngleResult:
    """
    Compute the saw settings for a compound miter on a regular N-sided vessel.

    With M the miter angle (half the polygon corner angle) and α the side
    angle from horizontal:

        β         = asin(sin(M) * sin(α))        blade tilt from flat
        90° - γ   = atan(cos(α) * tan(M))        miter gauge complement
        γ         = 90° - (90° - γ)              miter gauge from square

    Each pair is rounded on one side only and the other side is derived from
    the rounded value, so β + (90 - β) and γ + (90 - γ) are exactly 90.0.

    At α = 90° the complement collapses to 0 and the gauge reads 90°
    (straight crosscut with a pure bevel); that is the expected answer.

    Raises:
        InvalidGeometry: number_of_sides outside [3, 60] or side_angle_deg
            outside [1, 90].
    """
    check_polygon(number_of_sides, side_angle_deg)

    interior_angle = (number_of_sides - 2) * 180.0 / number_of_sides
    corner_angle = 180.0 - interior_angle
    miter_angle = corner_angle / 2.0

    side_rad = math.radians(side_angle_deg)
    miter_rad = math.radians(miter_angle)

    blade_tilt = math.degrees(math.asin(math.sin(miter_rad) * math.sin(side_rad)))
    miter_gauge_complement = math.degrees(math.atan(math.cos(side_rad) * math.tan(miter_rad)))

    blade_tilt_rounded = _round1(blade_tilt)
    miter_gauge_complement_rounded = _round1(miter_gauge_complement)

    return AngleResult(
        blade_tilt=blade_tilt_rounded,
        blade_tilt_complement=_round1(90.0 - blade_tilt_rounded),
        miter_gauge=_round1(90.0 - miter_gauge_complement_rounded),
        miter_gauge_complement=miter_gauge_complement_rounded,
        trim_angle=_round1(side_angle_deg),
        interior_angle=_round1(interior_angle),
        miter_angle=_round1(miter_angle),
    )


def exceeds_miter_gauge_limit(angles: AngleResult, limit_deg: float) -> bool:
    """True when the gauge cannot reach the primary setting and the complement is needed."""
    return angles.miter_gauge > limit_deg


def calculate_stock_width(diameter_mm: float, number_of_sides: int, side_angle_deg: float) -> float:
    """
    Minimum rip width for one side piece:

        w = D * sin(180°/N) / cos(α)

    Grows without bound as α approaches 90°; clamping a display value is up
    to the caller.
    """
    segment_rad = math.pi / number_of_sides
    cos_side = max(math.cos(math.radians(side_angle_deg)), _COS_FLOOR)
    return diameter_mm * math.sin(segment_rad) / cos_side


def has_parallel_sides(number_of_sides: int) -> bool:
    return number_of_sides % 2 == 0


def calculate_distance_across_flats(
    diameter_mm: float, number_of_sides: int, thickness_mm: float
) -> Optional[float]:
    """
    Outer distance between two opposite faces, including wall thickness on both sides.

    Returns None for odd side counts, which have no parallel faces.
    """
    if not has_parallel_sides(number_of_sides):
        return None

    outer_diameter = diameter_mm + 2.0 * thickness_mm
    return outer_diameter * math.cos(math.pi / number_of_sides)


def compute_vessel_metrics(dimensions: VesselDimensions, polygon: PolygonSpec) -> VesselMetrics:
    """
    Radii of the outer and inner shell at the base and the rim.

    The wall leans in by height * tan(90° - α) over the full height. A taper
    that would cross the axis stops at zero radius.
    """
    taper_rad = math.radians(90.0 - polygon.side_angle_deg)
    horizontal_offset = dimensions.height_mm * math.tan(taper_rad)

    outer_bottom = dimensions.diameter_mm / 2.0
    outer_top = max(0.0, outer_bottom - horizontal_offset)
    wall = dimensions.thickness_mm

    return VesselMetrics(
        outer_bottom_radius=outer_bottom,
        outer_top_radius=outer_top,
        inner_bottom_radius=max(0.0, outer_bottom - wall),
        inner_top_radius=max(0.0, outer_top - wall),
        wall_thickness=wall,
    )
