# report.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .geometry import (
    calculate_angles,
    calculate_distance_across_flats,
    calculate_stock_width,
    compute_vessel_metrics,
    exceeds_miter_gauge_limit,
)
from .materials import calculate_surface_area, estimate_material, material_cost_estimate
from .model import (
    AngleResult,
    CalculatorInputs,
    LengthUnit,
    MaterialEstimate,
    PolygonSpec,
    ProjectType,
    VesselDimensions,
    VesselMetrics,
    VolumeReading,
    VolumeUnit,
)
from .units import (
    convert_volume,
    format_number,
    from_millimeters,
    smart_volume_unit,
    to_millimeters,
    unit_label,
)
from .volume import apply_drainage_reduction, calculate_interior_volume, describe_volume

log = logging.getLogger(__name__)


@dataclass
class CalculationReport:
    """All derived outputs for one set of inputs; lengths in `length_unit`."""

    angles: AngleResult
    length_unit: LengthUnit
    stock_width: float
    distance_across_flats: Optional[float]
    surface_area: float  # length_unit²
    metrics: VesselMetrics
    volume: Optional[VolumeReading]
    material: Optional[MaterialEstimate]
    material_cost: Optional[float]
    warnings: List[str] = field(default_factory=list)


def _volume_reading(volume_mm3: float, inputs: CalculatorInputs) -> VolumeReading:
    unit = smart_volume_unit(volume_mm3, inputs.unit_system)
    context = describe_volume(
        convert_volume(volume_mm3, VolumeUnit.GALLONS),
        convert_volume(volume_mm3, VolumeUnit.LITERS),
        inputs.project_type,
        inputs.unit_system,
    )
    return VolumeReading(
        value=convert_volume(volume_mm3, unit),
        unit=unit,
        label=unit_label(unit),
        context=context,
    )


def build_report(inputs: CalculatorInputs) -> CalculationReport:
    """
    Recompute every output from the user's current inputs.

    Lengths are converted to millimeters for the engine and back to the
    user's unit for display. Volume and material need a positive thickness
    and are None otherwise.

    Raises:
        InvalidGeometry: side count or side angle out of range.
    """
    polygon = PolygonSpec(inputs.number_of_sides, inputs.side_angle_deg)
    dims = VesselDimensions(
        height_mm=to_millimeters(inputs.height, inputs.length_unit),
        diameter_mm=to_millimeters(inputs.diameter, inputs.length_unit),
        thickness_mm=to_millimeters(inputs.thickness, inputs.length_unit),
    )
    unit = inputs.length_unit
    warnings: List[str] = []

    angles = calculate_angles(polygon.number_of_sides, polygon.side_angle_deg)
    if exceeds_miter_gauge_limit(angles, inputs.miter_gauge_limit_deg):
        warnings.append(
            f"Miter gauge {format_number(angles.miter_gauge, 1)}° is beyond the "
            f"{format_number(inputs.miter_gauge_limit_deg, 0)}° gauge limit; "
            f"set {format_number(angles.miter_gauge_complement, 1)}° from the other reference"
        )

    stock_width_mm = calculate_stock_width(
        dims.diameter_mm, polygon.number_of_sides, polygon.side_angle_deg
    )
    daf_mm = calculate_distance_across_flats(
        dims.diameter_mm, polygon.number_of_sides, dims.thickness_mm
    )
    surface_mm2 = calculate_surface_area(
        dims.height_mm, stock_width_mm, polygon.number_of_sides, polygon.side_angle_deg
    )
    mm_per_unit = to_millimeters(1.0, unit)

    volume: Optional[VolumeReading] = None
    material: Optional[MaterialEstimate] = None
    material_cost: Optional[float] = None
    if inputs.thickness > 0:
        volume_mm3 = calculate_interior_volume(
            dims.diameter_mm,
            dims.height_mm,
            polygon.number_of_sides,
            polygon.side_angle_deg,
            dims.thickness_mm,
        )
        if dims.diameter_mm - 2.0 * dims.thickness_mm <= 0:
            warnings.append("Material is at least half the diameter thick; no interior volume")
        if inputs.project_type == ProjectType.PLANTER:
            volume_mm3 = apply_drainage_reduction(volume_mm3, inputs.apply_drainage)
        volume = _volume_reading(volume_mm3, inputs)

        material = estimate_material(
            dims.height_mm,
            stock_width_mm,
            dims.thickness_mm,
            polygon.number_of_sides,
            polygon.side_angle_deg,
            inputs.unit_system,
            inputs.include_waste,
        )
        if material.board_feet is not None:
            material_cost = material_cost_estimate(material.board_feet, inputs.price_per_board_foot)

    metrics_mm = compute_vessel_metrics(dims, polygon)
    metrics = VesselMetrics(
        outer_bottom_radius=from_millimeters(metrics_mm.outer_bottom_radius, unit),
        outer_top_radius=from_millimeters(metrics_mm.outer_top_radius, unit),
        inner_bottom_radius=from_millimeters(metrics_mm.inner_bottom_radius, unit),
        inner_top_radius=from_millimeters(metrics_mm.inner_top_radius, unit),
        wall_thickness=from_millimeters(metrics_mm.wall_thickness, unit),
    )

    log.debug("Angles for %s sides at %s°: %s", polygon.number_of_sides, polygon.side_angle_deg, angles)

    return CalculationReport(
        angles=angles,
        length_unit=unit,
        stock_width=from_millimeters(stock_width_mm, unit),
        distance_across_flats=None if daf_mm is None else from_millimeters(daf_mm, unit),
        surface_area=surface_mm2 / mm_per_unit**2,
        metrics=metrics,
        volume=volume,
        material=material,
        material_cost=material_cost,
        warnings=warnings,
    )


def format_report(report: CalculationReport, show_metrics: bool = False) -> List[str]:
    """Render a report as display lines."""
    angles = report.angles
    length = unit_label(report.length_unit)
    lines = [
        f"Blade tilt:            {format_number(angles.blade_tilt, 1)}°"
        f" (complement {format_number(angles.blade_tilt_complement, 1)}°)",
        f"Miter gauge:           {format_number(angles.miter_gauge, 1)}°"
        f" (complement {format_number(angles.miter_gauge_complement, 1)}°)",
        f"Trim angle:            {format_number(angles.trim_angle, 1)}°",
        f"Stock width:           {format_number(report.stock_width, 2)} {length}",
    ]
    if report.distance_across_flats is not None:
        lines.append(
            f"Distance across flats: {format_number(report.distance_across_flats, 2)} {length}"
        )
    lines.append(f"Surface area:          {format_number(report.surface_area, 2)} {length}²")
    if report.volume is not None:
        lines.append(
            f"Interior volume:       {format_number(report.volume.value, 1)} {report.volume.label}"
            f" ({report.volume.context})"
        )
    if report.material is not None:
        precision = 4 if report.material.cubic_meters is not None else 2
        waste = " incl. 10% waste" if report.material.includes_waste else ""
        lines.append(
            f"{report.material.label + ':':<23}"
            f"{format_number(report.material.value, precision)} {report.material.unit}{waste}"
        )
    if report.material_cost is not None:
        lines.append(f"Material cost:         {format_number(report.material_cost, 2)}")
    if show_metrics:
        metrics = report.metrics
        lines.extend(
            [
                f"Outer radius:          {format_number(metrics.outer_bottom_radius, 2)} -> "
                f"{format_number(metrics.outer_top_radius, 2)} {length}",
                f"Inner radius:          {format_number(metrics.inner_bottom_radius, 2)} -> "
                f"{format_number(metrics.inner_top_radius, 2)} {length}",
            ]
        )
    lines.extend(f"WARNING: {warning}" for warning in report.warnings)
    return lines
