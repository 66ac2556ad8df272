# model.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class UnitSystem(str, Enum):
    IMPERIAL = "imperial"
    METRIC = "metric"


class LengthUnit(str, Enum):
    INCHES = "inches"
    FEET = "feet"
    MILLIMETERS = "millimeters"
    CENTIMETERS = "centimeters"


class VolumeUnit(str, Enum):
    CUBIC_INCHES = "cubic_inches"
    GALLONS = "gallons"
    QUARTS = "quarts"
    FLUID_OUNCES = "fluid_ounces"
    CUBIC_CENTIMETERS = "cubic_centimeters"
    LITERS = "liters"
    MILLILITERS = "milliliters"
    CUBIC_METERS = "cubic_meters"


class ProjectType(str, Enum):
    GENERAL = "general"
    PLANTER = "planter"
    DECORATIVE = "decorative"
    STORAGE = "storage"


@dataclass
class PolygonSpec:
    """Cross-section and wall slope of the vessel."""

    number_of_sides: int  # N, 3..60
    side_angle_deg: float  # α from horizontal; 90 = vertical walls


@dataclass
class AngleResult:
    """Saw settings for one compound miter, degrees rounded to 0.1."""

    blade_tilt: float  # β; bevel from flat
    blade_tilt_complement: float  # 90 - β
    miter_gauge: float  # γ; fence rotation from square
    miter_gauge_complement: float  # 90 - γ
    trim_angle: float  # δ; top/bottom trim, equals α
    interior_angle: float
    miter_angle: float  # half the polygon corner angle


@dataclass
class VesselDimensions:
    """Outer vessel dimensions in millimeters."""

    height_mm: float
    diameter_mm: float  # circumscribed circle at the base
    thickness_mm: float


@dataclass
class VesselMetrics:
    outer_bottom_radius: float
    outer_top_radius: float
    inner_bottom_radius: float
    inner_top_radius: float
    wall_thickness: float


@dataclass
class MaterialEstimate:
    """Stock quantity in board feet (imperial) or cubic meters (metric)."""

    board_feet: Optional[float] = None
    cubic_meters: Optional[float] = None
    includes_waste: bool = False

    @property
    def value(self) -> float:
        if self.board_feet is not None:
            return self.board_feet
        return self.cubic_meters or 0.0

    @property
    def unit(self) -> str:
        return "bd ft" if self.board_feet is not None else "m³"

    @property
    def label(self) -> str:
        return "Board Feet" if self.board_feet is not None else "Material Volume"


@dataclass
class VolumeReading:
    """Interior volume expressed in a human-friendly unit."""

    value: float
    unit: VolumeUnit
    label: str
    context: str


@dataclass
class CalculatorInputs:
    """Everything the user sets, lengths in `length_unit`."""

    number_of_sides: int = 4
    side_angle_deg: float = 45.0
    height: float = 10.0
    diameter: float = 10.0
    thickness: float = 0.75
    length_unit: LengthUnit = LengthUnit.INCHES
    unit_system: UnitSystem = UnitSystem.IMPERIAL
    project_type: ProjectType = ProjectType.GENERAL
    include_waste: bool = False
    apply_drainage: bool = False  # planters only
    miter_gauge_limit_deg: float = 60.0
    price_per_board_foot: Optional[float] = None
