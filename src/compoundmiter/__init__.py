# __init__.py
from .geometry import (
    calculate_angles,
    calculate_distance_across_flats,
    calculate_stock_width,
    compute_vessel_metrics,
    has_parallel_sides,
)
from .materials import calculate_board_feet, calculate_cubic_meters
from .model import AngleResult, PolygonSpec, VesselDimensions, VesselMetrics
from .validation import InvalidGeometry
from .volume import apply_drainage_reduction, calculate_interior_volume

__all__ = [
    "AngleResult",
    "InvalidGeometry",
    "PolygonSpec",
    "VesselDimensions",
    "VesselMetrics",
    "apply_drainage_reduction",
    "calculate_angles",
    "calculate_board_feet",
    "calculate_cubic_meters",
    "calculate_distance_across_flats",
    "calculate_interior_volume",
    "calculate_stock_width",
    "compute_vessel_metrics",
    "has_parallel_sides",
]
