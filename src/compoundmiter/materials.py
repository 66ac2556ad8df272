# materials.py
from __future__ import annotations

import math
from typing import Optional

from .model import MaterialEstimate, UnitSystem
from .units import BOARD_FOOT_TO_CUBIC_INCHES, INCH_TO_MM

WASTE_FACTOR = 1.1  # flat 10% allowance


def calculate_piece_length(height_mm: float, side_angle_deg: float) -> float:
    """Slant length of one side piece: height / sin(α)."""
    return height_mm / math.sin(math.radians(side_angle_deg))


def calculate_board_feet(
    height_mm: float,
    stock_width_mm: float,
    thickness_mm: float,
    number_of_sides: int,
    side_angle_deg: float,
    include_waste: bool = False,
) -> float:
    """
    Board feet for all side pieces.

        bd ft = L" * W" * T" * N / 144

    multiplied by 1.1 when include_waste is set.
    """
    piece_length_mm = calculate_piece_length(height_mm, side_angle_deg)

    length_in = piece_length_mm / INCH_TO_MM
    width_in = stock_width_mm / INCH_TO_MM
    thickness_in = thickness_mm / INCH_TO_MM

    board_feet = length_in * width_in * thickness_in * number_of_sides / BOARD_FOOT_TO_CUBIC_INCHES
    if include_waste:
        board_feet *= WASTE_FACTOR
    return board_feet


def calculate_cubic_meters(
    height_mm: float,
    stock_width_mm: float,
    thickness_mm: float,
    number_of_sides: int,
    side_angle_deg: float,
    include_waste: bool = False,
) -> float:
    """Metric counterpart of calculate_board_feet, same piece geometry."""
    piece_length_mm = calculate_piece_length(height_mm, side_angle_deg)

    cubic_mm = piece_length_mm * stock_width_mm * thickness_mm * number_of_sides
    if include_waste:
        cubic_mm *= WASTE_FACTOR
    return cubic_mm / 1e9


def calculate_surface_area(
    height_mm: float,
    stock_width_mm: float,
    number_of_sides: int,
    side_angle_deg: float,
) -> float:
    """Total face area (mm²) of all side pieces."""
    piece_length_mm = calculate_piece_length(height_mm, side_angle_deg)
    return piece_length_mm * stock_width_mm * number_of_sides


def material_cost_estimate(
    board_feet: float, price_per_board_foot: Optional[float] = None
) -> Optional[float]:
    if not price_per_board_foot:
        return None
    return board_feet * price_per_board_foot


def estimate_material(
    height_mm: float,
    stock_width_mm: float,
    thickness_mm: float,
    number_of_sides: int,
    side_angle_deg: float,
    unit_system: UnitSystem,
    include_waste: bool = False,
) -> MaterialEstimate:
    """Board feet for imperial users, cubic meters for metric ones."""
    args = (height_mm, stock_width_mm, thickness_mm, number_of_sides, side_angle_deg, include_waste)
    if unit_system == UnitSystem.IMPERIAL:
        return MaterialEstimate(board_feet=calculate_board_feet(*args), includes_waste=include_waste)
    return MaterialEstimate(cubic_meters=calculate_cubic_meters(*args), includes_waste=include_waste)
