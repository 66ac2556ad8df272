# config.py
from __future__ import annotations

import argparse
import math
from dataclasses import asdict, dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Type, TypeVar

import logging

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # type: ignore

from .model import CalculatorInputs, LengthUnit, ProjectType, UnitSystem
from .units import default_length_unit

log = logging.getLogger(__name__)

MITER_GAUGE_LIMIT_MIN_DEG = 45.0
MITER_GAUGE_LIMIT_MAX_DEG = 60.0
MITER_GAUGE_LIMIT_STEP_DEG = 5.0

E = TypeVar("E", bound=Enum)


@dataclass
class RunConfig:
    inputs: CalculatorInputs
    show_metrics: bool
    log_level: str


def build_arg_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser for the calculator inputs.

    Returns:
        Configured argparse.ArgumentParser instance.
    """
    p = argparse.ArgumentParser(
        description="Compound miter calculator for tapered polygonal vessels",
    )
    p.add_argument(
        "--config",
        type=Path,
        help="TOML config file (defaults to config.toml if present)",
    )
    p.add_argument("--sides", dest="number_of_sides", type=int, help="Number of sides (3-60)")
    p.add_argument(
        "--side-angle",
        dest="side_angle_deg",
        type=float,
        help="Wall angle from horizontal in degrees (1-90; 90 = vertical)",
    )
    p.add_argument("--height", type=float, help="Vessel height in the length unit")
    p.add_argument("--diameter", type=float, help="Base diameter (circumscribed) in the length unit")
    p.add_argument("--thickness", type=float, help="Material thickness in the length unit")
    p.add_argument(
        "--length-unit", choices=[unit.value for unit in LengthUnit], help="Unit for lengths"
    )
    p.add_argument(
        "--unit-system",
        choices=[system.value for system in UnitSystem],
        help="Imperial (board feet, gallons) or metric (m³, liters)",
    )
    p.add_argument(
        "--project-type",
        choices=[project.value for project in ProjectType],
        help="Tunes the volume description",
    )
    p.add_argument(
        "--waste",
        dest="include_waste",
        action="store_true",
        help="Add a 10%% waste allowance to the material estimate",
    )
    p.add_argument(
        "--no-waste",
        dest="include_waste",
        action="store_false",
        help="Material estimate without waste allowance (default)",
    )
    p.set_defaults(include_waste=None)
    p.add_argument(
        "--drainage",
        dest="apply_drainage",
        action="store_true",
        help="Reserve 10%% of a planter's volume for drainage",
    )
    p.add_argument(
        "--no-drainage",
        dest="apply_drainage",
        action="store_false",
        help="Report the full planter volume (default)",
    )
    p.set_defaults(apply_drainage=None)
    p.add_argument(
        "--miter-gauge-limit",
        dest="miter_gauge_limit_deg",
        type=float,
        help="Largest angle your miter gauge reaches (45-60, steps of 5)",
    )
    p.add_argument("--price-per-board-foot", type=float, help="Optional lumber price for a cost line")
    p.add_argument(
        "--metrics", dest="show_metrics", action="store_true", help="Also print vessel radii"
    )

    p.add_argument("--log-level", default="INFO")
    return p


def _load_toml(path: Path) -> dict:
    """
    Load a TOML config file.

    Raises:
        FileNotFoundError: If the file is missing.
        tomllib.TOMLDecodeError: On parse errors.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("rb") as f:
        return tomllib.load(f)


def _dict_get_nested(data: dict, key: str, default=None):
    """Fetch a dotted-path value ("vessel.height") from a nested dict."""
    parts = key.split(".")
    current_level = data
    for part in parts[:-1]:
        current_level = current_level.get(part, {})
    return current_level.get(parts[-1], default)


def _parse_enum(enum_cls: Type[E], value, setting: str) -> E:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        choices = sorted(member.value for member in enum_cls)
        raise SystemExit(f"Invalid {setting} '{value}'; expected one of {choices}") from None


def clamp_miter_gauge_limit(value: float) -> float:
    """Snap to the nearest multiple of 5 (halves round up) inside [45, 60]."""
    snapped = math.floor(value / MITER_GAUGE_LIMIT_STEP_DEG + 0.5) * MITER_GAUGE_LIMIT_STEP_DEG
    return max(MITER_GAUGE_LIMIT_MIN_DEG, min(MITER_GAUGE_LIMIT_MAX_DEG, snapped))


def load_config_and_args(args: argparse.Namespace) -> RunConfig:
    """
    Merge CLI args with TOML config into a RunConfig.

    Raises:
        SystemExit: On missing/invalid config when explicitly requested, or
            on an unknown unit/project name.
    """
    cfg_data: dict = {}
    cfg_path: Optional[Path] = args.config
    used_default = False

    # Default: try config.toml if no explicit --config was provided
    if cfg_path is None:
        default_path = Path("config.toml")
        if default_path.exists():
            cfg_path = default_path
            used_default = True

    if cfg_path is not None:
        try:
            cfg_data = _load_toml(cfg_path)
        except FileNotFoundError:
            if not used_default:
                raise SystemExit(f"Config file not found: {cfg_path}")
        except Exception as e:  # TOML parse errors, permission issues, etc.
            raise SystemExit(f"Failed to load config file {cfg_path}: {e}") from e

    defaults = CalculatorInputs()
    inputs = CalculatorInputs(
        number_of_sides=_dict_get_nested(cfg_data, "polygon.number_of_sides", defaults.number_of_sides),
        side_angle_deg=_dict_get_nested(cfg_data, "polygon.side_angle_deg", defaults.side_angle_deg),
        height=_dict_get_nested(cfg_data, "vessel.height", defaults.height),
        diameter=_dict_get_nested(cfg_data, "vessel.diameter", defaults.diameter),
        thickness=_dict_get_nested(cfg_data, "vessel.thickness", defaults.thickness),
        include_waste=bool(_dict_get_nested(cfg_data, "options.include_waste", False)),
        apply_drainage=bool(_dict_get_nested(cfg_data, "options.apply_drainage", False)),
        miter_gauge_limit_deg=_dict_get_nested(
            cfg_data, "options.miter_gauge_limit_deg", defaults.miter_gauge_limit_deg
        ),
        price_per_board_foot=_dict_get_nested(cfg_data, "options.price_per_board_foot", None),
    )
    unit_system = _dict_get_nested(cfg_data, "options.unit_system", defaults.unit_system)
    length_unit = _dict_get_nested(cfg_data, "vessel.length_unit", None)
    project_type = _dict_get_nested(cfg_data, "options.project_type", defaults.project_type)

    # CLI overrides
    for name in (
        "number_of_sides",
        "side_angle_deg",
        "height",
        "diameter",
        "thickness",
        "miter_gauge_limit_deg",
        "price_per_board_foot",
    ):
        value = getattr(args, name, None)
        if value is not None:
            setattr(inputs, name, value)
    if getattr(args, "include_waste", None) is not None:
        inputs.include_waste = bool(args.include_waste)
    if getattr(args, "apply_drainage", None) is not None:
        inputs.apply_drainage = bool(args.apply_drainage)
    if getattr(args, "unit_system", None) is not None:
        unit_system = args.unit_system
    if getattr(args, "length_unit", None) is not None:
        length_unit = args.length_unit
    if getattr(args, "project_type", None) is not None:
        project_type = args.project_type

    inputs.unit_system = _parse_enum(UnitSystem, unit_system, "unit_system")
    inputs.project_type = _parse_enum(ProjectType, project_type, "project_type")
    # A unit system without an explicit length unit picks that system's usual unit.
    if length_unit is None:
        inputs.length_unit = default_length_unit(inputs.unit_system)
    else:
        inputs.length_unit = _parse_enum(LengthUnit, length_unit, "length_unit")

    inputs.miter_gauge_limit_deg = clamp_miter_gauge_limit(float(inputs.miter_gauge_limit_deg))

    log.debug("CalculatorInputs: %s", asdict(inputs))

    return RunConfig(
        inputs=inputs,
        show_metrics=bool(getattr(args, "show_metrics", False)),
        log_level=getattr(args, "log_level", "INFO"),
    )
