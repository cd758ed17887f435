"""
Airscrew Analyzer Module
========================

Blade-element performance analysis of a rotating airscrew.

The blade is divided into radial elements. For each element the local
airflow (resultant velocity and induced angle of attack) is computed from
the rotational and forward speeds, section lift and drag coefficients are
looked up from airfoil tables, and the element forces are summed along the
blade and over all blades. Repeating this across a range of forward speeds
gives thrust, torque, power, thrust coefficient and thrust-to-power ratio.

Key Functions:
--------------
- interpolate(): Piecewise-linear table lookup
- get_speed_distribution(): Local flow at each blade element
- get_single_blade_forces(): Forces on one blade at one speed
- PerformanceSweep.run(): Performance curve over a speed range
- trace_speed_point(): Step-by-step calculation report

Example Usage:
-------------
    from src.airscrew_analyzer import PerformanceSweep, get_airscrew

    sweep = PerformanceSweep(get_airscrew("16in 6-blade fan"))
    print(sweep.to_dataframe())

Units Convention:
----------------
- Length: metres (m), area: m²
- Speed: m/s internally, km/h in reported speed
- Angles: degrees
- Rotational speed: rpm, rev/s or rad/s (explicit field per unit)
- Thrust: Newtons (N), torque: N·m, power: Watts (W)
"""

from .config import (
    AirscrewConfig,
    AirscrewAnalyzerConfig,
    BladeGeometry,
    AerodynamicsTable,
    EnvironmentParams,
    DragModelType,
    ConfigurationError,
    AIR_DENSITY_SEA_LEVEL,
    DEFAULT_CONFIG,
)
from .interpolation import interpolate, TableRangeError
from .section_flow import SectionSample, get_speed_distribution
from .blade_forces import (
    SectionForce,
    BladeSummary,
    BladeForceResult,
    get_single_blade_forces,
)
from .performance import SpeedPoint, PerformanceSweep, get_performance
from .debugger import CalculationDebugger, TraceEntry
from .debug_trace import trace_speed_point
from .data.airscrew_database import (
    AIRSCREW_DATABASE,
    get_airscrew,
    list_airscrews,
    create_check_airscrew,
)

__all__ = [
    # Configuration
    "AirscrewConfig",
    "AirscrewAnalyzerConfig",
    "BladeGeometry",
    "AerodynamicsTable",
    "EnvironmentParams",
    "DragModelType",
    "AIR_DENSITY_SEA_LEVEL",
    "DEFAULT_CONFIG",
    # Errors
    "ConfigurationError",
    "TableRangeError",
    # Core
    "interpolate",
    "SectionSample",
    "get_speed_distribution",
    "SectionForce",
    "BladeSummary",
    "BladeForceResult",
    "get_single_blade_forces",
    "SpeedPoint",
    "PerformanceSweep",
    "get_performance",
    # Debugger
    "CalculationDebugger",
    "TraceEntry",
    "trace_speed_point",
    # Database access
    "AIRSCREW_DATABASE",
    "get_airscrew",
    "list_airscrews",
    "create_check_airscrew",
]
