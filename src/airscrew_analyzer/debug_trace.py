"""
Debug Trace Functions
=====================

Trace a complete airscrew operating point with detailed output.
"""

from typing import Optional

from .config import AirscrewConfig, AirscrewAnalyzerConfig, DEFAULT_CONFIG
from .debugger import CalculationDebugger
from .performance import PerformanceSweep


def trace_speed_point(
    airscrew: AirscrewConfig,
    v_ms: float,
    config: Optional[AirscrewAnalyzerConfig] = None
) -> CalculationDebugger:
    """
    Trace every calculation for one forward speed.

    Parameters:
    ----------
    airscrew : AirscrewConfig
        The airscrew to analyze.

    v_ms : float
        Forward speed (m/s).

    config : AirscrewAnalyzerConfig, optional
        Runtime settings.

    Returns:
    -------
    CalculationDebugger
        Trace holding inputs, every blade element and the totals.

    Example:
    -------
        dbg = trace_speed_point(get_airscrew("16in 6-blade fan"), 20.0)
        print(dbg.get_report())
    """
    config = config if config is not None else DEFAULT_CONFIG
    sweep = PerformanceSweep(airscrew, config)

    geometry = airscrew.geometry
    env = airscrew.environment

    dbg = CalculationDebugger(
        airscrew=airscrew.name or "(unnamed)",
        blades=geometry.blade_count,
        elements=geometry.section_count,
        drag_model=airscrew.aerodynamics.drag_model.value,
        speed=f"{v_ms} m/s",
    )

    # =========================================================================
    # INPUTS
    # =========================================================================
    dbg.stage("INPUTS")
    dbg.record("Inputs", "V", v_ms)
    dbg.record("Inputs", "w", sweep.omega)
    dbg.record("Inputs", "rho", env.density)
    dbg.record("Inputs", "R", geometry.tip_radius)
    dbg.record("Inputs", "n_blades", geometry.blade_count)
    dbg.record("Inputs", "deg_per_rad", config.deg_per_rad)

    # =========================================================================
    # BLADE ELEMENTS
    # =========================================================================
    dbg.stage("BLADE ELEMENTS")
    point = sweep.evaluate(v_ms, debugger=dbg)

    # =========================================================================
    # AIRSCREW TOTALS
    # =========================================================================
    dbg.stage("AIRSCREW TOTALS")
    n_blades = {"n_blades": geometry.blade_count}
    dbg.record("Totals", "T", point.thrust, "T = sum(dT) * n_blades", n_blades)
    dbg.record("Totals", "M", point.torque, "M = sum(dM) * n_blades", n_blades)
    dbg.record("Totals", "P", point.power, "P = M * w", {"w": sweep.omega})
    dbg.record(
        "Totals", "Ct", point.thrust_coefficient,
        "Ct = T / (pi * R^2 * 0.5 * rho * V^2)", {"A": sweep.disc_area},
    )
    dbg.record("Totals", "T/P", point.thrust_to_power, "T / P")

    return dbg
