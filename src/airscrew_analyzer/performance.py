"""
Airscrew Performance Sweep
==========================

This module drives the blade force integration across a range of forward
speeds and derives the airscrew performance curve.

For each forward speed V:
    T   = T_blade × n_blades              total thrust (N)
    M   = M_blade × n_blades              total torque (N·m)
    P   = M × ω                           shaft power (W)
    q   = 0.5 × ρ × V²                    free-stream dynamic pressure (Pa)
    Ct  = T / (π R² × q)                  thrust coefficient
    T/P                                   thrust-to-power ratio (N/W)

At V = 0 the free-stream dynamic pressure is zero, so Ct is infinite (or
NaN when thrust is also zero). These values are returned as-is.

Classes:
--------
- SpeedPoint: One row of the performance curve
- PerformanceSweep: Runs the sweep for an AirscrewConfig

Usage:
------
    from src.airscrew_analyzer import PerformanceSweep, get_airscrew

    sweep = PerformanceSweep(get_airscrew("16in 6-blade fan"))
    for point in sweep.run():
        print(f"{point.speed_kmh:6.1f} km/h  {point.thrust:7.2f} N  {point.power:8.1f} W")

    df = sweep.to_dataframe()

Units Convention:
----------------
- Speed: m/s internally, km/h in SpeedPoint.speed_kmh
- Thrust/Drag: Newtons (N)
- Torque: Newton-metres (N·m)
- Power: Watts (W)
"""

import math
from dataclasses import dataclass, asdict
from typing import List, Optional, Tuple

import numpy as np
import pandas as pd
from scipy import optimize

from .config import AirscrewConfig, AirscrewAnalyzerConfig, DEFAULT_CONFIG
from .blade_forces import BladeForceResult, get_single_blade_forces
from .debugger import CalculationDebugger
from .interpolation import TableRangeError


@dataclass
class SpeedPoint:
    """
    One point of the airscrew performance curve.

    Attributes:
    ----------
    speed_kmh : float
        Forward speed (km/h).

    thrust : float
        Total thrust of all blades (N).

    torque : float
        Total drag torque of all blades (N·m).

    power : float
        Shaft power required (W).

    thrust_coefficient : float
        T / (disc area × free-stream dynamic pressure). Non-finite at zero speed.

    thrust_to_power : float
        T / P (N/W). Non-finite when power is zero.

    speed_ms : float
        Forward speed (m/s).

    total_drag : float
        Sum of element drag forces over all blades (N).
    """
    speed_kmh: float
    thrust: float
    torque: float
    power: float
    thrust_coefficient: float
    thrust_to_power: float
    speed_ms: float = 0.0
    total_drag: float = 0.0

    def to_dict(self) -> dict:
        """Convert point to dictionary for export."""
        return asdict(self)


class PerformanceSweep:
    """
    Blade-element performance analysis of one airscrew.

    The configuration is validated on construction, so a sweep either runs
    to completion or raises before producing any point.

    Attributes:
    ----------
    airscrew : AirscrewConfig
        Geometry, aerodynamics and environment being analyzed.

    config : AirscrewAnalyzerConfig
        Runtime settings.

    Example:
    -------
        sweep = PerformanceSweep(airscrew)
        points = sweep.run()
        print(f"Static thrust: {points[0].thrust:.2f} N")

        rpm = sweep.get_rotational_speed_for_thrust(10.0, v_ms=15.0)
    """

    def __init__(
        self,
        airscrew: AirscrewConfig,
        config: Optional[AirscrewAnalyzerConfig] = None
    ):
        """
        Initialize the sweep.

        Raises:
        ------
        ConfigurationError
            If the airscrew description is degenerate.
        """
        airscrew.validate()
        self.airscrew = airscrew
        self.config = config if config is not None else DEFAULT_CONFIG

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def omega(self) -> float:
        """Get the angular speed (rad/s)."""
        return self.airscrew.environment.omega

    @property
    def disc_area(self) -> float:
        """Get the swept disc area (m²)."""
        return self.airscrew.geometry.disc_area

    def get_speeds(self) -> np.ndarray:
        """
        Get the forward speeds of the sweep (m/s).

        Returns:
        -------
        np.ndarray
            n_speeds + 1 equally spaced speeds from v0 to v1 inclusive.
        """
        env = self.airscrew.environment
        return np.linspace(env.v0, env.v1, env.n_speeds + 1)

    # -------------------------------------------------------------------------
    # Core Calculation Methods
    # -------------------------------------------------------------------------

    def get_blade_forces(
        self,
        v_ms: float,
        omega: Optional[float] = None,
        debugger: Optional[CalculationDebugger] = None
    ) -> BladeForceResult:
        """Integrate the forces on a single blade at forward speed v_ms."""
        return get_single_blade_forces(
            self.airscrew.geometry,
            self.airscrew.aerodynamics,
            self.omega if omega is None else omega,
            v_ms,
            self.airscrew.environment.density,
            debugger=debugger,
            deg_per_rad=self.config.deg_per_rad,
        )

    def evaluate(
        self,
        v_ms: float,
        omega: Optional[float] = None,
        debugger: Optional[CalculationDebugger] = None
    ) -> SpeedPoint:
        """
        Calculate one performance point at forward speed v_ms.

        Parameters:
        ----------
        v_ms : float
            Forward speed (m/s).

        omega : float, optional
            Angular speed override (rad/s). Defaults to the configured value.

        debugger : CalculationDebugger, optional
            Receives every blade element quantity of this point.

        Returns:
        -------
        SpeedPoint
            Totals for all blades at this speed.

        Raises:
        ------
        TableRangeError
            If a table lookup falls beyond its last breakpoint.
        """
        omega = self.omega if omega is None else omega
        n_blades = self.airscrew.geometry.blade_count
        density = self.airscrew.environment.density

        summary = self.get_blade_forces(v_ms, omega, debugger).summary

        thrust = summary.total_thrust * n_blades
        torque = summary.total_torque * n_blades
        power = torque * omega
        q = 0.5 * density * v_ms * v_ms

        # Zero speed or zero power give inf/nan rather than an exception
        with np.errstate(divide="ignore", invalid="ignore"):
            thrust_coefficient = np.float64(thrust) / (self.disc_area * q)
            thrust_to_power = np.float64(thrust) / power

        return SpeedPoint(
            speed_kmh=v_ms * self.config.speed_display_factor,
            thrust=thrust,
            torque=torque,
            power=power,
            thrust_coefficient=float(thrust_coefficient),
            thrust_to_power=float(thrust_to_power),
            speed_ms=float(v_ms),
            total_drag=summary.total_drag * n_blades,
        )

    def run(self, verbose: Optional[bool] = None) -> List[SpeedPoint]:
        """
        Run the forward speed sweep.

        Parameters:
        ----------
        verbose : bool, optional
            Print one line per speed point. Defaults to config.default_verbose.

        Returns:
        -------
        list of SpeedPoint
            n_speeds + 1 points in order of increasing speed.

        Raises:
        ------
        TableRangeError
            On the first lookup beyond a table's last breakpoint; no
            partial result is returned.
        """
        if verbose is None:
            verbose = self.config.default_verbose

        points = []
        for v_ms in self.get_speeds():
            point = self.evaluate(float(v_ms))
            points.append(point)

            if verbose:
                print(
                    f"  V={point.speed_kmh:7.2f} km/h  T={point.thrust:9.3f} N  "
                    f"M={point.torque:8.4f} N*m  P={point.power:9.2f} W"
                )

        return points

    def to_dataframe(self, points: Optional[List[SpeedPoint]] = None) -> pd.DataFrame:
        """
        Get the performance curve as a DataFrame.

        Parameters:
        ----------
        points : list of SpeedPoint, optional
            Points to tabulate. Runs the sweep if not given.

        Returns:
        -------
        pd.DataFrame
            One row per speed point, one column per SpeedPoint field.
        """
        if points is None:
            points = self.run(verbose=False)
        return pd.DataFrame([p.to_dict() for p in points])

    # -------------------------------------------------------------------------
    # Derived Quantities
    # -------------------------------------------------------------------------

    def get_efficiency(self, v_ms: float) -> float:
        """
        Calculate propulsive efficiency at forward speed v_ms.

        Efficiency is the ratio of useful power (thrust × velocity) to
        shaft power.

        Returns:
        -------
        float
            Efficiency. Returns 0 at zero airspeed or when the operating
            point produces no useful thrust.
        """
        if v_ms == 0:
            return 0.0

        point = self.evaluate(v_ms)

        if point.power <= 0 or point.thrust < 0:
            return 0.0

        return (point.thrust * v_ms) / point.power

    def get_rotational_speed_for_thrust(
        self,
        thrust_required: float,
        v_ms: float,
        rpm_bounds: Optional[Tuple[float, float]] = None,
        verbose: bool = False
    ) -> Optional[float]:
        """
        Find the RPM that produces a target thrust at forward speed v_ms.

        The geometry is fixed; only the operating point is solved for.
        Uses scipy's root_scalar with Brent's method over the RPM bracket.

        Parameters:
        ----------
        thrust_required : float
            Target total thrust (N).

        v_ms : float
            Forward speed (m/s).

        rpm_bounds : tuple of float, optional
            RPM bracket to search. Defaults to config.default_rpm_bounds.

        verbose : bool, optional
            Print a message when no solution exists.

        Returns:
        -------
        float or None
            RPM producing the target thrust, or None if the target is not
            bracketed by the thrust at the bracket ends.

        Raises:
        ------
        ValueError
            If the RPM bracket is not 0 < min_rpm < max_rpm.
        """
        min_rpm, max_rpm = rpm_bounds if rpm_bounds is not None else self.config.default_rpm_bounds

        # Zero RPM has no blade-element flow (omega r = 0)
        if not 0 < min_rpm < max_rpm:
            raise ValueError(
                f"RPM bracket must satisfy 0 < min < max, got ({min_rpm}, {max_rpm})"
            )

        def thrust_residual(rpm: float) -> float:
            omega = 2.0 * math.pi * rpm / 60.0
            return self.evaluate(v_ms, omega).thrust - thrust_required

        low = thrust_residual(min_rpm)
        high = thrust_residual(max_rpm)

        if low * high > 0:
            if verbose:
                print(
                    f"Thrust request ({thrust_required:.2f} N) is not reachable "
                    f"between {min_rpm:.0f} and {max_rpm:.0f} RPM at {v_ms} m/s"
                )
            return None

        try:
            result = optimize.root_scalar(
                thrust_residual,
                bracket=(min_rpm, max_rpm),
                method="brentq",
                rtol=self.config.root_finding_tolerance,
            )
        except TableRangeError:
            raise
        except ValueError as e:
            if verbose:
                print(f"Could not find RPM for requested thrust: {e}")
            return None

        return float(result.root)


def get_performance(
    airscrew: AirscrewConfig,
    config: Optional[AirscrewAnalyzerConfig] = None
) -> List[SpeedPoint]:
    """Run the full performance sweep for an airscrew description."""
    return PerformanceSweep(airscrew, config).run(verbose=False)
