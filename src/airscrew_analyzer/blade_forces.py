"""
Blade Force Integration
=======================

Blade-element integration of thrust, drag and torque for a single blade
at one forward speed.

For each blade element at radius r:
    q  = 0.5 × ρ × W²                        dynamic pressure
    α  = θ(r) + φ(r) + Δθ(V)                 twist + induced angle + pitch correction
    Cy = Cy(α)
    Cx = Cx0 + A(α) × Cy²      (polar model)
       = Cx(α)                 (table model)
    dT = Cy × q × S(r)
    dD = Cx × q × S(r)
    dM = dD × r

Totals are the plain sums over all elements. The lift of each element is
taken as thrust and its drag as the torque-producing force.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .config import (
    AerodynamicsTable,
    BladeGeometry,
    DragModelType,
    DEG_PER_RAD,
)
from .debugger import CalculationDebugger, element_group
from .interpolation import interpolate
from .section_flow import SectionSample, get_speed_distribution


@dataclass
class SectionForce:
    """Forces on one blade element."""
    radius: float               # Element radius (m)
    thrust: float               # Local thrust (N)
    drag: float                 # Local drag (N)
    torque: float               # Local torque (N·m)
    total_aoa: float = 0.0      # Total angle of attack (degrees)
    lift_coefficient: float = 0.0
    drag_coefficient: float = 0.0


@dataclass
class BladeSummary:
    """Totals for one blade at one forward speed."""
    total_thrust: float = 0.0   # N
    total_drag: float = 0.0     # N
    total_torque: float = 0.0   # N·m


@dataclass
class BladeForceResult:
    """Section flow, section forces and totals for one blade."""
    speed_distribution: List[SectionSample] = field(default_factory=list)
    force_distribution: List[SectionForce] = field(default_factory=list)
    summary: BladeSummary = field(default_factory=BladeSummary)
    pitch_correction: float = 0.0   # degrees


def get_pitch_correction(geometry: BladeGeometry, v0: float) -> float:
    """Get the pitch correction angle (degrees) at forward speed v0 (m/s)."""
    if not geometry.has_pitch_correction:
        return 0.0
    return interpolate(
        geometry.speed_table, geometry.pitch_correction, v0,
        name="pitch correction table"
    )


def get_drag_coefficient(
    aerodynamics: AerodynamicsTable,
    aoa: float,
    lift_coefficient: float
) -> float:
    """
    Get the section drag coefficient using the configured drag model.

    Parameters:
    ----------
    aerodynamics : AerodynamicsTable
        Airfoil tables with either a polar or a direct drag model.

    aoa : float
        Total angle of attack (degrees).

    lift_coefficient : float
        Section lift coefficient at aoa (used by the polar model).

    Returns:
    -------
    float
        Drag coefficient Cx.
    """
    if aerodynamics.drag_model is DragModelType.POLAR:
        polar_factor = interpolate(aerodynamics.aoa, aerodynamics.polar, aoa, name="polar table")
        return aerodynamics.cd0 + polar_factor * lift_coefficient * lift_coefficient

    return interpolate(aerodynamics.aoa, aerodynamics.drag, aoa, name="drag table")


def get_single_blade_forces(
    geometry: BladeGeometry,
    aerodynamics: AerodynamicsTable,
    angular_speed: float,
    v0: float,
    density: float,
    debugger: Optional[CalculationDebugger] = None,
    deg_per_rad: float = DEG_PER_RAD
) -> BladeForceResult:
    """
    Integrate thrust, drag and torque along one blade.

    Parameters:
    ----------
    geometry : BladeGeometry
        Blade stations with twist and element area tables. The number of
        stations sets the number of elements; the last station is the tip.

    aerodynamics : AerodynamicsTable
        Section lift and drag coefficients versus angle of attack.

    angular_speed : float
        Rotor angular speed (rad/s).

    v0 : float
        Forward speed (m/s).

    density : float
        Air density (kg/m³).

    debugger : CalculationDebugger, optional
        Receives the pitch correction and every element quantity.

    deg_per_rad : float, optional
        Radian to degree factor for the induced angle.

    Returns:
    -------
    BladeForceResult
        Per-element flow and forces plus the blade totals.

    Raises:
    ------
    TableRangeError
        If any lookup (radius, angle of attack, speed) falls beyond the
        last breakpoint of its table.
    """
    pitch_correction = get_pitch_correction(geometry, v0)
    if debugger is not None and geometry.has_pitch_correction:
        debugger.record(
            "Blade", "dA", pitch_correction,
            formula="dA = interp(VX, dAVX, V)", inputs={"V": v0},
        )

    speed_distribution = get_speed_distribution(
        angular_speed, geometry.tip_radius, v0, geometry.section_count, deg_per_rad
    )

    result = BladeForceResult(
        speed_distribution=speed_distribution,
        pitch_correction=pitch_correction,
    )
    summary = result.summary

    for i, sample in enumerate(speed_distribution):
        r = sample.radius
        q = 0.5 * density * sample.local_velocity * sample.local_velocity
        section_area = interpolate(geometry.radii, geometry.area, r, name="area table")
        twist = interpolate(geometry.radii, geometry.twist, r, name="twist table")
        qs = section_area * q

        total_aoa = twist + sample.local_aoa + pitch_correction
        cy = interpolate(aerodynamics.aoa, aerodynamics.lift, total_aoa, name="lift table")
        cx = get_drag_coefficient(aerodynamics, total_aoa, cy)

        force = SectionForce(
            radius=r,
            thrust=cy * qs,
            drag=cx * qs,
            torque=cx * qs * r,
            total_aoa=total_aoa,
            lift_coefficient=cy,
            drag_coefficient=cx,
        )
        result.force_distribution.append(force)

        summary.total_thrust += force.thrust
        summary.total_drag += force.drag
        summary.total_torque += force.torque

        if debugger is not None:
            _trace_element(debugger, i + 1, sample, force, density, q,
                           section_area, twist, pitch_correction)

    return result


def _trace_element(debugger, index, sample, force, density, q, area, twist, pitch):
    group = element_group(index)
    record = debugger.record
    record(group, "r", sample.radius)
    record(group, "W", sample.local_velocity, "W = sqrt(V^2 + (w*r)^2)")
    record(group, "q", q, "q = 0.5 * rho * W^2", {"rho": density})
    record(group, "S", area, "S = interp(RX, SX, r)")
    record(group, "a", force.total_aoa, "a = twist + phi + dA",
           {"twist": twist, "phi": sample.local_aoa, "dA": pitch})
    record(group, "Cy", force.lift_coefficient, "Cy = interp(alpha, CY, a)")
    record(group, "Cx", force.drag_coefficient, "Cx = Cx(a, Cy)")
    record(group, "dT", force.thrust, "dT = Cy * q * S")
    record(group, "dD", force.drag, "dD = Cx * q * S")
    record(group, "dM", force.torque, "dM = dD * r")
