"""
Airscrew Analyzer Configuration Module
======================================

This module contains the configuration dataclasses and physical constants
for blade-element airscrew analysis. An analysis is described by three
groups of inputs:

- BladeGeometry: blade count and radial tables (twist, section area,
  optional pitch correction versus forward speed)
- AerodynamicsTable: airfoil coefficients versus angle of attack
- EnvironmentParams: rotational speed, forward speed sweep, air density

These are combined into an AirscrewConfig, which is validated before any
computation begins. AirscrewAnalyzerConfig holds runtime settings that are
not part of the physical description.

Physical Constants:
------------------
- AIR_DENSITY_SEA_LEVEL: Standard air density at sea level (1.225 kg/m³)
- MS_TO_KMH: Conversion from m/s to km/h (3.6)
- DEG_PER_RAD: Degrees per radian used for angle of attack (57.3)

Usage:
------
    from src.airscrew_analyzer.config import (
        AirscrewConfig, BladeGeometry, AerodynamicsTable, EnvironmentParams
    )

    config = AirscrewConfig(
        geometry=BladeGeometry(
            blade_count=2,
            radii=[0.0, 0.1, 0.2],
            twist=[12.0, 9.0, 6.0],
            area=[0.0004, 0.0004, 0.0004],
        ),
        aerodynamics=AerodynamicsTable.polar_model(
            aoa=[-30, 0, 30], lift=[-1.2, 0.0, 1.2],
            cd0=0.02, polar=[0.1, 0.06, 0.1],
        ),
        environment=EnvironmentParams(v0=0.0, v1=20.0, n_speeds=10, rpm=6000),
    )
    config.validate()
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple


# =============================================================================
# Physical Constants
# =============================================================================

# Standard air density at sea level (kg/m³)
AIR_DENSITY_SEA_LEVEL = 1.225

# Forward speed display conversion (m/s -> km/h)
MS_TO_KMH = 3.6

# Degrees per radian for induced angle of attack (rounded)
DEG_PER_RAD = 57.3


class ConfigurationError(ValueError):
    """Raised when an airscrew description cannot be analyzed."""


def validate_table(x_table: Sequence[float], y_table: Sequence[float], name: str) -> List[str]:
    """
    Check a breakpoint table for use with interpolate().

    Parameters:
    ----------
    x_table : sequence of float
        Breakpoint x values (must be strictly increasing).

    y_table : sequence of float
        Values at each breakpoint.

    name : str
        Table name used in error messages.

    Returns:
    -------
    list of str
        Problems found (empty if the table is usable).
    """
    errors = []

    if len(x_table) < 2:
        errors.append(f"{name}: at least 2 breakpoints required, got {len(x_table)}")
    if len(x_table) != len(y_table):
        errors.append(
            f"{name}: x and y lengths differ ({len(x_table)} vs {len(y_table)})"
        )

    for i in range(len(x_table) - 1):
        if not x_table[i + 1] > x_table[i]:
            errors.append(
                f"{name}: breakpoints must be strictly increasing "
                f"(x[{i}]={x_table[i]}, x[{i + 1}]={x_table[i + 1]})"
            )
            break

    return errors


# =============================================================================
# Blade Geometry
# =============================================================================

@dataclass
class BladeGeometry:
    """
    Geometry of a single blade plus the number of blades.

    Attributes:
    ----------
    blade_count : int
        Number of identical blades on the airscrew.

    radii : list of float
        Radial stations (m), increasing from root to tip.
        The last value is the tip radius. The number of stations also
        sets the number of blade elements used in the integration.

    twist : list of float
        Built-in blade angle at each station (degrees).

    area : list of float
        Planform area of the blade element at each station (m²).

    speed_table : list of float, optional
        Forward speeds (m/s) for the pitch-correction table.

    pitch_correction : list of float, optional
        Extra blade angle (degrees) at each speed in speed_table,
        for variable-pitch hubs.
    """
    blade_count: int
    radii: List[float]
    twist: List[float]
    area: List[float]
    speed_table: Optional[List[float]] = None
    pitch_correction: Optional[List[float]] = None

    @property
    def tip_radius(self) -> float:
        """Get the tip radius (m)."""
        return self.radii[-1]

    @property
    def section_count(self) -> int:
        """Get the number of blade elements."""
        return len(self.radii)

    @property
    def disc_area(self) -> float:
        """Get the swept disc area π·R² (m²)."""
        return math.pi * self.tip_radius * self.tip_radius

    @property
    def has_pitch_correction(self) -> bool:
        """True if a pitch-versus-speed table is configured."""
        return bool(self.speed_table)

    def validate(self) -> List[str]:
        """Return a list of geometry problems (empty if valid)."""
        errors = []

        if self.blade_count < 1:
            errors.append(f"Blade count must be positive, got {self.blade_count}")

        errors.extend(validate_table(self.radii, self.twist, "twist table"))
        errors.extend(validate_table(self.radii, self.area, "area table"))

        if self.radii and self.radii[-1] <= 0:
            errors.append(f"Tip radius must be positive, got {self.radii[-1]}")

        has_speeds = self.speed_table is not None and len(self.speed_table) > 0
        has_pitch = self.pitch_correction is not None and len(self.pitch_correction) > 0
        if has_speeds != has_pitch:
            errors.append(
                "Pitch correction requires both speed_table and pitch_correction"
            )
        elif has_speeds:
            errors.extend(
                validate_table(self.speed_table, self.pitch_correction, "pitch correction table")
            )

        return errors


# =============================================================================
# Aerodynamics
# =============================================================================

class DragModelType(Enum):
    """Section drag coefficient model."""
    POLAR = "polar"     # Cx = Cx0 + A(α)·Cy²
    TABLE = "table"     # Cx = Cx(α)


@dataclass
class AerodynamicsTable:
    """
    Airfoil section coefficients versus angle of attack.

    Exactly one drag model must be described:

    - Polar model: cd0 and polar are set
    - Table model: drag is set

    Attributes:
    ----------
    aoa : list of float
        Angle of attack breakpoints (degrees), strictly increasing.

    lift : list of float
        Lift coefficient Cy at each angle of attack.

    cd0 : float, optional
        Zero-lift drag coefficient Cx0 (polar model).

    polar : list of float, optional
        Drag polar factor A at each angle of attack (polar model).

    drag : list of float, optional
        Drag coefficient Cx at each angle of attack (table model).
    """
    aoa: List[float]
    lift: List[float]
    cd0: Optional[float] = None
    polar: Optional[List[float]] = None
    drag: Optional[List[float]] = None

    @classmethod
    def polar_model(cls, aoa, lift, cd0: float, polar) -> "AerodynamicsTable":
        """Create a table using the zero-lift drag + polar factor model."""
        return cls(aoa=list(aoa), lift=list(lift), cd0=cd0, polar=list(polar))

    @classmethod
    def table_model(cls, aoa, lift, drag) -> "AerodynamicsTable":
        """Create a table using a direct drag coefficient lookup."""
        return cls(aoa=list(aoa), lift=list(lift), drag=list(drag))

    @property
    def drag_model(self) -> DragModelType:
        """
        Get the drag model selected by the fields that are present.

        Raises:
        ------
        ConfigurationError
            If neither drag model is described, or a drag table is mixed
            with any polar model field.
        """
        has_polar = self.cd0 is not None and self.polar is not None
        has_table = self.drag is not None

        if has_table and (self.cd0 is not None or self.polar is not None):
            raise ConfigurationError(
                "Aerodynamics mix a drag table with polar model fields (cd0/polar). "
                "Provide either cd0 + polar or drag, not both."
            )
        if has_polar:
            return DragModelType.POLAR
        if has_table:
            return DragModelType.TABLE

        raise ConfigurationError(
            "Aerodynamics describe no drag model. "
            "Provide either cd0 + polar or drag."
        )

    def validate(self) -> List[str]:
        """Return a list of aerodynamics problems (empty if valid)."""
        errors = validate_table(self.aoa, self.lift, "lift table")

        try:
            model = self.drag_model
        except ConfigurationError as e:
            errors.append(str(e))
            return errors

        if model is DragModelType.POLAR:
            errors.extend(validate_table(self.aoa, self.polar, "polar table"))
        else:
            errors.extend(validate_table(self.aoa, self.drag, "drag table"))

        return errors


# =============================================================================
# Environment
# =============================================================================

@dataclass
class EnvironmentParams:
    """
    Operating conditions for a forward speed sweep.

    The rotational speed is given in exactly one of three units, each with
    its own field, so the unit is never implied:

    - rpm: revolutions per minute
    - rev_per_second: revolutions per second
    - angular_speed: radians per second

    Attributes:
    ----------
    v0 : float
        First forward speed of the sweep (m/s).

    v1 : float
        Last forward speed of the sweep (m/s).

    n_speeds : int
        Number of equal speed steps. The sweep has n_speeds + 1 points.
        Zero is allowed only for a single-point sweep (v0 == v1).

    density : float
        Air density (kg/m³). Default sea level standard.
    """
    v0: float
    v1: float
    n_speeds: int
    density: float = AIR_DENSITY_SEA_LEVEL
    rpm: Optional[float] = None
    rev_per_second: Optional[float] = None
    angular_speed: Optional[float] = None

    def _rotational_inputs(self) -> List[Tuple[str, float]]:
        return [
            (name, value) for name, value in (
                ("rpm", self.rpm),
                ("rev_per_second", self.rev_per_second),
                ("angular_speed", self.angular_speed),
            )
            if value is not None
        ]

    @property
    def omega(self) -> float:
        """
        Get the angular speed in rad/s.

        Raises:
        ------
        ConfigurationError
            If no rotational speed or more than one is given.
        """
        given = self._rotational_inputs()
        if len(given) != 1:
            raise ConfigurationError(
                "Exactly one of rpm, rev_per_second or angular_speed must be set "
                f"(got {[name for name, _ in given] or 'none'})"
            )

        name, value = given[0]
        if name == "rpm":
            return 2.0 * math.pi * value / 60.0
        if name == "rev_per_second":
            return 2.0 * math.pi * value
        return value

    @property
    def speed_step(self) -> float:
        """Get the forward speed increment (m/s)."""
        if self.n_speeds == 0:
            return 0.0
        return (self.v1 - self.v0) / self.n_speeds

    def validate(self) -> List[str]:
        """Return a list of environment problems (empty if valid)."""
        errors = []

        try:
            if self.omega <= 0:
                errors.append(f"Rotational speed must be positive, got {self.omega} rad/s")
        except ConfigurationError as e:
            errors.append(str(e))

        if self.density <= 0:
            errors.append(f"Air density must be positive, got {self.density}")

        if self.n_speeds < 0:
            errors.append(f"Number of speed steps must not be negative, got {self.n_speeds}")
        elif self.n_speeds == 0 and self.v0 != self.v1:
            errors.append(
                "Number of speed steps is 0 but v0 != v1; "
                "use n_speeds >= 1 for a speed range"
            )

        if self.v1 < self.v0:
            errors.append(f"Speed range must not decrease (v0={self.v0}, v1={self.v1})")

        return errors


# =============================================================================
# Complete Airscrew Description
# =============================================================================

@dataclass
class AirscrewConfig:
    """
    Complete description of an airscrew analysis.

    Attributes:
    ----------
    geometry : BladeGeometry
        Blade geometry and count.

    aerodynamics : AerodynamicsTable
        Section airfoil coefficients.

    environment : EnvironmentParams
        Rotational speed, speed sweep and air density.

    name : str
        Optional label used in reports.
    """
    geometry: BladeGeometry
    aerodynamics: AerodynamicsTable
    environment: EnvironmentParams
    name: str = ""

    def validate(self) -> None:
        """
        Validate the whole description.

        Raises:
        ------
        ConfigurationError
            Listing every problem found, if any.
        """
        errors = []
        errors.extend(self.geometry.validate())
        errors.extend(self.aerodynamics.validate())
        errors.extend(self.environment.validate())

        if errors:
            label = f" '{self.name}'" if self.name else ""
            raise ConfigurationError(
                f"Invalid airscrew configuration{label}:\n  - " + "\n  - ".join(errors)
            )


# =============================================================================
# Runtime Settings
# =============================================================================

@dataclass
class AirscrewAnalyzerConfig:
    """
    Runtime settings for the Airscrew Analyzer.

    Attributes:
    ----------
    deg_per_rad : float
        Radian to degree factor applied to the induced angle of attack.

    speed_display_factor : float
        Factor converting internal speed (m/s) to reported speed (km/h).

    default_verbose : bool
        When True, sweeps print one status line per speed point.

    root_finding_tolerance : float
        Relative tolerance for the rotational speed solve.

    default_rpm_bounds : tuple of float
        RPM bracket searched when solving for a thrust target.
    """
    deg_per_rad: float = DEG_PER_RAD
    speed_display_factor: float = MS_TO_KMH
    default_verbose: bool = False
    root_finding_tolerance: float = 0.001
    default_rpm_bounds: Tuple[float, float] = (100.0, 30000.0)


# =============================================================================
# Default Configuration Instance
# =============================================================================

DEFAULT_CONFIG = AirscrewAnalyzerConfig()
