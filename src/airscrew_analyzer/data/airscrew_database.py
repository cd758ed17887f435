"""
Airscrew Database
=================

Sample airscrew descriptions for examples and regression tests.

16-inch six-blade fan:
- 11 radial stations from hub to 0.2 m tip, 0.0002 m² per element
- Blade angle 12.5° at the root washing out to 5° at the tip
- Variable-pitch hub adding 6° at rest and 4° per 25 m/s
- Symmetric section with stall near 20°, Cx0 = 0.045
- 95 rev/s, swept from 0 to 45 m/s in 15 steps at sea level density

Reference results for this fan were published at
https://rcopen.com/forum/f20/topic171881/56
"""

from typing import Dict, List, Optional

from ..config import (
    AirscrewConfig,
    BladeGeometry,
    AerodynamicsTable,
    EnvironmentParams,
    AIR_DENSITY_SEA_LEVEL,
)


# =============================================================================
# Shared Tables
# =============================================================================

# Radial stations (m)
FAN_16IN_RADII = [0, 0.02, 0.04, 0.06, 0.08, 0.1, 0.12, 0.14, 0.16, 0.18, 0.2]

# Built-in blade angle at each station (degrees)
FAN_16IN_TWIST = [12.5, 12.5, 11.5, 9.5, 8.5, 8.5, 5.5, 5, 5, 5, 5]

# Element area at each station (m²)
FAN_16IN_AREA = [0.0002] * 11

# Pitch correction versus forward speed
FAN_16IN_SPEEDS = [0, 25, 50, 75, 100, 125, 150, 175, 200, 225, 250, 275]
FAN_16IN_PITCH = [6, 10, 14, 18, 22, 26, 30, 34, 38, 42, 46, 50]

# Section aerodynamics versus angle of attack (degrees)
SECTION_AOA = [-60, -30, -20, -15, -10, -8, -6, -4, 0, 4, 6, 8, 10, 15, 20, 30, 60]
SECTION_CY = [-0.4, -0.8, -1.05, -0.95, -0.8, -0.64, -0.48, -0.32, 0,
              0.32, 0.48, 0.64, 0.8, 0.95, 1.05, 0.8, 0.4]
SECTION_POLAR = [0.75, 0.25, 0.175, 0.135, 0.105, 0.085, 0.07, 0.065, 0.065,
                 0.065, 0.07, 0.085, 0.105, 0.135, 0.175, 0.25, 0.75]
SECTION_CX0 = 0.045

# Same section as a direct drag table, Cx = Cx0 + A·Cy² at each breakpoint
SECTION_CX = [0.165, 0.205, 0.238, 0.167, 0.1122, 0.0798, 0.0611, 0.0517, 0.045,
              0.0517, 0.0611, 0.0798, 0.1122, 0.167, 0.238, 0.205, 0.165]


def _fan_16in_geometry() -> BladeGeometry:
    return BladeGeometry(
        blade_count=6,
        radii=list(FAN_16IN_RADII),
        twist=list(FAN_16IN_TWIST),
        area=list(FAN_16IN_AREA),
        speed_table=list(FAN_16IN_SPEEDS),
        pitch_correction=list(FAN_16IN_PITCH),
    )


def _fan_16in_environment() -> EnvironmentParams:
    return EnvironmentParams(
        v0=0.0,
        v1=45.0,
        n_speeds=15,
        density=AIR_DENSITY_SEA_LEVEL,
        rev_per_second=95,
    )


# =============================================================================
# Database
# =============================================================================

AIRSCREW_DATABASE: Dict[str, AirscrewConfig] = {
    "16in 6-blade fan": AirscrewConfig(
        name="16in 6-blade fan",
        geometry=_fan_16in_geometry(),
        aerodynamics=AerodynamicsTable.polar_model(
            aoa=SECTION_AOA,
            lift=SECTION_CY,
            cd0=SECTION_CX0,
            polar=SECTION_POLAR,
        ),
        environment=_fan_16in_environment(),
    ),

    # Same fan, drag read directly from a Cx(α) table
    "16in 6-blade fan (drag table)": AirscrewConfig(
        name="16in 6-blade fan (drag table)",
        geometry=_fan_16in_geometry(),
        aerodynamics=AerodynamicsTable.table_model(
            aoa=SECTION_AOA,
            lift=SECTION_CY,
            drag=SECTION_CX,
        ),
        environment=_fan_16in_environment(),
    ),

    # Same fan on a fixed-pitch hub
    "16in 6-blade fan (fixed pitch)": AirscrewConfig(
        name="16in 6-blade fan (fixed pitch)",
        geometry=BladeGeometry(
            blade_count=6,
            radii=list(FAN_16IN_RADII),
            twist=list(FAN_16IN_TWIST),
            area=list(FAN_16IN_AREA),
        ),
        aerodynamics=AerodynamicsTable.polar_model(
            aoa=SECTION_AOA,
            lift=SECTION_CY,
            cd0=SECTION_CX0,
            polar=SECTION_POLAR,
        ),
        environment=_fan_16in_environment(),
    ),
}


def create_check_airscrew(
    twist: float = 0.0,
    cd0: float = 0.0,
    blade_count: int = 1,
    angular_speed: float = 1.0,
    density: float = 1.0,
    v0: float = 0.0,
    v1: float = 0.0,
    n_speeds: int = 0,
    name: Optional[str] = None
) -> AirscrewConfig:
    """
    Create a minimal airscrew whose results can be worked out by hand.

    - Stations at 0 and 1 m, so two elements at r = 0.25 and 0.75 m
    - Unit element area and constant blade angle
    - Linear lift Cy = α / 90 between -90° and 90°
    - Constant drag Cx = cd0 (zero polar factor)

    At zero forward speed the induced angle is zero, so every element
    sees α = twist and the blade thrust is
        T = Cy(twist) × 0.5 × ρ × ω² × (0.25² + 0.75²)

    Parameters:
    ----------
    twist : float
        Blade angle at both stations (degrees).

    cd0 : float
        Zero-lift drag coefficient.

    blade_count, angular_speed, density, v0, v1, n_speeds
        Passed through to the geometry and environment.

    name : str, optional
        Custom name for the airscrew.

    Returns:
    -------
    AirscrewConfig
    """
    if name is None:
        name = f"Check rotor {twist:g} deg"

    return AirscrewConfig(
        name=name,
        geometry=BladeGeometry(
            blade_count=blade_count,
            radii=[0.0, 1.0],
            twist=[twist, twist],
            area=[1.0, 1.0],
        ),
        aerodynamics=AerodynamicsTable.polar_model(
            aoa=[-90.0, 90.0],
            lift=[-1.0, 1.0],
            cd0=cd0,
            polar=[0.0, 0.0],
        ),
        environment=EnvironmentParams(
            v0=v0,
            v1=v1,
            n_speeds=n_speeds,
            density=density,
            angular_speed=angular_speed,
        ),
    )


def get_airscrew(name: str) -> AirscrewConfig:
    """
    Get an airscrew description by name.

    Raises:
    ------
    KeyError
        If the name is not in the database.
    """
    if name not in AIRSCREW_DATABASE:
        raise KeyError(
            f"Airscrew '{name}' not found. Available: {list_airscrews()}"
        )
    return AIRSCREW_DATABASE[name]


def list_airscrews() -> List[str]:
    """List all airscrew names in the database."""
    return sorted(AIRSCREW_DATABASE.keys())
