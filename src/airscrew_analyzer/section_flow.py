"""
Section Flow Model
==================

Local airflow seen by each blade element. The blade is split into N
annuli of equal width and sampled at each annulus midpoint.

For a section at radius r:
    tangential velocity   u = ω·r
    resultant velocity    W = sqrt(V² + u²)
    induced angle         φ = -atan(V / u)   (degrees)
"""

import math
from dataclasses import dataclass
from typing import List

from .config import DEG_PER_RAD


@dataclass
class SectionSample:
    """Flow at one blade element."""
    radius: float           # Section midpoint radius (m)
    local_velocity: float   # Resultant velocity (m/s)
    local_aoa: float        # Induced angle of attack (degrees)


def get_speed_distribution(
    angular_speed: float,
    tip_radius: float,
    v0: float,
    n_sections: int,
    deg_per_rad: float = DEG_PER_RAD
) -> List[SectionSample]:
    """
    Calculate local velocity and induced angle of attack along the blade.

    Parameters:
    ----------
    angular_speed : float
        Rotor angular speed ω (rad/s). Must be positive.

    tip_radius : float
        Blade tip radius R (m).

    v0 : float
        Forward (axial) speed V (m/s).

    n_sections : int
        Number of equal-width blade elements N.

    deg_per_rad : float, optional
        Radian to degree factor for the induced angle.

    Returns:
    -------
    list of SectionSample
        N samples ordered from root to tip. The first sample sits at
        half an element width, so no sample is at zero radius.
    """
    dr = tip_radius / n_sections
    samples = []

    for i in range(n_sections):
        r = dr * (i + 0.5)
        u = angular_speed * r
        samples.append(SectionSample(
            radius=r,
            local_velocity=math.sqrt(v0 * v0 + u * u),
            local_aoa=-math.atan(v0 / u) * deg_per_rad,
        ))

    return samples
