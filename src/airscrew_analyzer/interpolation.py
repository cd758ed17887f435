"""
Table Interpolation
===================

One-dimensional piecewise-linear lookup used for every tabulated
relationship in the analyzer (geometry versus radius, airfoil coefficients
versus angle of attack, pitch correction versus forward speed).

Behaviour at the table edges:
- Below the first breakpoint the first segment is extended linearly.
- Above the last breakpoint no value exists and TableRangeError is raised.
"""

import math
from typing import Sequence


class TableRangeError(ValueError):
    """Raised when a lookup falls beyond the last breakpoint of a table."""

    def __init__(self, name: str, x: float, x_min: float, x_max: float):
        self.name = name
        self.x = x
        self.x_min = x_min
        self.x_max = x_max
        super().__init__(
            f"Lookup outside {name}: x={x} is beyond the last breakpoint "
            f"(table covers {x_min} to {x_max})"
        )


def interpolate(
    x_table: Sequence[float],
    y_table: Sequence[float],
    x: float,
    name: str = "table"
) -> float:
    """
    Linearly interpolate y at x from a breakpoint table.

    The first segment whose upper breakpoint lies above x is used, so
    queries below the table are extrapolated with the first segment's slope.

    Parameters:
    ----------
    x_table : sequence of float
        Strictly increasing breakpoints.

    y_table : sequence of float
        Values at each breakpoint.

    x : float
        Query value.

    name : str, optional
        Table name reported in TableRangeError.

    Returns:
    -------
    float
        Interpolated value.

    Raises:
    ------
    TableRangeError
        If x lies beyond the last breakpoint (or is NaN).

    Example:
    -------
        interpolate([0.0, 1.0], [0.0, 10.0], 0.5)   # 5.0
        interpolate([0.0, 1.0], [0.0, 10.0], -1.0)  # -10.0
    """
    size = len(x_table)

    for i in range(size - 1):
        if x_table[i + 1] > x:
            k = (y_table[i + 1] - y_table[i]) / (x_table[i + 1] - x_table[i])
            return y_table[i] + k * (x - x_table[i])

    # Closed at the top: the last breakpoint itself is inside the table
    if size > 0 and x == x_table[-1]:
        return float(y_table[-1])

    x_min = x_table[0] if size else math.nan
    x_max = x_table[-1] if size else math.nan
    raise TableRangeError(name, x, x_min, x_max)
