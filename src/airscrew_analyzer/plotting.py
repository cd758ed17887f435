"""
Airscrew Analyzer Plotting Module
=================================

Visualization of blade-element performance results.

Plot Types Available:
--------------------
- Thrust and power vs forward speed
- Thrust coefficient and thrust-to-power ratio vs forward speed
- Spanwise distribution of element thrust, drag and angle of attack

Plots are returned as matplotlib figures and are never shown here, so the
same calls work interactively and for saving to file.

Usage:
-----
    from src.airscrew_analyzer import PerformanceSweep, get_airscrew
    from src.airscrew_analyzer.plotting import PerformancePlotter

    plotter = PerformancePlotter(PerformanceSweep(get_airscrew("16in 6-blade fan")))
    fig = plotter.plot_thrust_power()
    fig.savefig("fan_performance.png", dpi=150)
"""

from typing import List, Optional, Tuple

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.axes import Axes

from .performance import PerformanceSweep, SpeedPoint


class PerformancePlotter:
    """
    Airscrew performance visualization class.

    Attributes:
    ----------
    sweep : PerformanceSweep
        Sweep providing the data to plot.

    Example:
    -------
        plotter = PerformancePlotter(sweep)
        plotter.plot_thrust_power()
        plotter.plot_section_distribution(v_ms=20.0)
    """

    DEFAULT_FIGURE_SIZE = (12, 8)
    DEFAULT_DISTRIBUTION_SIZE = (10, 6)

    DEFAULT_GRID = True
    DEFAULT_LEGEND_LOC = "best"

    def __init__(self, sweep: PerformanceSweep):
        self.sweep = sweep
        self._data: Optional[pd.DataFrame] = None

    @property
    def title(self) -> str:
        return self.sweep.airscrew.name or "Airscrew"

    def _get_data(self, points: Optional[List[SpeedPoint]] = None) -> pd.DataFrame:
        """Get the sweep as a DataFrame, running it once and caching."""
        if points is not None:
            return self.sweep.to_dataframe(points)
        if self._data is None:
            self._data = self.sweep.to_dataframe()
        return self._data

    def _get_axes(self, ax: Optional[Axes], figsize) -> Tuple[Figure, Axes]:
        if ax is None:
            fig, ax = plt.subplots(1, figsize=figsize or self.DEFAULT_FIGURE_SIZE)
        else:
            fig = ax.get_figure()
        return fig, ax

    # -------------------------------------------------------------------------
    # Speed Sweep Plots
    # -------------------------------------------------------------------------

    def plot_thrust_power(
        self,
        points: Optional[List[SpeedPoint]] = None,
        figsize: Optional[Tuple[int, int]] = None,
        ax: Optional[Axes] = None
    ) -> Figure:
        """
        Plot total thrust and shaft power vs forward speed.

        Thrust is drawn on the left axis and power on a twin right axis.

        Parameters:
        ----------
        points : list of SpeedPoint, optional
            Precomputed sweep. Runs the sweep if not given.

        figsize : tuple, optional
            Figure size as (width, height) in inches.

        ax : matplotlib.axes.Axes, optional
            Existing axes to plot on. If None, creates new figure.

        Returns:
        -------
        matplotlib.figure.Figure
        """
        df = self._get_data(points)
        fig, ax = self._get_axes(ax, figsize)

        ax.plot(df.speed_kmh, df.thrust, "b-", label="Thrust", linewidth=2)
        ax.set_xlabel("Forward speed [km/h]")
        ax.set_ylabel("Thrust [N]", color="b")
        ax.grid(self.DEFAULT_GRID)

        ax_power = ax.twinx()
        ax_power.plot(df.speed_kmh, df.power, "r--", label="Power", linewidth=2)
        ax_power.set_ylabel("Power [W]", color="r")

        lines = ax.get_lines() + ax_power.get_lines()
        ax.legend(lines, [line.get_label() for line in lines], loc=self.DEFAULT_LEGEND_LOC)
        ax.set_title(f"Thrust and Power - {self.title}")

        return fig

    def plot_coefficients(
        self,
        points: Optional[List[SpeedPoint]] = None,
        figsize: Optional[Tuple[int, int]] = None
    ) -> Figure:
        """
        Plot thrust coefficient and thrust-to-power ratio vs forward speed.

        Non-finite values (at zero forward speed) are left out of the plot.

        Returns:
        -------
        matplotlib.figure.Figure
        """
        df = self._get_data(points)

        fig, (ax_ct, ax_tp) = plt.subplots(
            2, 1, sharex=True,
            figsize=figsize or self.DEFAULT_FIGURE_SIZE
        )

        ct = df.thrust_coefficient.where(np.isfinite(df.thrust_coefficient))
        tp = df.thrust_to_power.where(np.isfinite(df.thrust_to_power))

        ax_ct.plot(df.speed_kmh, ct, "g-o", markersize=4)
        ax_ct.set_ylabel("Thrust coefficient [-]")
        ax_ct.set_title(f"Coefficients - {self.title}")
        ax_ct.grid(self.DEFAULT_GRID)

        ax_tp.plot(df.speed_kmh, tp, "m-o", markersize=4)
        ax_tp.set_xlabel("Forward speed [km/h]")
        ax_tp.set_ylabel("Thrust / power [N/W]")
        ax_tp.grid(self.DEFAULT_GRID)

        return fig

    # -------------------------------------------------------------------------
    # Spanwise Plots
    # -------------------------------------------------------------------------

    def plot_section_distribution(
        self,
        v_ms: float,
        figsize: Optional[Tuple[int, int]] = None
    ) -> Figure:
        """
        Plot element thrust, drag and angle of attack along one blade.

        Parameters:
        ----------
        v_ms : float
            Forward speed (m/s).

        figsize : tuple, optional
            Figure size as (width, height) in inches.

        Returns:
        -------
        matplotlib.figure.Figure
        """
        forces = self.sweep.get_blade_forces(v_ms).force_distribution

        radius = [f.radius for f in forces]

        fig, (ax_force, ax_aoa) = plt.subplots(
            2, 1, sharex=True,
            figsize=figsize or self.DEFAULT_DISTRIBUTION_SIZE
        )

        ax_force.plot(radius, [f.thrust for f in forces], "b-o", label="Thrust", markersize=4)
        ax_force.plot(radius, [f.drag for f in forces], "r-s", label="Drag", markersize=4)
        ax_force.set_ylabel("Element force [N]")
        ax_force.set_title(f"Blade Loading at {v_ms:.1f} m/s - {self.title}")
        ax_force.grid(self.DEFAULT_GRID)
        ax_force.legend(loc=self.DEFAULT_LEGEND_LOC)

        ax_aoa.plot(radius, [f.total_aoa for f in forces], "k-o", markersize=4)
        ax_aoa.set_xlabel("Radius [m]")
        ax_aoa.set_ylabel("Angle of attack [deg]")
        ax_aoa.grid(self.DEFAULT_GRID)

        return fig
