#!/usr/bin/env python3
"""
Airscrew Analyzer Launcher
==========================

Runs a blade-element performance sweep for an airscrew from the sample
database and prints the performance table.

Usage:
------
    # From the project root directory:
    python run_airscrew_analyzer.py
    python run_airscrew_analyzer.py "16in 6-blade fan (drag table)"
    python run_airscrew_analyzer.py --list
    python run_airscrew_analyzer.py --trace 20
    python run_airscrew_analyzer.py --plot fan.png

Requirements:
------------
- Python 3.8+
- numpy
- pandas
- scipy
- matplotlib (for --plot)
"""

import argparse
import sys
from pathlib import Path

# -------------------------------------------------------------------------
# Path Configuration
# -------------------------------------------------------------------------

project_root = Path(__file__).parent.resolve()
sys.path.insert(0, str(project_root))

from src.airscrew_analyzer import (
    PerformanceSweep,
    ConfigurationError,
    TableRangeError,
    get_airscrew,
    list_airscrews,
    trace_speed_point,
)

DEFAULT_AIRSCREW = "16in 6-blade fan"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Blade-element airscrew performance sweep"
    )
    parser.add_argument(
        "airscrew", nargs="?", default=DEFAULT_AIRSCREW,
        help=f"Airscrew name from the database (default: {DEFAULT_AIRSCREW!r})"
    )
    parser.add_argument("--list", action="store_true", help="List available airscrews")
    parser.add_argument(
        "--trace", type=float, metavar="SPEED",
        help="Print a step-by-step calculation report at SPEED m/s"
    )
    parser.add_argument(
        "--plot", metavar="FILE",
        help="Save thrust/power and coefficient plots (FILE and FILE with _coeff suffix)"
    )
    return parser.parse_args(argv)


def main(argv=None):
    """
    Run the analyzer from the command line.

    Returns:
    -------
    int
        Process exit code.
    """
    args = parse_args(argv)

    if args.list:
        for name in list_airscrews():
            print(name)
        return 0

    print("=" * 60)
    print("  Airscrew Analyzer - Blade Element Performance")
    print("=" * 60)

    try:
        airscrew = get_airscrew(args.airscrew)

        if args.trace is not None:
            print(trace_speed_point(airscrew, args.trace).get_report())
            return 0

        sweep = PerformanceSweep(airscrew)
        points = sweep.run()

    except (KeyError, ConfigurationError, TableRangeError) as e:
        print(f"\n[ERROR] {e}")
        return 1

    print(f"  {airscrew.name}")
    print("-" * 60)
    print(sweep.to_dataframe(points).to_string(index=False, float_format=lambda v: f"{v:.4g}"))

    if args.plot:
        from src.airscrew_analyzer.plotting import PerformancePlotter

        plotter = PerformancePlotter(sweep)
        plot_path = Path(args.plot)
        plotter.plot_thrust_power(points).savefig(plot_path, dpi=150)
        coeff_path = plot_path.with_name(f"{plot_path.stem}_coeff{plot_path.suffix}")
        plotter.plot_coefficients(points).savefig(coeff_path, dpi=150)
        print(f"\nSaved plots to {plot_path} and {coeff_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
