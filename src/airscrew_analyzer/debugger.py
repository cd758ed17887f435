"""
Calculation Trace
=================

Records the quantities of one blade-element calculation so an operating
point can be checked by hand.

The trace is organised the way the integration runs:

- Inputs: forward speed, angular speed, density, tip radius
- Blade: pitch correction at the forward speed
- Element i: W, q, S, α, Cy, Cx, dT, dD, dM at radius r
- Totals: T, M, P, Ct, T/P for all blades

Every quantity carries its unit (looked up by symbol), and the report
ends with a spanwise table of all elements.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import pandas as pd


# Units of the traced quantities, by symbol
QUANTITY_UNITS = {
    "V": "m/s",
    "w": "rad/s",
    "rho": "kg/m^3",
    "R": "m",
    "n_blades": "",
    "deg_per_rad": "deg/rad",
    "dA": "deg",
    "r": "m",
    "W": "m/s",
    "q": "Pa",
    "S": "m^2",
    "a": "deg",
    "Cy": "",
    "Cx": "",
    "dT": "N",
    "dD": "N",
    "dM": "N*m",
    "T": "N",
    "M": "N*m",
    "P": "W",
    "Ct": "",
    "T/P": "N/W",
}

# Columns of the spanwise element table
ELEMENT_COLUMNS = ["r", "W", "q", "S", "a", "Cy", "Cx", "dT", "dD", "dM"]


@dataclass
class TraceEntry:
    """One traced quantity."""
    group: str                  # "Inputs", "Blade", "Element 3", "Totals"
    symbol: str                 # e.g. "q", "Cy", "dT"
    value: float
    formula: str = ""
    inputs: Dict[str, float] = field(default_factory=dict)

    @property
    def unit(self) -> str:
        return QUANTITY_UNITS.get(self.symbol, "")


def element_group(index: int) -> str:
    """Group name of blade element `index` (1-based, root to tip)."""
    return f"Element {index}"


class CalculationDebugger:
    """
    Trace of one airscrew operating point.

    Pass an instance to get_single_blade_forces() (or PerformanceSweep.evaluate)
    and every element quantity is recorded:

        dbg = CalculationDebugger(airscrew="16in fan", speed="20 m/s")
        get_single_blade_forces(geometry, aero, omega, 20.0, 1.225, debugger=dbg)
        print(dbg.element_table())
    """

    def __init__(self, **metadata):
        self.metadata = metadata
        self.entries: List[TraceEntry] = []
        self.stages: List[tuple] = []   # (first entry index, title)

    def __len__(self) -> int:
        return len(self.entries)

    def stage(self, title: str):
        """Open a report stage, e.g. "BLADE ELEMENTS"."""
        self.stages.append((len(self.entries), title))

    def record(
        self,
        group: str,
        symbol: str,
        value: float,
        formula: str = "",
        inputs: Optional[Dict[str, float]] = None
    ):
        """Record one quantity."""
        self.entries.append(TraceEntry(group, symbol, value, formula, dict(inputs or {})))

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def find(self, symbol: str, group: Optional[str] = None) -> Optional[TraceEntry]:
        """Find the most recent entry for a symbol (optionally within a group)."""
        for entry in reversed(self.entries):
            if entry.symbol == symbol and (group is None or entry.group == group):
                return entry
        return None

    def group(self, group: str) -> List[TraceEntry]:
        """Get all entries of a group in recording order."""
        return [e for e in self.entries if e.group == group]

    @property
    def element_count(self) -> int:
        """Number of blade elements traced."""
        return len({e.group for e in self.entries if e.group.startswith("Element ")})

    def element_table(self) -> pd.DataFrame:
        """
        Get the traced element quantities as a spanwise table.

        Returns:
        -------
        pd.DataFrame
            One row per element (root to tip), columns ELEMENT_COLUMNS.
        """
        rows = []
        for index in range(1, self.element_count + 1):
            values = {e.symbol: e.value for e in self.group(element_group(index))}
            rows.append([values.get(column) for column in ELEMENT_COLUMNS])
        return pd.DataFrame(rows, columns=ELEMENT_COLUMNS, index=range(1, len(rows) + 1))

    # -------------------------------------------------------------------------
    # Report
    # -------------------------------------------------------------------------

    def _format_entry(self, entry: TraceEntry) -> str:
        line = f"    {entry.symbol:<12}= {entry.value:.6g}"
        if entry.unit:
            line += f" {entry.unit}"
        if entry.formula:
            line = f"{line:<40}  {entry.formula}"
        if entry.inputs:
            shown = ", ".join(f"{k}={v:.6g}" for k, v in entry.inputs.items())
            line += f"  [{shown}]"
        return line

    def get_report(self) -> str:
        """Render the trace as text, one block per group plus the element table."""
        lines = ["=" * 70, "AIRSCREW CALCULATION TRACE", "=" * 70]

        for key, value in self.metadata.items():
            lines.append(f"  {key}: {value}")

        stage_titles = dict(self.stages)
        current_group = None

        for i, entry in enumerate(self.entries):
            if i in stage_titles:
                lines.extend(["", f">>> {stage_titles[i]}", "-" * 70])
                current_group = None

            if entry.group != current_group:
                header = f"  {entry.group}"
                if entry.symbol == "r":
                    header += f" (r = {entry.value:.6g} m)"
                lines.append(header)
                current_group = entry.group

            if entry.symbol != "r":
                lines.append(self._format_entry(entry))

        if self.element_count:
            lines.extend(["", ">>> SPANWISE SUMMARY", "-" * 70])
            lines.append(self.element_table().to_string(float_format=lambda v: f"{v:.5g}"))

        lines.extend(["", "=" * 70, f"Traced quantities: {len(self.entries)}", "=" * 70])
        return "\n".join(lines)
