"""
Performance Sweep Tests
=======================

Validates the forward speed sweep, blade-count scaling, non-finite
results at zero speed and the operating point solve.
"""

import math
import sys
from dataclasses import replace
from pathlib import Path
import unittest

import pandas as pd

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.airscrew_analyzer import (
    PerformanceSweep,
    SpeedPoint,
    TableRangeError,
    AerodynamicsTable,
    get_airscrew,
    get_performance,
    create_check_airscrew,
)


class TestSweepShape(unittest.TestCase):
    """Test the speed points produced by a sweep."""

    def setUp(self):
        self.airscrew = get_airscrew("16in 6-blade fan")
        self.points = PerformanceSweep(self.airscrew).run()

    def test_point_count(self):
        """A sweep of n_speeds steps has n_speeds + 1 points."""
        self.assertEqual(len(self.points), 16)

    def test_endpoints_in_kmh(self):
        self.assertAlmostEqual(self.points[0].speed_kmh, 0.0)
        self.assertAlmostEqual(self.points[-1].speed_kmh, 45.0 * 3.6)

    def test_uniform_spacing(self):
        """Consecutive speeds are (v1 - v0) / n_speeds apart (m/s)."""
        speeds = [p.speed_ms for p in self.points]
        for a, b in zip(speeds, speeds[1:]):
            self.assertAlmostEqual(b - a, 3.0)

    def test_display_speed_matches_internal(self):
        for point in self.points:
            self.assertAlmostEqual(point.speed_kmh, point.speed_ms * 3.6)

    def test_power_is_torque_times_omega(self):
        omega = self.airscrew.environment.omega
        for point in self.points:
            self.assertAlmostEqual(point.power, point.torque * omega)

    def test_static_thrust_positive(self):
        self.assertGreater(self.points[0].thrust, 0.0)
        self.assertGreater(self.points[0].power, 0.0)

    def test_module_function_matches_class(self):
        points = get_performance(self.airscrew)
        self.assertEqual([p.thrust for p in points], [p.thrust for p in self.points])


class TestBladeCountScaling(unittest.TestCase):
    """Scaling blade count scales totals and leaves ratios unchanged."""

    def test_scaling(self):
        base = get_airscrew("16in 6-blade fan")
        base = replace(base, environment=replace(base.environment, v0=3.0, v1=30.0, n_speeds=9))
        tripled = replace(base, geometry=replace(base.geometry, blade_count=18))

        base_points = PerformanceSweep(base).run()
        tripled_points = PerformanceSweep(tripled).run()

        for b, t in zip(base_points, tripled_points):
            self.assertAlmostEqual(t.thrust, 3 * b.thrust, places=9)
            self.assertAlmostEqual(t.torque, 3 * b.torque, places=9)
            self.assertAlmostEqual(t.power, 3 * b.power, places=6)
            self.assertAlmostEqual(t.thrust_coefficient, b.thrust_coefficient, places=9)
            self.assertAlmostEqual(t.thrust_to_power, b.thrust_to_power, places=9)


class TestCheckRotorScenario(unittest.TestCase):
    """Single-point sweep of the hand-calculable check rotor."""

    def test_zero_twist_single_point(self):
        """Zero blade angle at rest: one point, no thrust, non-finite ratios."""
        points = PerformanceSweep(create_check_airscrew()).run()

        self.assertEqual(len(points), 1)
        point = points[0]
        self.assertEqual(point.speed_kmh, 0.0)
        self.assertAlmostEqual(point.thrust, 0.0, places=12)
        self.assertEqual(point.torque, 0.0)
        self.assertEqual(point.power, 0.0)
        self.assertFalse(math.isfinite(point.thrust_coefficient))
        self.assertFalse(math.isfinite(point.thrust_to_power))

    def test_twisted_single_point(self):
        """Golden values: T = 0.1 × Σq, M = Cx × Σ(q r), P = M × ω."""
        airscrew = create_check_airscrew(twist=9.0, cd0=0.01)
        point = PerformanceSweep(airscrew).run()[0]

        self.assertAlmostEqual(point.thrust, 0.03125, places=12)
        self.assertAlmostEqual(point.torque, 0.0021875, places=12)
        self.assertAlmostEqual(point.power, 0.0021875, places=12)
        self.assertAlmostEqual(point.total_drag, 0.003125, places=12)
        self.assertAlmostEqual(point.thrust_to_power, 0.03125 / 0.0021875, places=9)
        self.assertEqual(point.thrust_coefficient, math.inf)

    def test_forward_speed_coefficient(self):
        """Ct = T / (π R² × 0.5 ρ V²) once the speed is non-zero."""
        airscrew = create_check_airscrew(twist=9.0, cd0=0.01, v0=0.1, v1=0.1)
        point = PerformanceSweep(airscrew).run()[0]

        q = 0.5 * 1.0 * 0.1 * 0.1
        self.assertTrue(math.isfinite(point.thrust_coefficient))
        self.assertAlmostEqual(point.thrust_coefficient, point.thrust / (math.pi * q))

    def test_rpm_input(self):
        """60 rpm is 2π rad/s, so thrust is 4π² times the 1 rad/s value."""
        airscrew = create_check_airscrew(twist=9.0)
        airscrew = replace(
            airscrew,
            environment=replace(airscrew.environment, angular_speed=None, rpm=60.0),
        )
        point = PerformanceSweep(airscrew).run()[0]
        self.assertAlmostEqual(point.thrust, 0.03125 * (2 * math.pi) ** 2, places=9)


class TestZeroSpeed(unittest.TestCase):
    """Zero forward speed gives explicit non-finite values, not errors."""

    def test_fan_static_point(self):
        point = PerformanceSweep(get_airscrew("16in 6-blade fan")).evaluate(0.0)

        self.assertTrue(math.isinf(point.thrust_coefficient))
        self.assertTrue(math.isfinite(point.thrust_to_power))


class TestSweepFailures(unittest.TestCase):
    """A lookup beyond a table fails the whole sweep."""

    def test_pitch_table_too_short(self):
        base = get_airscrew("16in 6-blade fan")
        airscrew = replace(
            base,
            geometry=replace(base.geometry, speed_table=[0, 20], pitch_correction=[6, 9]),
        )
        with self.assertRaises(TableRangeError):
            PerformanceSweep(airscrew).run()

    def test_aerodynamics_too_narrow(self):
        base = get_airscrew("16in 6-blade fan")
        airscrew = replace(
            base,
            aerodynamics=AerodynamicsTable.polar_model(
                aoa=[-90, 10], lift=[-1.0, 0.8], cd0=0.045, polar=[0.1, 0.1]
            ),
        )
        with self.assertRaises(TableRangeError):
            PerformanceSweep(airscrew).run()


class TestDerivedQuantities(unittest.TestCase):
    """Test DataFrame output, efficiency and the RPM solve."""

    def test_dataframe(self):
        sweep = PerformanceSweep(get_airscrew("16in 6-blade fan"))
        df = sweep.to_dataframe()

        self.assertIsInstance(df, pd.DataFrame)
        self.assertEqual(len(df), 16)
        for column in ("speed_kmh", "thrust", "torque", "power",
                       "thrust_coefficient", "thrust_to_power"):
            self.assertIn(column, df.columns)

    def test_point_to_dict(self):
        point = SpeedPoint(1.0, 2.0, 3.0, 4.0, 5.0, 6.0)
        self.assertEqual(point.to_dict()["thrust_to_power"], 6.0)

    def test_efficiency_zero_at_rest(self):
        sweep = PerformanceSweep(get_airscrew("16in 6-blade fan"))
        self.assertEqual(sweep.get_efficiency(0.0), 0.0)

    def test_efficiency_definition(self):
        airscrew = create_check_airscrew(twist=9.0, cd0=0.01, angular_speed=10.0)
        sweep = PerformanceSweep(airscrew)
        point = sweep.evaluate(0.5)

        self.assertGreater(point.thrust, 0.0)
        self.assertAlmostEqual(sweep.get_efficiency(0.5), point.thrust * 0.5 / point.power)

    def test_rotational_speed_for_thrust(self):
        """At rest thrust grows with ω², so 100× the unit thrust needs 10 rad/s."""
        sweep = PerformanceSweep(create_check_airscrew(twist=9.0, cd0=0.01))
        rpm = sweep.get_rotational_speed_for_thrust(3.125, v_ms=0.0, rpm_bounds=(10.0, 1000.0))

        self.assertIsNotNone(rpm)
        self.assertAlmostEqual(rpm, 10.0 * 60.0 / (2 * math.pi), delta=0.5)

    def test_unreachable_thrust(self):
        sweep = PerformanceSweep(create_check_airscrew(twist=9.0, cd0=0.01))
        rpm = sweep.get_rotational_speed_for_thrust(-1.0, v_ms=0.0, rpm_bounds=(10.0, 1000.0))
        self.assertIsNone(rpm)

    def test_rpm_bracket_from_rest_rejected(self):
        """A bracket starting at 0 RPM is rejected before any evaluation."""
        sweep = PerformanceSweep(create_check_airscrew(twist=9.0, cd0=0.01))
        with self.assertRaises(ValueError) as ctx:
            sweep.get_rotational_speed_for_thrust(3.125, v_ms=0.0, rpm_bounds=(0.0, 1000.0))
        self.assertIn("RPM bracket", str(ctx.exception))

    def test_rpm_bracket_from_rest_in_flight(self):
        sweep = PerformanceSweep(get_airscrew("16in 6-blade fan"))
        with self.assertRaises(ValueError):
            sweep.get_rotational_speed_for_thrust(5.0, v_ms=10.0, rpm_bounds=(0.0, 20000.0))

    def test_rpm_bracket_reversed(self):
        sweep = PerformanceSweep(create_check_airscrew(twist=9.0, cd0=0.01))
        with self.assertRaises(ValueError):
            sweep.get_rotational_speed_for_thrust(3.125, v_ms=0.0, rpm_bounds=(1000.0, 10.0))


if __name__ == "__main__":
    unittest.main(verbosity=2)
