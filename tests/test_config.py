"""
Configuration Tests
===================

Validates rotational speed units, drag model selection and rejection of
degenerate airscrew descriptions.
"""

import math
import sys
from dataclasses import replace
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.airscrew_analyzer import (
    AerodynamicsTable,
    BladeGeometry,
    ConfigurationError,
    DragModelType,
    EnvironmentParams,
    PerformanceSweep,
    get_airscrew,
    list_airscrews,
    create_check_airscrew,
)


class TestRotationalSpeedUnits(unittest.TestCase):
    """Each rotational speed field has one explicit unit."""

    def test_rpm(self):
        env = EnvironmentParams(v0=0, v1=10, n_speeds=5, rpm=60.0)
        self.assertAlmostEqual(env.omega, 2 * math.pi)

    def test_rev_per_second(self):
        env = EnvironmentParams(v0=0, v1=10, n_speeds=5, rev_per_second=1.0)
        self.assertAlmostEqual(env.omega, 2 * math.pi)

    def test_angular_speed(self):
        env = EnvironmentParams(v0=0, v1=10, n_speeds=5, angular_speed=3.0)
        self.assertEqual(env.omega, 3.0)

    def test_missing(self):
        env = EnvironmentParams(v0=0, v1=10, n_speeds=5)
        with self.assertRaises(ConfigurationError):
            env.omega

    def test_ambiguous(self):
        env = EnvironmentParams(v0=0, v1=10, n_speeds=5, rpm=6000, angular_speed=600)
        with self.assertRaises(ConfigurationError):
            env.omega

    def test_speed_step(self):
        env = EnvironmentParams(v0=0, v1=45, n_speeds=15, rpm=6000)
        self.assertAlmostEqual(env.speed_step, 3.0)


class TestDragModelSelection(unittest.TestCase):
    """The drag model is chosen by which fields are present."""

    def test_polar(self):
        aero = AerodynamicsTable.polar_model([0, 1], [0, 1], cd0=0.02, polar=[0.1, 0.1])
        self.assertIs(aero.drag_model, DragModelType.POLAR)

    def test_table(self):
        aero = AerodynamicsTable.table_model([0, 1], [0, 1], drag=[0.02, 0.03])
        self.assertIs(aero.drag_model, DragModelType.TABLE)

    def test_both(self):
        aero = AerodynamicsTable([0, 1], [0, 1], cd0=0.02, polar=[0.1, 0.1], drag=[0.02, 0.03])
        with self.assertRaises(ConfigurationError):
            aero.drag_model

    def test_neither(self):
        aero = AerodynamicsTable([0, 1], [0, 1])
        with self.assertRaises(ConfigurationError):
            aero.drag_model

    def test_polar_without_cd0(self):
        aero = AerodynamicsTable([0, 1], [0, 1], polar=[0.1, 0.1])
        with self.assertRaises(ConfigurationError):
            aero.drag_model

    def test_drag_table_with_cd0(self):
        aero = AerodynamicsTable([0, 1], [0, 1], cd0=0.02, drag=[0.02, 0.03])
        with self.assertRaises(ConfigurationError):
            aero.drag_model

    def test_drag_table_with_polar(self):
        aero = AerodynamicsTable([0, 1], [0, 1], polar=[0.1, 0.1], drag=[0.02, 0.03])
        with self.assertRaises(ConfigurationError):
            aero.drag_model

    def test_mixed_description_rejected_by_sweep(self):
        airscrew = create_check_airscrew(twist=9.0)
        airscrew = replace(
            airscrew,
            aerodynamics=AerodynamicsTable([-90, 90], [-1, 1], cd0=0.02, drag=[0.02, 0.02]),
        )
        with self.assertRaises(ConfigurationError) as ctx:
            PerformanceSweep(airscrew)
        self.assertIn("mix a drag table", str(ctx.exception))


class TestDegenerateConfiguration(unittest.TestCase):
    """Degenerate descriptions are rejected before any computation."""

    def setUp(self):
        self.base = create_check_airscrew(twist=9.0, v0=0.0, v1=10.0, n_speeds=5)

    def assertRejected(self, airscrew, fragment):
        with self.assertRaises(ConfigurationError) as ctx:
            PerformanceSweep(airscrew)
        self.assertIn(fragment, str(ctx.exception))

    def _geometry(self, **changes):
        return replace(self.base, geometry=replace(self.base.geometry, **changes))

    def _environment(self, **changes):
        return replace(self.base, environment=replace(self.base.environment, **changes))

    def test_valid_base(self):
        PerformanceSweep(self.base)

    def test_zero_blades(self):
        self.assertRejected(self._geometry(blade_count=0), "Blade count")

    def test_non_positive_tip_radius(self):
        self.assertRejected(self._geometry(radii=[-1.0, 0.0]), "Tip radius")

    def test_non_increasing_radii(self):
        airscrew = self._geometry(radii=[0.0, 0.5, 0.5], twist=[1, 1, 1], area=[1, 1, 1])
        self.assertRejected(airscrew, "strictly increasing")

    def test_mismatched_twist(self):
        self.assertRejected(self._geometry(twist=[1.0, 2.0, 3.0]), "twist table")

    def test_single_station(self):
        self.assertRejected(self._geometry(radii=[1.0], twist=[1.0], area=[1.0]), "at least 2")

    def test_partial_pitch_tables(self):
        self.assertRejected(self._geometry(speed_table=[0, 10]), "Pitch correction")

    def test_zero_steps_with_range(self):
        self.assertRejected(self._environment(n_speeds=0), "speed steps is 0")

    def test_negative_steps(self):
        self.assertRejected(self._environment(n_speeds=-1), "must not be negative")

    def test_decreasing_range(self):
        self.assertRejected(self._environment(v0=10.0, v1=0.0), "must not decrease")

    def test_zero_density(self):
        self.assertRejected(self._environment(density=0.0), "density")

    def test_zero_rotational_speed(self):
        self.assertRejected(self._environment(angular_speed=0.0), "Rotational speed")

    def test_missing_rotational_speed(self):
        self.assertRejected(self._environment(angular_speed=None), "Exactly one")

    def test_missing_drag_model(self):
        airscrew = replace(self.base, aerodynamics=AerodynamicsTable([-90, 90], [-1, 1]))
        self.assertRejected(airscrew, "no drag model")

    def test_all_problems_reported(self):
        airscrew = replace(
            self._geometry(blade_count=0),
            environment=replace(self.base.environment, density=-1.0),
        )
        with self.assertRaises(ConfigurationError) as ctx:
            airscrew.validate()
        message = str(ctx.exception)
        self.assertIn("Blade count", message)
        self.assertIn("density", message)

    def test_single_point_allowed(self):
        """n_speeds = 0 with v0 == v1 is a one-point sweep."""
        points = PerformanceSweep(self._environment(n_speeds=0, v1=0.0)).run()
        self.assertEqual(len(points), 1)


class TestDatabase(unittest.TestCase):
    """Test the sample airscrew database."""

    def test_all_entries_valid(self):
        for name in list_airscrews():
            get_airscrew(name).validate()

    def test_unknown_name(self):
        with self.assertRaises(KeyError):
            get_airscrew("no such fan")

    def test_fan_geometry(self):
        geometry = get_airscrew("16in 6-blade fan").geometry
        self.assertIsInstance(geometry, BladeGeometry)
        self.assertEqual(geometry.blade_count, 6)
        self.assertEqual(geometry.section_count, 11)
        self.assertAlmostEqual(geometry.tip_radius, 0.2)
        self.assertTrue(geometry.has_pitch_correction)


if __name__ == "__main__":
    unittest.main(verbosity=2)
