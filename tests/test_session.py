# tests/test_session.py
# ------------------------------------------------------------
# Parameter session: every setter replaces the outcome.
#
from __future__ import annotations

import math

from core.config import DEFAULT_VALUES, INPUT_LIMITS
from core.models import ResultState, StiffnessMode
from core.session import ClearanceSession


def test_fresh_session_has_result():
    s = ClearanceSession()
    assert s.outcome.state == ResultState.PRESENT
    assert s.vehicle.mass == DEFAULT_VALUES.MASS_KG
    assert s.spring.material_coefficient == 80000.0
    assert math.isclose(s.outcome.result.new_clearance_mm, 170.067, abs_tol=1e-3)


def test_each_setter_replaces_outcome():
    s = ClearanceSession()
    previous = s.outcome
    for setter, value in (
        (s.set_mass, 1000.0),
        (s.set_spring_count, 2),
        (s.set_initial_clearance, 150.0),
        (s.set_wire_diameter, 12.0),
        (s.set_outer_diameter, 90.0),
        (s.set_material_coefficient, 40000.0),
    ):
        out = setter(value)
        assert out is s.outcome
        assert out is not previous
        assert out != previous
        previous = out


def test_spring_height_setter_recomputes_same_numbers():
    s = ClearanceSession()
    before = s.outcome
    after = s.set_spring_height(400.0)
    assert after is not before
    assert after == before
    assert s.spring.spring_height == 400.0


def test_session_recovers_after_invalid_geometry():
    s = ClearanceSession()
    s.set_outer_diameter(s.spring.wire_diameter)
    assert s.outcome.state == ResultState.ABSENT
    s.set_outer_diameter(70.0)
    assert s.outcome.state == ResultState.PRESENT


def test_returned_parameters_are_copies():
    s = ClearanceSession()
    v = s.vehicle
    v.mass = 0.0
    assert s.vehicle.mass == DEFAULT_VALUES.MASS_KG


def test_known_rate_mode_has_no_calculated_stiffness():
    s = ClearanceSession()
    s.set_known_stiffness(30.0)
    assert s.outcome.state == ResultState.PRESENT  # still geometry mode
    out = s.set_stiffness_mode(StiffnessMode.KNOWN_RATE)
    assert out.state == ResultState.PRESENT_WITHOUT_STIFFNESS
    assert out.result.calculated_stiffness is None
    # 1500 kg, 4 springs, 30 N/mm → 122.625 mm
    assert math.isclose(out.result.spring_deflection_mm, 122.625, rel_tol=1e-12)
    assert math.isclose(out.result.new_clearance_mm, 57.375, rel_tol=1e-12)
    assert "k =" not in out.summary()


def test_switching_back_to_geometry():
    s = ClearanceSession(stiffness_mode=StiffnessMode.KNOWN_RATE)
    assert s.outcome.state == ResultState.PRESENT_WITHOUT_STIFFNESS
    out = s.set_stiffness_mode(StiffnessMode.GEOMETRY)
    assert out.state == ResultState.PRESENT
    assert "k =" in out.summary()


def test_dependent_input_ranges():
    assert INPUT_LIMITS.outer_diameter_range(10.0) == (15.0, 200.0)
    assert INPUT_LIMITS.spring_height_range(10.0) == (10.0, 500.0)
    assert INPUT_LIMITS.SPRING_COUNTS == (2, 4)
