# tests/test_smoke.py
# ------------------------------------------------------------
# Smoke tests for the clearance engine.
# Run:  pytest -q
#
from __future__ import annotations

import math

import numpy as np

from core.models import (
    SpringParameters, VehicleParameters,
    ResultState,
)
from core.clearance import compute_clearance, compute_stiffness, sweep_mass


def _default_vehicle(
    mass: float = 1500.0,
    spring_count: int = 4,
    initial_clearance: float = 180.0,
) -> VehicleParameters:
    return VehicleParameters(
        mass=mass,
        spring_count=spring_count,
        initial_clearance=initial_clearance,
    )


def _default_spring(
    wire_diameter: float = 10.0,
    outer_diameter: float = 70.0,
    spring_height: float = 250.0,
    material_coefficient: float = 80000.0,
) -> SpringParameters:
    return SpringParameters(
        wire_diameter=wire_diameter,
        outer_diameter=outer_diameter,
        spring_height=spring_height,
        material_coefficient=material_coefficient,
    )


def test_reference_car_numbers():
    """1500 kg on four steel springs (d=10, OD=70) sits ~9.93 mm lower."""
    out = compute_clearance(_default_vehicle(), _default_spring())
    assert out.state == ResultState.PRESENT
    r = out.result
    assert math.isclose(r.calculated_stiffness, 800000000 / 2160000, rel_tol=1e-12)
    assert math.isclose(r.calculated_stiffness, 370.37, abs_tol=0.01)
    assert math.isclose(r.spring_deflection_mm, 9.933, abs_tol=1e-3)
    assert math.isclose(r.new_clearance_mm, 170.067, abs_tol=1e-3)
    assert r.clearance_change_mm == r.spring_deflection_mm


def test_scaling_round_trip_is_kept():
    """Reported stiffness goes through *1000 then /1000, exactly as computed."""
    spring = _default_spring(wire_diameter=7.25, outer_diameter=63.5, material_coefficient=45000.0)
    out = compute_clearance(_default_vehicle(), spring)
    k = compute_stiffness(spring) * 1000.0
    assert out.result.calculated_stiffness == k / 1000.0
    expected_deflection = ((1500.0 * 9.81) / 4 / k) * 1000.0
    assert out.result.spring_deflection_mm == expected_deflection


def test_same_inputs_same_result():
    """Two calls with identical inputs give identical results."""
    a = compute_clearance(_default_vehicle(mass=1235.0), _default_spring(wire_diameter=12.5))
    b = compute_clearance(_default_vehicle(mass=1235.0), _default_spring(wire_diameter=12.5))
    assert a == b


def test_zero_mass_leaves_clearance_unchanged():
    """No load → no deflection, clearance exactly equal to the initial value."""
    for wire, outer in ((1.0, 6.0), (10.0, 70.0), (20.0, 200.0)):
        out = compute_clearance(
            _default_vehicle(mass=0.0, initial_clearance=143.0),
            _default_spring(wire_diameter=wire, outer_diameter=outer),
        )
        assert out.result.spring_deflection_mm == 0.0
        assert out.result.new_clearance_mm == 143.0


def test_heavier_vehicle_sits_lower():
    """Deflection strictly rises and clearance strictly falls with mass."""
    masses = np.linspace(20.0, 3000.0, 40)
    outcomes = sweep_mass(_default_vehicle(), _default_spring(), masses)
    deflections = [o.result.spring_deflection_mm for o in outcomes]
    clearances = [o.result.new_clearance_mm for o in outcomes]
    assert all(b > a for a, b in zip(deflections, deflections[1:]))
    assert all(b < a for a, b in zip(clearances, clearances[1:]))


def test_two_springs_deflect_twice_as_much():
    four = compute_clearance(_default_vehicle(spring_count=4), _default_spring())
    two = compute_clearance(_default_vehicle(spring_count=2), _default_spring())
    assert math.isclose(two.result.spring_deflection_mm, 2 * four.result.spring_deflection_mm, rel_tol=1e-12)


def test_spring_height_does_not_change_result():
    short = compute_clearance(_default_vehicle(), _default_spring(spring_height=50.0))
    tall = compute_clearance(_default_vehicle(), _default_spring(spring_height=500.0))
    assert short.result == tall.result
