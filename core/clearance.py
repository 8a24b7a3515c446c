# core/clearance.py
# ------------------------------------------------------------
# Spring rate and static ride-height drop.
#
# Model
# -----
# 1) Mean coil diameter      D     = OD - d
# 2) Empirical spring rate   k_raw = G * d^4 / (10 * D^3)          [N/mm]
#    A simplified stand-in for the helical-spring formula: no active-coil
#    count, and 10 is an empirical calibration factor.
# 3) Working rate            k     = k_raw * 1000
#    Reported rate           k_raw' = k / 1000
# 4) Weight                  F     = m * 9.81                       [N]
# 5) Per spring              f     = F / n
# 6) Deflection              δ     = f / k,  δ_mm = δ * 1000
# 7) New clearance           h'    = h0 - δ_mm
# 8) Clearance change        Δh    = δ_mm
#
# The *1000 / /1000 pair in steps 3 and 6 is kept exactly as written so
# results match the reference figures bit for bit.
#
# Failure handling
# ----------------
# Zero mean diameter, zero wire diameter or zero spring count divide by
# zero. compute_clearance() never raises for these: any ArithmeticError
# or non-finite value becomes an ABSENT outcome with a reason.
#
from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional

from .config import PHYSICS
from .models import (
    CalculationResult,
    ClearanceOutcome,
    SpringParameters,
    VehicleParameters,
)

logger = logging.getLogger(__name__)


def compute_stiffness(spring: SpringParameters) -> float:
    """
    Empirical per-spring rate (N/mm) from geometry and material.

        k = G * d^4 / (10 * D^3),  D = OD - d

    Raises
    ------
    ZeroDivisionError
        When the mean diameter is zero.
    """
    mean_diameter = spring.mean_diameter()
    return (spring.material_coefficient * spring.wire_diameter ** 4) / (
        PHYSICS.EMPIRICAL_FACTOR * mean_diameter ** 3
    )


def _all_finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)


def compute_clearance(
    vehicle: VehicleParameters,
    spring: SpringParameters,
    *,
    known_stiffness: Optional[float] = None,
) -> ClearanceOutcome:
    """
    Master entry point. Derives deflection and new clearance for the inputs.

    Parameters
    ----------
    vehicle         : VehicleParameters
    spring          : SpringParameters
    known_stiffness : optional per-spring rate in N/mm. When given, the
                      geometry formula is skipped and the outcome carries no
                      calculated stiffness.

    Returns
    -------
    ClearanceOutcome
        PRESENT / PRESENT_WITHOUT_STIFFNESS on success, ABSENT on failure.
    """
    try:
        if known_stiffness is None:
            stiffness = compute_stiffness(spring) * PHYSICS.STIFFNESS_SCALE
        else:
            stiffness = known_stiffness * PHYSICS.STIFFNESS_SCALE

        weight_force = vehicle.mass * PHYSICS.GRAVITY_MPS2
        force_per_spring = weight_force / vehicle.spring_count
        deflection = force_per_spring / stiffness
        deflection_mm = deflection * PHYSICS.MM_PER_M
        new_clearance = vehicle.initial_clearance - deflection_mm
    except ArithmeticError as exc:
        logger.warning("Clearance calculation failed: %s (vehicle=%s, spring=%s)", exc, vehicle, spring)
        return ClearanceOutcome.absent(f"calculation error: {exc}")

    calculated = None if known_stiffness is not None else stiffness / PHYSICS.STIFFNESS_SCALE

    if not _all_finite(deflection_mm, new_clearance, stiffness):
        logger.warning(
            "Clearance calculation produced non-finite values (deflection=%r, clearance=%r)",
            deflection_mm, new_clearance,
        )
        return ClearanceOutcome.absent("non-finite result")

    result = CalculationResult(
        spring_deflection_mm=deflection_mm,
        new_clearance_mm=new_clearance,
        clearance_change_mm=deflection_mm,
        calculated_stiffness=calculated,
    )
    logger.debug("Clearance result: %s", result)
    return ClearanceOutcome.from_result(result)


def sweep_mass(
    vehicle: VehicleParameters,
    spring: SpringParameters,
    masses: Iterable[float],
    *,
    known_stiffness: Optional[float] = None,
) -> List[ClearanceOutcome]:
    """
    Evaluate compute_clearance() for each mass, all other inputs unchanged.
    Each point is independent; a failed point does not affect the others.
    """
    outcomes = []
    for m in masses:
        v = VehicleParameters(
            mass=float(m),
            spring_count=vehicle.spring_count,
            initial_clearance=vehicle.initial_clearance,
        )
        outcomes.append(compute_clearance(v, spring, known_stiffness=known_stiffness))
    return outcomes


__all__ = ["compute_stiffness", "compute_clearance", "sweep_mass"]
