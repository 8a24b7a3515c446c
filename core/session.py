"""
Clearance Session (explicit state + recompute)
==============================================
Holds every parameter the UI can change together with the latest outcome.

Each setter replaces one field and immediately recomputes the outcome from
scratch through ``compute_clearance``; the previous outcome is discarded,
never patched. The session does not clamp values: widgets enforce the ranges
declared in ``core.config.INPUT_LIMITS``.

Classes:
    ClearanceSession: Mutable parameter state with a pure recompute.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from .clearance import compute_clearance
from .config import DEFAULT_VALUES
from .materials import DEFAULT_MATERIAL, material_label
from .models import (
    ClearanceOutcome,
    Material,
    SpringParameters,
    StiffnessMode,
    VehicleParameters,
)

logger = logging.getLogger(__name__)


def default_vehicle() -> VehicleParameters:
    return VehicleParameters(
        mass=DEFAULT_VALUES.MASS_KG,
        spring_count=DEFAULT_VALUES.SPRING_COUNT,
        initial_clearance=DEFAULT_VALUES.INITIAL_CLEARANCE_MM,
    )


def default_spring() -> SpringParameters:
    # Material seeded from the first catalog entry
    return SpringParameters(
        wire_diameter=DEFAULT_VALUES.WIRE_DIAMETER_MM,
        outer_diameter=DEFAULT_VALUES.OUTER_DIAMETER_MM,
        spring_height=DEFAULT_VALUES.SPRING_HEIGHT_MM,
        material_coefficient=DEFAULT_MATERIAL.stiffness_coefficient,
    )


class ClearanceSession:
    """Single-writer parameter state for one calculator session."""

    def __init__(
        self,
        vehicle: Optional[VehicleParameters] = None,
        spring: Optional[SpringParameters] = None,
        stiffness_mode: StiffnessMode = StiffnessMode.GEOMETRY,
        known_stiffness: float = DEFAULT_VALUES.KNOWN_RATE_N_PER_MM,
    ):
        self._vehicle = vehicle if vehicle is not None else default_vehicle()
        self._spring = spring if spring is not None else default_spring()
        self._stiffness_mode = stiffness_mode
        self._known_stiffness = known_stiffness
        self._outcome: ClearanceOutcome = ClearanceOutcome.absent("not computed yet")
        self.recompute()

    # --- read access -------------------------------------------------
    @property
    def vehicle(self) -> VehicleParameters:
        return replace(self._vehicle)

    @property
    def spring(self) -> SpringParameters:
        return replace(self._spring)

    @property
    def stiffness_mode(self) -> StiffnessMode:
        return self._stiffness_mode

    @property
    def known_stiffness(self) -> float:
        return self._known_stiffness

    @property
    def outcome(self) -> ClearanceOutcome:
        return self._outcome

    @property
    def selected_material_label(self) -> str:
        return material_label(self._spring.material_coefficient)

    # --- recompute ---------------------------------------------------
    def recompute(self) -> ClearanceOutcome:
        """Replace the outcome with a fresh computation from current state."""
        known = self._known_stiffness if self._stiffness_mode == StiffnessMode.KNOWN_RATE else None
        self._outcome = compute_clearance(self._vehicle, self._spring, known_stiffness=known)
        logger.debug("Recomputed: %s", self._outcome.summary())
        return self._outcome

    def _set_vehicle(self, **changes) -> ClearanceOutcome:
        self._vehicle = replace(self._vehicle, **changes)
        return self.recompute()

    def _set_spring(self, **changes) -> ClearanceOutcome:
        self._spring = replace(self._spring, **changes)
        return self.recompute()

    # --- vehicle setters ---------------------------------------------
    def set_mass(self, mass: float) -> ClearanceOutcome:
        return self._set_vehicle(mass=float(mass))

    def set_spring_count(self, spring_count: int) -> ClearanceOutcome:
        return self._set_vehicle(spring_count=int(spring_count))

    def set_initial_clearance(self, clearance: float) -> ClearanceOutcome:
        return self._set_vehicle(initial_clearance=float(clearance))

    # --- spring setters ----------------------------------------------
    def set_wire_diameter(self, diameter: float) -> ClearanceOutcome:
        return self._set_spring(wire_diameter=float(diameter))

    def set_outer_diameter(self, diameter: float) -> ClearanceOutcome:
        return self._set_spring(outer_diameter=float(diameter))

    def set_spring_height(self, height: float) -> ClearanceOutcome:
        return self._set_spring(spring_height=float(height))

    def set_material_coefficient(self, coefficient: float) -> ClearanceOutcome:
        return self._set_spring(material_coefficient=float(coefficient))

    def select_material(self, material: Material) -> ClearanceOutcome:
        return self.set_material_coefficient(material.stiffness_coefficient)

    # --- stiffness source --------------------------------------------
    def set_stiffness_mode(self, mode: StiffnessMode) -> ClearanceOutcome:
        self._stiffness_mode = StiffnessMode(mode)
        return self.recompute()

    def set_known_stiffness(self, rate: float) -> ClearanceOutcome:
        self._known_stiffness = float(rate)
        return self.recompute()


__all__ = ["ClearanceSession", "default_vehicle", "default_spring"]
