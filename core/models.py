# core/models.py
# ------------------------------------------------------------
# Core data models for the clearance calculator.
# This file contains NO imports from other local modules
# to avoid circular-import issues.
#
# Units convention (consistent across the codebase):
# - Lengths: millimetres (mm)
# - Mass: kg
# - Forces: N
# - Stiffness coefficients (material): N/mm^2
# - Spring rates: N/mm
#
# Notes:
# - spring_height is carried through the model but the current
#   stiffness formula does not use it (no active-coil count yet).
# - clearance_change_mm is a separate field even though it currently
#   always equals spring_deflection_mm.
#
# This file is purely data containers + tiny helpers.
# All calculations live in clearance.py.

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional


# -----------------------------
# Enumerations
# -----------------------------
class StiffnessMode(str, Enum):
    GEOMETRY = "Geometry"     # rate derived from wire/coil diameters + material
    KNOWN_RATE = "KnownRate"  # rate entered directly (N/mm)


class ResultState(str, Enum):
    ABSENT = "Absent"                                       # nothing valid to show
    PRESENT = "Present"                                     # result incl. calculated stiffness
    PRESENT_WITHOUT_STIFFNESS = "PresentWithoutStiffness"   # rate was supplied, not calculated


# -----------------------------
# Catalog entry
# -----------------------------
@dataclass(frozen=True)
class Material:
    """
    Spring material.

    Attributes
    ----------
    name                  : str
        Display name.
    stiffness_coefficient : float
        Shear-modulus-like coefficient (N/mm^2). Also the selection key,
        so it must be unique within a catalog.
    """
    name: str
    stiffness_coefficient: float


# -----------------------------
# Inputs
# -----------------------------
@dataclass
class SpringParameters:
    """
    Coil spring geometry and material.

    wire_diameter        : Wire (bar) diameter, mm.
    outer_diameter       : Outer coil diameter, mm. Expected > wire_diameter.
    spring_height        : Free height, mm. Not used by the current formula.
    material_coefficient : Material stiffness coefficient, N/mm^2.
    """
    wire_diameter: float
    outer_diameter: float
    spring_height: float
    material_coefficient: float

    def mean_diameter(self) -> float:
        """Mean coil diameter D = outer - wire (mm)."""
        return self.outer_diameter - self.wire_diameter


@dataclass
class VehicleParameters:
    """
    mass              : Vehicle mass carried by the springs, kg.
    spring_count      : Number of springs sharing the load (2 or 4).
    initial_clearance : Ride height before loading, mm.
    """
    mass: float
    spring_count: int
    initial_clearance: float


# -----------------------------
# Results
# -----------------------------
@dataclass(frozen=True)
class CalculationResult:
    """
    Output of one clearance computation. Never patched; a new input
    produces a new instance.

    spring_deflection_mm : Static compression of each spring (mm).
    new_clearance_mm     : Ride height under the vehicle's weight (mm).
    clearance_change_mm  : Drop in ride height (mm).
    calculated_stiffness : Per-spring rate from geometry (N/mm), or None
                           when the rate was supplied directly.
    """
    spring_deflection_mm: float
    new_clearance_mm: float
    clearance_change_mm: float
    calculated_stiffness: Optional[float] = None


@dataclass(frozen=True)
class ClearanceOutcome:
    """
    Explicit result state seen by the UI.

    state  : ResultState
    result : CalculationResult when present, None when absent.
    reason : Why the outcome is absent (empty otherwise).
    """
    state: ResultState
    result: Optional[CalculationResult] = None
    reason: str = ""

    @classmethod
    def absent(cls, reason: str = "") -> "ClearanceOutcome":
        return cls(state=ResultState.ABSENT, reason=reason)

    @classmethod
    def from_result(cls, result: CalculationResult) -> "ClearanceOutcome":
        if result.calculated_stiffness is None:
            return cls(state=ResultState.PRESENT_WITHOUT_STIFFNESS, result=result)
        return cls(state=ResultState.PRESENT, result=result)

    @property
    def is_present(self) -> bool:
        return self.state is not ResultState.ABSENT

    def summary(self) -> str:
        """One-line human-readable summary."""
        if self.state is ResultState.ABSENT or self.result is None:
            return f"No result ({self.reason})." if self.reason else "No result."
        r = self.result
        text = (
            f"Deflection {r.spring_deflection_mm:.1f} mm → "
            f"clearance {r.new_clearance_mm:.1f} mm"
        )
        if self.state is ResultState.PRESENT:
            text += f" (k = {r.calculated_stiffness:.2f} N/mm)"
        return text


# Friendly export list
__all__ = [
    "StiffnessMode",
    "ResultState",
    "Material",
    "SpringParameters",
    "VehicleParameters",
    "CalculationResult",
    "ClearanceOutcome",
]
