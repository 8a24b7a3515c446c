# core/config.py
# ------------------------------------------------------------
# Constants, input limits and UI defaults for the clearance calculator.
#
# Units convention
# ----------------
# - Lengths: millimetres (mm)
# - Mass: kg
# - Forces: N
# - Stiffness coefficients: N/mm^2
# - Spring rates: N/mm
#
# Input ranges are declared here for the widgets only. The model itself
# never clamps; keeping values inside the ranges is the UI's job.
#
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class PhysicalConstants:
    """Fixed numbers used by the clearance model."""
    GRAVITY_MPS2: float = 9.81
    # Empirical calibration factor of the simplified spring-rate formula
    EMPIRICAL_FACTOR: float = 10.0
    # Scale applied to the raw rate before the force balance (and undone after)
    STIFFNESS_SCALE: float = 1000.0
    MM_PER_M: float = 1000.0


@dataclass(frozen=True)
class InputLimits:
    """Slider / selector ranges exposed to the UI."""
    MASS_MIN_KG: float = 20.0
    MASS_MAX_KG: float = 3000.0
    MASS_STEP_KG: float = 5.0

    SPRING_COUNTS: Tuple[int, ...] = (2, 4)

    CLEARANCE_MIN_MM: float = 50.0
    CLEARANCE_MAX_MM: float = 300.0
    CLEARANCE_STEP_MM: float = 1.0

    WIRE_MIN_MM: float = 1.0
    WIRE_MAX_MM: float = 20.0
    WIRE_STEP_MM: float = 0.25

    # Lower bound of the outer diameter is wire diameter + this margin
    OUTER_MARGIN_MM: float = 5.0
    OUTER_MAX_MM: float = 200.0
    OUTER_STEP_MM: float = 0.25

    HEIGHT_MAX_MM: float = 500.0
    HEIGHT_STEP_MM: float = 1.0

    KNOWN_RATE_MIN: float = 1.0
    KNOWN_RATE_MAX: float = 500.0
    KNOWN_RATE_STEP: float = 0.5

    def outer_diameter_range(self, wire_diameter: float) -> Tuple[float, float]:
        """(min, max) outer diameter allowed for the given wire diameter."""
        return wire_diameter + self.OUTER_MARGIN_MM, self.OUTER_MAX_MM

    def spring_height_range(self, wire_diameter: float) -> Tuple[float, float]:
        """(min, max) free height allowed for the given wire diameter."""
        return wire_diameter, self.HEIGHT_MAX_MM


@dataclass(frozen=True)
class DefaultValues:
    """Starting values for a fresh session."""
    MASS_KG: float = 1500.0
    SPRING_COUNT: int = 4
    INITIAL_CLEARANCE_MM: float = 180.0

    WIRE_DIAMETER_MM: float = 10.0
    OUTER_DIAMETER_MM: float = 70.0
    SPRING_HEIGHT_MM: float = 250.0

    KNOWN_RATE_N_PER_MM: float = 30.0

    # Mass sweep chart
    SWEEP_POINTS: int = 25


def log_level_from_env(default: str = "INFO") -> str:
    """Log level name taken from CLEARANCE_LOG_LEVEL (falls back to default)."""
    return os.environ.get("CLEARANCE_LOG_LEVEL", default).upper()


def log_file_from_env() -> Optional[str]:
    """Log file path taken from CLEARANCE_LOG_FILE (None when unset or empty)."""
    return os.environ.get("CLEARANCE_LOG_FILE") or None


# Global configuration instances
PHYSICS = PhysicalConstants()
INPUT_LIMITS = InputLimits()
DEFAULT_VALUES = DefaultValues()


__all__ = [
    "PhysicalConstants",
    "InputLimits",
    "DefaultValues",
    "PHYSICS",
    "INPUT_LIMITS",
    "DEFAULT_VALUES",
    "log_level_from_env",
    "log_file_from_env",
]
