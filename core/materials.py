# core/materials.py
# ------------------------------------------------------------
# Spring material catalog.
#
# The coefficient (N/mm^2) doubles as the selection key in the UI:
# the selectbox stores the number, and the label is looked up from it.
# Two entries with the same coefficient would make that lookup ambiguous,
# so the table is checked once at import.
#
from __future__ import annotations

from typing import Dict, Optional, Sequence, Tuple

from .models import Material


MATERIALS: Tuple[Material, ...] = (
    Material(name="Steel", stiffness_coefficient=80000.0),
    Material(name="Stainless steel", stiffness_coefficient=70000.0),
    Material(name="Bronze", stiffness_coefficient=40000.0),
    Material(name="Titanium", stiffness_coefficient=45000.0),
)


def _index_by_coefficient(materials: Sequence[Material]) -> Dict[float, Material]:
    if not materials:
        raise ValueError("Material catalog must contain at least one entry.")
    index: Dict[float, Material] = {}
    for m in materials:
        if m.stiffness_coefficient in index:
            raise ValueError(
                f"Duplicate stiffness coefficient {m.stiffness_coefficient:g} "
                f"({index[m.stiffness_coefficient].name!r} and {m.name!r})."
            )
        index[m.stiffness_coefficient] = m
    return index


_BY_COEFFICIENT = _index_by_coefficient(MATERIALS)

DEFAULT_MATERIAL: Material = MATERIALS[0]


def coefficients() -> Tuple[float, ...]:
    """Catalog coefficients in display order."""
    return tuple(m.stiffness_coefficient for m in MATERIALS)


def material_names() -> Tuple[str, ...]:
    return tuple(m.name for m in MATERIALS)


def material_by_coefficient(coefficient: float) -> Optional[Material]:
    """Reverse lookup: coefficient → Material (None if not in the catalog)."""
    return _BY_COEFFICIENT.get(float(coefficient))


def format_coefficient(coefficient: float) -> str:
    """80000 → '80 000 N/mm²'."""
    return f"{coefficient:,.0f}".replace(",", " ") + " N/mm²"


def material_label(coefficient: float) -> str:
    """Display label for the selected coefficient."""
    m = material_by_coefficient(coefficient)
    if m is None:
        return format_coefficient(coefficient)
    return f"{m.name} ({format_coefficient(m.stiffness_coefficient)})"


__all__ = [
    "MATERIALS",
    "DEFAULT_MATERIAL",
    "coefficients",
    "material_names",
    "material_by_coefficient",
    "format_coefficient",
    "material_label",
]
