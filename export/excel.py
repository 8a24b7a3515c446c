# export/excel.py
# ------------------------------------------------------------
# Excel report for the clearance calculator.
#
# What this file provides
# -----------------------
# - build_input_table(vehicle, spring, ...)   → pandas.DataFrame of inputs
# - build_results_table(outcome)              → pandas.DataFrame of results
# - build_mass_sweep_table(masses, outcomes)  → pandas.DataFrame (mass, clearance)
# - export_to_excel_bytes(...)                → bytes of an .xlsx workbook with:
#       * "Summary" sheet (status + key numbers)
#       * "Inputs"  sheet
#       * "Results" sheet
#   Optional: a "MassSweep" sheet with a line chart if you pass the sweep in.
#
# Dependencies: pandas, numpy, xlsxwriter (pandas uses it as engine)
#
from __future__ import annotations

from io import BytesIO
from typing import Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from core.materials import material_label
from core.models import (
    ClearanceOutcome,
    ResultState,
    SpringParameters,
    StiffnessMode,
    VehicleParameters,
)


# -----------------------------
# Table builders (pandas)
# -----------------------------
def build_input_table(
    vehicle: VehicleParameters,
    spring: SpringParameters,
    *,
    stiffness_mode: StiffnessMode = StiffnessMode.GEOMETRY,
    known_stiffness: Optional[float] = None,
) -> pd.DataFrame:
    """
    Flatten the inputs into a tidy Parameter / Value / Unit table.
    """
    rows = [
        ("Vehicle mass", vehicle.mass, "kg"),
        ("Number of springs", vehicle.spring_count, ""),
        ("Initial clearance", vehicle.initial_clearance, "mm"),
        ("Stiffness source", stiffness_mode.value, ""),
    ]
    if stiffness_mode == StiffnessMode.KNOWN_RATE:
        rows.append(("Known spring rate", known_stiffness, "N/mm"))
    else:
        rows += [
            ("Wire diameter", spring.wire_diameter, "mm"),
            ("Outer diameter", spring.outer_diameter, "mm"),
            ("Mean coil diameter", spring.mean_diameter(), "mm"),
            ("Spring height", spring.spring_height, "mm"),
            ("Material", material_label(spring.material_coefficient), ""),
        ]
    return pd.DataFrame(rows, columns=["Parameter", "Value", "Unit"])


def build_results_table(outcome: ClearanceOutcome) -> pd.DataFrame:
    """
    Result quantities; empty table (with headers) when the outcome is absent.
    """
    columns = ["Quantity", "Value", "Unit"]
    if not outcome.is_present or outcome.result is None:
        return pd.DataFrame(columns=columns)

    r = outcome.result
    rows = []
    if outcome.state == ResultState.PRESENT:
        rows.append(("Calculated stiffness", r.calculated_stiffness, "N/mm"))
    rows += [
        ("Spring deflection", r.spring_deflection_mm, "mm"),
        ("New clearance", r.new_clearance_mm, "mm"),
        ("Clearance change", r.clearance_change_mm, "mm"),
    ]
    return pd.DataFrame(rows, columns=columns)


def build_mass_sweep_table(
    masses_kg: Sequence[float],
    outcomes: Sequence[ClearanceOutcome],
) -> pd.DataFrame:
    """
    (mass, new clearance, deflection) per sweep point; absent points become NaN.
    """
    if len(masses_kg) != len(outcomes):
        raise ValueError(
            f"masses and outcomes must be the same length (got {len(masses_kg)} vs {len(outcomes)})."
        )
    clearance = [o.result.new_clearance_mm if o.is_present else np.nan for o in outcomes]
    deflection = [o.result.spring_deflection_mm if o.is_present else np.nan for o in outcomes]
    return pd.DataFrame({
        "Mass (kg)": [float(m) for m in masses_kg],
        "New clearance (mm)": clearance,
        "Deflection (mm)": deflection,
    })


# -----------------------------
# Excel writer
# -----------------------------
def export_to_excel_bytes(
    vehicle: VehicleParameters,
    spring: SpringParameters,
    outcome: ClearanceOutcome,
    *,
    stiffness_mode: StiffnessMode = StiffnessMode.GEOMETRY,
    known_stiffness: Optional[float] = None,
    mass_sweep: Optional[Tuple[Sequence[float], Sequence[ClearanceOutcome]]] = None,
) -> bytes:
    """
    Create an in-memory .xlsx workbook with summary, inputs and results.
    Optionally include a MassSweep sheet.

    Parameters
    ----------
    vehicle, spring : inputs used for the outcome
    outcome         : ClearanceOutcome to report
    stiffness_mode  : how the spring rate was obtained
    known_stiffness : rate in N/mm when stiffness_mode is KNOWN_RATE
    mass_sweep      : optional tuple (masses, outcomes) from core.clearance.sweep_mass

    Returns
    -------
    bytes
        The content of the .xlsx file, ready for download or saving.
    """
    inputs = build_input_table(
        vehicle, spring, stiffness_mode=stiffness_mode, known_stiffness=known_stiffness
    )
    results = build_results_table(outcome)

    bio = BytesIO()
    with pd.ExcelWriter(bio, engine="xlsxwriter") as writer:
        _write_summary_sheet(writer, vehicle, outcome)
        inputs.to_excel(writer, sheet_name="Inputs", index=False)
        results.to_excel(writer, sheet_name="Results", index=False)

        if mass_sweep is not None:
            masses, sweep_outcomes = mass_sweep
            _write_mass_sweep_sheet(writer, build_mass_sweep_table(masses, sweep_outcomes))

        for name in ("Inputs", "Results"):
            ws = writer.sheets[name]
            ws.set_column(0, 0, 26)
            ws.set_column(1, 1, 30)
            ws.set_column(2, 2, 10)

    return bio.getvalue()


# -----------------------------
# Helpers (xlsxwriter formatting)
# -----------------------------
def _write_summary_sheet(
    writer: pd.ExcelWriter,
    vehicle: VehicleParameters,
    outcome: ClearanceOutcome,
) -> None:
    ws = writer.book.add_worksheet("Summary")
    writer.sheets["Summary"] = ws

    h1 = writer.book.add_format({"bold": True, "font_size": 14})
    lab = writer.book.add_format({"bold": True})
    nof = writer.book.add_format({"bold": True, "font_color": "#AA0000"})

    ws.write(0, 0, "Clearance Calculator — Summary", h1)

    ws.write(2, 0, "Status:", lab)
    if not outcome.is_present or outcome.result is None:
        ws.write(2, 1, "No result", nof)
        ws.write(3, 0, "Reason:", lab)
        ws.write(3, 1, outcome.reason or "")
        ws.set_column(0, 0, 28)
        ws.set_column(1, 1, 40)
        return

    r = outcome.result
    ws.write(2, 1, outcome.state.value)
    rows = [("Initial clearance (mm)", vehicle.initial_clearance)]
    if r.calculated_stiffness is not None:
        rows.append(("Calculated stiffness (N/mm)", r.calculated_stiffness))
    rows += [
        ("Spring deflection (mm)", r.spring_deflection_mm),
        ("New clearance (mm)", r.new_clearance_mm),
        ("Clearance change (mm)", r.clearance_change_mm),
    ]
    row = 4
    for label, val in rows:
        ws.write(row, 0, label, lab)
        ws.write_number(row, 1, float(val))
        row += 1

    ws.set_column(0, 0, 28)
    ws.set_column(1, 1, 16)


def _write_mass_sweep_sheet(writer: pd.ExcelWriter, df: pd.DataFrame) -> None:
    """
    Writes a sheet "MassSweep" with the sweep table and a simple line chart.
    """
    df.to_excel(writer, sheet_name="MassSweep", index=False)
    ws = writer.sheets["MassSweep"]
    ws.set_column(0, 2, 20)

    chart = writer.book.add_chart({"type": "line"})
    n = len(df)
    chart.add_series({
        "name":       ["MassSweep", 0, 1],
        "categories": ["MassSweep", 1, 0, n, 0],
        "values":     ["MassSweep", 1, 1, n, 1],
        "line":       {"width": 2.25},
    })
    chart.set_title({"name": "New clearance vs mass"})
    chart.set_x_axis({"name": "Vehicle mass (kg)"})
    chart.set_y_axis({"name": "Clearance (mm)"})
    chart.set_legend({"position": "bottom"})
    ws.insert_chart("E2", chart, {"x_scale": 1.3, "y_scale": 1.2})


__all__ = [
    "build_input_table",
    "build_results_table",
    "build_mass_sweep_table",
    "export_to_excel_bytes",
]
