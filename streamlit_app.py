# streamlit_app.py
# ------------------------------------------------------------
# Streamlit UI for the clearance calculator.
# - Collects vehicle and spring inputs
# - Pushes them into a ClearanceSession (full recompute on every change)
# - Shows the text summary + initial/new clearance bar chart
# - Optional: mass sweep chart and Excel download
#
# Run:
#   streamlit run streamlit_app.py
#
from __future__ import annotations

import logging

import streamlit as st
import pandas as pd
import numpy as np
import matplotlib.pyplot as plt

# Local imports (no circular refs; core/* never imports streamlit_app)
from core.clearance import sweep_mass
from core.config import DEFAULT_VALUES, INPUT_LIMITS, log_file_from_env, log_level_from_env
from core.logging_config import setup_logging
from core.materials import coefficients, material_label
from core.models import ResultState, StiffnessMode
from core.session import ClearanceSession
from charts.plots import plot_clearance_comparison, plot_clearance_vs_mass
from export.excel import export_to_excel_bytes

logger = logging.getLogger("core.app")


def _session() -> ClearanceSession:
    if "clearance_session" not in st.session_state:
        setup_logging(log_level_from_env(), log_file=log_file_from_env())
        st.session_state["clearance_session"] = ClearanceSession()
        logger.info("New calculator session started.")
    return st.session_state["clearance_session"]


def _clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)


def _stiffness_mode_toggle(current: StiffnessMode) -> StiffnessMode:
    known = st.toggle(
        "I know the spring rate",
        value=current == StiffnessMode.KNOWN_RATE,
        help="Skip the geometry estimate and enter the rate of one spring directly.",
    )
    return StiffnessMode.KNOWN_RATE if known else StiffnessMode.GEOMETRY


# -----------------------------
# Sidebar inputs
# -----------------------------
st.set_page_config(page_title="Clearance Calculator", layout="wide")
st.title("Vehicle clearance calculator")

session = _session()
veh = session.vehicle
spr = session.spring
lim = INPUT_LIMITS

with st.sidebar:
    st.header("Vehicle")
    mass = st.slider(
        "Vehicle mass (kg)",
        min_value=lim.MASS_MIN_KG, max_value=lim.MASS_MAX_KG,
        value=_clamp(veh.mass, lim.MASS_MIN_KG, lim.MASS_MAX_KG), step=lim.MASS_STEP_KG,
    )
    spring_count = st.selectbox(
        "Number of springs",
        list(lim.SPRING_COUNTS),
        index=list(lim.SPRING_COUNTS).index(veh.spring_count),
        format_func=lambda n: "2 (front or rear axle)" if n == 2 else "4 (all corners)",
    )
    initial_clearance = st.slider(
        "Initial clearance (mm)",
        min_value=lim.CLEARANCE_MIN_MM, max_value=lim.CLEARANCE_MAX_MM,
        value=_clamp(veh.initial_clearance, lim.CLEARANCE_MIN_MM, lim.CLEARANCE_MAX_MM),
        step=lim.CLEARANCE_STEP_MM,
    )

    st.divider()
    st.header("Springs")
    mode = _stiffness_mode_toggle(session.stiffness_mode)

    if mode == StiffnessMode.KNOWN_RATE:
        known_rate = st.slider(
            "Spring rate (N/mm)",
            min_value=lim.KNOWN_RATE_MIN, max_value=lim.KNOWN_RATE_MAX,
            value=_clamp(session.known_stiffness, lim.KNOWN_RATE_MIN, lim.KNOWN_RATE_MAX),
            step=lim.KNOWN_RATE_STEP,
        )
    else:
        wire = st.slider(
            "Wire diameter (mm)",
            min_value=lim.WIRE_MIN_MM, max_value=lim.WIRE_MAX_MM,
            value=_clamp(spr.wire_diameter, lim.WIRE_MIN_MM, lim.WIRE_MAX_MM), step=lim.WIRE_STEP_MM,
        )
        od_lo, od_hi = lim.outer_diameter_range(wire)
        outer = st.slider(
            "Outer diameter (mm)",
            min_value=od_lo, max_value=od_hi,
            value=_clamp(spr.outer_diameter, od_lo, od_hi), step=lim.OUTER_STEP_MM,
        )
        h_lo, h_hi = lim.spring_height_range(wire)
        height = st.slider(
            "Spring height (mm)",
            min_value=h_lo, max_value=h_hi,
            value=_clamp(spr.spring_height, h_lo, h_hi), step=lim.HEIGHT_STEP_MM,
            help="Recorded with the inputs; the current rate estimate does not use it.",
        )
        options = list(coefficients())
        current = spr.material_coefficient if spr.material_coefficient in options else options[0]
        coefficient = st.selectbox(
            "Spring material",
            options,
            index=options.index(current),
            format_func=material_label,
        )


# -----------------------------
# Push widget values into the session
# -----------------------------
# Setters recompute; only call them for fields that actually changed.
if mass != veh.mass:
    session.set_mass(mass)
if spring_count != veh.spring_count:
    session.set_spring_count(spring_count)
if initial_clearance != veh.initial_clearance:
    session.set_initial_clearance(initial_clearance)
if mode != session.stiffness_mode:
    session.set_stiffness_mode(mode)

if mode == StiffnessMode.KNOWN_RATE:
    if known_rate != session.known_stiffness:
        session.set_known_stiffness(known_rate)
else:
    if wire != spr.wire_diameter:
        session.set_wire_diameter(wire)
    if outer != spr.outer_diameter:
        session.set_outer_diameter(outer)
    if height != spr.spring_height:
        session.set_spring_height(height)
    if coefficient != spr.material_coefficient:
        session.set_material_coefficient(coefficient)

outcome = session.outcome


# -----------------------------
# Results
# -----------------------------
if outcome.is_present:
    res = outcome.result
    veh = session.vehicle

    col1, col2 = st.columns((1, 1), gap="large")

    with col1:
        st.subheader("Results")
        if outcome.state == ResultState.PRESENT:
            st.metric("Calculated stiffness", f"{res.calculated_stiffness:.2f} N/mm")
        st.metric("Spring deflection", f"{res.spring_deflection_mm:.1f} mm")
        st.metric(
            "New clearance",
            f"{res.new_clearance_mm:.1f} mm",
            delta=f"{-res.clearance_change_mm:.1f} mm",
        )
        st.metric("Clearance change", f"{res.clearance_change_mm:.1f} mm")
        if mode == StiffnessMode.GEOMETRY:
            st.caption(f"Material: {session.selected_material_label}")

    with col2:
        st.subheader("Clearance")
        fig = plot_clearance_comparison(veh.initial_clearance, res.new_clearance_mm)
        st.pyplot(fig, clear_figure=True)

    st.divider()

    # Optional mass sweep
    st.markdown("### Mass sweep")
    sweep = st.checkbox("Show clearance across a mass range")
    sweep_data = None
    if sweep:
        m_lo, m_hi = st.slider(
            "Mass range (kg)",
            min_value=lim.MASS_MIN_KG, max_value=lim.MASS_MAX_KG,
            value=(lim.MASS_MIN_KG, lim.MASS_MAX_KG), step=lim.MASS_STEP_KG,
        )
        npts = st.slider("Points", min_value=5, max_value=100, value=DEFAULT_VALUES.SWEEP_POINTS, step=1)

        m_vals = np.linspace(float(m_lo), float(m_hi), int(npts))
        known = session.known_stiffness if mode == StiffnessMode.KNOWN_RATE else None
        sweep_outcomes = sweep_mass(veh, session.spring, m_vals, known_stiffness=known)
        y_vals = [o.result.new_clearance_mm if o.is_present else np.nan for o in sweep_outcomes]
        sweep_data = (list(m_vals), sweep_outcomes)

        if len(m_vals) >= 2:
            fig = plot_clearance_vs_mass(
                m_vals, y_vals,
                initial_clearance_mm=veh.initial_clearance,
                current_mass_kg=veh.mass,
            )
            st.pyplot(fig, clear_figure=True)
        with st.expander("Sweep table"):
            st.dataframe(
                pd.DataFrame({"Mass (kg)": m_vals, "New clearance (mm)": y_vals}),
                use_container_width=True,
            )

    st.download_button(
        "Download Excel report",
        data=export_to_excel_bytes(
            veh,
            session.spring,
            outcome,
            stiffness_mode=mode,
            known_stiffness=session.known_stiffness if mode == StiffnessMode.KNOWN_RATE else None,
            mass_sweep=sweep_data,
        ),
        file_name="clearance_report.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )
    plt.close("all")
else:
    # Results panel stays hidden until the inputs are computable again
    st.info("Adjust the inputs to get a result.")
