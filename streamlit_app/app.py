"""
OptionLattice – Streamlit Frontend
Prices one contract from the payoff model with the closed form (when it
exists) and the binomial lattice, and shows lattice convergence.
"""
import logging
import sys
import time
from pathlib import Path

# Make sure 'src' is importable as a package (useful on Streamlit Cloud)
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if SRC.exists():
    sys.path.insert(0, str(SRC))

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from option_lattice.common.config import DEFAULT_LATTICE_STEPS
from option_lattice.common.logging_config import setup_logging
from option_lattice.exceptions import PricingError, UnsupportedOperationError
from option_lattice.pricing_models.contracts import CONTRACT_TYPES, create_contract

setup_logging()
logger = logging.getLogger("option_lattice.app")

st.set_page_config(page_title="Option Lattice", layout="wide", initial_sidebar_state="expanded")

st.title("🌳 Option Lattice")
st.caption("Black-Scholes • CRR Binomial Tree • Early Exercise • Nested Contracts")

# --- Inputs ---
with st.sidebar:
    st.header("Contract")
    kind = st.selectbox(
        "Contract Type",
        list(CONTRACT_TYPES),
        format_func=lambda k: k.replace("_", " ").title(),
    )
    K = st.number_input("Strike (K)", 0.01, 10000.0, 100.0)
    T = st.number_input("Maturity (Years)", 0.01, 10.0, 1.0 if kind != "compound_call" else 0.25)
    sigma = st.number_input("Volatility (%)", 1.0, 500.0, 20.0) / 100
    r = st.number_input("Risk-Free Rate (%)", -5.0, 100.0, 5.0) / 100
    B = None
    if kind.startswith("knock_out"):
        B = st.number_input("Barrier (B)", 0.01, 10000.0, 120.0)

    st.header("Market")
    S = st.number_input("Spot Price", 0.01, 10000.0, 100.0)
    q = st.number_input("Dividend Yield (%)", 0.0, 100.0, 0.0) / 100

    st.header("Engine")
    num_steps = st.slider("Lattice Steps (N)", 10, 2000, DEFAULT_LATTICE_STEPS, 10)
    show_convergence = st.checkbox("Convergence Study", value=False)

try:
    contract = create_contract(kind, K, T, sigma, r, B=B)
except PricingError as e:
    st.error(f"Invalid contract: {e}")
    st.stop()

# --- Pricing ---
if st.button("Calculate Option Price", type="primary"):
    start = time.perf_counter()
    try:
        lattice = contract.lattice_value(S, num_steps, q or None)
    except PricingError as e:
        st.error(f"Calculation Error: {e}")
        st.stop()
    calc_ms = (time.perf_counter() - start) * 1000
    logger.info("Priced %s with N=%d in %.2f ms", kind, num_steps, calc_ms)

    try:
        analytic = contract.analytic_value(S)
    except UnsupportedOperationError:
        analytic = None

    m1, m2, m3 = st.columns(3)
    m1.metric("Lattice Value", f"{lattice:.4f}")
    m2.metric("Black-Scholes", f"{analytic:.4f}" if analytic is not None else "n/a")
    m3.metric("Calc Time", f"{calc_ms:.1f} ms")
    if q and analytic is not None:
        st.caption("Black-Scholes column ignores the dividend yield.")

    if show_convergence:
        if analytic is None:
            st.info("No closed form for this contract; convergence is shown against the finest lattice.")
        steps = [n for n in (10, 25, 50, 100, 200, 400, 800) if n <= max(num_steps, 50)]
        values = [contract.lattice_value(S, n, q or None) for n in steps]
        reference = analytic if analytic is not None else values[-1]
        df = pd.DataFrame({"N": steps, "Lattice": values, "Error": [v - reference for v in values]})

        fig = go.Figure()
        fig.add_trace(go.Scatter(x=df["N"], y=df["Lattice"], mode="lines+markers", name="Lattice"))
        fig.add_hline(y=reference, line_dash="dash", annotation_text="Reference")
        fig.update_layout(xaxis_title="Steps (N)", yaxis_title="Value", template="plotly_dark", height=400)
        st.plotly_chart(fig, use_container_width=True)
        st.dataframe(df, use_container_width=True)
