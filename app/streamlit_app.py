"""
BondFlow — Bond Cash-Flow Dashboard
===================================

Sidebar: bond terms and display toggles.
Main:    return KPIs, sign-stacked cash-flow chart (optional cumulative line),
         per-period detail table, break-even report, downloads.

The projection is recomputed on every widget change, memoized on the full
parameter tuple.

Run: streamlit run app/streamlit_app.py
"""

from __future__ import annotations

import datetime as dt
import io
import sys
from pathlib import Path

import altair as alt
import pandas as pd
import streamlit as st
from pydantic import ValidationError

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import (
    DEFAULT_BANK_COMMISSION_PER_MILLE,
    DEFAULT_HORIZON_YEARS,
    BondParameters,
)
from core.utils import add_years

from engine.cashflow import CashFlowProjection
from engine.runner import project_cash_flows

from analytics.aggregator import chart_frame, stacked_bars
from analytics.decisions import generate_bond_report

from inputs.loader import BondInput
from inputs.validators import validate_parameters

from app.formatting import fmt_currency, fmt_pct, format_schedule

POSITIVE_COLOR = "#10B981"
NEGATIVE_COLOR = "#EF4444"
CUMULATIVE_COLOR = "#2563eb"

PERIODICITY_OPTIONS = {"Annual": "annual", "Semiannual": "semiannual"}


# ---------------------------------------------------------------------------
# Cached projection
# ---------------------------------------------------------------------------
@st.cache_data(show_spinner=False)
def _project(params: BondParameters, today: dt.date, language: str) -> CashFlowProjection:
    return project_cash_flows(params, today=today, language=language)


# ---------------------------------------------------------------------------
# Chart helpers
# ---------------------------------------------------------------------------
def _plot_cash_flows(chart_df: pd.DataFrame, *, show_cumulative: bool, height: int = 460):
    if len(chart_df) == 0:
        st.info("No data to plot.")
        return
    order = chart_df["time"].tolist()
    bars_df = stacked_bars(chart_df)

    bars = (
        alt.Chart(bars_df).mark_bar()
        .encode(
            x=alt.X("time:N", sort=order, title="Period"),
            y=alt.Y("value:Q", stack="zero", title="Cash flow (€)", axis=alt.Axis(format=",.0f")),
            color=alt.Color(
                "series:N",
                scale=alt.Scale(domain=["positive", "negative"], range=[POSITIVE_COLOR, NEGATIVE_COLOR]),
                legend=alt.Legend(title=None),
            ),
            opacity=alt.condition("datum.figurative", alt.value(0.3), alt.value(1.0)),
            tooltip=["time", "series", alt.Tooltip("value:Q", format=",.2f"), "figurative"],
        )
    )
    zero = alt.Chart(pd.DataFrame({"y": [0]})).mark_rule(color="#00000033").encode(y="y:Q")
    layers = [bars, zero]

    if show_cumulative:
        line = (
            alt.Chart(chart_df).mark_line(color=CUMULATIVE_COLOR, strokeWidth=3, point=True)
            .encode(
                x=alt.X("time:N", sort=order),
                y=alt.Y("cumulative:Q"),
                tooltip=["time", "label", alt.Tooltip("cumulative:Q", format=",.2f")],
            )
        )
        layers.append(line)

    chart = alt.layer(*layers).properties(title="Cash Flow", height=height)
    st.altair_chart(chart, use_container_width=True)


def _detail_rows(projection: CashFlowProjection, *, figurative_tag: str) -> pd.DataFrame:
    """One row per period with its inflow/outflow lines flattened into text."""
    rows = []
    for p in projection.periods:
        inflow_lines = [
            f"{d.label}{' ' + figurative_tag if d.is_figurative else ''}: {fmt_currency(d.amount)}"
            for d in p.inflows
        ]
        outflow_lines = [f"{d.label}: {fmt_currency(d.amount)}" for d in p.outflows]
        rows.append({
            "Period": p.period_label,
            "Description": p.description,
            "Inflow lines": "; ".join(inflow_lines),
            "Outflow lines": "; ".join(outflow_lines),
            "Inflows": fmt_currency(p.positive_total),
            "Outflows": fmt_currency(abs(p.negative_total)),
            "Net": fmt_currency(p.net_flow),
            "Cumulative": fmt_currency(p.cumulative_balance),
        })
    return pd.DataFrame(rows)


def _excel_bytes(projection: CashFlowProjection) -> bytes:
    buf = io.BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        projection.to_frame().to_excel(writer, sheet_name="Schedule", index=False)
        projection.details_frame().to_excel(writer, sheet_name="Details", index=False)
        projection.summary.to_dataframe().to_excel(writer, sheet_name="Summary", index=False)
    return buf.getvalue()


# ═══════════════════════════════════════════════════════════════════════════
# PAGE CONFIG
# ═══════════════════════════════════════════════════════════════════════════
st.set_page_config(page_title="BondFlow", layout="wide")
st.title("BondFlow")
st.caption("Bond cash-flow visualizer")

today = dt.date.today()

# ═══════════════════════════════════════════════════════════════════════════
# SIDEBAR — Bond Parameters
# ═══════════════════════════════════════════════════════════════════════════
with st.sidebar:
    st.header("Bond Parameters")

    language = st.radio("Labels", options=["en", "it"], horizontal=True)

    nominal = st.number_input("Nominal (€)", value=10_000.0, step=1_000.0)
    c1, c2 = st.columns(2)
    purchase_price = c1.number_input("Purchase Price (%)", value=98.5, step=0.1)
    selling_price = c2.number_input("Selling Price (%)", value=100.0, step=0.1)
    c3, c4 = st.columns(2)
    coupon_rate = c3.number_input("Annual Coupon (%)", value=3.5, step=0.1)
    tax_rate = c4.number_input("Tax (%)", value=12.5, step=0.5)
    bank_commission = st.number_input(
        "Bank Commission (‰)", value=float(DEFAULT_BANK_COMMISSION_PER_MILLE), step=0.5
    )
    maturity_date = st.date_input("Maturity Date", value=add_years(today, DEFAULT_HORIZON_YEARS))
    periodicity_label = st.selectbox("Periodicity", options=list(PERIODICITY_OPTIONS.keys()))

    st.divider()
    show_cumulative = st.toggle("Show Cumulative", value=False)
    show_nominal = st.toggle("Show Nominal", value=False)
    include_nominal_at_t0 = st.toggle("Real T0 Nominal", value=False)
    sell_at_maturity = st.toggle("Held to Maturity", value=True)

try:
    params = BondInput(
        nominal=nominal,
        purchase_price=purchase_price,
        selling_price=selling_price,
        tax_rate=tax_rate,
        coupon_rate=coupon_rate,
        bank_commission_per_mille=bank_commission,
        periodicity=PERIODICITY_OPTIONS[periodicity_label],
        maturity_date=maturity_date,
        include_nominal_at_t0=include_nominal_at_t0,
        show_nominal=show_nominal,
        sell_at_maturity=sell_at_maturity,
    ).to_parameters(today=today)
except ValidationError as e:
    st.error(f"Invalid parameters: {e}")
    st.stop()

# Validation
vr = validate_parameters(params, today=today)
if not vr.is_valid:
    st.error("Parameter validation failed:\n" + vr.summary())
elif vr.warnings:
    for w in vr.warnings:
        st.warning(w)

projection = _project(params, today, language)
summary = projection.summary
report = generate_bond_report(projection)

# ═══════════════════════════════════════════════════════════════════════════
# KPI ROW
# ═══════════════════════════════════════════════════════════════════════════
k1, k2, k3, k4 = st.columns(4)
k1.metric("Total Return", fmt_pct(summary.total_return_percent))
k2.metric("Annualized Return", fmt_pct(summary.annualized_return_percent))
k3.metric("Net Profit", fmt_currency(summary.net_profit))
k4.metric("Break-even", report.break_even_label or "N/A")

for flag in report.flags:
    st.warning(flag)

# ═══════════════════════════════════════════════════════════════════════════
# CHART + SUMMARY CARD
# ═══════════════════════════════════════════════════════════════════════════
left, right = st.columns([3, 1])
with left:
    _plot_cash_flows(chart_frame(projection), show_cumulative=show_cumulative)
with right:
    st.markdown("**Total Summary**")
    st.dataframe(summary.to_dataframe(), use_container_width=True, hide_index=True)
    st.caption(
        f"{projection.n_periods} period(s), {projection.years_to_maturity:.2f} years to maturity."
    )

# ═══════════════════════════════════════════════════════════════════════════
# DETAIL TABLE
# ═══════════════════════════════════════════════════════════════════════════
st.divider()
st.subheader("Cash-Flow Detail")
figurative_tag = "(Figurativo)" if language == "it" else "(Figurative)"
st.dataframe(
    _detail_rows(projection, figurative_tag=figurative_tag),
    use_container_width=True,
    hide_index=True,
)

with st.expander("Schedule table (with estimated payment dates)", expanded=False):
    st.dataframe(format_schedule(projection.to_frame()), use_container_width=True, hide_index=True)

with st.expander("Decision report", expanded=False):
    st.dataframe(report.to_dataframe(), use_container_width=True, hide_index=True)

d1, d2 = st.columns(2)
d1.download_button(
    "Download CSV",
    data=projection.to_frame().to_csv(index=False).encode("utf-8"),
    file_name="bond_cash_flows.csv",
    mime="text/csv",
    use_container_width=True,
)
d2.download_button(
    "Download Excel",
    data=_excel_bytes(projection),
    file_name="bond_cash_flows.xlsx",
    mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    use_container_width=True,
)
