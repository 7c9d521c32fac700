"""
Chart-ready series from a projection.

The dashboard draws a sign-stacked bar per period (positive above the axis,
negative below) and, optionally, the cumulative balance as a line. The T0 bar
is drawn translucent when its inflow is figurative.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import pandas as pd

from core.utils import require_columns

if TYPE_CHECKING:
    from engine.cashflow import CashFlowProjection

CHART_COLUMNS = ("time", "label", "positive", "negative", "net", "cumulative", "figurative")


def chart_frame(projection: "CashFlowProjection") -> pd.DataFrame:
    """
    One row per period: time tag, description, displayed positive/negative
    totals, displayed net, real cumulative balance, figurative flag.
    """
    rows = [
        {
            "time": p.period_label,
            "label": p.description,
            "positive": p.positive_total,
            "negative": p.negative_total,
            "net": p.net_flow,
            "cumulative": p.cumulative_balance,
            "figurative": p.has_figurative,
        }
        for p in projection.periods
    ]
    return pd.DataFrame(rows, columns=list(CHART_COLUMNS))


def stacked_bars(chart: pd.DataFrame) -> pd.DataFrame:
    """
    Melt the chart frame into long form for a stacked bar encoding:
    columns time, series ("positive" / "negative"), value, figurative, order.
    """
    require_columns(chart, ["time", "positive", "negative", "figurative"])
    d = chart[["time", "positive", "negative", "figurative"]].copy()
    d["order"] = np.arange(len(d))
    long = d.melt(
        id_vars=["time", "figurative", "order"],
        value_vars=["positive", "negative"],
        var_name="series",
        value_name="value",
    )
    # figurative only colours the positive bar
    long["figurative"] = long["figurative"] & (long["series"] == "positive")
    return long.sort_values(["order", "series"]).reset_index(drop=True)
