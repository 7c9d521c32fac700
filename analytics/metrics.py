"""
Return summary of a projected schedule.

Totals only count real cash: figurative lines (the informational T0 nominal)
are excluded, so toggling their display never moves the returns.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

import numpy as np
import pandas as pd

from core.config import INITIAL_INVESTMENT_FALLBACK

if TYPE_CHECKING:
    from engine.cashflow import CashFlowPeriod


@dataclass(frozen=True)
class ReturnSummary:
    total_real_inflow: float
    total_outflow: float
    net_profit: float
    initial_investment: float  # |T0 negative total|, fallback when zero
    total_return_percent: float
    annualized_return_percent: float
    years_to_maturity: float

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a display-friendly table."""
        rows = [
            {"Metric": "Total Inflows", "Value": f"{self.total_real_inflow:,.2f}", "Unit": "€"},
            {"Metric": "Total Outflows", "Value": f"{self.total_outflow:,.2f}", "Unit": "€"},
            {"Metric": "Net Profit", "Value": f"{self.net_profit:,.2f}", "Unit": "€"},
            {"Metric": "Initial Investment", "Value": f"{self.initial_investment:,.2f}", "Unit": "€"},
            {"Metric": "Total Return", "Value": f"{self.total_return_percent:.2f}", "Unit": "%"},
            {"Metric": "Annualized Return", "Value": f"{self.annualized_return_percent:.2f}", "Unit": "%"},
            {"Metric": "Years to Maturity", "Value": f"{self.years_to_maturity:.2f}", "Unit": "years"},
        ]
        return pd.DataFrame(rows)


def compute_return_summary(
    periods: Sequence["CashFlowPeriod"],
    *,
    years_to_maturity: float,
    fallback_investment: float = INITIAL_INVESTMENT_FALLBACK,
) -> ReturnSummary:
    """
    Compute real-cash totals and simple (non-compounded) returns.

    Parameters
    ----------
    periods : sequence of CashFlowPeriod
        Schedule with the purchase period first
    years_to_maturity : float
        Actual/365.25 horizon; returns are annualized over it when positive
    fallback_investment : float
        Denominator used when the T0 outflow is zero
    """
    real_inflows = np.array([p.real_inflow for p in periods], dtype=float)
    negatives = np.array([p.negative_total for p in periods], dtype=float)

    total_real_inflow = float(real_inflows.sum())
    total_outflow = float(np.abs(negatives.sum()))
    net_profit = total_real_inflow - total_outflow

    t0_negative = float(negatives[0]) if len(negatives) else 0.0
    initial_investment = abs(t0_negative) if t0_negative != 0 else fallback_investment

    total_return = net_profit / initial_investment * 100.0
    annualized = total_return / years_to_maturity if years_to_maturity > 0 else total_return

    return ReturnSummary(
        total_real_inflow=total_real_inflow,
        total_outflow=total_outflow,
        net_profit=net_profit,
        initial_investment=initial_investment,
        total_return_percent=total_return,
        annualized_return_percent=annualized,
        years_to_maturity=float(years_to_maturity),
    )
