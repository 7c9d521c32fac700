"""
Decision support — break-even period and flags on a projected bond.

Answers the questions the dashboard's break-even panel asks:
  Q1: "Do I make money at all?"          -> net profit sign
  Q2: "When am I back in the black?"     -> first period with cumulative >= 0
  Q3: "Does the sale price eat my gain?" -> selling below purchase price
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

import pandas as pd

if TYPE_CHECKING:
    from engine.cashflow import CashFlowProjection


@dataclass
class BondReport:
    """Structured decision output for one projection."""
    n_periods: int
    years_to_maturity: float
    net_profit: float
    total_return_percent: float
    annualized_return_percent: float

    break_even_index: Optional[int]  # first period with cumulative >= 0
    break_even_label: Optional[str]
    capital_gain: float  # (selling - purchase)/100 * nominal, may be negative

    flags: List[str] = field(default_factory=list)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a display-friendly table."""
        rows = [
            {"Metric": "Periods", "Value": str(self.n_periods), "Unit": ""},
            {"Metric": "Years to Maturity", "Value": f"{self.years_to_maturity:.2f}", "Unit": "years"},
            {"Metric": "Net Profit", "Value": f"{self.net_profit:,.2f}", "Unit": "€"},
            {"Metric": "Total Return", "Value": f"{self.total_return_percent:.2f}", "Unit": "%"},
            {"Metric": "Annualized Return", "Value": f"{self.annualized_return_percent:.2f}", "Unit": "%"},
            {"Metric": "Capital Gain", "Value": f"{self.capital_gain:,.2f}", "Unit": "€"},
            {
                "Metric": "Break-even",
                "Value": self.break_even_label if self.break_even_label is not None else "N/A",
                "Unit": "",
            },
        ]
        if self.flags:
            rows.append({"Metric": "FLAGS", "Value": " | ".join(self.flags), "Unit": ""})
        return pd.DataFrame(rows)


def generate_bond_report(projection: "CashFlowProjection") -> BondReport:
    """Build the break-even / flag report for a projection."""
    params = projection.params
    summary = projection.summary

    break_even = next(
        (p for p in projection.periods if p.cumulative_balance >= 0),
        None,
    )
    capital_gain = (params.selling_price - params.purchase_price) / 100.0 * params.nominal

    flags = []
    if summary.net_profit < 0:
        flags.append("NEGATIVE_NET_PROFIT: real outflows exceed real inflows")
    if capital_gain < 0:
        flags.append("CAPITAL_LOSS_AT_MATURITY: selling price below purchase price")
    if break_even is None:
        flags.append("NO_BREAK_EVEN: cumulative balance never turns non-negative")
    if projection.years_to_maturity <= 0:
        flags.append("DEGENERATE_HORIZON: maturity on or before the reference date")

    return BondReport(
        n_periods=projection.n_periods,
        years_to_maturity=projection.years_to_maturity,
        net_profit=summary.net_profit,
        total_return_percent=summary.total_return_percent,
        annualized_return_percent=summary.annualized_return_percent,
        break_even_index=break_even.period_index if break_even is not None else None,
        break_even_label=break_even.period_label if break_even is not None else None,
        capital_gain=capital_gain,
        flags=flags,
    )
