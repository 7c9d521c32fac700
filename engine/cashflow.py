"""
Deterministic bond cash-flow building blocks.

Key rules:
  1. Period 0 is the purchase: cost at the purchase price plus the buy commission
  2. Periods 1..N each pay one gross coupon, taxed at the flat tax rate
  3. Only period N redeems the nominal, taxes a positive capital gain and,
     unless the bond is held to maturity, charges a second commission
  4. The cumulative balance only ever sees real cash; figurative lines are display-only
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Optional, Sequence, Tuple

import pandas as pd

from core.config import BondParameters
from core.schema import DETAIL_COLUMNS, PERIOD_TAG_PREFIX, SCHEDULE_COLUMNS
from core.utils import period_dates

if TYPE_CHECKING:
    from analytics.metrics import ReturnSummary

    from .nominal import NominalSlot


@dataclass(frozen=True)
class CashFlowDetail:
    """One named component of a period's inflows or outflows."""
    label: str
    amount: float
    is_figurative: bool = False


@dataclass(frozen=True)
class CashFlowPeriod:
    """One row of the schedule."""
    period_index: int
    period_label: str  # "T0", "A1".., "S1"..
    description: str
    inflows: Tuple[CashFlowDetail, ...]
    outflows: Tuple[CashFlowDetail, ...]
    positive_total: float  # includes figurative lines (display total)
    negative_total: float  # -sum(outflows)
    cumulative_balance: float  # running sum of real net cash

    @property
    def real_inflow(self) -> float:
        return _sum_amounts(self.inflows, real_only=True)

    @property
    def net_flow(self) -> float:
        """Displayed net (figurative lines included)."""
        return self.positive_total + self.negative_total

    @property
    def real_net_flow(self) -> float:
        return self.real_inflow + self.negative_total

    @property
    def has_figurative(self) -> bool:
        return any(d.is_figurative for d in self.inflows)

    def outflow(self, label: str) -> Optional[CashFlowDetail]:
        return next((d for d in self.outflows if d.label == label), None)

    def inflow(self, label: str) -> Optional[CashFlowDetail]:
        return next((d for d in self.inflows if d.label == label), None)


@dataclass(frozen=True)
class CashFlowProjection:
    """Full projector output: the period sequence plus its return summary."""
    params: BondParameters
    today: dt.date
    years_to_maturity: float
    periods_per_year: int
    periods: Tuple[CashFlowPeriod, ...]
    summary: "ReturnSummary"

    @property
    def n_periods(self) -> int:
        """N — index of the terminal period."""
        return len(self.periods) - 1

    @property
    def terminal(self) -> CashFlowPeriod:
        return self.periods[-1]

    def payment_dates(self):
        return period_dates(self.today, self.params.maturity_date, self.n_periods, self.periods_per_year)

    def to_frame(self) -> pd.DataFrame:
        return schedule_to_frame(self)

    def details_frame(self) -> pd.DataFrame:
        return details_to_frame(self)


def _sum_amounts(details: Sequence[CashFlowDetail], *, real_only: bool = False) -> float:
    return sum((d.amount for d in details if not (real_only and d.is_figurative)), 0.0)


def purchase_period(
    params: BondParameters,
    nominal_slot: "NominalSlot",
    labels: Dict[str, str],
) -> CashFlowPeriod:
    """Period 0: purchase cost + buy commission out, optional nominal in."""
    commission = params.bank_commission_per_mille / 1000.0
    purchase_cost = (params.purchase_price / 100.0) * params.nominal
    buy_commission = params.nominal * commission

    outflows = (
        CashFlowDetail(labels["purchase_cost"], purchase_cost),
        CashFlowDetail(labels["bank_commission"], buy_commission),
    )
    inflows = nominal_slot.to_details(labels["nominal"])

    negative = -(purchase_cost + buy_commission)
    return CashFlowPeriod(
        period_index=0,
        period_label="T0",
        description=labels["purchase_period"],
        inflows=inflows,
        outflows=outflows,
        positive_total=_sum_amounts(inflows),
        negative_total=negative,
        cumulative_balance=nominal_slot.real_amount + negative,
    )


def coupon_period(
    params: BondParameters,
    index: int,
    n_periods: int,
    previous_cumulative: float,
    labels: Dict[str, str],
) -> CashFlowPeriod:
    """
    Period `index` in 1..N: one gross coupon and its tax.
    The terminal period also carries redemption, capital-gain tax and
    the sale commission when the bond is not held to maturity.
    """
    periods_per_year = params.periods_per_year
    coupon_decimal = (params.coupon_rate / 100.0) / periods_per_year
    tax_decimal = params.tax_rate / 100.0

    gross_coupon = params.nominal * coupon_decimal
    inflows = [CashFlowDetail(labels["coupon"], gross_coupon)]
    outflows = [CashFlowDetail(labels["coupon_tax"], gross_coupon * tax_decimal)]

    is_last = index == n_periods
    if is_last:
        inflows.append(CashFlowDetail(labels["nominal_redemption"], params.nominal))

        capital_gain = (params.selling_price - params.purchase_price) / 100.0 * params.nominal
        # losses are not a tax credit
        if capital_gain > 0:
            outflows.append(CashFlowDetail(labels["capital_gain_tax"], capital_gain * tax_decimal))

        if not params.sell_at_maturity:
            sell_commission = params.nominal * (params.bank_commission_per_mille / 1000.0)
            outflows.append(CashFlowDetail(labels["bank_commission"], sell_commission))

    positive = _sum_amounts(inflows)
    negative = -_sum_amounts(outflows)

    prefix = PERIOD_TAG_PREFIX.get(params.periodicity, "A")
    if is_last:
        description = labels["maturity_period"]
    elif params.periodicity == "semiannual":
        description = labels["semiannual_period"].format(i=index)
    else:
        description = labels["annual_period"].format(i=index)

    return CashFlowPeriod(
        period_index=index,
        period_label=f"{prefix}{index}",
        description=description,
        inflows=tuple(inflows),
        outflows=tuple(outflows),
        positive_total=positive,
        negative_total=negative,
        cumulative_balance=previous_cumulative + positive + negative,
    )


def schedule_to_frame(projection: CashFlowProjection) -> pd.DataFrame:
    """
    One row per period with displayed totals.
    Returns DataFrame with Period, Label, Date, Description, Inflows, Outflows, Net, Cumulative.
    """
    dates = projection.payment_dates()
    rows = []
    for period in projection.periods:
        rows.append({
            "Period": period.period_index,
            "Label": period.period_label,
            "Date": pd.Timestamp(dates[period.period_index]),
            "Description": period.description,
            "Inflows": period.positive_total,
            "Outflows": abs(period.negative_total),
            "Net": period.net_flow,
            "Cumulative": period.cumulative_balance,
        })
    return pd.DataFrame(rows, columns=list(SCHEDULE_COLUMNS))


def details_to_frame(projection: CashFlowProjection) -> pd.DataFrame:
    """Long-form table: one row per inflow/outflow line of every period."""
    rows = []
    for period in projection.periods:
        for direction, details in (("in", period.inflows), ("out", period.outflows)):
            for d in details:
                rows.append({
                    "Period": period.period_index,
                    "Label": period.period_label,
                    "Direction": direction,
                    "Item": d.label,
                    "Amount": d.amount,
                    "Figurative": d.is_figurative,
                })
    return pd.DataFrame(rows, columns=list(DETAIL_COLUMNS))
