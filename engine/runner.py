"""
Projection runner — turns one set of bond parameters into the full schedule.

Pure and stateless: the only implicit input is the reference date `today`,
used to measure the time left to maturity (Actual/365.25). Calling it twice
with equal parameters and the same `today` returns equal projections.

No validation happens here. Zero or negative amounts simply flow through the
arithmetic; callers wanting checks use inputs.validators.
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import List, Optional

from analytics.metrics import compute_return_summary
from core.config import BondParameters
from core.schema import DEFAULT_LANGUAGE, labels_for
from core.utils import as_date, periods_for_horizon, year_fraction

from .cashflow import CashFlowPeriod, CashFlowProjection, coupon_period, purchase_period
from .nominal import resolve_nominal_slot

logger = logging.getLogger(__name__)


def project_cash_flows(
    params: BondParameters,
    *,
    today: Optional[dt.date] = None,
    language: str = DEFAULT_LANGUAGE,
) -> CashFlowProjection:
    """
    Project the cash-flow schedule of a bond.

    Parameters
    ----------
    params : BondParameters
        Bond terms and display toggles
    today : date, optional
        Reference date for the time to maturity (defaults to the current date)
    language : str
        Label set for detail lines and descriptions ("en" or "it")

    Returns
    -------
    CashFlowProjection with periods 0..N and the return summary.
    A maturity on or before `today` degenerates to N=1: the single period
    carries both the first coupon and the whole maturity payload.
    """
    ref = as_date(today) if today is not None else dt.date.today()
    labels = labels_for(language)

    years = year_fraction(ref, params.maturity_date)
    periods_per_year = params.periods_per_year
    n_periods = periods_for_horizon(years, periods_per_year)

    logger.debug(
        "Projecting %s bond: %.4f years to maturity, %d periods",
        params.periodicity, years, n_periods,
    )

    t0 = purchase_period(params, resolve_nominal_slot(params), labels)
    periods: List[CashFlowPeriod] = [t0]

    cumulative = t0.cumulative_balance
    for i in range(1, n_periods + 1):
        period = coupon_period(params, i, n_periods, cumulative, labels)
        cumulative = period.cumulative_balance
        periods.append(period)

    summary = compute_return_summary(periods, years_to_maturity=years)

    return CashFlowProjection(
        params=params,
        today=ref,
        years_to_maturity=years,
        periods_per_year=periods_per_year,
        periods=tuple(periods),
        summary=summary,
    )
