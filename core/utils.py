from __future__ import annotations

import datetime as dt
import math
from typing import Iterable, List

import pandas as pd
from dateutil.relativedelta import relativedelta

from .config import DAYS_PER_YEAR


def require_columns(df: pd.DataFrame, cols: Iterable[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def as_date(value) -> dt.date:
    """Coerce a date-like value (date, datetime, Timestamp, ISO string) to a date."""
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    return pd.Timestamp(value).normalize().date()


def add_years(start: dt.date, years: int) -> dt.date:
    """Calendar year offset (29 Feb rolls back to 28 Feb)."""
    return start + relativedelta(years=years)


def year_fraction(start: dt.date, end: dt.date) -> float:
    """Actual/365.25 year fraction from `start` to `end`, clamped at 0."""
    days = (as_date(end) - as_date(start)).days
    return max(days, 0) / DAYS_PER_YEAR


def periods_for_horizon(years: float, periods_per_year: int) -> int:
    """Number of coupon periods covering `years`; always at least one."""
    return max(1, math.ceil(years * periods_per_year))


def period_dates(
    today: dt.date,
    maturity_date: dt.date,
    n_periods: int,
    periods_per_year: int,
) -> List[dt.date]:
    """
    Estimated payment date for periods 0..n_periods.

    Period 0 is `today`; period k is k coupon intervals later. The terminal
    period is pinned to the maturity date (or `today` if maturity has passed).
    """
    start = as_date(today)
    maturity = max(as_date(maturity_date), start)
    months = 12 // periods_per_year
    dates = [start]
    for k in range(1, n_periods + 1):
        dates.append(min(start + relativedelta(months=k * months), maturity))
    dates[-1] = maturity if n_periods > 0 else start
    return dates
