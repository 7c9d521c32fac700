# tests/utils.py
from __future__ import annotations

import datetime as dt

from core.config import BondParameters

TODAY = dt.date(2026, 10, 18)
# 1826 days after TODAY -> 4.9993 years -> 5 annual periods
FIVE_YEARS_OUT = dt.date(2031, 10, 18)


def make_params(**overrides) -> BondParameters:
    """Baseline bond: 10k nominal bought at 98.5, 3.5% annual coupon, 12.5% tax, 2 per mille commission."""
    base = dict(
        maturity_date=FIVE_YEARS_OUT,
        nominal=10_000.0,
        purchase_price=98.5,
        selling_price=100.0,
        tax_rate=12.5,
        coupon_rate=3.5,
        bank_commission_per_mille=2.0,
        periodicity="annual",
        include_nominal_at_t0=False,
        show_nominal=False,
        sell_at_maturity=True,
    )
    base.update(overrides)
    return BondParameters(**base)
