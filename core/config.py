"""
Bond parameters and projection defaults.
The numeric defaults mirror the dashboard's initial form values.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, replace
from typing import Dict, Literal

from dateutil.relativedelta import relativedelta

Periodicity = Literal["annual", "semiannual"]

PERIODS_PER_YEAR: Dict[str, int] = {
    "annual": 1,
    "semiannual": 2,
}

# Actual/365.25 year fraction
DAYS_PER_YEAR: float = 365.25

DEFAULT_HORIZON_YEARS: int = 5

# Per-mille commission on buy (and on sell unless held to maturity).
# Configurable; some desks quote 2, the dashboard ships with 7.
DEFAULT_BANK_COMMISSION_PER_MILLE: float = 7.0

# Substituted for a zero initial investment in return percentages
INITIAL_INVESTMENT_FALLBACK: float = 1.0


@dataclass(frozen=True)
class BondParameters:
    """
    Immutable input record for one cash-flow projection.

    Prices are percent of par (98.5 -> 98.5% of nominal), tax and coupon
    rates are percentages, the bank commission is per mille.
    """

    maturity_date: dt.date
    nominal: float = 10_000.0
    purchase_price: float = 98.5
    selling_price: float = 100.0
    tax_rate: float = 12.5
    coupon_rate: float = 3.5
    bank_commission_per_mille: float = DEFAULT_BANK_COMMISSION_PER_MILLE
    periodicity: Periodicity = "annual"

    # display / accounting toggles
    include_nominal_at_t0: bool = False  # nominal at T0 counted as real cash
    show_nominal: bool = False  # figurative T0 nominal line when not real
    sell_at_maturity: bool = True  # no second commission at redemption

    @property
    def periods_per_year(self) -> int:
        return PERIODS_PER_YEAR.get(self.periodicity, 1)

    def with_updates(self, **changes) -> "BondParameters":
        return replace(self, **changes)

    @classmethod
    def with_defaults(cls, today: dt.date | None = None, **overrides) -> "BondParameters":
        """Default parameters maturing DEFAULT_HORIZON_YEARS after `today`."""
        base = today if today is not None else dt.date.today()
        overrides.setdefault("maturity_date", base + relativedelta(years=DEFAULT_HORIZON_YEARS))
        return cls(**overrides)
