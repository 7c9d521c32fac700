"""
Core package — bond parameters, configuration constants, label catalogue,
and shared date helpers. No business logic lives here.
"""

from .config import (
    BondParameters,
    Periodicity,
    PERIODS_PER_YEAR,
    DAYS_PER_YEAR,
    DEFAULT_BANK_COMMISSION_PER_MILLE,
    DEFAULT_HORIZON_YEARS,
)
from .schema import SCHEDULE_COLUMNS, DETAIL_COLUMNS, LABELS, labels_for
from .utils import require_columns, year_fraction, periods_for_horizon, period_dates

__all__ = [
    "BondParameters",
    "Periodicity",
    "PERIODS_PER_YEAR",
    "DAYS_PER_YEAR",
    "DEFAULT_BANK_COMMISSION_PER_MILLE",
    "DEFAULT_HORIZON_YEARS",
    "SCHEDULE_COLUMNS",
    "DETAIL_COLUMNS",
    "LABELS",
    "labels_for",
    "require_columns",
    "year_fraction",
    "periods_for_horizon",
    "period_dates",
]
