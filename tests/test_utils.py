# tests/test_utils.py

from __future__ import annotations

import datetime as dt

import pandas as pd
import pytest

from core.config import BondParameters, DEFAULT_BANK_COMMISSION_PER_MILLE
from core.utils import (
    add_years,
    as_date,
    period_dates,
    periods_for_horizon,
    require_columns,
    year_fraction,
)
from tests.utils import TODAY


def test_year_fraction_actual_365_25():
    assert year_fraction(TODAY, dt.date(2031, 10, 18)) == pytest.approx(1826 / 365.25)
    assert year_fraction(TODAY, TODAY) == 0.0
    assert year_fraction(TODAY, dt.date(2000, 1, 1)) == 0.0


@pytest.mark.parametrize(
    "years, per_year, expected",
    [
        (0.0, 1, 1),
        (0.0, 2, 1),
        (0.5, 1, 1),
        (1.0, 1, 1),
        (1.002, 1, 2),
        (4.9993, 2, 10),
        (5.002, 1, 6),
    ],
)
def test_periods_for_horizon(years, per_year, expected):
    assert periods_for_horizon(years, per_year) == expected


def test_as_date_accepts_common_inputs():
    assert as_date("2031-10-18") == dt.date(2031, 10, 18)
    assert as_date(dt.datetime(2031, 10, 18, 15, 30)) == dt.date(2031, 10, 18)
    assert as_date(pd.Timestamp("2031-10-18 09:00")) == dt.date(2031, 10, 18)
    assert as_date(dt.date(2031, 10, 18)) == dt.date(2031, 10, 18)


def test_add_years_rolls_leap_day():
    assert add_years(dt.date(2028, 2, 29), 1) == dt.date(2029, 2, 28)


def test_period_dates_annual_and_semiannual():
    annual = period_dates(TODAY, dt.date(2031, 10, 18), 5, 1)
    assert annual == [dt.date(y, 10, 18) for y in range(2026, 2032)]

    semi = period_dates(TODAY, dt.date(2031, 10, 18), 10, 2)
    assert semi[1] == dt.date(2027, 4, 18)
    assert semi[-1] == dt.date(2031, 10, 18)
    assert len(semi) == 11


def test_period_dates_pin_terminal_to_maturity():
    dates = period_dates(TODAY, dt.date(2027, 12, 1), 2, 1)
    assert dates == [TODAY, dt.date(2027, 10, 18), dt.date(2027, 12, 1)]

    past = period_dates(TODAY, dt.date(2020, 1, 1), 1, 1)
    assert past == [TODAY, TODAY]


def test_require_columns():
    df = pd.DataFrame({"a": [1]})
    require_columns(df, ["a"])
    with pytest.raises(ValueError, match="Missing required columns"):
        require_columns(df, ["a", "b"])


def test_parameter_defaults():
    params = BondParameters.with_defaults(TODAY)

    assert params.maturity_date == dt.date(2031, 10, 18)
    assert params.bank_commission_per_mille == DEFAULT_BANK_COMMISSION_PER_MILLE
    assert params.periods_per_year == 1
    assert params.with_updates(periodicity="semiannual").periods_per_year == 2
    assert params.sell_at_maturity is True
    assert params.include_nominal_at_t0 is False
    assert params.show_nominal is False
