# tests/test_analytics.py

from __future__ import annotations

import pandas as pd
import pytest

from analytics.aggregator import CHART_COLUMNS, chart_frame, stacked_bars
from analytics.decisions import generate_bond_report
from tests.utils import TODAY


def test_chart_frame(projection):
    chart = chart_frame(projection(show_nominal=True))

    assert tuple(chart.columns) == CHART_COLUMNS
    assert chart["time"].tolist() == ["T0", "A1", "A2", "A3", "A4", "A5"]
    assert chart["figurative"].tolist() == [True, False, False, False, False, False]
    assert chart["positive"].iloc[0] == pytest.approx(10_000.0)
    assert chart["negative"].iloc[0] == pytest.approx(-9870.0)
    # displayed net includes the figurative nominal, cumulative does not
    assert chart["net"].iloc[0] == pytest.approx(130.0)
    assert chart["cumulative"].iloc[0] == pytest.approx(-9870.0)


def test_stacked_bars_long_form(projection):
    bars = stacked_bars(chart_frame(projection(show_nominal=True)))

    assert len(bars) == 12
    assert set(bars["series"]) == {"positive", "negative"}
    t0 = bars[bars["time"] == "T0"].set_index("series")
    assert bool(t0.loc["positive", "figurative"]) is True
    assert bool(t0.loc["negative", "figurative"]) is False
    assert bars["order"].tolist() == sorted(bars["order"].tolist())


def test_stacked_bars_requires_columns():
    with pytest.raises(ValueError):
        stacked_bars(pd.DataFrame({"time": ["T0"]}))


def test_report_break_even_at_maturity(projection):
    report = generate_bond_report(projection())

    assert report.break_even_index == 5
    assert report.break_even_label == "A5"
    assert report.capital_gain == pytest.approx(150.0)
    assert report.flags == []
    assert report.n_periods == 5


def test_report_break_even_immediately_with_real_nominal(projection):
    report = generate_bond_report(projection(include_nominal_at_t0=True))
    assert report.break_even_label == "T0"


def test_report_flags_losing_bond(projection):
    report = generate_bond_report(projection(purchase_price=105.0, coupon_rate=0.0))

    assert report.net_profit == pytest.approx(10_000.0 - 10_520.0)
    assert report.break_even_index is None
    joined = " ".join(report.flags)
    assert "NEGATIVE_NET_PROFIT" in joined
    assert "NO_BREAK_EVEN" in joined
    assert "CAPITAL_LOSS_AT_MATURITY" in joined


def test_report_flags_degenerate_horizon(projection):
    report = generate_bond_report(projection(maturity_date=TODAY))
    assert any(f.startswith("DEGENERATE_HORIZON") for f in report.flags)


def test_report_table(projection):
    table = generate_bond_report(projection(purchase_price=105.0, coupon_rate=0.0)).to_dataframe()

    assert table.loc[table["Metric"] == "Break-even", "Value"].item() == "N/A"
    assert table["Metric"].iloc[-1] == "FLAGS"
