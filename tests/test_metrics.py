# tests/test_metrics.py

from __future__ import annotations

import pytest

from analytics.metrics import compute_return_summary
from engine.cashflow import CashFlowDetail, CashFlowPeriod


def _period(index, inflows=(), outflows=(), cumulative=0.0):
    inflows = tuple(inflows)
    outflows = tuple(outflows)
    return CashFlowPeriod(
        period_index=index,
        period_label=f"P{index}",
        description="",
        inflows=inflows,
        outflows=outflows,
        positive_total=sum(d.amount for d in inflows),
        negative_total=-sum(d.amount for d in outflows),
        cumulative_balance=cumulative,
    )


def test_summary_for_baseline_bond(projection):
    out = projection()
    s = out.summary

    assert s.total_real_inflow == pytest.approx(5 * 350.0 + 10_000.0)
    assert s.total_outflow == pytest.approx(9870.0 + 5 * 43.75 + 18.75)
    assert s.net_profit == pytest.approx(1642.5)
    assert s.initial_investment == pytest.approx(9870.0)
    assert s.total_return_percent == pytest.approx(1642.5 / 9870.0 * 100)
    assert s.annualized_return_percent == pytest.approx(s.total_return_percent / (1826 / 365.25))
    assert s.years_to_maturity == pytest.approx(1826 / 365.25)


def test_real_nominal_counts_towards_inflows(projection):
    s = projection(include_nominal_at_t0=True).summary
    assert s.total_real_inflow == pytest.approx(5 * 350.0 + 20_000.0)
    assert s.initial_investment == pytest.approx(9870.0)


def test_figurative_lines_are_excluded():
    periods = [
        _period(0, inflows=[CashFlowDetail("Nominal", 1000.0, is_figurative=True)],
                outflows=[CashFlowDetail("Purchase Cost", 990.0)]),
        _period(1, inflows=[CashFlowDetail("Nominal Redemption", 1000.0)]),
    ]
    s = compute_return_summary(periods, years_to_maturity=1.0)

    assert s.total_real_inflow == pytest.approx(1000.0)
    assert s.net_profit == pytest.approx(10.0)
    assert s.total_return_percent == pytest.approx(10.0 / 990.0 * 100)


def test_zero_initial_investment_uses_fallback():
    periods = [
        _period(0),
        _period(1, inflows=[CashFlowDetail("Coupon", 5.0)]),
    ]
    s = compute_return_summary(periods, years_to_maturity=2.0)

    assert s.initial_investment == 1.0
    assert s.total_return_percent == pytest.approx(500.0)
    assert s.annualized_return_percent == pytest.approx(250.0)


def test_custom_fallback_denominator():
    s = compute_return_summary([_period(0), _period(1, inflows=[CashFlowDetail("Coupon", 5.0)])],
                               years_to_maturity=0.0, fallback_investment=10.0)
    assert s.total_return_percent == pytest.approx(50.0)
    assert s.annualized_return_percent == s.total_return_percent


def test_summary_table(projection):
    table = projection().summary.to_dataframe()
    assert list(table.columns) == ["Metric", "Value", "Unit"]
    assert table.loc[table["Metric"] == "Net Profit", "Value"].item() == "1,642.50"
    assert table.loc[table["Metric"] == "Total Return", "Value"].item() == "16.64"
