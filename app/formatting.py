from __future__ import annotations

import pandas as pd

CURRENCY_SYMBOL = "€"


def fmt_currency(val: float, symbol: str = CURRENCY_SYMBOL) -> str:
    """Format an amount with thousands separators, two decimals and a currency symbol."""
    return f"{symbol} {val:,.2f}"


def fmt_pct(val: float, *, signed: bool = True) -> str:
    """Format a percentage (already x100) with 2 decimals."""
    return f"{val:+.2f}%" if signed else f"{val:.2f}%"


def format_schedule(frame: pd.DataFrame, symbol: str = CURRENCY_SYMBOL) -> pd.DataFrame:
    """Display copy of a schedule frame: dates as ISO strings, amounts as currency."""
    out = frame.copy()
    if "Date" in out.columns:
        out["Date"] = pd.to_datetime(out["Date"], errors="coerce").dt.strftime("%Y-%m-%d")
    for c in ["Inflows", "Outflows", "Net", "Cumulative", "Amount"]:
        if c in out.columns:
            out[c] = out[c].apply(lambda v: fmt_currency(float(v), symbol))
    return out
