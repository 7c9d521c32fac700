"""
BondFlow command line — print a bond's cash-flow schedule and return summary.

Run: bondflow --nominal 10000 --purchase-price 98.5 --maturity-date 2031-10-18
"""

from __future__ import annotations

import argparse
import datetime as dt
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from analytics.decisions import generate_bond_report
from engine.runner import project_cash_flows
from inputs.loader import parameters_from_mapping
from inputs.validators import validate_parameters

from .formatting import fmt_currency, fmt_pct, format_schedule

logger = logging.getLogger(__name__)

NUMERIC_OPTIONS = (
    "nominal",
    "purchase_price",
    "selling_price",
    "tax_rate",
    "coupon_rate",
    "bank_commission_per_mille",
)


def _iso_date(val: str) -> dt.date:
    try:
        return dt.date.fromisoformat(val)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date (expected YYYY-MM-DD): {val!r}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="bondflow", description="Bond cash-flow schedule")
    # numbers are parsed leniently by the input layer (garbage -> 0)
    p.add_argument("--nominal", type=str, default=None, help="Face value")
    p.add_argument("--purchase-price", type=str, default=None, help="Purchase price, %% of par")
    p.add_argument("--selling-price", type=str, default=None, help="Selling price at maturity, %% of par")
    p.add_argument("--tax-rate", type=str, default=None, help="Tax rate on coupons and capital gain, %%")
    p.add_argument("--coupon-rate", type=str, default=None, help="Annual coupon, %%")
    p.add_argument("--bank-commission-per-mille", type=str, default=None, help="Bank commission, per mille")
    p.add_argument("--periodicity", type=str, default=None, help="annual | semiannual")
    p.add_argument("--maturity-date", type=str, default=None, help="YYYY-MM-DD (default: today + 5y)")
    p.add_argument("--include-nominal-at-t0", action="store_true", help="Count the T0 nominal as real cash")
    p.add_argument("--show-nominal", action="store_true", help="Show the T0 nominal as a figurative line")
    p.add_argument(
        "--sell-at-maturity",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Held to maturity: no second bank commission",
    )
    p.add_argument("--today", type=_iso_date, default=None, help="Reference date (default: today)")
    p.add_argument("--language", choices=("en", "it"), default="en")
    p.add_argument("--details", action="store_true", help="Also print every inflow/outflow line")
    p.add_argument("--csv", type=str, default=None, help="Write the schedule to this CSV path")
    p.add_argument("--verbose", action="store_true")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s: %(message)s",
    )

    raw = {name: getattr(args, name) for name in NUMERIC_OPTIONS if getattr(args, name) is not None}
    if args.periodicity is not None:
        raw["periodicity"] = args.periodicity
    if args.maturity_date is not None:
        raw["maturity_date"] = args.maturity_date
    raw["include_nominal_at_t0"] = args.include_nominal_at_t0
    raw["show_nominal"] = args.show_nominal
    raw["sell_at_maturity"] = args.sell_at_maturity

    today = args.today or dt.date.today()
    try:
        params = parameters_from_mapping(raw, today=today)
    except ValidationError as e:
        logger.error("Invalid bond parameters: %s", e)
        return 2

    vr = validate_parameters(params, today=today)
    if vr.errors or vr.warnings:
        print(vr.summary(), file=sys.stderr)

    projection = project_cash_flows(params, today=today, language=args.language)
    schedule = projection.to_frame()

    print(format_schedule(schedule).to_string(index=False))
    if args.details:
        print()
        print(format_schedule(projection.details_frame()).to_string(index=False))

    s = projection.summary
    print()
    print(f"Total inflows:     {fmt_currency(s.total_real_inflow)}")
    print(f"Total outflows:    {fmt_currency(s.total_outflow)}")
    print(f"Net profit:        {fmt_currency(s.net_profit)}")
    print(f"Total return:      {fmt_pct(s.total_return_percent)}")
    print(f"Annualized return: {fmt_pct(s.annualized_return_percent)}")

    report = generate_bond_report(projection)
    if report.break_even_label is not None:
        print(f"Break-even:        {report.break_even_label}")
    for flag in report.flags:
        print(f"! {flag}")

    if args.csv:
        schedule.to_csv(args.csv, index=False)
        logger.info("Schedule written to %s", args.csv)

    return 0


if __name__ == "__main__":
    sys.exit(main())
