"""
Plausibility checks for bond parameters before they reach the projector.

The projector itself accepts anything numeric; this is caller-side,
advisory validation for the dashboard and CLI:
- Non-positive nominal
- Negative prices or commission
- Tax rates outside [0, 100]
- Maturity that leaves no real horizon
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import List, Optional

from core.config import PERIODS_PER_YEAR, BondParameters
from core.utils import as_date

PRICE_LOW, PRICE_HIGH = 50.0, 150.0
MAX_PLAUSIBLE_COUPON = 20.0
MAX_PLAUSIBLE_COMMISSION = 20.0


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a parameter set."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def validate_parameters(
    params: BondParameters,
    *,
    today: Optional[dt.date] = None,
) -> ValidationResult:
    """
    Run all checks on a parameter set.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    result = ValidationResult()
    ref = as_date(today) if today is not None else dt.date.today()

    # --- Nominal ---
    if params.nominal <= 0:
        result.errors.append(f"Nominal must be positive (got {params.nominal:g}).")

    # --- Prices ---
    for name, price in (("Purchase price", params.purchase_price), ("Selling price", params.selling_price)):
        if price < 0:
            result.errors.append(f"{name} is negative ({price:g}%).")
        elif price == 0:
            result.warnings.append(f"{name} is zero.")
        elif price < PRICE_LOW or price > PRICE_HIGH:
            result.warnings.append(
                f"{name} {price:g}% is far from par; check it is quoted in percent of nominal."
            )

    # --- Rates ---
    if params.tax_rate < 0 or params.tax_rate > 100:
        result.errors.append(f"Tax rate must be within 0-100% (got {params.tax_rate:g}%).")

    if params.coupon_rate < 0:
        result.errors.append(f"Coupon rate is negative ({params.coupon_rate:g}%).")
    elif params.coupon_rate > MAX_PLAUSIBLE_COUPON:
        result.warnings.append(f"Coupon rate {params.coupon_rate:g}% looks implausibly high.")

    # --- Commission ---
    if params.bank_commission_per_mille < 0:
        result.errors.append(
            f"Bank commission is negative ({params.bank_commission_per_mille:g}‰)."
        )
    elif params.bank_commission_per_mille > MAX_PLAUSIBLE_COMMISSION:
        result.warnings.append(
            f"Bank commission {params.bank_commission_per_mille:g}‰ is high; "
            f"check it is per mille, not percent."
        )

    # --- Periodicity ---
    if params.periodicity not in PERIODS_PER_YEAR:
        result.errors.append(f"Unknown periodicity {params.periodicity!r}.")

    # --- Maturity ---
    maturity = as_date(params.maturity_date)
    if maturity <= ref:
        result.warnings.append(
            f"Maturity {maturity.isoformat()} is not after {ref.isoformat()}; "
            f"the schedule collapses to a single terminal period."
        )

    return result
