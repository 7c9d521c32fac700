from __future__ import annotations

from typing import Dict, Tuple

# Columns of the per-period schedule table (engine.cashflow.schedule_to_frame).
SCHEDULE_COLUMNS: Tuple[str, ...] = (
    "Period",
    "Label",
    "Date",
    "Description",
    "Inflows",
    "Outflows",
    "Net",
    "Cumulative",
)

# Columns of the long-form detail table (one row per inflow/outflow line).
DETAIL_COLUMNS: Tuple[str, ...] = (
    "Period",
    "Label",
    "Direction",
    "Item",
    "Amount",
    "Figurative",
)

DEFAULT_LANGUAGE = "en"

# Display wording for detail lines and period descriptions.
# "it" is the Italian dashboard wording.
LABELS: Dict[str, Dict[str, str]] = {
    "en": {
        "purchase_cost": "Purchase Cost",
        "bank_commission": "Bank Commission",
        "nominal": "Nominal",
        "coupon": "Coupon",
        "coupon_tax": "Coupon Tax",
        "nominal_redemption": "Nominal Redemption",
        "capital_gain_tax": "Capital Gain Tax",
        "purchase_period": "Purchase & Nominal",
        "annual_period": "Year {i}",
        "semiannual_period": "Half-year {i}",
        "maturity_period": "Maturity",
    },
    "it": {
        "purchase_cost": "Costo Acquisto",
        "bank_commission": "Commissione Banca",
        "nominal": "Nominale",
        "coupon": "Cedola",
        "coupon_tax": "Tassazione Cedola",
        "nominal_redemption": "Rimborso Nominale",
        "capital_gain_tax": "Tassa Capital Gain",
        "purchase_period": "Acquisto & Nominale",
        "annual_period": "Anno {i}",
        "semiannual_period": "Semestre {i}",
        "maturity_period": "Scadenza",
    },
}

# Period tags are language independent: T0, A1.. (annual), S1.. (semiannual)
PERIOD_TAG_PREFIX: Dict[str, str] = {
    "annual": "A",
    "semiannual": "S",
}


def labels_for(language: str) -> Dict[str, str]:
    """Label set for `language`, falling back to English."""
    return LABELS.get(language, LABELS[DEFAULT_LANGUAGE])
