"""
Input layer — coerce raw user input (form fields, CLI options, JSON) into BondParameters.

Numeric entry is forgiving, the way the dashboard's number inputs are:
anything that does not parse to a finite number becomes 0.0. Structural
problems (unknown periodicity, unparsable maturity date) are not guessed at
and raise pydantic.ValidationError.
"""

from __future__ import annotations

import datetime as dt
import logging
import math
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

from core.config import (
    DEFAULT_BANK_COMMISSION_PER_MILLE,
    DEFAULT_HORIZON_YEARS,
    BondParameters,
    Periodicity,
)
from core.utils import add_years, as_date

logger = logging.getLogger(__name__)

_PERIODICITY_ALIASES = {
    "annual": "annual",
    "annuale": "annual",
    "yearly": "annual",
    "1": "annual",
    "semiannual": "semiannual",
    "semi-annual": "semiannual",
    "semestrale": "semiannual",
    "2": "semiannual",
}


def coerce_number(value: Any, *, default: float = 0.0, field_name: str = "value") -> float:
    """
    Parse a user-entered number; invalid or non-finite entries become `default`.
    A lone decimal comma ("98,5") is accepted.
    """
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        out = float(value)
    else:
        text = str(value).strip() if value is not None else ""
        if "," in text and "." not in text:
            text = text.replace(",", ".")
        try:
            out = float(text)
        except ValueError:
            logger.warning("Non-numeric %s %r coerced to %s", field_name, value, default)
            return default
    if not math.isfinite(out):
        logger.warning("Non-finite %s %r coerced to %s", field_name, value, default)
        return default
    return out


class BondInput(BaseModel):
    """Raw bond form. Field names match BondParameters."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    nominal: float = 10_000.0
    purchase_price: float = 98.5
    selling_price: float = 100.0
    tax_rate: float = 12.5
    coupon_rate: float = 3.5
    bank_commission_per_mille: float = DEFAULT_BANK_COMMISSION_PER_MILLE
    periodicity: Periodicity = "annual"
    maturity_date: Optional[dt.date] = None

    include_nominal_at_t0: bool = False
    show_nominal: bool = False
    sell_at_maturity: bool = True

    @field_validator(
        "nominal",
        "purchase_price",
        "selling_price",
        "tax_rate",
        "coupon_rate",
        "bank_commission_per_mille",
        mode="before",
    )
    @classmethod
    def _coerce_numeric(cls, v: Any, info: ValidationInfo) -> float:
        return coerce_number(v, field_name=info.field_name)

    @field_validator("periodicity", mode="before")
    @classmethod
    def _normalize_periodicity(cls, v: Any) -> Any:
        if isinstance(v, str):
            return _PERIODICITY_ALIASES.get(v.strip().lower(), v)
        if isinstance(v, int) and not isinstance(v, bool):
            return _PERIODICITY_ALIASES.get(str(v), v)
        return v

    @field_validator("maturity_date", mode="before")
    @classmethod
    def _parse_maturity(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        if isinstance(v, dt.datetime):
            return v.date()
        return v

    def to_parameters(self, *, today: Optional[dt.date] = None) -> BondParameters:
        """Build BondParameters; a missing maturity defaults to today + 5 years."""
        maturity = self.maturity_date
        if maturity is None:
            base = as_date(today) if today is not None else dt.date.today()
            maturity = add_years(base, DEFAULT_HORIZON_YEARS)
        return BondParameters(
            maturity_date=maturity,
            nominal=self.nominal,
            purchase_price=self.purchase_price,
            selling_price=self.selling_price,
            tax_rate=self.tax_rate,
            coupon_rate=self.coupon_rate,
            bank_commission_per_mille=self.bank_commission_per_mille,
            periodicity=self.periodicity,
            include_nominal_at_t0=self.include_nominal_at_t0,
            show_nominal=self.show_nominal,
            sell_at_maturity=self.sell_at_maturity,
        )


def parameters_from_mapping(
    data: Mapping[str, Any],
    *,
    today: Optional[dt.date] = None,
) -> BondParameters:
    """Validate a raw mapping and return BondParameters (missing fields take defaults)."""
    return BondInput.model_validate(dict(data)).to_parameters(today=today)
