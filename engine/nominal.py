"""
The T0 nominal slot.

The purchase period may show the bond's face value as an inflow in one of
three ways, resolved once per projection:

  absent      nothing is shown
  real        the nominal is counted as cash (reinvestment modelled as
              already holding the nominal); it feeds the cumulative balance
              and the return totals
  figurative  the nominal is displayed for framing only and never touches
              the cumulative balance or the returns

`include_nominal_at_t0` wins over `show_nominal`; the two never combine.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Tuple

from core.config import BondParameters

from .cashflow import CashFlowDetail

SlotKind = Literal["absent", "real", "figurative"]


@dataclass(frozen=True)
class NominalSlot:
    kind: SlotKind
    amount: float = 0.0

    @property
    def real_amount(self) -> float:
        return self.amount if self.kind == "real" else 0.0

    def to_details(self, label: str) -> Tuple[CashFlowDetail, ...]:
        if self.kind == "absent":
            return ()
        return (CashFlowDetail(label, self.amount, is_figurative=self.kind == "figurative"),)


def resolve_nominal_slot(params: BondParameters) -> NominalSlot:
    if params.include_nominal_at_t0:
        return NominalSlot("real", params.nominal)
    if params.show_nominal:
        return NominalSlot("figurative", params.nominal)
    return NominalSlot("absent")
