"""
Cash-flow projection engine — deterministic bond schedule + return summary.
"""

from .cashflow import (
    CashFlowDetail,
    CashFlowPeriod,
    CashFlowProjection,
    details_to_frame,
    schedule_to_frame,
)
from .nominal import NominalSlot, resolve_nominal_slot
from .runner import project_cash_flows

__all__ = [
    "CashFlowDetail",
    "CashFlowPeriod",
    "CashFlowProjection",
    "NominalSlot",
    "resolve_nominal_slot",
    "project_cash_flows",
    "schedule_to_frame",
    "details_to_frame",
]
