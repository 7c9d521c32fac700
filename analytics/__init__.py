"""
Analytics outputs — return summary, chart series, and decision support.
"""

from .metrics import ReturnSummary, compute_return_summary
from .aggregator import chart_frame, stacked_bars
from .decisions import BondReport, generate_bond_report

__all__ = [
    "ReturnSummary",
    "compute_return_summary",
    "chart_frame",
    "stacked_bars",
    "BondReport",
    "generate_bond_report",
]
