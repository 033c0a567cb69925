"""
Fiscal calendar module.

Quarter layout: Q1 Mar-May, Q2 Jun-Aug, Q3 Sep-Nov, Q4 Dec-Feb. Q4 belongs
to the fiscal year of its December.
"""
from .fiscal import (
    FiscalCalendar,
    Quarter,
    format_quarter_label,
    next_quarter,
    prev_quarter,
    quarter_of,
)

__all__ = [
    "FiscalCalendar",
    "Quarter",
    "quarter_of",
    "next_quarter",
    "prev_quarter",
    "format_quarter_label",
]
