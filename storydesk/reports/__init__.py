"""
Dashboard reports built from normalized and matched story records.
"""
from .export import export_ranking_csv
from .ranking import rank_by_links
from .schedule import deadlines_in_week, missing_press_releases
from .totals import link_metrics, running_totals

__all__ = [
    "running_totals",
    "link_metrics",
    "rank_by_links",
    "deadlines_in_week",
    "missing_press_releases",
    "export_ranking_csv",
]
