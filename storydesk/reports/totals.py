"""
Story totals and link metrics for the running totals and pitch analysis views.
"""

from collections import Counter
from datetime import date
from typing import Optional, Sequence

from ..calendar.fiscal import Quarter, filter_in_quarter
from ..config.defaults import ReportParams
from ..data.models import MetricsRecord, PlanningRecord
from ..utils.time import parse_date
from .models import LinkMetrics, RunningTotals


def _pitch_date(story: PlanningRecord) -> Optional[date]:
    return parse_date(story.pitch_date)


def sort_by_pitch_date(stories: Sequence[PlanningRecord]) -> list[PlanningRecord]:
    """Most recent pitch first; stories without a pitch date go last in input order."""
    dated = [s for s in stories if _pitch_date(s) is not None]
    undated = [s for s in stories if _pitch_date(s) is None]
    dated.sort(key=_pitch_date, reverse=True)
    return dated + undated


def running_totals(
    stories: Sequence[PlanningRecord],
    quarter: Optional[Quarter] = None,
    params: Optional[ReportParams] = None,
) -> RunningTotals:
    """
    Count stories by status and brand.

    Args:
        stories: Planning records
        quarter: If given, only stories pitched within this quarter are counted
        params: Report parameters

    Returns:
        RunningTotals for the selected stories
    """
    params = params or ReportParams()

    if quarter is not None:
        stories = filter_in_quarter(stories, quarter, _pitch_date)

    by_status = Counter(story.status for story in stories)
    by_brand = Counter(story.brand or params.unassigned_brand for story in stories)
    statuses = tuple(params.tracked_statuses) + ("",) * 3
    pitched, in_progress, published = (by_status.get(status, 0) if status else 0 for status in statuses[:3])

    return RunningTotals(
        total=len(stories),
        pitched=pitched,
        in_progress=in_progress,
        published=published,
        by_brand=dict(by_brand),
        by_status=dict(by_status),
        stories_by_pitch_date=tuple(sort_by_pitch_date(stories)),
    )


def link_metrics(
    records: Sequence[MetricsRecord],
    thresholds: Optional[Sequence[int]] = None,
) -> LinkMetrics:
    """
    Summarize link counts across metrics records.

    The average covers only records with at least one link and is rounded
    to one decimal. Threshold counts are strictly greater than.
    """
    if thresholds is None:
        thresholds = ReportParams().link_thresholds

    linked = [record.link_count for record in records if record.link_count > 0]
    average = round(sum(linked) / len(linked), 1) if linked else 0.0

    return LinkMetrics(
        total_stories=len(records),
        average_links=average,
        above_threshold={
            threshold: sum(1 for count in linked if count > threshold)
            for threshold in thresholds
        },
    )
