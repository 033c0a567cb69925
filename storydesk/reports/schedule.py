"""
Deadline reports: what is due this week, and which stories are past
production without a published URL.
"""

from datetime import date
from typing import Optional, Sequence

from ..config.defaults import ReportParams
from ..data.models import PlanningRecord
from ..utils.time import days_between, parse_date, week_bounds
from .models import Deadline, OverdueStory


def deadlines_in_week(
    stories: Sequence[PlanningRecord],
    today: date,
    params: Optional[ReportParams] = None,
    week_starts_on: str = "sunday",
) -> list[Deadline]:
    """
    Collect every story deadline that falls within the week containing today.

    Args:
        stories: Planning records with parsed deadlines
        today: Reference date
        params: Report parameters (deadline types, untitled label)
        week_starts_on: "sunday" or "monday"

    Returns:
        Deadlines sorted by date, then story title
    """
    params = params or ReportParams()
    start, end = week_bounds(today, week_starts_on)

    deadlines = []
    for story in stories:
        for field_name, label in params.deadline_types:
            due = story.deadlines.get(field_name)
            if field_name == "pitch_date" and due is None:
                due = parse_date(story.pitch_date)
            if due is None or not (start <= due <= end):
                continue

            deadlines.append(Deadline(
                story_id=story.id,
                story_title=story.title or params.untitled_label,
                brand=story.brand,
                deadline_type=label,
                field=field_name,
                due=due,
                days_until=days_between(today, due),
                status=story.status,
                study_url=story.study_url,
            ))

    deadlines.sort(key=lambda d: (d.due, d.story_title))
    return deadlines


def missing_press_releases(
    stories: Sequence[PlanningRecord],
    today: date,
    params: Optional[ReportParams] = None,
) -> list[OverdueStory]:
    """
    Stories whose production date has passed and that have no published URL.

    Args:
        stories: Planning records
        today: Reference date; production on today is not yet overdue
        params: Report parameters (production field name)

    Returns:
        Overdue stories, most overdue first
    """
    params = params or ReportParams()

    overdue = []
    for story in stories:
        production_date = story.deadlines.get(params.production_field)
        if production_date is None or production_date >= today:
            continue
        if story.has_published_url:
            continue
        overdue.append(OverdueStory(
            story=story,
            production_date=production_date,
            days_overdue=days_between(production_date, today),
        ))

    overdue.sort(key=lambda item: item.days_overdue, reverse=True)
    return overdue
