"""
Report row models consumed by the dashboard tables and the CSV exporter.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from ..data.models import PlanningRecord


@dataclass(frozen=True)
class RankedStory:
    """Planning story ranked by its matched link count."""
    rank: int
    planning_id: Any
    title: str
    brand: str
    pitch_date: Optional[date]
    link_count: int
    strategy: str


@dataclass(frozen=True)
class RunningTotals:
    """Story counts for the running totals view."""
    total: int
    pitched: int
    in_progress: int
    published: int
    by_brand: dict[str, int]
    by_status: dict[str, int]
    stories_by_pitch_date: tuple[PlanningRecord, ...]


@dataclass(frozen=True)
class LinkMetrics:
    """Link and authority summary for the pitch analysis view."""
    total_stories: int
    average_links: float
    # Threshold -> number of stories strictly above it
    above_threshold: dict[int, int]


@dataclass(frozen=True)
class Deadline:
    """One story deadline falling in the current week."""
    story_id: Any
    story_title: str
    brand: str
    deadline_type: str
    field: str
    due: date
    days_until: int
    status: str
    study_url: str

    @property
    def is_overdue(self) -> bool:
        return self.days_until < 0

    @property
    def is_today(self) -> bool:
        return self.days_until == 0

    @property
    def is_tomorrow(self) -> bool:
        return self.days_until == 1


@dataclass(frozen=True)
class OverdueStory:
    """Story past its production date with no published URL."""
    story: PlanningRecord
    production_date: date
    days_overdue: int
