"""
Canonical data models for normalized story records.

This module defines immutable data structures that represent story rows
after normalization from the planning (content calendar) sheet and the
metrics (study story data) sheet.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Mapping, Optional, Union

# Pitch dates may be left as raw sheet cells; consumers read them through
# utils.time.parse_date.
DateCell = Union[date, str, None]


class MatchStrategy(str, Enum):
    """Strategy that associated a planning record with a metrics record."""
    EXACT_TITLE = "exact-title"
    FUZZY_TITLE = "fuzzy-title"
    DATE_FALLBACK = "date-fallback"
    NONE = "none"


@dataclass(frozen=True)
class PlanningRecord:
    """Story entry from the planning sheet."""
    id: Any
    title: str
    brand: str = ""
    pitch_date: DateCell = None
    status: str = ""
    study_url: str = ""
    # Deadline field name -> date, e.g. "production_date", "qa_due_by"
    deadlines: Mapping[str, date] = field(default_factory=dict, hash=False, compare=False)

    @property
    def production_date(self) -> Optional[date]:
        """Production deadline, None if not scheduled."""
        return self.deadlines.get("production_date")

    @property
    def has_published_url(self) -> bool:
        return bool(self.study_url and self.study_url.strip())


@dataclass(frozen=True)
class MetricsRecord:
    """Story entry from the metrics sheet."""
    title: str
    brand: str = ""
    pitch_date: DateCell = None
    link_count: int = 0
    study_url: str = ""

    def __post_init__(self):
        if self.link_count < 0:
            raise ValueError(f"link_count must be >= 0, got {self.link_count}")


@dataclass(frozen=True)
class MatchResult:
    """Association of one planning record with at most one metrics record."""
    planning_id: Any
    metrics_record: Optional[MetricsRecord] = None
    strategy: MatchStrategy = MatchStrategy.NONE

    @property
    def matched(self) -> bool:
        return self.metrics_record is not None

    @classmethod
    def unmatched(cls, planning_id: Any):
        """Create result for a planning record with no counterpart."""
        return cls(planning_id=planning_id)


@dataclass(frozen=True)
class RecordNormalizationResult:
    """Result of normalizing a batch of sheet rows into records."""

    records: tuple = ()

    # Processing metadata
    skipped: int = 0
    warnings: tuple[str, ...] = ()

    @property
    def success(self) -> bool:
        return self.skipped == 0
