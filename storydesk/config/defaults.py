"""Default configuration parameters for the storydesk core."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MatcherParams:
    """Fuzzy title matching thresholds."""
    fuzzy_min_substring_length: int = 20     # Both titles at least this long for containment
    fuzzy_min_word_length: int = 4           # Shorter words are ignored for overlap
    fuzzy_min_shared_words: int = 3          # Shared significant words required


@dataclass(frozen=True)
class AliasParams:
    """
    Accepted sheet column keys per semantic field, in priority order.

    Keys are in normalized header form (see data.sheets.normalize_header).
    """
    record_id: tuple[str, ...] = ("id",)
    title: tuple[str, ...] = ("story_title", "study_title", "title", "news_peg")
    brand: tuple[str, ...] = ("brand",)
    pitch_date: tuple[str, ...] = ("pitch_date", "date_pitched", "pitched")
    status: tuple[str, ...] = ("status",)
    study_url: tuple[str, ...] = ("study_url", "published_url", "url")
    link_count: tuple[str, ...] = (
        "link_count",
        "links",
        "study_link_",
        "link_",
        "prev_link_",
        # Never produced by normalize_header, which collapses "__"; only
        # reachable from rows built by hand.
        "prev__link_",
    )


@dataclass(frozen=True)
class CalendarParams:
    """Fiscal calendar presentation parameters."""
    label_style: str = "short"       # "short" -> "Q1 25", "long" -> "Q1 2025"
    week_starts_on: str = "sunday"   # "sunday" or "monday"


@dataclass(frozen=True)
class ReportParams:
    """Dashboard report parameters."""
    link_thresholds: tuple[int, ...] = (50, 80)
    tracked_statuses: tuple[str, ...] = ("Pitched", "In Progress", "Published")
    unassigned_brand: str = "Unassigned"
    untitled_label: str = "Untitled Story"
    # (sheet field, display label) pairs checked for "due this week"
    deadline_types: tuple[tuple[str, str], ...] = (
        ("pitch_date", "Pitch Date"),
        ("analysis_due_by", "Analysis Due"),
        ("edits_due_by", "Edits Due"),
        ("qa_due_by", "QA Due"),
        ("production_date", "Production"),
    )
    production_field: str = "production_date"


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    matcher: MatcherParams
    aliases: AliasParams
    calendar: CalendarParams
    reports: ReportParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        matcher=MatcherParams(),
        aliases=AliasParams(),
        calendar=CalendarParams(),
        reports=ReportParams(),
    )
