#!/usr/bin/env python3
"""
Basic Usage Example - Storydesk Editorial Core

This script demonstrates the basic usage of the storydesk core with sample
sheet data. It shows how to:
- Parse planning and metrics sheet value grids
- Normalize rows into story records
- Match planning stories to metrics stories
- Rank matched stories by links and export the ranking as CSV
- Work with fiscal quarters

Run: python examples/basic_usage.py
"""

import io
from datetime import date

from storydesk.calendar import FiscalCalendar
from storydesk.config.loader import ConfigLoader
from storydesk.data.normalizer import RecordNormalizer
from storydesk.data.sheets import parse_sheet_values
from storydesk.logging import configure_logging
from storydesk.matching import RecordMatcher
from storydesk.reports import export_ranking_csv, rank_by_links, running_totals
from storydesk.utils.time import FixedClock

PLANNING_VALUES = [
    ["Story Title", "Brand", "Pitch Date", "Status", "Production Date", "Study URL"],
    ["Best Cities for Dog Owners", "LawnStarter", "3/4/2025", "Published", "2025-03-20", "https://example.com/dogs"],
    ["Worst Cities for Allergies: 2025 Edition", "Lawn Love", "2025-04-02", "In Progress", "2025-04-18", ""],
    ["Garden Gnome Survey", "Home Gnome", "2025-05-09", "Pitched", "", ""],
]

METRICS_VALUES = [
    ["Brand", "Study Title", "Study URL", "Study Link #", "Pitch Date"],
    ["LawnStarter", "Best Cities for Dog Owners", "https://example.com/dogs", "42", "2025-03-04"],
    ["Lawn Love", "Worst Cities for Allergies 2025", "", "17", "2025-04-02"],
    ["Home Gnome", "Survey Results", "", "n/a", "2025-05-09"],
]


def main() -> None:
    """Run the example pipeline."""
    configure_logging(level="INFO")

    config = ConfigLoader.create().load()
    normalizer = RecordNormalizer(aliases=config.aliases, reports=config.reports)

    planning = normalizer.normalize_planning_rows(parse_sheet_values(PLANNING_VALUES)).records
    metrics = normalizer.normalize_metrics_rows(parse_sheet_values(METRICS_VALUES)).records

    results = RecordMatcher(config.matcher).match_all(planning, metrics)
    for story, result in zip(planning, results):
        linked = result.metrics_record.title if result.metrics_record else "-"
        print(f"{story.title!r:50} {result.strategy.value:14} {linked}")

    ranking = rank_by_links(planning, results, include_unmatched=True)
    buffer = io.StringIO()
    export_ranking_csv(ranking, buffer)
    print()
    print(buffer.getvalue())

    calendar = FiscalCalendar(clock=FixedClock(date(2025, 4, 15)), label_style=config.calendar.label_style)
    quarter = calendar.current_quarter()
    totals = running_totals(planning, quarter=quarter, params=config.reports)
    print(f"{calendar.format_quarter_label(quarter)}: {totals.total} stories, {totals.by_status}")


if __name__ == "__main__":
    main()
