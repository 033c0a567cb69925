"""Pytest configuration and shared fixtures."""

import pytest
from datetime import date
from typing import Any, List

from storydesk.data.models import MetricsRecord, PlanningRecord


@pytest.fixture
def planning_sheet_values() -> List[List[Any]]:
    """Sample content calendar value grid, header first."""
    return [
        ["Story Title", "Brand", "Pitch Date", "Status", "Analysis Due By", "Production Date", "Study URL"],
        ["Best Cities for Dog Owners", "LawnStarter", "3/4/2025", "Published", "2025-02-20", "2025-03-20", "https://example.com/dogs"],
        ["Worst Cities for Allergies: 2025 Edition", "Lawn Love", "2025-04-02", "In Progress", "", "2025-04-18"],
        ["Garden Gnome Survey", "", "not yet", "Pitched"],
    ]


@pytest.fixture
def metrics_sheet_values() -> List[List[Any]]:
    """Sample study story data value grid, header first."""
    return [
        ["Brand", "Study Title", "Study URL", "Study Link #", "Average O/R", "Pitch Date", "Prev. Link #"],
        ["LawnStarter", "Best Cities for Dog Owners", "https://example.com/dogs", "42", "0.31", "2025-03-04", ""],
        ["Lawn Love", "Worst Cities for Allergies 2025", "", "", "0.12", "2025-04-02", "17"],
        ["Home Gnome", "Survey Results", "", "n/a", "", "6/1/2025", ""],
    ]


@pytest.fixture
def planning_records() -> List[PlanningRecord]:
    """Planning records covering every matching strategy."""
    return [
        PlanningRecord(id="p1", title="Dog Parks Study", brand="LawnStarter",
                       pitch_date=date(2025, 3, 1), status="Published"),
        PlanningRecord(id="p2", title="The Best Cities for Urban Gardening in America",
                       brand="Lawn Love", pitch_date=date(2025, 6, 10), status="In Progress"),
        PlanningRecord(id="p3", title="Untouched Topic", brand="Home Gnome",
                       pitch_date=date(2025, 9, 15), status="Pitched"),
        PlanningRecord(id="p4", title="Nothing Matches Here", brand="",
                       pitch_date=None, status="Pitched"),
    ]


@pytest.fixture
def metrics_records() -> List[MetricsRecord]:
    """Metrics records paired with planning_records."""
    return [
        MetricsRecord(title="Dog Parks Study", brand="LawnStarter",
                      pitch_date=date(2099, 1, 1), link_count=40),
        MetricsRecord(title="Best Cities for Urban Gardening", brand="Lawn Love",
                      pitch_date=date(2025, 6, 12), link_count=12),
        MetricsRecord(title="Something Else Entirely", brand="Home Gnome",
                      pitch_date=date(2025, 9, 15), link_count=7),
    ]
