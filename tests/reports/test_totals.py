"""Tests for running totals and link metrics."""

from datetime import date

from storydesk.calendar.fiscal import quarter_of
from storydesk.config.defaults import ReportParams
from storydesk.data.models import MetricsRecord, PlanningRecord
from storydesk.reports.totals import link_metrics, running_totals, sort_by_pitch_date


def _story(story_id, status, brand="", pitch_date=None):
    return PlanningRecord(id=story_id, title=f"Story {story_id}", brand=brand,
                          pitch_date=pitch_date, status=status)


class TestRunningTotals:
    """Test running_totals."""

    def test_counts(self):
        stories = [
            _story(1, "Pitched", "LawnStarter", date(2025, 3, 3)),
            _story(2, "Pitched", "Lawn Love", date(2025, 4, 10)),
            _story(3, "In Progress", "LawnStarter", None),
            _story(4, "Published", "", date(2025, 7, 1)),
            _story(5, "On Hold", "Home Gnome", date(2024, 12, 24)),
        ]

        totals = running_totals(stories)

        assert totals.total == 5
        assert totals.pitched == 2
        assert totals.in_progress == 1
        assert totals.published == 1
        assert totals.by_brand == {"LawnStarter": 2, "Lawn Love": 1, "Unassigned": 1, "Home Gnome": 1}
        assert totals.by_status == {"Pitched": 2, "In Progress": 1, "Published": 1, "On Hold": 1}

    def test_sorted_by_pitch_date_descending_undated_last(self):
        stories = [
            _story(1, "Pitched", pitch_date=date(2025, 3, 3)),
            _story(2, "Pitched", pitch_date=None),
            _story(3, "Pitched", pitch_date=date(2025, 7, 1)),
            _story(4, "Pitched", pitch_date="not a date"),
            _story(5, "Pitched", pitch_date="4/1/2025"),
        ]

        ordered = [s.id for s in running_totals(stories).stories_by_pitch_date]
        assert ordered == [3, 5, 1, 2, 4]
        assert [s.id for s in sort_by_pitch_date(stories)] == ordered

    def test_quarter_filter(self):
        stories = [
            _story(1, "Pitched", pitch_date=date(2025, 2, 28)),
            _story(2, "Pitched", pitch_date=date(2025, 3, 1)),
            _story(3, "Published", pitch_date=date(2025, 5, 31)),
            _story(4, "Published", pitch_date=None),
        ]

        totals = running_totals(stories, quarter=quarter_of(date(2025, 4, 1)))

        assert totals.total == 2
        assert totals.pitched == 1
        assert totals.published == 1

    def test_empty(self):
        totals = running_totals([])
        assert totals.total == 0
        assert totals.by_brand == {}
        assert totals.stories_by_pitch_date == ()

    def test_custom_statuses(self):
        params = ReportParams(tracked_statuses=("Draft",), unassigned_brand="None")
        totals = running_totals([_story(1, "Draft"), _story(2, "Pitched")], params=params)

        assert totals.pitched == 1
        assert totals.in_progress == 0
        assert totals.published == 0
        assert totals.by_brand == {"None": 2}


class TestLinkMetrics:
    """Test link_metrics."""

    def test_metrics(self):
        records = [
            MetricsRecord(title="a", link_count=0),
            MetricsRecord(title="b", link_count=10),
            MetricsRecord(title="c", link_count=51),
            MetricsRecord(title="d", link_count=80),
            MetricsRecord(title="e", link_count=91),
        ]

        metrics = link_metrics(records)

        assert metrics.total_stories == 5
        assert metrics.average_links == 58.0
        assert metrics.above_threshold == {50: 3, 80: 1}

    def test_no_links(self):
        metrics = link_metrics([MetricsRecord(title="a")])
        assert metrics.average_links == 0.0
        assert metrics.above_threshold == {50: 0, 80: 0}

    def test_custom_thresholds(self):
        metrics = link_metrics([MetricsRecord(title="a", link_count=5)], thresholds=[1, 5])
        assert metrics.above_threshold == {1: 1, 5: 0}
