"""Tests for the due-this-week and missing press release reports."""

from datetime import date

from storydesk.data.models import PlanningRecord
from storydesk.reports.schedule import deadlines_in_week, missing_press_releases

# Wednesday; the Sunday-start week is 2025-03-02 .. 2025-03-08
TODAY = date(2025, 3, 5)


class TestDeadlinesInWeek:
    """Test deadlines_in_week."""

    def test_collects_deadlines_in_week(self):
        stories = [
            PlanningRecord(
                id="a", title="Snow Study", status="In Progress",
                pitch_date=date(2025, 3, 2),
                deadlines={"qa_due_by": date(2025, 3, 6), "production_date": date(2025, 3, 20)},
            ),
            PlanningRecord(
                id="b", title="", deadlines={"edits_due_by": date(2025, 3, 5)},
            ),
        ]

        deadlines = deadlines_in_week(stories, TODAY)

        assert [(d.story_id, d.deadline_type) for d in deadlines] == [
            ("a", "Pitch Date"),
            ("b", "Edits Due"),
            ("a", "QA Due"),
        ]
        pitch, edits, qa = deadlines
        assert pitch.days_until == -3 and pitch.is_overdue
        assert edits.is_today and edits.story_title == "Untitled Story"
        assert qa.is_tomorrow

    def test_week_boundaries_inclusive(self):
        stories = [
            PlanningRecord(id="sun", title="Sun", deadlines={"qa_due_by": date(2025, 3, 2)}),
            PlanningRecord(id="sat", title="Sat", deadlines={"qa_due_by": date(2025, 3, 8)}),
            PlanningRecord(id="next", title="Next", deadlines={"qa_due_by": date(2025, 3, 9)}),
            PlanningRecord(id="prev", title="Prev", deadlines={"qa_due_by": date(2025, 3, 1)}),
        ]

        assert [d.story_id for d in deadlines_in_week(stories, TODAY)] == ["sun", "sat"]

    def test_monday_weeks(self):
        stories = [PlanningRecord(id="sun", title="Sun", deadlines={"qa_due_by": date(2025, 3, 2)})]
        assert deadlines_in_week(stories, TODAY, week_starts_on="monday") == []

    def test_same_day_sorted_by_title(self):
        stories = [
            PlanningRecord(id=1, title="Zinnias", deadlines={"qa_due_by": TODAY}),
            PlanningRecord(id=2, title="Azaleas", deadlines={"qa_due_by": TODAY}),
        ]
        assert [d.story_title for d in deadlines_in_week(stories, TODAY)] == ["Azaleas", "Zinnias"]

    def test_raw_pitch_date_cells(self):
        """Pitch dates left as sheet strings are parsed; garbage is ignored."""
        stories = [
            PlanningRecord(id="raw", title="Raw", pitch_date="3/4/2025"),
            PlanningRecord(id="bad", title="Bad", pitch_date="next week"),
        ]

        deadlines = deadlines_in_week(stories, TODAY)

        assert [(d.story_id, d.due) for d in deadlines] == [("raw", date(2025, 3, 4))]


class TestMissingPressReleases:
    """Test missing_press_releases."""

    def test_overdue_without_url(self):
        stories = [
            PlanningRecord(id=1, title="Old", deadlines={"production_date": date(2025, 1, 5)}),
            PlanningRecord(id=2, title="Recent", deadlines={"production_date": date(2025, 3, 1)}),
            PlanningRecord(id=3, title="Published", study_url="https://example.com",
                           deadlines={"production_date": date(2025, 1, 1)}),
            PlanningRecord(id=4, title="Today", deadlines={"production_date": TODAY}),
            PlanningRecord(id=5, title="Future", deadlines={"production_date": date(2025, 4, 1)}),
            PlanningRecord(id=6, title="Unscheduled"),
            PlanningRecord(id=7, title="Blank URL", study_url="   ",
                           deadlines={"production_date": date(2025, 2, 25)}),
        ]

        overdue = missing_press_releases(stories, TODAY)

        assert [item.story.id for item in overdue] == [1, 7, 2]
        assert [item.days_overdue for item in overdue] == [59, 8, 4]
        assert overdue[0].production_date == date(2025, 1, 5)

