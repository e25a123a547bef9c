"""Tests for ProgressAggregator domain service."""

from datetime import UTC, date, datetime

from dailyvocab.domain.common.value_objects import SubmissionId, UserId
from dailyvocab.domain.identity.entities.user import Learner
from dailyvocab.domain.practice.entities.submission import Submission
from dailyvocab.domain.practice.entities.word_entry import WordEntry
from dailyvocab.domain.practice.rules import SubmissionRules
from dailyvocab.domain.practice.services.progress_aggregator import ProgressAggregator

LEARNER = Learner(id=UserId(1), enrollment_start=date(2026, 3, 1))
ENTRIES = [WordEntry(word="w", meaning="m", sentence="s", description="d")] * 5


def _make_submission(
    id: int, day: date, stars: int | None = None, learner_id: int = 1
) -> Submission:
    return Submission.create_with_id(
        id=SubmissionId(id),
        learner_id=UserId(learner_id),
        submission_date=day,
        entries=ENTRIES,
        required_entry_count=5,
        submitted_at=datetime(day.year, day.month, day.day, 9, tzinfo=UTC),
        stars=stars,
    )


class TestWeeklyStats:
    def test_no_records(self) -> None:
        aggregator = ProgressAggregator(SubmissionRules())
        stats = aggregator.compute_weekly_stats(LEARNER, date(2026, 3, 10), [])
        assert stats.completed_count == 0
        assert stats.average_stars == 0
        assert stats.current_streak == 0
        assert stats.window_start == date(2026, 3, 4)
        assert stats.window_end == date(2026, 3, 10)

    def test_window_counts_and_average(self) -> None:
        aggregator = ProgressAggregator(SubmissionRules())
        history = [
            _make_submission(1, date(2026, 3, 2), stars=3),  # outside window
            _make_submission(2, date(2026, 3, 4), stars=3),
            _make_submission(3, date(2026, 3, 6), stars=1),
            _make_submission(4, date(2026, 3, 9)),  # pending, not averaged
        ]

        stats = aggregator.compute_weekly_stats(LEARNER, date(2026, 3, 10), history)

        assert stats.completed_count == 3
        assert stats.average_stars == 2.0

    def test_other_learners_ignored(self) -> None:
        aggregator = ProgressAggregator(SubmissionRules())
        history = [_make_submission(1, date(2026, 3, 10), stars=3, learner_id=2)]
        stats = aggregator.compute_weekly_stats(LEARNER, date(2026, 3, 10), history)
        assert stats.completed_count == 0

    def test_custom_window(self) -> None:
        aggregator = ProgressAggregator(SubmissionRules(stats_window_days=3))
        history = [_make_submission(i, date(2026, 3, i)) for i in range(1, 11)]
        stats = aggregator.compute_weekly_stats(LEARNER, date(2026, 3, 10), history)
        assert stats.completed_count == 3
        assert stats.current_streak == 10


class TestStreak:
    def test_streak_including_as_of(self) -> None:
        submitted = {date(2026, 3, 8), date(2026, 3, 9), date(2026, 3, 10)}
        assert ProgressAggregator.compute_streak(submitted, date(2026, 3, 10)) == 3

    def test_streak_from_latest_day_when_as_of_empty(self) -> None:
        submitted = {date(2026, 3, 7), date(2026, 3, 8), date(2026, 3, 9)}
        assert ProgressAggregator.compute_streak(submitted, date(2026, 3, 10)) == 3

    def test_streak_stops_at_gap(self) -> None:
        submitted = {date(2026, 3, 5), date(2026, 3, 7), date(2026, 3, 8)}
        assert ProgressAggregator.compute_streak(submitted, date(2026, 3, 8)) == 2

    def test_future_records_ignored(self) -> None:
        submitted = {date(2026, 3, 12)}
        assert ProgressAggregator.compute_streak(submitted, date(2026, 3, 10)) == 0


class TestOverview:
    def test_overview_counts(self) -> None:
        history = [
            _make_submission(1, date(2026, 3, 1), stars=2),
            _make_submission(2, date(2026, 3, 2), stars=3),
            _make_submission(3, date(2026, 3, 3)),
        ]
        overview = ProgressAggregator.compute_overview(history)
        assert overview.total_submissions == 3
        assert overview.reviewed_count == 2
        assert overview.pending_count == 1
        assert overview.average_stars == 2.5
