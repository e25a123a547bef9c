"""Tests for SubmissionWindowTracker domain service."""

from datetime import date

import pytest

from dailyvocab.domain.common.exceptions import ValidationError
from dailyvocab.domain.common.value_objects import UserId
from dailyvocab.domain.identity.entities.user import Learner
from dailyvocab.domain.practice.services.submission_window import SubmissionWindowTracker

LEARNER = Learner(id=UserId(1), enrollment_start=date(2026, 3, 1))
TODAY = date(2026, 3, 10)


class TestSubmissionWindowTracker:
    def test_is_due(self) -> None:
        tracker = SubmissionWindowTracker(today=TODAY)
        assert tracker.is_due(LEARNER, date(2026, 3, 1))
        assert tracker.is_due(LEARNER, TODAY)
        assert not tracker.is_due(LEARNER, date(2026, 2, 28))
        assert not tracker.is_due(LEARNER, date(2026, 3, 11))

    def test_deadline_passes_at_end_of_day(self) -> None:
        tracker = SubmissionWindowTracker(today=TODAY)
        assert tracker.has_deadline_passed(date(2026, 3, 9))
        assert not tracker.has_deadline_passed(TODAY)

    def test_find_missed_dates(self) -> None:
        tracker = SubmissionWindowTracker(today=TODAY)
        submitted = {date(2026, 3, 2), date(2026, 3, 5), TODAY}

        missed = list(
            tracker.find_missed_dates(LEARNER, date(2026, 2, 20), date(2026, 3, 31), submitted)
        )

        assert missed == [
            date(2026, 3, 1),
            date(2026, 3, 3),
            date(2026, 3, 4),
            date(2026, 3, 6),
            date(2026, 3, 7),
            date(2026, 3, 8),
            date(2026, 3, 9),
        ]

    def test_today_is_never_missed(self) -> None:
        tracker = SubmissionWindowTracker(today=TODAY)
        assert list(tracker.find_missed_dates(LEARNER, TODAY, TODAY, set())) == []

    def test_range_entirely_before_enrollment(self) -> None:
        tracker = SubmissionWindowTracker(today=TODAY)
        missed = tracker.find_missed_dates(LEARNER, date(2026, 1, 1), date(2026, 1, 31), set())
        assert list(missed) == []

    def test_inverted_range_fails_immediately(self) -> None:
        tracker = SubmissionWindowTracker(today=TODAY)
        with pytest.raises(ValidationError):
            tracker.find_missed_dates(LEARNER, date(2026, 3, 9), date(2026, 3, 1), set())

    def test_generator_is_lazy(self) -> None:
        tracker = SubmissionWindowTracker(today=TODAY)
        missed = tracker.find_missed_dates(LEARNER, date(2026, 3, 1), date(2026, 3, 9), set())
        assert next(missed) == date(2026, 3, 1)
        assert next(missed) == date(2026, 3, 2)
