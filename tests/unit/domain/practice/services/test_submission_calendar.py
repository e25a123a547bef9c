"""Tests for SubmissionCalendar domain service."""

from datetime import UTC, date, datetime

import pytest

from dailyvocab.domain.common.exceptions import ValidationError
from dailyvocab.domain.common.value_objects import SubmissionId, UserId
from dailyvocab.domain.identity.entities.user import Learner
from dailyvocab.domain.practice.entities.submission import Submission
from dailyvocab.domain.practice.entities.word_entry import WordEntry
from dailyvocab.domain.practice.services.submission_calendar import DayStatus, SubmissionCalendar

LEARNER = Learner(id=UserId(1), enrollment_start=date(2026, 3, 3))
TODAY = date(2026, 3, 10)
ENTRIES = [WordEntry(word="w", meaning="m", sentence="s", description="d")] * 5


def _make_submission(id: int, day: date, stars: int | None = None) -> Submission:
    return Submission.create_with_id(
        id=SubmissionId(id),
        learner_id=LEARNER.id,
        submission_date=day,
        entries=ENTRIES,
        required_entry_count=5,
        submitted_at=datetime(2026, 3, day.day, 9, tzinfo=UTC),
        stars=stars,
    )


class TestSubmissionCalendar:
    def test_build_month(self) -> None:
        submissions = [
            _make_submission(1, date(2026, 3, 4), stars=2),
            _make_submission(2, date(2026, 3, 5)),
        ]

        days = SubmissionCalendar().build_month(LEARNER, 2026, 3, submissions, TODAY)
        by_day = {d.date.day: d for d in days}

        assert len(days) == 31
        assert by_day[2].status is DayStatus.NOT_ENROLLED
        assert by_day[3].status is DayStatus.MISSED
        assert by_day[4].status is DayStatus.REVIEWED
        assert by_day[4].stars == 2
        assert by_day[5].status is DayStatus.PENDING
        assert by_day[6].status is DayStatus.MISSED
        assert by_day[10].status is DayStatus.DUE
        assert by_day[11].status is DayStatus.UPCOMING

    def test_submitted_today_is_pending_not_due(self) -> None:
        days = SubmissionCalendar().build_month(
            LEARNER, 2026, 3, [_make_submission(1, TODAY)], TODAY
        )
        assert days[9].status is DayStatus.PENDING

    def test_february_length(self) -> None:
        days = SubmissionCalendar().build_month(LEARNER, 2028, 2, [], TODAY)
        assert len(days) == 29

    @pytest.mark.parametrize("month", [0, 13])
    def test_invalid_month(self, month: int) -> None:
        with pytest.raises(ValidationError):
            SubmissionCalendar().build_month(LEARNER, 2026, month, [], TODAY)
