"""Domain service producing the per-day state behind the dashboard calendar."""

import calendar
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from dailyvocab.domain.common.exceptions import ValidationError
from dailyvocab.domain.identity.entities.user import Learner
from dailyvocab.domain.practice.entities.submission import Submission


class DayStatus(StrEnum):
    NOT_ENROLLED = "not_enrolled"
    UPCOMING = "upcoming"
    DUE = "due"
    MISSED = "missed"
    PENDING = "pending"
    REVIEWED = "reviewed"


@dataclass(frozen=True)
class CalendarDay:
    date: date
    status: DayStatus
    stars: int | None = None


class SubmissionCalendar:
    """Classifies each day of a month for one learner."""

    @staticmethod
    def classify(
        learner: Learner, day: date, submission: Submission | None, today: date
    ) -> DayStatus:
        if day < learner.enrollment_start:
            return DayStatus.NOT_ENROLLED
        if submission is not None:
            return DayStatus.REVIEWED if submission.is_reviewed else DayStatus.PENDING
        if day > today:
            return DayStatus.UPCOMING
        if day == today:
            return DayStatus.DUE
        return DayStatus.MISSED

    def build_month(
        self,
        learner: Learner,
        year: int,
        month: int,
        submissions: Iterable[Submission],
        today: date,
    ) -> list[CalendarDay]:
        """
        Build one CalendarDay per day of the month.

        Raises:
            ValidationError: If month is not in 1..12
        """
        if not 1 <= month <= 12:
            raise ValidationError("Month must be between 1 and 12", field="month", value=month)

        by_date = {s.submission_date: s for s in submissions if s.learner_id == learner.id}
        _, days_in_month = calendar.monthrange(year, month)

        days: list[CalendarDay] = []
        for day_number in range(1, days_in_month + 1):
            day = date(year, month, day_number)
            submission = by_date.get(day)
            days.append(
                CalendarDay(
                    date=day,
                    status=self.classify(learner, day, submission, today),
                    stars=submission.stars if submission else None,
                )
            )
        return days
