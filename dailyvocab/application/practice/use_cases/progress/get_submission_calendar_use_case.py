"""Use case for the month view of a learner's submissions."""

import calendar
from datetime import date

from dailyvocab.application.common.clock import ClockProtocol
from dailyvocab.application.common.result import Failure, Result, Success
from dailyvocab.application.identity.services.learner_lookup_service import LearnerLookupService
from dailyvocab.application.practice.protocols.submission_repository import (
    SubmissionRepositoryProtocol,
)
from dailyvocab.domain.common.exceptions import DomainError, ValidationError
from dailyvocab.domain.practice.services.submission_calendar import (
    CalendarDay,
    SubmissionCalendar,
)


class GetSubmissionCalendarUseCase:
    def __init__(
        self,
        submission_repository: SubmissionRepositoryProtocol,
        learner_lookup: LearnerLookupService,
        submission_calendar: SubmissionCalendar,
        clock: ClockProtocol,
    ) -> None:
        self.submission_repository = submission_repository
        self.learner_lookup = learner_lookup
        self.submission_calendar = submission_calendar
        self.clock = clock

    def get_month(
        self, learner_id: int, year: int | None = None, month: int | None = None
    ) -> Result[list[CalendarDay], DomainError]:
        """Classify every day of a month; defaults to the current month."""
        today = self.clock.today()
        year = year or today.year
        month = month or today.month
        try:
            learner = self.learner_lookup.get_learner(learner_id)
            if not 1 <= month <= 12:
                raise ValidationError("Month must be between 1 and 12", field="month", value=month)
        except DomainError as e:
            return Failure(e)

        first = date(year, month, 1)
        last = date(year, month, calendar.monthrange(year, month)[1])
        submissions = self.submission_repository.list_by_learner(learner.id, first, last)
        return Success(
            self.submission_calendar.build_month(learner, year, month, submissions, today)
        )
