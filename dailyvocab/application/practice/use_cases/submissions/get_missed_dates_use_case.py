"""Use case for listing the days a learner missed."""

from datetime import date

from dailyvocab.application.common.clock import ClockProtocol
from dailyvocab.application.common.result import Failure, Result, Success
from dailyvocab.application.identity.services.learner_lookup_service import LearnerLookupService
from dailyvocab.application.practice.protocols.submission_repository import (
    SubmissionRepositoryProtocol,
)
from dailyvocab.domain.common.exceptions import DomainError
from dailyvocab.domain.practice.services.submission_window import SubmissionWindowTracker


class GetMissedDatesUseCase:
    def __init__(
        self,
        submission_repository: SubmissionRepositoryProtocol,
        learner_lookup: LearnerLookupService,
        clock: ClockProtocol,
    ) -> None:
        self.submission_repository = submission_repository
        self.learner_lookup = learner_lookup
        self.clock = clock

    def get_missed_dates(
        self, learner_id: int, start: date, end: date
    ) -> Result[list[date], DomainError]:
        """
        List missed days in [start, end], ascending.

        Returns:
            Success with the dates, or Failure(NotFoundError | ValidationError)
        """
        try:
            learner = self.learner_lookup.get_learner(learner_id)
            tracker = SubmissionWindowTracker(today=self.clock.today())
            submitted = self.submission_repository.list_submitted_dates(learner.id, start, end)
            return Success(list(tracker.find_missed_dates(learner, start, end, submitted)))
        except DomainError as e:
            return Failure(e)
