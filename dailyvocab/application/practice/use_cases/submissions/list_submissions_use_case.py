"""Use case for reading a learner's submission history."""

from datetime import date

from dailyvocab.application.common.clock import ClockProtocol
from dailyvocab.application.common.result import Failure, Result, Success
from dailyvocab.application.identity.services.learner_lookup_service import LearnerLookupService
from dailyvocab.application.practice.protocols.submission_repository import (
    SubmissionRepositoryProtocol,
)
from dailyvocab.domain.common.exceptions import DomainError, NotFoundError, ValidationError
from dailyvocab.domain.common.value_objects.ids import SubmissionId
from dailyvocab.domain.practice.entities.submission import Submission


class ListSubmissionsUseCase:
    def __init__(
        self,
        submission_repository: SubmissionRepositoryProtocol,
        learner_lookup: LearnerLookupService,
        clock: ClockProtocol,
    ) -> None:
        self.submission_repository = submission_repository
        self.learner_lookup = learner_lookup
        self.clock = clock

    def list_submissions(
        self, learner_id: int, start: date | None = None, end: date | None = None
    ) -> Result[list[Submission], DomainError]:
        """
        List submissions ascending by date.

        Args:
            learner_id: ID of the learner
            start: First day (inclusive), defaults to the enrollment start
            end: Last day (inclusive), defaults to today
        """
        try:
            learner = self.learner_lookup.get_learner(learner_id)
        except DomainError as e:
            return Failure(e)

        start = start or learner.enrollment_start
        end = end or self.clock.today()
        if start > end:
            return Failure(
                ValidationError(
                    "Start must not be after end", field="start", value=start.isoformat()
                )
            )
        return Success(self.submission_repository.list_by_learner(learner.id, start, end))

    def get_submission(self, submission_id: int) -> Result[Submission, DomainError]:
        submission = self.submission_repository.find_by_id(SubmissionId(submission_id))
        if submission is None:
            return Failure(NotFoundError("Submission", submission_id))
        return Success(submission)
