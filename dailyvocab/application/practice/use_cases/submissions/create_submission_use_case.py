"""Use case for submitting the daily vocabulary task."""

from collections.abc import Sequence
from datetime import date, timedelta

import structlog

from dailyvocab.application.common.clock import ClockProtocol
from dailyvocab.application.common.events import publish_events
from dailyvocab.application.common.result import Failure, Result, Success
from dailyvocab.application.identity.services.learner_lookup_service import LearnerLookupService
from dailyvocab.application.practice.protocols.submission_repository import (
    SubmissionRepositoryProtocol,
)
from dailyvocab.application.practice.use_cases.dtos import WordEntryData, to_word_entries
from dailyvocab.domain.common.exceptions import ConflictError, DomainError, ValidationError
from dailyvocab.domain.practice.entities.submission import Submission
from dailyvocab.domain.practice.services.penalty_accrual import PenaltyAccrualEngine
from dailyvocab.domain.practice.services.submission_window import SubmissionWindowTracker

logger = structlog.get_logger(__name__)


class CreateSubmissionUseCase:
    """Use case for creating a learner's submission for a day."""

    def __init__(
        self,
        submission_repository: SubmissionRepositoryProtocol,
        learner_lookup: LearnerLookupService,
        penalty_engine: PenaltyAccrualEngine,
        clock: ClockProtocol,
    ) -> None:
        self.submission_repository = submission_repository
        self.learner_lookup = learner_lookup
        self.penalty_engine = penalty_engine
        self.clock = clock

    def create_submission(
        self,
        learner_id: int,
        entries: Sequence[WordEntryData],
        submission_date: date | None = None,
    ) -> Result[Submission, DomainError]:
        """
        Create the submission for (learner, day).

        The required entry count is computed here, once, and frozen on the
        record.

        Args:
            learner_id: ID of the submitting learner
            entries: Vocabulary entries
            submission_date: Day the submission is for, defaults to today

        Returns:
            Success with the persisted submission, or
            Failure(NotFoundError | ValidationError | ConflictError)
        """
        try:
            submission = self._create(learner_id, entries, submission_date)
        except DomainError as e:
            logger.info(
                "rejected_submission",
                learner_id=learner_id,
                error=type(e).__name__,
                reason=e.message,
            )
            return Failure(e)
        return Success(submission)

    def _create(
        self,
        learner_id: int,
        entries: Sequence[WordEntryData],
        submission_date: date | None,
    ) -> Submission:
        learner = self.learner_lookup.get_learner(learner_id)
        tracker = SubmissionWindowTracker(today=self.clock.today())
        day = submission_date or tracker.today

        if not tracker.is_due(learner, day):
            raise ValidationError(
                "Submissions are only accepted from enrollment up to today",
                field="submission_date",
                value=day.isoformat(),
            )

        if self.submission_repository.find_by_learner_and_date(learner.id, day) is not None:
            raise ConflictError(
                f"A submission for {day.isoformat()} already exists",
                {"learner_id": learner_id, "submission_date": day.isoformat()},
            )

        word_entries = to_word_entries(entries)
        submitted = self.submission_repository.list_submitted_dates(
            learner.id, learner.enrollment_start, day - timedelta(days=1)
        )
        required = self.penalty_engine.compute_required_entry_count(learner, day, submitted)

        submission = Submission.create(
            learner_id=learner.id,
            submission_date=day,
            entries=word_entries,
            required_entry_count=required,
            submitted_at=self.clock.now(),
        )
        events = submission.collect_events()

        # Unique (learner, date) constraint decides racing creators
        saved = self.submission_repository.insert(submission)
        publish_events(events, submission_id=saved.id.value)

        logger.info(
            "created_submission",
            submission_id=saved.id.value,
            learner_id=learner_id,
            submission_date=day.isoformat(),
            entry_count=saved.entry_count,
            required_entry_count=required,
        )
        return saved
