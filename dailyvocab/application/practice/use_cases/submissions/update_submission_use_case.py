"""Use case for editing a pending submission."""

from collections.abc import Sequence

import structlog

from dailyvocab.application.common.clock import ClockProtocol
from dailyvocab.application.common.events import publish_events
from dailyvocab.application.common.result import Failure, Result, Success
from dailyvocab.application.practice.protocols.submission_repository import (
    SubmissionRepositoryProtocol,
)
from dailyvocab.application.practice.use_cases.dtos import WordEntryData, to_word_entries
from dailyvocab.domain.common.exceptions import DomainError, NotFoundError, StateError
from dailyvocab.domain.common.value_objects.ids import SubmissionId, UserId
from dailyvocab.domain.practice.entities.submission import ReviewState, Submission

logger = structlog.get_logger(__name__)


class UpdateSubmissionUseCase:
    """Use case for replacing the entries of a learner's own pending submission."""

    def __init__(
        self,
        submission_repository: SubmissionRepositoryProtocol,
        clock: ClockProtocol,
    ) -> None:
        self.submission_repository = submission_repository
        self.clock = clock

    def update_submission(
        self,
        submission_id: int,
        learner_id: int,
        entries: Sequence[WordEntryData],
    ) -> Result[Submission, DomainError]:
        """
        Replace entries and refresh submitted_at.

        Args:
            submission_id: ID of the submission to edit
            learner_id: ID of the acting learner (must own the submission)
            entries: New vocabulary entries

        Returns:
            Success with the updated submission, or
            Failure(NotFoundError | StateError | ValidationError)
        """
        try:
            submission = self._update(submission_id, learner_id, entries)
        except DomainError as e:
            logger.info(
                "rejected_submission_update",
                submission_id=submission_id,
                error=type(e).__name__,
                reason=e.message,
            )
            return Failure(e)
        return Success(submission)

    def _update(
        self, submission_id: int, learner_id: int, entries: Sequence[WordEntryData]
    ) -> Submission:
        submission = self.submission_repository.find_by_id(SubmissionId(submission_id))
        # Someone else's submission is reported as missing, not forbidden
        if submission is None or submission.learner_id != UserId(learner_id):
            raise NotFoundError("Submission", submission_id)

        # State is checked before content: a reviewed record is locked whatever is sent
        if submission.is_reviewed:
            raise _reviewed_error()

        submission.replace_entries(to_word_entries(entries), submitted_at=self.clock.now())

        if not self.submission_repository.update_entries_if_pending(submission):
            # A review landed between our read and our write
            raise _reviewed_error()
        publish_events(submission.collect_events())

        logger.info(
            "updated_submission",
            submission_id=submission_id,
            learner_id=learner_id,
            entry_count=submission.entry_count,
        )
        return submission


def _reviewed_error() -> StateError:
    return StateError(
        "Submission",
        ReviewState.REVIEWED.value,
        "Reviewed submissions can no longer be edited",
    )
