"""Use case for grading a submission."""

import structlog

from dailyvocab.application.common.clock import ClockProtocol
from dailyvocab.application.common.events import publish_events
from dailyvocab.application.common.result import Failure, Result, Success
from dailyvocab.application.practice.protocols.submission_repository import (
    SubmissionRepositoryProtocol,
)
from dailyvocab.domain.common.exceptions import DomainError, NotFoundError
from dailyvocab.domain.common.value_objects.ids import SubmissionId, UserId
from dailyvocab.domain.practice.entities.submission import Submission
from dailyvocab.domain.practice.rules import SubmissionRules

logger = structlog.get_logger(__name__)


class ReviewSubmissionUseCase:
    """
    Use case for reviewing submissions.

    Pending -> Reviewed and Reviewed -> Reviewed (re-grade) are both accepted.
    Whether this reviewer may grade this learner is decided upstream.
    """

    def __init__(
        self,
        submission_repository: SubmissionRepositoryProtocol,
        rules: SubmissionRules,
        clock: ClockProtocol,
    ) -> None:
        self.submission_repository = submission_repository
        self.rules = rules
        self.clock = clock

    def review_submission(
        self,
        submission_id: int,
        reviewer_id: int,
        stars: int,
        comment: str | None = None,
    ) -> Result[Submission, DomainError]:
        """
        Set stars and comment, overwriting any previous grade.

        Args:
            submission_id: ID of the submission
            reviewer_id: ID of the reviewer, kept for audit
            stars: Rating in [STAR_MIN, STAR_MAX]
            comment: Optional feedback

        Returns:
            Success with the reviewed submission, or Failure(NotFoundError | ValidationError)
        """
        try:
            submission = self.submission_repository.find_by_id(SubmissionId(submission_id))
            if submission is None:
                raise NotFoundError("Submission", submission_id)

            submission.review(
                reviewer_id=UserId(reviewer_id),
                stars=stars,
                comment=comment,
                reviewed_at=self.clock.now(),
                rules=self.rules,
            )
        except DomainError as e:
            logger.info(
                "rejected_review",
                submission_id=submission_id,
                error=type(e).__name__,
                reason=e.message,
            )
            return Failure(e)

        events = submission.collect_events()
        saved = self.submission_repository.save_review(submission)
        publish_events(events)

        logger.info(
            "reviewed_submission",
            submission_id=submission_id,
            reviewer_id=reviewer_id,
            stars=stars,
        )
        return Success(saved)
