"""Use case for the reviewer's queue of ungraded submissions."""

from dailyvocab.application.practice.protocols.submission_repository import (
    SubmissionRepositoryProtocol,
)
from dailyvocab.domain.practice.entities.submission import Submission


class ListPendingReviewsUseCase:
    def __init__(self, submission_repository: SubmissionRepositoryProtocol) -> None:
        self.submission_repository = submission_repository

    def list_pending(self, limit: int) -> list[Submission]:
        """Return up to `limit` pending submissions, oldest first."""
        return self.submission_repository.list_pending(limit)
