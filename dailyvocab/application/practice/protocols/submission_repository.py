"""Protocol for the submission record store."""

from datetime import date
from typing import Protocol

from dailyvocab.domain.common.value_objects.ids import SubmissionId, UserId
from dailyvocab.domain.practice.entities.submission import Submission


class SubmissionRepositoryProtocol(Protocol):
    """
    Record store for daily submissions.

    Records are append-only: there is no delete. Implementations must make
    insert and update_entries_if_pending atomic with respect to concurrent
    callers.
    """

    def find_by_id(self, submission_id: SubmissionId) -> Submission | None:
        """Find a submission by ID."""
        ...

    def find_by_learner_and_date(self, learner_id: UserId, day: date) -> Submission | None:
        """Find the submission a learner made for a given day."""
        ...

    def list_by_learner(self, learner_id: UserId, start: date, end: date) -> list[Submission]:
        """
        List a learner's submissions with start <= submission_date <= end.

        Returns:
            Submissions ordered by submission_date ascending
        """
        ...

    def list_submitted_dates(self, learner_id: UserId, start: date, end: date) -> set[date]:
        """Return the days in [start, end] that have a submission, read in one query."""
        ...

    def list_pending(self, limit: int) -> list[Submission]:
        """
        List unreviewed submissions across all learners.

        Returns:
            Oldest submitted_at first
        """
        ...

    def insert(self, submission: Submission) -> Submission:
        """
        Persist a new submission.

        Returns:
            Saved submission with its database-generated id

        Raises:
            ConflictError: If the learner already has a submission for that day
        """
        ...

    def update_entries_if_pending(self, submission: Submission) -> bool:
        """
        Write entries and submitted_at, but only while stars is still NULL in storage.

        Returns:
            True if the row was updated, False if it was reviewed in the meantime
        """
        ...

    def save_review(self, submission: Submission) -> Submission:
        """Write stars, comment, reviewer and review time."""
        ...
