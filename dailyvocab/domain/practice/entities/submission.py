"""
Submission aggregate root: one learner's vocabulary task for one day.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum

from dailyvocab.domain.common.aggregate_root import AggregateRoot
from dailyvocab.domain.common.exceptions import StateError, ValidationError
from dailyvocab.domain.common.value_objects import SubmissionId, UserId
from dailyvocab.domain.practice.entities.word_entry import WordEntry
from dailyvocab.domain.practice.events import (
    SubmissionCreated,
    SubmissionReviewed,
    SubmissionUpdated,
)
from dailyvocab.domain.practice.rules import SubmissionRules

MAX_COMMENT_LENGTH = 2000


class ReviewState(StrEnum):
    PENDING = "pending"
    REVIEWED = "reviewed"


def validate_entries(
    entries: Sequence[WordEntry], required_entry_count: int
) -> tuple[WordEntry, ...]:
    """
    Check an entry list against the required count.

    Field completeness is already guaranteed by WordEntry itself.

    Raises:
        ValidationError: If an item is not a WordEntry or there are too few entries
    """
    for index, entry in enumerate(entries):
        if not isinstance(entry, WordEntry):
            raise ValidationError(
                f"Entry {index + 1} is not a vocabulary entry", field="entries", value=index
            )
    if len(entries) < required_entry_count:
        raise ValidationError(
            f"At least {required_entry_count} vocabulary entries are required, "
            f"got {len(entries)}",
            field="entries",
            value=len(entries),
        )
    return tuple(entries)


def validate_stars(stars: object, rules: SubmissionRules) -> int:
    """
    Raises:
        ValidationError: If stars is not an integer inside the configured range
    """
    if not isinstance(stars, int) or isinstance(stars, bool):
        raise ValidationError("Stars must be an integer", field="stars", value=stars)
    if not rules.star_min <= stars <= rules.star_max:
        raise ValidationError(
            f"Stars must be between {rules.star_min} and {rules.star_max}",
            field="stars",
            value=stars,
        )
    return stars


@dataclass
class Submission(AggregateRoot[SubmissionId]):
    """
    Daily vocabulary submission.

    Business Rules:
    - One submission per learner per date (enforced by the repository)
    - required_entry_count is a snapshot taken at creation and never recomputed
    - len(entries) >= required_entry_count at all times
    - Entries can only be replaced while the submission is pending
    - Reviewing sets stars/comment and may be repeated (re-grade)
    """

    id: SubmissionId
    learner_id: UserId
    submission_date: date
    entries: tuple[WordEntry, ...]
    required_entry_count: int
    submitted_at: datetime
    stars: int | None = None
    comment: str | None = None
    reviewer_id: UserId | None = None
    reviewed_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.required_entry_count < 1:
            raise ValidationError(
                "Required entry count must be at least 1",
                field="required_entry_count",
                value=self.required_entry_count,
            )
        self.entries = validate_entries(self.entries, self.required_entry_count)

    @property
    def state(self) -> ReviewState:
        return ReviewState.PENDING if self.stars is None else ReviewState.REVIEWED

    @property
    def is_reviewed(self) -> bool:
        return self.stars is not None

    @property
    def entry_count(self) -> int:
        return len(self.entries)

    def replace_entries(self, entries: Sequence[WordEntry], submitted_at: datetime) -> None:
        """
        Replace the learner's entries and refresh the submission time.

        Args:
            entries: New entry list
            submitted_at: Time of the edit

        Raises:
            StateError: If the submission has already been reviewed
            ValidationError: If the entries fall short of the frozen required count
        """
        if self.is_reviewed:
            raise StateError(
                "Submission",
                self.state.value,
                "Reviewed submissions can no longer be edited",
            )
        self.entries = validate_entries(entries, self.required_entry_count)
        self.submitted_at = submitted_at
        self._record_event(
            SubmissionUpdated(
                submission_id=self.id,
                learner_id=self.learner_id,
                entry_count=len(self.entries),
            )
        )

    def review(
        self,
        reviewer_id: UserId,
        stars: int,
        comment: str | None,
        reviewed_at: datetime,
        rules: SubmissionRules,
    ) -> None:
        """
        Grade the submission, overwriting any previous grade.

        Raises:
            ValidationError: If stars is out of range or the comment is too long
        """
        stars = validate_stars(stars, rules)
        if comment is not None:
            comment = comment.strip() or None
        if comment is not None and len(comment) > MAX_COMMENT_LENGTH:
            raise ValidationError(
                f"Comment cannot exceed {MAX_COMMENT_LENGTH} characters", field="comment"
            )

        previous_stars = self.stars
        self.stars = stars
        self.comment = comment
        self.reviewer_id = reviewer_id
        self.reviewed_at = reviewed_at
        self._record_event(
            SubmissionReviewed(
                submission_id=self.id,
                learner_id=self.learner_id,
                reviewer_id=reviewer_id,
                stars=stars,
                previous_stars=previous_stars,
            )
        )

    @classmethod
    def create(
        cls,
        learner_id: UserId,
        submission_date: date,
        entries: Sequence[WordEntry],
        required_entry_count: int,
        submitted_at: datetime,
    ) -> "Submission":
        """
        Create a new pending submission (ID will be 0 until persisted).

        Raises:
            ValidationError: If there are fewer entries than required
        """
        submission = cls(
            id=SubmissionId.generate(),
            learner_id=learner_id,
            submission_date=submission_date,
            entries=tuple(entries),
            required_entry_count=required_entry_count,
            submitted_at=submitted_at,
        )
        submission._record_event(
            SubmissionCreated(
                learner_id=learner_id,
                submission_date=submission_date,
                entry_count=len(submission.entries),
                required_entry_count=required_entry_count,
            )
        )
        return submission

    @classmethod
    def create_with_id(
        cls,
        id: SubmissionId,
        learner_id: UserId,
        submission_date: date,
        entries: Sequence[WordEntry],
        required_entry_count: int,
        submitted_at: datetime,
        stars: int | None = None,
        comment: str | None = None,
        reviewer_id: UserId | None = None,
        reviewed_at: datetime | None = None,
    ) -> "Submission":
        """Reconstitute a submission from persistence."""
        return cls(
            id=id,
            learner_id=learner_id,
            submission_date=submission_date,
            entries=tuple(entries),
            required_entry_count=required_entry_count,
            submitted_at=submitted_at,
            stars=stars,
            comment=comment,
            reviewer_id=reviewer_id,
            reviewed_at=reviewed_at,
        )
