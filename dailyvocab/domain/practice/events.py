"""Domain events raised by the Submission aggregate."""

from dataclasses import dataclass
from datetime import date

from dailyvocab.domain.common.domain_event import DomainEvent
from dailyvocab.domain.common.value_objects import SubmissionId, UserId


@dataclass(frozen=True, kw_only=True)
class SubmissionCreated(DomainEvent):
    learner_id: UserId
    submission_date: date
    entry_count: int
    required_entry_count: int


@dataclass(frozen=True, kw_only=True)
class SubmissionUpdated(DomainEvent):
    submission_id: SubmissionId
    learner_id: UserId
    entry_count: int


@dataclass(frozen=True, kw_only=True)
class SubmissionReviewed(DomainEvent):
    """Audit record of a grading action, including re-grades."""

    submission_id: SubmissionId
    learner_id: UserId
    reviewer_id: UserId
    stars: int
    previous_stars: int | None
