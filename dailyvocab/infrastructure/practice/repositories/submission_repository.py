"""
Domain-centric repository for the Submission aggregate.

Returns domain entities instead of ORM models.
Uses SubmissionMapper internally for conversions.
"""

import logging
from datetime import date

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from dailyvocab.domain.common.exceptions import ConflictError, NotFoundError
from dailyvocab.domain.common.value_objects.ids import SubmissionId, UserId
from dailyvocab.domain.practice.entities.submission import Submission
from dailyvocab.infrastructure.practice.mappers.submission_mapper import SubmissionMapper
from dailyvocab.models import Submission as SubmissionORM

logger = logging.getLogger(__name__)


class SubmissionRepository:
    """Repository for Submission persistence (domain-centric)."""

    def __init__(self, db: Session) -> None:
        """
        Initialize repository.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db
        self.mapper = SubmissionMapper()

    def find_by_id(self, submission_id: SubmissionId) -> Submission | None:
        orm_model = self.db.get(SubmissionORM, submission_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_learner_and_date(self, learner_id: UserId, day: date) -> Submission | None:
        stmt = select(SubmissionORM).where(
            SubmissionORM.learner_id == learner_id.value,
            SubmissionORM.submission_date == day,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def list_by_learner(self, learner_id: UserId, start: date, end: date) -> list[Submission]:
        stmt = (
            select(SubmissionORM)
            .where(
                SubmissionORM.learner_id == learner_id.value,
                SubmissionORM.submission_date >= start,
                SubmissionORM.submission_date <= end,
            )
            .order_by(SubmissionORM.submission_date.asc())
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def list_submitted_dates(self, learner_id: UserId, start: date, end: date) -> set[date]:
        """
        Fetch submitted days in a single SELECT.

        Reading only committed rows in one statement gives the penalty scan
        a consistent snapshot of the learner's history.
        """
        stmt = select(SubmissionORM.submission_date).where(
            SubmissionORM.learner_id == learner_id.value,
            SubmissionORM.submission_date >= start,
            SubmissionORM.submission_date <= end,
        )
        return set(self.db.execute(stmt).scalars().all())

    def list_pending(self, limit: int) -> list[Submission]:
        stmt = (
            select(SubmissionORM)
            .where(SubmissionORM.stars.is_(None))
            .order_by(SubmissionORM.submitted_at.asc(), SubmissionORM.id.asc())
            .limit(limit)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def insert(self, submission: Submission) -> Submission:
        """
        Insert a new submission.

        Raises:
            ConflictError: If the (learner, date) unique constraint rejects the row
        """
        orm_model = self.mapper.to_orm(submission)
        self.db.add(orm_model)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.info(
                f"Duplicate submission for learner {submission.learner_id} "
                f"on {submission.submission_date}: {e.orig!s}"
            )
            raise ConflictError(
                f"A submission for {submission.submission_date.isoformat()} already exists",
                {
                    "learner_id": submission.learner_id.value,
                    "submission_date": submission.submission_date.isoformat(),
                },
            ) from e
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def update_entries_if_pending(self, submission: Submission) -> bool:
        """
        Compare-and-set on stars IS NULL.

        Returns:
            False if the row was reviewed (or vanished) since it was read
        """
        stmt = (
            update(SubmissionORM)
            .where(
                SubmissionORM.id == submission.id.value,
                SubmissionORM.stars.is_(None),
            )
            .values(
                entries=self.mapper.entries_to_json(submission),
                submitted_at=submission.submitted_at,
            )
            .execution_options(synchronize_session="fetch")
        )
        result = self.db.execute(stmt)
        self.db.commit()
        return result.rowcount == 1

    def save_review(self, submission: Submission) -> Submission:
        """
        Write the grade unconditionally; re-grading is allowed.

        Raises:
            NotFoundError: If the row does not exist
        """
        stmt = (
            update(SubmissionORM)
            .where(SubmissionORM.id == submission.id.value)
            .values(
                stars=submission.stars,
                comment=submission.comment,
                reviewer_id=submission.reviewer_id.value if submission.reviewer_id else None,
                reviewed_at=submission.reviewed_at,
            )
            .execution_options(synchronize_session="fetch")
        )
        result = self.db.execute(stmt)
        self.db.commit()
        if result.rowcount != 1:
            raise NotFoundError("Submission", submission.id.value)

        orm_model = self.db.get(SubmissionORM, submission.id.value)
        if orm_model is None:
            raise NotFoundError("Submission", submission.id.value)
        return self.mapper.to_domain(orm_model)
