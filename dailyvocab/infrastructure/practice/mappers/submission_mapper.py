"""Mapper for Submission ORM ↔ Domain conversion."""

from dailyvocab.domain.common.value_objects import SubmissionId, UserId
from dailyvocab.domain.practice.entities.submission import Submission
from dailyvocab.domain.practice.entities.word_entry import WordEntry
from dailyvocab.models import Submission as SubmissionORM


class SubmissionMapper:
    """Mapper for Submission ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: SubmissionORM) -> Submission:
        """Convert ORM model to domain entity."""
        return Submission.create_with_id(
            id=SubmissionId(orm_model.id),
            learner_id=UserId(orm_model.learner_id),
            submission_date=orm_model.submission_date,
            entries=[WordEntry.from_primitive(e) for e in orm_model.entries],
            required_entry_count=orm_model.required_entry_count,
            submitted_at=orm_model.submitted_at,
            stars=orm_model.stars,
            comment=orm_model.comment,
            reviewer_id=UserId(orm_model.reviewer_id) if orm_model.reviewer_id else None,
            reviewed_at=orm_model.reviewed_at,
        )

    def to_orm(self, domain_entity: Submission) -> SubmissionORM:
        """Convert a new domain entity to an ORM model."""
        return SubmissionORM(
            id=domain_entity.id.value if domain_entity.id.is_persisted else None,
            learner_id=domain_entity.learner_id.value,
            submission_date=domain_entity.submission_date,
            entries=self.entries_to_json(domain_entity),
            required_entry_count=domain_entity.required_entry_count,
            submitted_at=domain_entity.submitted_at,
            stars=domain_entity.stars,
            comment=domain_entity.comment,
            reviewer_id=domain_entity.reviewer_id.value if domain_entity.reviewer_id else None,
            reviewed_at=domain_entity.reviewed_at,
        )

    @staticmethod
    def entries_to_json(domain_entity: Submission) -> list[dict[str, str]]:
        return [entry.to_primitive() for entry in domain_entity.entries]
