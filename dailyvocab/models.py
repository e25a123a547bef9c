"""Database models."""

from datetime import date, datetime
from typing import Any

from sqlalchemy import (
    JSON,
    CheckConstraint,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dailyvocab.database import Base


class User(Base):
    """Dashboard user: student, teacher or admin."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    email: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    role: Mapped[str] = mapped_column(String(20), nullable=False, default="student")
    enrolled_on: Mapped[date] = mapped_column(Date, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    submissions: Mapped[list["Submission"]] = relationship(
        back_populates="learner", foreign_keys="Submission.learner_id"
    )

    __table_args__ = (
        CheckConstraint("role IN ('student', 'teacher', 'admin')", name="ck_users_role"),
    )

    def __repr__(self) -> str:
        """String representation of User."""
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"


class Submission(Base):
    """One learner's daily vocabulary task. Rows are never deleted."""

    __tablename__ = "submissions"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    learner_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    submission_date: Mapped[date] = mapped_column(Date, index=True, nullable=False)
    entries: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False)
    required_entry_count: Mapped[int] = mapped_column(Integer, nullable=False)
    submitted_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    stars: Mapped[int | None] = mapped_column(Integer, nullable=True)
    comment: Mapped[str | None] = mapped_column(Text, nullable=True)
    reviewer_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )
    reviewed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    learner: Mapped[User] = relationship(back_populates="submissions", foreign_keys=[learner_id])

    __table_args__ = (
        UniqueConstraint("learner_id", "submission_date", name="uq_submission_learner_date"),
        CheckConstraint("required_entry_count >= 1", name="ck_submissions_required_count"),
        # Review queue scans unreviewed rows oldest first
        Index(
            "ix_submissions_pending_submitted_at",
            "submitted_at",
            postgresql_where=text("stars IS NULL"),
        ),
    )

    def __repr__(self) -> str:
        """String representation of Submission."""
        return (
            f"<Submission(id={self.id}, learner_id={self.learner_id}, "
            f"date={self.submission_date}, stars={self.stars})>"
        )
