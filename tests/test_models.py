"""Tests for the ORM schema matching the migrations."""

from sqlalchemy import inspect
from sqlalchemy.orm import Session

from dailyvocab import models


def test_pending_review_index_is_declared() -> None:
    indexes = {i.name: i for i in models.Submission.__table__.indexes}
    index = indexes["ix_submissions_pending_submitted_at"]
    assert [c.name for c in index.columns] == ["submitted_at"]
    assert str(index.dialect_options["postgresql"]["where"]) == "stars IS NULL"


def test_pending_review_index_is_created(db_session: Session) -> None:
    names = {i["name"] for i in inspect(db_session.get_bind()).get_indexes("submissions")}
    assert "ix_submissions_pending_submitted_at" in names
