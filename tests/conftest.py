"""Pytest configuration and fixtures."""

from collections.abc import Callable, Generator
from datetime import UTC, date, datetime, time
from typing import Any

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from dailyvocab import models
from dailyvocab.core import container
from dailyvocab.database import Base, get_db
from dailyvocab.main import app

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# One shared connection, since TestClient runs sync endpoints in a worker thread
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

# "Today" for every API test
TODAY = date(2026, 3, 10)
ENROLLED_ON = date(2026, 3, 1)


class FixedClock:
    """Clock frozen at a given day (noon UTC)."""

    def __init__(self, today: date) -> None:
        self._today = today

    def today(self) -> date:
        return self._today

    def now(self) -> datetime:
        return datetime.combine(self._today, time(12, 0), tzinfo=UTC)


def make_entries(count: int, prefix: str = "word") -> list[dict[str, str]]:
    """Build a JSON payload of complete vocabulary entries."""
    return [
        {
            "word": f"{prefix}{i}",
            "meaning": f"meaning of {prefix}{i}",
            "sentence": f"A sentence using {prefix}{i}.",
            "description": "noun",
        }
        for i in range(1, count + 1)
    ]


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def fixed_clock() -> Generator[FixedClock, None, None]:
    clock = FixedClock(TODAY)
    container.clock.override(clock)
    yield clock
    container.clock.reset_override()


@pytest.fixture
def client(db_session: Session, fixed_clock: FixedClock) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def test_learner(db_session: Session) -> models.User:
    """Create a student enrolled on ENROLLED_ON."""
    user = models.User(
        email="learner@example.com",
        name="Test Learner",
        role="student",
        enrolled_on=ENROLLED_ON,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def other_learner(db_session: Session) -> models.User:
    user = models.User(
        email="other@example.com",
        name="Other Learner",
        role="student",
        enrolled_on=ENROLLED_ON,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def test_teacher(db_session: Session) -> models.User:
    user = models.User(
        email="teacher@example.com",
        name="Test Teacher",
        role="teacher",
        enrolled_on=ENROLLED_ON,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def as_user() -> Callable[[models.User], dict[str, str]]:
    """Headers the upstream gateway would set for the given user."""

    def headers(user: models.User) -> dict[str, str]:
        return {"X-User-Id": str(user.id)}

    return headers


@pytest.fixture
def create_submission(
    db_session: Session,
) -> Callable[..., models.Submission]:
    """Insert a submission row directly, bypassing the penalty rules."""

    def _create(
        learner: models.User,
        day: date,
        entry_count: int = 5,
        stars: int | None = None,
        submitted_at: datetime | None = None,
    ) -> models.Submission:
        submission = models.Submission(
            learner_id=learner.id,
            submission_date=day,
            entries=make_entries(entry_count),
            required_entry_count=5,
            submitted_at=submitted_at or datetime.combine(day, time(9, 0), tzinfo=UTC),
            stars=stars,
        )
        db_session.add(submission)
        db_session.commit()
        db_session.refresh(submission)
        return submission

    return _create
