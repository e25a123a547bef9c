"""Tests for review API endpoints."""

from collections.abc import Callable
from datetime import UTC, date, datetime

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from dailyvocab import models

Headers = Callable[[models.User], dict[str, str]]


class TestReviewSubmission:
    """Test suite for POST /submissions/:id/review endpoint."""

    def test_review_success(
        self,
        client: TestClient,
        db_session: Session,
        test_learner: models.User,
        test_teacher: models.User,
        as_user: Headers,
        create_submission,
    ) -> None:
        submission = create_submission(test_learner, date(2026, 3, 9))

        response = client.post(
            f"/api/v1/submissions/{submission.id}/review",
            json={"stars": 2, "comment": "Nice sentences"},
            headers=as_user(test_teacher),
        )

        assert response.status_code == status.HTTP_200_OK
        reviewed = response.json()["submission"]
        assert reviewed["status"] == "reviewed"
        assert reviewed["stars"] == 2
        assert reviewed["comment"] == "Nice sentences"
        assert reviewed["reviewer_id"] == test_teacher.id
        assert reviewed["reviewed_at"] is not None

        db_session.expire_all()
        db_submission = db_session.get(models.Submission, submission.id)
        assert db_submission is not None
        assert db_submission.stars == 2

    @pytest.mark.parametrize("stars", [-1, 4])
    def test_review_stars_out_of_range(
        self,
        stars: int,
        client: TestClient,
        db_session: Session,
        test_learner: models.User,
        test_teacher: models.User,
        as_user: Headers,
        create_submission,
    ) -> None:
        submission = create_submission(test_learner, date(2026, 3, 9))

        response = client.post(
            f"/api/v1/submissions/{submission.id}/review",
            json={"stars": stars},
            headers=as_user(test_teacher),
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        assert response.json()["error"] == "ValidationError"

        db_session.expire_all()
        assert db_session.get(models.Submission, submission.id).stars is None

    def test_regrade_overwrites_previous_review(
        self,
        client: TestClient,
        test_learner: models.User,
        test_teacher: models.User,
        as_user: Headers,
        create_submission,
    ) -> None:
        submission = create_submission(test_learner, date(2026, 3, 9))
        url = f"/api/v1/submissions/{submission.id}/review"

        client.post(url, json={"stars": 3, "comment": "Great"}, headers=as_user(test_teacher))
        response = client.post(
            url, json={"stars": 1, "comment": "Revised"}, headers=as_user(test_teacher)
        )

        assert response.status_code == status.HTTP_200_OK
        reviewed = response.json()["submission"]
        assert reviewed["stars"] == 1
        assert reviewed["comment"] == "Revised"

    def test_review_without_comment_clears_comment(
        self,
        client: TestClient,
        test_learner: models.User,
        test_teacher: models.User,
        as_user: Headers,
        create_submission,
    ) -> None:
        submission = create_submission(test_learner, date(2026, 3, 9))
        url = f"/api/v1/submissions/{submission.id}/review"

        client.post(url, json={"stars": 3, "comment": "Great"}, headers=as_user(test_teacher))
        response = client.post(url, json={"stars": 2}, headers=as_user(test_teacher))

        assert response.json()["submission"]["comment"] is None

    @pytest.mark.parametrize("stars", [True, "2", 2.5])
    def test_review_stars_must_be_an_integer(
        self,
        stars: object,
        client: TestClient,
        db_session: Session,
        test_learner: models.User,
        test_teacher: models.User,
        as_user: Headers,
        create_submission,
    ) -> None:
        submission = create_submission(test_learner, date(2026, 3, 9))

        response = client.post(
            f"/api/v1/submissions/{submission.id}/review",
            json={"stars": stars},
            headers=as_user(test_teacher),
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        data = response.json()
        assert data["error"] == "ValidationError"
        assert "stars" in data["detail"]

        db_session.expire_all()
        assert db_session.get(models.Submission, submission.id).stars is None

    def test_review_not_found(
        self, client: TestClient, test_teacher: models.User, as_user: Headers
    ) -> None:
        response = client.post(
            "/api/v1/submissions/99999/review",
            json={"stars": 2},
            headers=as_user(test_teacher),
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["error"] == "NotFoundError"


class TestPendingReviews:
    """Test suite for GET /reviews/pending endpoint."""

    def test_pending_oldest_first(
        self,
        client: TestClient,
        test_learner: models.User,
        other_learner: models.User,
        test_teacher: models.User,
        as_user: Headers,
        create_submission,
    ) -> None:
        newer = create_submission(
            test_learner, date(2026, 3, 9), submitted_at=datetime(2026, 3, 9, 20, tzinfo=UTC)
        )
        older = create_submission(
            other_learner, date(2026, 3, 9), submitted_at=datetime(2026, 3, 9, 8, tzinfo=UTC)
        )
        create_submission(test_learner, date(2026, 3, 8), stars=3)

        response = client.get("/api/v1/reviews/pending", headers=as_user(test_teacher))

        assert response.status_code == status.HTTP_200_OK
        ids = [s["id"] for s in response.json()["submissions"]]
        assert ids == [older.id, newer.id]

    def test_pending_limit(
        self,
        client: TestClient,
        test_learner: models.User,
        test_teacher: models.User,
        as_user: Headers,
        create_submission,
    ) -> None:
        for day in range(1, 6):
            create_submission(test_learner, date(2026, 3, day))

        response = client.get(
            "/api/v1/reviews/pending", params={"limit": 2}, headers=as_user(test_teacher)
        )

        submissions = response.json()["submissions"]
        assert [s["submission_date"] for s in submissions] == ["2026-03-01", "2026-03-02"]

    def test_pending_limit_must_be_positive(
        self, client: TestClient, test_teacher: models.User, as_user: Headers
    ) -> None:
        response = client.get(
            "/api/v1/reviews/pending", params={"limit": 0}, headers=as_user(test_teacher)
        )
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
