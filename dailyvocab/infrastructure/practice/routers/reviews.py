"""API routes for grading submissions."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from dailyvocab.application.practice.use_cases.reviews.list_pending_reviews_use_case import (
    ListPendingReviewsUseCase,
)
from dailyvocab.application.practice.use_cases.reviews.review_submission_use_case import (
    ReviewSubmissionUseCase,
)
from dailyvocab.config import get_settings
from dailyvocab.core import container
from dailyvocab.domain.common.exceptions import DomainError
from dailyvocab.infrastructure.common.di import inject_use_case
from dailyvocab.infrastructure.common.results import unwrap_or_raise
from dailyvocab.infrastructure.identity.dependencies import CurrentUser
from dailyvocab.infrastructure.practice.schemas import (
    PendingReviewsResponse,
    ReviewRequest,
    ReviewResponse,
    Submission,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["reviews"])


@router.post(
    "/submissions/{submission_id}/review",
    response_model=ReviewResponse,
    status_code=status.HTTP_200_OK,
)
def review_submission(
    submission_id: int,
    request: ReviewRequest,
    current_user: CurrentUser,
    use_case: ReviewSubmissionUseCase = Depends(
        inject_use_case(container.review_submission_use_case)
    ),
) -> ReviewResponse:
    """
    Grade a submission, or re-grade one that was already reviewed.

    Raises:
        HTTPException 404: No such submission
        HTTPException 422: Stars outside the allowed range
    """
    try:
        submission = unwrap_or_raise(
            use_case.review_submission(
                submission_id=submission_id,
                reviewer_id=current_user.id.value,
                stars=request.stars,
                comment=request.comment,
            )
        )
        return ReviewResponse(
            success=True,
            message="Submission reviewed successfully",
            submission=Submission.from_entity(submission),
        )
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to review submission {submission_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get(
    "/reviews/pending",
    response_model=PendingReviewsResponse,
    status_code=status.HTTP_200_OK,
)
def list_pending_reviews(
    current_user: CurrentUser,
    limit: int | None = Query(None, ge=1, le=500, description="Maximum submissions to return"),
    use_case: ListPendingReviewsUseCase = Depends(
        inject_use_case(container.list_pending_reviews_use_case)
    ),
) -> PendingReviewsResponse:
    """List submissions waiting for a grade, oldest first."""
    try:
        submissions = use_case.list_pending(limit or get_settings().PENDING_REVIEWS_LIMIT)
        return PendingReviewsResponse(submissions=[Submission.from_entity(s) for s in submissions])
    except Exception as e:
        logger.error(f"Failed to list pending reviews: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
