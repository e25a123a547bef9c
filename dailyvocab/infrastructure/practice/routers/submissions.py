"""API routes for the learner's daily submissions."""

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status

from dailyvocab.application.practice.use_cases.submissions.create_submission_use_case import (
    CreateSubmissionUseCase,
)
from dailyvocab.application.practice.use_cases.submissions.get_entry_requirement_use_case import (
    GetEntryRequirementUseCase,
)
from dailyvocab.application.practice.use_cases.submissions.get_missed_dates_use_case import (
    GetMissedDatesUseCase,
)
from dailyvocab.application.practice.use_cases.submissions.list_submissions_use_case import (
    ListSubmissionsUseCase,
)
from dailyvocab.application.practice.use_cases.submissions.update_submission_use_case import (
    UpdateSubmissionUseCase,
)
from dailyvocab.core import container
from dailyvocab.domain.common.exceptions import DomainError, NotFoundError
from dailyvocab.infrastructure.common.di import inject_use_case
from dailyvocab.infrastructure.common.results import unwrap_or_raise
from dailyvocab.infrastructure.identity.dependencies import CurrentUser
from dailyvocab.infrastructure.practice.schemas import (
    EntryRequirementResponse,
    MissedDatesResponse,
    Submission,
    SubmissionCreateRequest,
    SubmissionCreateResponse,
    SubmissionsListResponse,
    SubmissionUpdateRequest,
    SubmissionUpdateResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/submissions", tags=["submissions"])


def _unexpected(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )


@router.get(
    "/requirement",
    response_model=EntryRequirementResponse,
    status_code=status.HTTP_200_OK,
)
def get_entry_requirement(
    current_user: CurrentUser,
    target_date: date | None = Query(None, alias="date", description="Defaults to today"),
    use_case: GetEntryRequirementUseCase = Depends(
        inject_use_case(container.get_entry_requirement_use_case)
    ),
) -> EntryRequirementResponse:
    """
    Preview how many vocabulary entries a submission needs.

    Includes the penalty for consecutive missed days before the target day.
    """
    try:
        assessment = unwrap_or_raise(
            use_case.get_requirement(learner_id=current_user.id.value, target_date=target_date)
        )
        return EntryRequirementResponse(
            target_date=assessment.target_date,
            missed_days=assessment.missed_days,
            baseline_entry_count=assessment.baseline_entry_count,
            penalty_entry_count=assessment.penalty_entry_count,
            required_entry_count=assessment.required_entry_count,
        )
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected("compute entry requirement", e) from e


@router.get(
    "/missed",
    response_model=MissedDatesResponse,
    status_code=status.HTTP_200_OK,
)
def get_missed_dates(
    current_user: CurrentUser,
    start: date = Query(..., description="First day (inclusive)"),
    end: date = Query(..., description="Last day (inclusive)"),
    use_case: GetMissedDatesUseCase = Depends(inject_use_case(container.get_missed_dates_use_case)),
) -> MissedDatesResponse:
    """List the days in a range whose deadline passed without a submission."""
    try:
        missed = unwrap_or_raise(
            use_case.get_missed_dates(learner_id=current_user.id.value, start=start, end=end)
        )
        return MissedDatesResponse(missed_dates=missed)
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected("list missed dates", e) from e


@router.post(
    "",
    response_model=SubmissionCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_submission(
    request: SubmissionCreateRequest,
    current_user: CurrentUser,
    use_case: CreateSubmissionUseCase = Depends(
        inject_use_case(container.create_submission_use_case)
    ),
) -> SubmissionCreateResponse:
    """
    Submit the daily vocabulary task.

    Raises:
        HTTPException 422: Blank fields, too few entries or a day that is not due
        HTTPException 409: A submission for that day already exists
    """
    try:
        submission = unwrap_or_raise(
            use_case.create_submission(
                learner_id=current_user.id.value,
                entries=[e.to_data() for e in request.entries],
                submission_date=request.submission_date,
            )
        )
        return SubmissionCreateResponse(
            success=True,
            message="Daily vocabulary task submitted successfully",
            submission=Submission.from_entity(submission),
        )
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected("create submission", e) from e


@router.get(
    "",
    response_model=SubmissionsListResponse,
    status_code=status.HTTP_200_OK,
)
def list_submissions(
    current_user: CurrentUser,
    start: date | None = Query(None, description="Defaults to the enrollment start"),
    end: date | None = Query(None, description="Defaults to today"),
    use_case: ListSubmissionsUseCase = Depends(
        inject_use_case(container.list_submissions_use_case)
    ),
) -> SubmissionsListResponse:
    """List the acting learner's submissions, oldest date first."""
    try:
        submissions = unwrap_or_raise(
            use_case.list_submissions(learner_id=current_user.id.value, start=start, end=end)
        )
        return SubmissionsListResponse(
            submissions=[Submission.from_entity(s) for s in submissions]
        )
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected("list submissions", e) from e


@router.get(
    "/{submission_id}",
    response_model=Submission,
    status_code=status.HTTP_200_OK,
)
def get_submission(
    submission_id: int,
    current_user: CurrentUser,
    use_case: ListSubmissionsUseCase = Depends(
        inject_use_case(container.list_submissions_use_case)
    ),
) -> Submission:
    """Get one submission; learners only see their own."""
    try:
        submission = unwrap_or_raise(use_case.get_submission(submission_id))
        if submission.learner_id != current_user.id and not current_user.role.can_review:
            raise NotFoundError("Submission", submission_id)
        return Submission.from_entity(submission)
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected(f"get submission {submission_id}", e) from e


@router.put(
    "/{submission_id}",
    response_model=SubmissionUpdateResponse,
    status_code=status.HTTP_200_OK,
)
def update_submission(
    submission_id: int,
    request: SubmissionUpdateRequest,
    current_user: CurrentUser,
    use_case: UpdateSubmissionUseCase = Depends(
        inject_use_case(container.update_submission_use_case)
    ),
) -> SubmissionUpdateResponse:
    """
    Replace the entries of a pending submission.

    Raises:
        HTTPException 404: No such submission for this learner
        HTTPException 409: The submission has already been reviewed
        HTTPException 422: Blank fields or too few entries
    """
    try:
        submission = unwrap_or_raise(
            use_case.update_submission(
                submission_id=submission_id,
                learner_id=current_user.id.value,
                entries=[e.to_data() for e in request.entries],
            )
        )
        return SubmissionUpdateResponse(
            success=True,
            message="Daily vocabulary task updated successfully",
            submission=Submission.from_entity(submission),
        )
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected(f"update submission {submission_id}", e) from e
