"""API routes for the dashboard's progress cards and calendar."""

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status

from dailyvocab.application.practice.use_cases.progress.get_learner_overview_use_case import (
    GetLearnerOverviewUseCase,
)
from dailyvocab.application.practice.use_cases.progress.get_submission_calendar_use_case import (
    GetSubmissionCalendarUseCase,
)
from dailyvocab.application.practice.use_cases.progress.get_weekly_stats_use_case import (
    GetWeeklyStatsUseCase,
)
from dailyvocab.core import container
from dailyvocab.domain.common.exceptions import DomainError
from dailyvocab.domain.practice.services.progress_aggregator import WeeklyStats
from dailyvocab.infrastructure.common.di import inject_use_case
from dailyvocab.infrastructure.common.results import unwrap_or_raise
from dailyvocab.infrastructure.identity.dependencies import CurrentUser
from dailyvocab.infrastructure.practice.schemas import (
    CalendarDaySchema,
    LearnerOverviewResponse,
    SubmissionCalendarResponse,
    WeeklyStatsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["progress"])


def _weekly_response(stats: WeeklyStats) -> WeeklyStatsResponse:
    return WeeklyStatsResponse(
        window_start=stats.window_start,
        window_end=stats.window_end,
        completed_count=stats.completed_count,
        average_stars=stats.average_stars,
        current_streak=stats.current_streak,
    )


def _unexpected(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )


@router.get(
    "/progress/weekly",
    response_model=WeeklyStatsResponse,
    status_code=status.HTTP_200_OK,
)
def get_weekly_stats(
    current_user: CurrentUser,
    as_of: date | None = Query(None, description="Last day of the window, defaults to today"),
    use_case: GetWeeklyStatsUseCase = Depends(inject_use_case(container.get_weekly_stats_use_case)),
) -> WeeklyStatsResponse:
    """Weekly completion count, average stars and current streak."""
    try:
        stats = unwrap_or_raise(
            use_case.get_weekly_stats(learner_id=current_user.id.value, as_of=as_of)
        )
        return _weekly_response(stats)
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected("compute weekly stats", e) from e


@router.get(
    "/learners/{learner_id}/progress/weekly",
    response_model=WeeklyStatsResponse,
    status_code=status.HTTP_200_OK,
)
def get_learner_weekly_stats(
    learner_id: int,
    current_user: CurrentUser,
    as_of: date | None = Query(None, description="Last day of the window, defaults to today"),
    use_case: GetWeeklyStatsUseCase = Depends(inject_use_case(container.get_weekly_stats_use_case)),
) -> WeeklyStatsResponse:
    """Weekly stats for any learner, as shown on the reviewer dashboard."""
    try:
        stats = unwrap_or_raise(use_case.get_weekly_stats(learner_id=learner_id, as_of=as_of))
        return _weekly_response(stats)
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected(f"compute weekly stats for learner {learner_id}", e) from e


@router.get(
    "/progress/calendar",
    response_model=SubmissionCalendarResponse,
    status_code=status.HTTP_200_OK,
)
def get_submission_calendar(
    current_user: CurrentUser,
    year: int | None = Query(None, ge=1, le=9999, description="Defaults to the current year"),
    month: int | None = Query(None, ge=1, le=12, description="Defaults to the current month"),
    use_case: GetSubmissionCalendarUseCase = Depends(
        inject_use_case(container.get_submission_calendar_use_case)
    ),
) -> SubmissionCalendarResponse:
    """Status of every day in a month."""
    try:
        days = unwrap_or_raise(
            use_case.get_month(learner_id=current_user.id.value, year=year, month=month)
        )
        return SubmissionCalendarResponse(
            year=days[0].date.year,
            month=days[0].date.month,
            days=[CalendarDaySchema(date=d.date, status=d.status, stars=d.stars) for d in days],
        )
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected("build submission calendar", e) from e


@router.get(
    "/progress/overview",
    response_model=LearnerOverviewResponse,
    status_code=status.HTTP_200_OK,
)
def get_learner_overview(
    current_user: CurrentUser,
    use_case: GetLearnerOverviewUseCase = Depends(
        inject_use_case(container.get_learner_overview_use_case)
    ),
) -> LearnerOverviewResponse:
    """Lifetime submission counters."""
    try:
        overview = unwrap_or_raise(use_case.get_overview(learner_id=current_user.id.value))
        return LearnerOverviewResponse(
            total_submissions=overview.total_submissions,
            reviewed_count=overview.reviewed_count,
            pending_count=overview.pending_count,
            average_stars=overview.average_stars,
        )
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected("compute learner overview", e) from e
