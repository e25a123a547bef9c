from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from dailyvocab.application.identity.services.learner_lookup_service import LearnerLookupService
from dailyvocab.application.practice.use_cases.progress.get_learner_overview_use_case import (
    GetLearnerOverviewUseCase,
)
from dailyvocab.application.practice.use_cases.progress.get_submission_calendar_use_case import (
    GetSubmissionCalendarUseCase,
)
from dailyvocab.application.practice.use_cases.progress.get_weekly_stats_use_case import (
    GetWeeklyStatsUseCase,
)
from dailyvocab.application.practice.use_cases.reviews.list_pending_reviews_use_case import (
    ListPendingReviewsUseCase,
)
from dailyvocab.application.practice.use_cases.reviews.review_submission_use_case import (
    ReviewSubmissionUseCase,
)
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
from dailyvocab.config import get_settings
from dailyvocab.domain.practice.services.penalty_accrual import PenaltyAccrualEngine
from dailyvocab.domain.practice.services.progress_aggregator import ProgressAggregator
from dailyvocab.domain.practice.services.submission_calendar import SubmissionCalendar
from dailyvocab.infrastructure.common.clock import SystemClock
from dailyvocab.infrastructure.identity.repositories.user_repository import UserRepository
from dailyvocab.infrastructure.practice.repositories.submission_repository import (
    SubmissionRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    settings = providers.Singleton(get_settings)
    rules = providers.Singleton(lambda settings: settings.submission_rules(), settings)
    clock = providers.Singleton(
        lambda settings: SystemClock(timezone=settings.TIMEZONE), settings
    )

    # Repositories
    user_repository = providers.Factory(UserRepository, db=db)
    submission_repository = providers.Factory(SubmissionRepository, db=db)

    # Domain services (pure domain logic, no db)
    penalty_engine = providers.Factory(PenaltyAccrualEngine, rules=rules)
    progress_aggregator = providers.Factory(ProgressAggregator, rules=rules)
    submission_calendar = providers.Factory(SubmissionCalendar)

    # Identity services
    learner_lookup = providers.Factory(LearnerLookupService, user_repository=user_repository)

    # Practice module, submission use cases
    get_entry_requirement_use_case = providers.Factory(
        GetEntryRequirementUseCase,
        submission_repository=submission_repository,
        learner_lookup=learner_lookup,
        penalty_engine=penalty_engine,
        clock=clock,
    )
    get_missed_dates_use_case = providers.Factory(
        GetMissedDatesUseCase,
        submission_repository=submission_repository,
        learner_lookup=learner_lookup,
        clock=clock,
    )
    create_submission_use_case = providers.Factory(
        CreateSubmissionUseCase,
        submission_repository=submission_repository,
        learner_lookup=learner_lookup,
        penalty_engine=penalty_engine,
        clock=clock,
    )
    update_submission_use_case = providers.Factory(
        UpdateSubmissionUseCase,
        submission_repository=submission_repository,
        clock=clock,
    )
    list_submissions_use_case = providers.Factory(
        ListSubmissionsUseCase,
        submission_repository=submission_repository,
        learner_lookup=learner_lookup,
        clock=clock,
    )

    # Practice module, review use cases
    review_submission_use_case = providers.Factory(
        ReviewSubmissionUseCase,
        submission_repository=submission_repository,
        rules=rules,
        clock=clock,
    )
    list_pending_reviews_use_case = providers.Factory(
        ListPendingReviewsUseCase,
        submission_repository=submission_repository,
    )

    # Practice module, progress use cases
    get_weekly_stats_use_case = providers.Factory(
        GetWeeklyStatsUseCase,
        submission_repository=submission_repository,
        learner_lookup=learner_lookup,
        progress_aggregator=progress_aggregator,
        clock=clock,
    )
    get_submission_calendar_use_case = providers.Factory(
        GetSubmissionCalendarUseCase,
        submission_repository=submission_repository,
        learner_lookup=learner_lookup,
        submission_calendar=submission_calendar,
        clock=clock,
    )
    get_learner_overview_use_case = providers.Factory(
        GetLearnerOverviewUseCase,
        submission_repository=submission_repository,
        learner_lookup=learner_lookup,
        progress_aggregator=progress_aggregator,
        clock=clock,
    )


# Initialize container
container = Container()
