"""Use case for the learner's weekly progress card."""

from datetime import date

from dailyvocab.application.common.clock import ClockProtocol
from dailyvocab.application.common.result import Failure, Result, Success
from dailyvocab.application.identity.services.learner_lookup_service import LearnerLookupService
from dailyvocab.application.practice.protocols.submission_repository import (
    SubmissionRepositoryProtocol,
)
from dailyvocab.domain.common.exceptions import DomainError
from dailyvocab.domain.practice.services.progress_aggregator import (
    ProgressAggregator,
    WeeklyStats,
)


class GetWeeklyStatsUseCase:
    def __init__(
        self,
        submission_repository: SubmissionRepositoryProtocol,
        learner_lookup: LearnerLookupService,
        progress_aggregator: ProgressAggregator,
        clock: ClockProtocol,
    ) -> None:
        self.submission_repository = submission_repository
        self.learner_lookup = learner_lookup
        self.progress_aggregator = progress_aggregator
        self.clock = clock

    def get_weekly_stats(
        self, learner_id: int, as_of: date | None = None
    ) -> Result[WeeklyStats, DomainError]:
        """
        Compute completion count, average stars and streak as of a day.

        The full history since enrollment is loaded because a streak can be
        longer than the stats window.
        """
        try:
            learner = self.learner_lookup.get_learner(learner_id)
        except DomainError as e:
            return Failure(e)

        as_of = as_of or self.clock.today()
        history = self.submission_repository.list_by_learner(
            learner.id, learner.enrollment_start, as_of
        )
        return Success(self.progress_aggregator.compute_weekly_stats(learner, as_of, history))
