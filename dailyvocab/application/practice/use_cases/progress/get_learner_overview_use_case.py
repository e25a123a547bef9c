"""Use case for lifetime counters shown on the dashboard."""

from dailyvocab.application.common.clock import ClockProtocol
from dailyvocab.application.common.result import Failure, Result, Success
from dailyvocab.application.identity.services.learner_lookup_service import LearnerLookupService
from dailyvocab.application.practice.protocols.submission_repository import (
    SubmissionRepositoryProtocol,
)
from dailyvocab.domain.common.exceptions import DomainError
from dailyvocab.domain.practice.services.progress_aggregator import (
    LearnerOverview,
    ProgressAggregator,
)


class GetLearnerOverviewUseCase:
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

    def get_overview(self, learner_id: int) -> Result[LearnerOverview, DomainError]:
        try:
            learner = self.learner_lookup.get_learner(learner_id)
        except DomainError as e:
            return Failure(e)

        history = self.submission_repository.list_by_learner(
            learner.id, learner.enrollment_start, self.clock.today()
        )
        return Success(self.progress_aggregator.compute_overview(history))
