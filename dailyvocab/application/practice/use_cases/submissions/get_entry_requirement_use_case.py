"""Use case for previewing how many entries the next submission needs."""

from datetime import date, timedelta

import structlog

from dailyvocab.application.common.clock import ClockProtocol
from dailyvocab.application.common.result import Failure, Result, Success
from dailyvocab.application.identity.services.learner_lookup_service import LearnerLookupService
from dailyvocab.application.practice.protocols.submission_repository import (
    SubmissionRepositoryProtocol,
)
from dailyvocab.domain.common.exceptions import DomainError
from dailyvocab.domain.practice.services.penalty_accrual import (
    PenaltyAccrualEngine,
    PenaltyAssessment,
)

logger = structlog.get_logger(__name__)


class GetEntryRequirementUseCase:
    """Use case for previewing the entry requirement (penalty included)."""

    def __init__(
        self,
        submission_repository: SubmissionRepositoryProtocol,
        learner_lookup: LearnerLookupService,
        penalty_engine: PenaltyAccrualEngine,
        clock: ClockProtocol,
    ) -> None:
        self.submission_repository = submission_repository
        self.learner_lookup = learner_lookup
        self.penalty_engine = penalty_engine
        self.clock = clock

    def get_requirement(
        self, learner_id: int, target_date: date | None = None
    ) -> Result[PenaltyAssessment, DomainError]:
        """
        Compute the requirement for a day without creating anything.

        Args:
            learner_id: ID of the learner
            target_date: Day to assess, defaults to today

        Returns:
            Success with the PenaltyAssessment, or Failure(NotFoundError | ValidationError)
        """
        try:
            learner = self.learner_lookup.get_learner(learner_id)
        except DomainError as e:
            return Failure(e)

        target = target_date or self.clock.today()
        submitted = self.submission_repository.list_submitted_dates(
            learner.id, learner.enrollment_start, target - timedelta(days=1)
        )
        assessment = self.penalty_engine.assess(learner, target, submitted)
        logger.debug(
            "assessed_entry_requirement",
            learner_id=learner_id,
            target_date=target.isoformat(),
            missed_days=assessment.missed_days,
        )
        return Success(assessment)
